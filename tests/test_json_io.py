import json

import pytest

from particle_sim.core.forces import ForceGenerator, Gravity, Drag, Buoyancy
from particle_sim.core.springs import Spring, AnchoredSpring, Bungee, FakeSpring
from particle_sim.io import (
    load_world,
    save_world,
    world_from_json,
    world_to_json,
    particle_from_json,
    generator_from_json,
    generator_to_json,
)
from particle_sim.particle import Particle
from particle_sim.vector import Vector3
from particle_sim.world import ParticleWorld


def _build_world() -> ParticleWorld:
    world = ParticleWorld()
    anchor = world.add_particle(Particle(position=(0.0, 10.0, 0.0)))
    a = world.add_particle(Particle(position=(0.0, 8.0, 0.0), damping=0.95))
    a.set_mass(1.0)
    b = world.add_particle(Particle(position=(1.0, 6.0, 0.5), velocity=(0.2, 0.0, 0.0)))
    b.set_mass(2.0)

    gravity = Gravity(Vector3(0.0, -9.81, 0.0))
    world.add_force(a, gravity)
    world.add_force(b, gravity)
    world.add_force(a, Bungee(anchor, spring_constant=15.0, rest_length=1.5))
    world.add_force(b, Spring(a, spring_constant=8.0, rest_length=2.0))
    world.add_force(a, Spring(b, spring_constant=8.0, rest_length=2.0))
    world.add_force(b, Drag(k1=0.1, k2=0.01))
    world.add_force(b, Buoyancy.water(max_depth=0.5, volume=0.001, liquid_height=5.0))
    return world


def test_save_and_load_round_trip(tmp_path):
    world = _build_world()
    path = tmp_path / "world.json"
    save_world(world, str(path))

    loaded = load_world(str(path))
    assert len(loaded.particles) == 3
    assert len(loaded.registry) == len(world.registry)
    assert [type(r.generator) for r in loaded.registry] == [type(r.generator) for r in world.registry]

    for p, q in zip(world.particles, loaded.particles):
        assert p.position == q.position
        assert p.velocity == q.velocity
        assert p.inverse_mass == q.inverse_mass
        assert p.damping == q.damping

    # Partner references resolve to particles of the loaded world
    spring = loaded.registry.registrations[3].generator
    assert isinstance(spring, Spring)
    assert spring.other is loaded.particles[1]

    # Shared gravity stays a single generator
    regs = loaded.registry.registrations
    assert regs[0].generator is regs[1].generator


def test_loaded_world_steps_identically(tmp_path):
    world = _build_world()
    path = tmp_path / "world.json"
    save_world(world, str(path))
    loaded = load_world(str(path))

    for _ in range(50):
        world.step(1 / 60)
        loaded.step(1 / 60)

    for p, q in zip(world.particles, loaded.particles):
        assert p.position == q.position


def test_world_to_json_groups_shared_generators():
    data = world_to_json(_build_world())
    assert data["forces"][0] == {"type": "gravity", "gravity": [0.0, -9.81, 0.0], "particles": [1, 2]}
    assert data["forces"][1]["type"] == "bungee"
    assert data["forces"][1]["other"] == 0
    assert "time" not in data
    assert data["particles"][0] == {
        "position": [0.0, 10.0, 0.0],
        "velocity": [0.0, 0.0, 0.0],
        "inverse_mass": 0.0,
    }
    json.dumps(data)


def test_world_from_json_defaults():
    world = world_from_json({
        "time": 1.5,
        "particles": [{"mass": 2.0}, {}],
        "forces": [{"type": "gravity", "gravity": [0, -1, 0], "particles": [0, 1]}],
    })
    a, b = world.particles
    assert world.time == 1.5
    assert a.get_mass() == 2.0
    assert not b.has_finite_mass()
    assert a.damping == 1.0
    assert a.position == Vector3()


@pytest.mark.parametrize("g", [
    AnchoredSpring(Vector3(1.0, 2.0, 3.0), spring_constant=4.0, rest_length=0.5),
    FakeSpring(Vector3(0.0, 1.0, 0.0), spring_constant=3.0, damping=0.7),
    Buoyancy(max_depth=0.2, volume=0.3, liquid_height=-1.0, liquid_density=1025.0),
])
def test_anchored_generators_rebuild_with_same_parameters(g):
    d = generator_to_json(g, index_of=lambda p: 0)
    rebuilt = generator_from_json(d, [])
    assert type(rebuilt) is type(g)
    assert generator_to_json(rebuilt, index_of=lambda p: 0) == d


def test_invalid_documents_raise():
    with pytest.raises(ValueError, match="Unknown force type"):
        world_from_json({"particles": [{}], "forces": [{"type": "magnet", "particles": [0]}]})
    with pytest.raises(ValueError, match="invalid particle index"):
        world_from_json({"particles": [{}], "forces": [{"type": "gravity", "gravity": [0, 0, 0], "particles": [3]}]})
    with pytest.raises(ValueError, match="invalid particle index"):
        world_from_json({
            "particles": [{}],
            "forces": [{"type": "spring", "other": 5, "spring_constant": 1, "rest_length": 1, "particles": [0]}],
        })
    with pytest.raises(ValueError, match="missing field"):
        world_from_json({"particles": [{}], "forces": [{"type": "drag", "k1": 1.0, "particles": [0]}]})
    with pytest.raises(ValueError):
        particle_from_json({"mass": 0})
    with pytest.raises(ValueError):
        particle_from_json({"mass": 1.0, "inverse_mass": 1.0})


def test_interleaved_registrations_keep_their_order(tmp_path):
    world = ParticleWorld()
    a = world.add_particle(Particle())
    b = world.add_particle(Particle())
    g1 = Gravity((0.0, -1.0, 0.0))
    g2 = Gravity((0.0, -2.0, 0.0))
    world.add_force(a, g1)
    world.add_force(a, g2)
    world.add_force(b, g1)

    data = world_to_json(world)
    assert data["forces"] == [
        {"type": "gravity", "gravity": [0.0, -1.0, 0.0], "particles": [0], "id": 0},
        {"type": "gravity", "gravity": [0.0, -2.0, 0.0], "particles": [0]},
        {"ref": 0, "particles": [1]},
    ]

    path = tmp_path / "world.json"
    save_world(world, str(path))
    loaded = load_world(str(path))

    def layout(w):
        return [(w.particles.index(r.particle), r.generator.gravity.y) for r in w.registry]

    assert layout(loaded) == layout(world) == [(0, -1.0), (0, -2.0), (1, -1.0)]
    regs = loaded.registry.registrations
    assert regs[0].generator is regs[2].generator


def test_generator_references_must_be_defined_first():
    with pytest.raises(ValueError, match="unknown generator id"):
        world_from_json({"particles": [{}], "forces": [{"ref": 0, "particles": [0]}]})
    with pytest.raises(ValueError, match="Duplicate generator id"):
        world_from_json({"particles": [{}], "forces": [
            {"type": "gravity", "gravity": [0, 0, 0], "id": 1, "particles": [0]},
            {"type": "drag", "k1": 0, "k2": 0, "id": 1, "particles": [0]},
        ]})


def test_unknown_generator_cannot_be_serialized():
    class Custom(ForceGenerator):
        def update_force(self, particle, dt):
            pass

    with pytest.raises(TypeError):
        generator_to_json(Custom(), index_of=lambda p: 0)


def test_particles_outside_world_are_rejected():
    world = ParticleWorld()
    p = world.add_particle(Particle())
    world.add_force(p, Spring(Particle(position=(1.0, 0.0, 0.0)), spring_constant=1.0, rest_length=1.0))
    with pytest.raises(ValueError, match="not part of the world"):
        world_to_json(world)
