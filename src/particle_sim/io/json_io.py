# MIT License (see LICENSE)
"""
JSON serialization and deserialization for particle worlds.

A world document lists particles, then force entries that each build one
generator and register it against one or more particles (by index).

JSON Schema Overview:
---------------------
{
  "time": float,                     # Default: 0.0
  "particles": [
    {
      "position": [x, y, z],         # Default: [0, 0, 0]
      "velocity": [vx, vy, vz],      # Default: [0, 0, 0]
      "acceleration": [ax, ay, az],  # Default: [0, 0, 0]
      "damping": float,              # Default: 1.0
      "mass": float,                 # Non-zero. Or:
      "inverse_mass": float          # Default: 0.0 (infinite mass)
    }
  ],
  "forces": [
    {
      "type": "gravity" | "drag" | "buoyancy" | "spring" |
              "anchored_spring" | "bungee" | "fake_spring",
      "particles": [int, ...],       # Targets (indices into "particles")
      "id": int,                     # Optional, names a generator shared
                                     # with later entries
      ...                            # Parameters of the generator:
      # gravity:         "gravity": [x, y, z]
      # drag:            "k1", "k2"
      # buoyancy:        "max_depth", "volume", "liquid_height",
      #                  "liquid_density" (default 1000)
      # spring, bungee:  "other" (particle index), "spring_constant",
      #                  "rest_length"
      # anchored_spring: "anchor": [x, y, z], "spring_constant", "rest_length"
      # fake_spring:     "anchor": [x, y, z], "spring_constant", "damping"
    }
    or, reusing the generator of an earlier entry carrying "id":
    {"ref": int, "particles": [int, ...]}
  ]
}

Registrations are restored in document order: force entries in order,
then the "particles" list of each entry in order.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Callable

from ..constants import DEFAULT_DAMPING, WATER_DENSITY
from ..particle import Particle
from ..vector import Vector3
from ..world import ParticleWorld
from ..core.forces import ForceGenerator, Gravity, Drag, Buoyancy
from ..core.springs import Spring, AnchoredSpring, Bungee, FakeSpring

logger = logging.getLogger(__name__)


def load_world_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a world file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_world(path: str) -> ParticleWorld:
    """
    Load and construct a ready-to-step ParticleWorld from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is structurally invalid.
    """
    world = world_from_json(load_world_raw(path))
    logger.info(
        "Loaded world from %s: %d particles, %d registrations",
        path, len(world.particles), len(world.registry),
    )
    return world


def world_from_json(data: dict[str, Any]) -> ParticleWorld:
    """Build a ParticleWorld from an already-parsed world document."""
    world = ParticleWorld(time=float(data.get("time", 0.0)))

    particles = [particle_from_json(p) for p in data.get("particles", [])]
    for p in particles:
        world.add_particle(p)

    shared: dict[Any, ForceGenerator] = {}
    for f_data in data.get("forces", []):
        if "ref" in f_data:
            if f_data["ref"] not in shared:
                raise ValueError(f"Force entry refers to unknown generator id: {f_data['ref']!r}")
            generator = shared[f_data["ref"]]
        else:
            generator = generator_from_json(f_data, particles)
            if "id" in f_data:
                if f_data["id"] in shared:
                    raise ValueError(f"Duplicate generator id: {f_data['id']!r}")
                shared[f_data["id"]] = generator
        targets = f_data.get("particles", [])
        if not targets:
            logger.warning("Force entry of type '%s' has no target particles", f_data.get("type"))
        for idx in targets:
            world.add_force(_particle_at(particles, idx), generator)

    return world


def particle_from_json(d: dict[str, Any]) -> Particle:
    """
    Parse a single particle definition.

    Raises:
        ValueError: If both mass and inverse_mass are given, or mass is zero.
    """
    if "mass" in d and "inverse_mass" in d:
        raise ValueError("Particle definition must not give both 'mass' and 'inverse_mass'.")

    p = Particle(
        position=tuple(d.get("position", [0.0, 0.0, 0.0])),
        velocity=tuple(d.get("velocity", [0.0, 0.0, 0.0])),
        acceleration=tuple(d.get("acceleration", [0.0, 0.0, 0.0])),
        damping=float(d.get("damping", DEFAULT_DAMPING)),
    )
    if "mass" in d:
        p.set_mass(float(d["mass"]))
    else:
        p.set_inverse_mass(float(d.get("inverse_mass", 0.0)))
    return p


def particle_to_json(p: Particle) -> dict[str, Any]:
    """
    Serialize a particle (round-trip compatible).

    Mass is always written as inverse_mass so infinite mass survives.
    Default-valued acceleration and damping are omitted.
    """
    result = {
        "position": list(p.position),
        "velocity": list(p.velocity),
        "inverse_mass": p.inverse_mass,
    }
    if p.acceleration != Vector3():
        result["acceleration"] = list(p.acceleration)
    if p.damping != DEFAULT_DAMPING:
        result["damping"] = p.damping
    return result


def generator_from_json(d: dict[str, Any], particles: list[Particle]) -> ForceGenerator:
    """
    Build one force generator from a force entry.

    Args:
        d: Force entry (see module docstring).
        particles: Particles already loaded, used to resolve "other".

    Raises:
        ValueError: On an unknown type or a bad particle index.
    """
    f_type = d.get("type")
    try:
        if f_type == "gravity":
            return Gravity(Vector3.from_array(d["gravity"]))
        if f_type == "drag":
            return Drag(k1=float(d["k1"]), k2=float(d["k2"]))
        if f_type == "buoyancy":
            return Buoyancy(
                max_depth=float(d["max_depth"]),
                volume=float(d["volume"]),
                liquid_height=float(d["liquid_height"]),
                liquid_density=float(d.get("liquid_density", WATER_DENSITY)),
            )
        if f_type in ("spring", "bungee"):
            cls = Spring if f_type == "spring" else Bungee
            return cls(
                other=_particle_at(particles, d["other"]),
                spring_constant=float(d["spring_constant"]),
                rest_length=float(d["rest_length"]),
            )
        if f_type == "anchored_spring":
            return AnchoredSpring(
                anchor=Vector3.from_array(d["anchor"]),
                spring_constant=float(d["spring_constant"]),
                rest_length=float(d["rest_length"]),
            )
        if f_type == "fake_spring":
            return FakeSpring(
                anchor=Vector3.from_array(d["anchor"]),
                spring_constant=float(d["spring_constant"]),
                damping=float(d["damping"]),
            )
    except KeyError as exc:
        raise ValueError(f"Force entry of type '{f_type}' is missing field {exc}") from exc
    raise ValueError(f"Unknown force type: '{f_type}'")


def generator_to_json(g: ForceGenerator, index_of: Callable[[Particle], int]) -> dict[str, Any]:
    """
    Serialize a generator's type and parameters (without its targets).

    Args:
        g: The generator.
        index_of: Maps a partner particle to its index in the document.

    Raises:
        TypeError: For generator types this module does not know.
    """
    if isinstance(g, Gravity):
        return {"type": "gravity", "gravity": list(g.gravity)}
    if isinstance(g, Drag):
        return {"type": "drag", "k1": g.k1, "k2": g.k2}
    if isinstance(g, Buoyancy):
        return {
            "type": "buoyancy",
            "max_depth": g.max_depth,
            "volume": g.volume,
            "liquid_height": g.liquid_height,
            "liquid_density": g.liquid_density,
        }
    if isinstance(g, (Spring, Bungee)):
        return {
            "type": "spring" if isinstance(g, Spring) else "bungee",
            "other": index_of(g.other),
            "spring_constant": g.spring_constant,
            "rest_length": g.rest_length,
        }
    if isinstance(g, AnchoredSpring):
        return {
            "type": "anchored_spring",
            "anchor": list(g.anchor),
            "spring_constant": g.spring_constant,
            "rest_length": g.rest_length,
        }
    if isinstance(g, FakeSpring):
        return {
            "type": "fake_spring",
            "anchor": list(g.anchor),
            "spring_constant": g.spring_constant,
            "damping": g.damping,
        }
    raise TypeError(f"Cannot serialize unknown force generator type: {type(g)}")


def world_to_json(world: ParticleWorld) -> dict[str, Any]:
    """
    Serialize a complete ParticleWorld to a dictionary.

    Consecutive registrations sharing one generator become one force entry,
    so entries follow registration order exactly. When a generator's
    registrations are interleaved with others, its first entry gets an
    "id" and each later run becomes a {"ref": id, "particles": [...]}
    entry that reuses the same instance on load.

    Raises:
        ValueError: If a registration or spring refers to a particle that
                    is not in world.particles.
    """
    def index_of(p: Particle) -> int:
        for i, q in enumerate(world.particles):
            if q is p:
                return i
        raise ValueError(f"Particle {p!r} is referenced but not part of the world")

    entries: list[dict[str, Any]] = []
    first_entry: dict[int, dict[str, Any]] = {}
    entry: dict[str, Any] | None = None
    last_key = None
    next_id = 0
    for reg in world.registry:
        key = id(reg.generator)
        if key != last_key:
            first = first_entry.get(key)
            if first is None:
                entry = generator_to_json(reg.generator, index_of)
                first_entry[key] = entry
            else:
                if "id" not in first:
                    first["id"] = next_id
                    next_id += 1
                entry = {"ref": first["id"]}
            entry["particles"] = []
            entries.append(entry)
            last_key = key
        entry["particles"].append(index_of(reg.particle))

    result: dict[str, Any] = {
        "particles": [particle_to_json(p) for p in world.particles],
        "forces": entries,
    }
    if world.time != 0.0:
        result["time"] = world.time
    return result


def save_world(world: ParticleWorld, path: str, indent: int = 2) -> None:
    """Save a ParticleWorld to a JSON file on disk."""
    data = world_to_json(world)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info("Saved world to %s", path)


def _particle_at(particles: list[Particle], idx: Any) -> Particle:
    """Resolve a particle index from a document, with bounds checking."""
    if not isinstance(idx, int) or isinstance(idx, bool) or not 0 <= idx < len(particles):
        raise ValueError(f"Force entry references invalid particle index: {idx!r}")
    return particles[idx]
