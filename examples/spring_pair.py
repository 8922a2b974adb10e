# examples/spring_pair.py
from particle_sim import Particle, ParticleWorld, Spring, Gravity, AnchoredSpring
from particle_sim.core.invariants import kinetic_energy, center_of_mass

world = ParticleWorld()

a = world.add_particle(Particle(position=(-1.0, 5.0, 0.0), damping=0.95))
b = world.add_particle(Particle(position=(+1.5, 5.0, 0.0), damping=0.95))
a.set_mass(1.0)
b.set_mass(2.0)

# Newton's third law is not automatic: register one spring on each end
world.add_force(a, Spring(b, spring_constant=10.0, rest_length=2.0))
world.add_force(b, Spring(a, spring_constant=10.0, rest_length=2.0))

# Hang the pair from a fixed point by the lighter particle
gravity = Gravity()
world.add_force(a, gravity)
world.add_force(b, gravity)
world.add_force(a, AnchoredSpring((-1.0, 10.0, 0.0), spring_constant=30.0, rest_length=3.0))

for _ in range(600):
    world.step(1 / 60)

print("t:", world.time)
print("a:", a.position, "b:", b.position)
print("separation:", (a.position - b.position).magnitude())
print("centre of mass:", center_of_mass(world.particles))
print("kinetic energy:", kinetic_energy(world.particles))
