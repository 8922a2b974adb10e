# MIT License (see LICENSE)
"""
Input/Output utilities for particle worlds.

This subpackage provides:
    - JSON serialization: Save and load worlds to/from JSON files.
    - Round-trip support: particles, generators and their registrations.

Typical usage:
    from particle_sim.io import load_world, save_world, world_to_json

    world = load_world("bungee.json")
    save_world(world, "output.json")
    data = world_to_json(world)
"""
from .json_io import (
    load_world,
    load_world_raw,
    world_from_json,
    save_world,
    world_to_json,
    particle_from_json,
    particle_to_json,
    generator_from_json,
    generator_to_json,
)

__all__ = [
    # Loading
    "load_world",
    "load_world_raw",
    "world_from_json",
    # Saving
    "save_world",
    "world_to_json",
    # Pieces
    "particle_from_json",
    "particle_to_json",
    "generator_from_json",
    "generator_to_json",
]
