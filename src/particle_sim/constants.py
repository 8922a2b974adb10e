# MIT License (see LICENSE)
"""
Physical constants and defaults used throughout the particle kernel.

Values are in SI units. Y is the up axis.
"""
from __future__ import annotations

# Standard gravitational acceleration near the Earth's surface, pointing down.
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?gn
GRAVITY_EARTH: tuple[float, float, float] = (0.0, -9.81, 0.0)

# Density of fresh water in kg/m³, used by the buoyancy generator.
WATER_DENSITY: float = 1000.0

# Damping assigned to a freshly constructed particle (keep all velocity).
DEFAULT_DAMPING: float = 1.0

# Environment variable consulted by logging_config.setup_logging().
LOG_LEVEL_ENV: str = "PARTICLE_SIM_LOG_LEVEL"
