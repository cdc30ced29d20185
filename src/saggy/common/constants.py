"""Physical constants (SI units)."""

ICE_DENSITY = 916.8  # kg/m^3, glaze ice
GRAVITY = 9.80665  # m/s^2
