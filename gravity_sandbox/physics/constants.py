"""Simulation constants (simulation units unless noted)."""

# Fixed tick duration; not derived from wall-clock time
TIME_STEP = 0.01

# Unit coordinates (persisted form) -> simulation coordinates (in-memory form)
DISPLAY_SCALE = 250.0

# Gravitational constant scaled so that G=1 unit-coordinate orbits keep their period
G = DISPLAY_SCALE ** 3

# Minimum squared distance used by the force law
SOFTENING = 5.0

# radius = RADIUS_SCALE * sqrt(mass / pi)
RADIUS_SCALE = 20.0

# Extra margin around the drawn circle that still counts as a hit
HIT_TOLERANCE = 1.0
