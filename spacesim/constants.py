"""Physical constants, unit scale and conversions between world and scene units."""

PI = 3.141592653589

# Gravitational constant, m^3 kg^-1 s^-2.
G = 0.000000000066743

EARTH_RADIUS_EQUATORIAL = 6378137.0
EARTH_RADIUS_SEMIMINOR_AXIS = 6356752.3141
EARTH_RADIUS_POLAR_RADIUS_OF_CURVATURE = 6399593.6259
EARTH_RADIUS_MEAN_RADIUS = 6371008.7714

# Standard gravitational parameter of the Earth, m^3 s^-2.
MU = 398601877000000.0

METERS_PER_UNIT = 10000.0
METER_PER_KILOMETER = 1000.0

DELTA_TIME = 0.00000066666666666

DEFAULT_TIME_SCALE = 1.0


def to_world(value, normal=False):
    """Return ``value`` in world units (metres).

    ``normal`` says that ``value`` is given in scene units and must be scaled.
    Works on scalars and numpy arrays alike.
    """
    return value * METERS_PER_UNIT if normal else value


def to_normalized(value, normal=False):
    """Return ``value`` in scene units.

    ``normal`` says that ``value`` is already in scene units.
    Works on scalars and numpy arrays alike.
    """
    return value if normal else value / METERS_PER_UNIT