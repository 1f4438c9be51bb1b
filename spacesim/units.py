"""Quantities kept both in world units (metres) and in scene units."""

import numpy as np

from spacesim.constants import to_normalized, to_world

_AXES = {"x": 0, "y": 1, "z": 2}


def _axis_index(axis):
    if isinstance(axis, str):
        try:
            return _AXES[axis.lower()]
        except KeyError:
            raise ValueError(f"unknown axis: {axis!r}") from None
    if isinstance(axis, bool) or axis not in (0, 1, 2):
        raise ValueError(f"unknown axis: {axis!r}")
    return int(axis)


class Meter:
    """A length held in metres and in scene units."""

    def __init__(self, value=0.0, normal=False):
        self.set(value, normal)

    def set(self, value, normal=False):
        """Store ``value``, given in scene units if ``normal`` else in metres."""
        value = float(value)
        self._world = float(to_world(value, normal))
        self._normalized = float(to_normalized(value, normal))

    def get(self, normal=False):
        """Return the length in scene units if ``normal`` else in metres."""
        return self._normalized if normal else self._world

    def __repr__(self):
        return f"{type(self).__name__}({self._world!r})"


class ScaledVector:
    """A 3-vector held in world units and in scene units."""

    def __init__(self, vector=(0.0, 0.0, 0.0), normal=False):
        self.set(vector, normal)

    def set(self, vector, normal=False):
        """Store ``vector``, given in scene units if ``normal`` else in world units."""
        v = np.array(vector, dtype=float)
        if v.shape != (3,):
            raise ValueError("expected a vector of three components")
        self._world = np.array(to_world(v, normal), dtype=float)
        self._normalized = np.array(to_normalized(v, normal), dtype=float)

    def set_component(self, axis, value, normal=False):
        """Set one component; ``axis`` is 0, 1, 2 or "x", "y", "z"."""
        index = _axis_index(axis)
        value = float(value)
        self._world[index] = to_world(value, normal)
        self._normalized[index] = to_normalized(value, normal)

    def get(self, normal=False):
        """Return a copy of the vector in scene units if ``normal`` else in world units."""
        return (self._normalized if normal else self._world).copy()

    @property
    def x(self):
        return float(self._world[0])

    @property
    def y(self):
        return float(self._world[1])

    @property
    def z(self):
        return float(self._world[2])

    def __repr__(self):
        return f"{type(self).__name__}({self._world.tolist()!r})"


class Position(ScaledVector):
    """A position in space."""

    def distance_to(self, other):
        """Euclidean distance to ``other`` in world units."""
        return float(np.linalg.norm(self._world - other._world))


class Velocity(ScaledVector):
    """A velocity."""


class Acceleration(ScaledVector):
    """An acceleration."""