"""Spheres: their description, mesh geometry, motion and transforms."""

import copy
import math
from dataclasses import dataclass, field

import numpy as np

from spacesim.constants import DEFAULT_TIME_SCALE, DELTA_TIME, METERS_PER_UNIT
from spacesim.linalg import perspective, scale, translate, vec3
from spacesim.units import Acceleration, Meter, Position, Velocity


@dataclass(frozen=True)
class SphereMesh:
    """Unit-sphere geometry laid out as a single triangle strip."""

    vertices: np.ndarray
    indices: np.ndarray

    @property
    def index_count(self):
        return int(self.indices.size)


def create_sphere_mesh(x_segments=50, y_segments=50):
    """Build a unit sphere from ``x_segments`` by ``y_segments`` quads.

    Vertices run row by row from the top pole to the bottom one; indices zigzag
    across rows, alternating direction so the strip stays continuous.
    """
    if x_segments < 1 or y_segments < 1:
        raise ValueError("a sphere needs at least one segment in each direction")

    ys = np.arange(y_segments + 1, dtype=float) / y_segments
    xs = np.arange(x_segments + 1, dtype=float) / x_segments
    ys_grid, xs_grid = np.meshgrid(ys, xs, indexing="ij")
    vertices = np.stack(
        (
            np.cos(xs_grid * 2.0 * math.pi) * np.sin(ys_grid * math.pi),
            np.cos(ys_grid * math.pi),
            np.sin(xs_grid * 2.0 * math.pi) * np.sin(ys_grid * math.pi),
        ),
        axis=-1,
    ).reshape(-1, 3)

    row_length = x_segments + 1
    rows = []
    for row in range(y_segments):
        top = row * row_length + np.arange(row_length)
        bottom = top + row_length
        if row % 2 == 0:
            pairs = np.column_stack((top, bottom))
        else:
            pairs = np.column_stack((bottom[::-1], top[::-1]))
        rows.append(pairs.ravel())
    indices = np.concatenate(rows).astype(np.uint32)

    return SphereMesh(vertices=vertices, indices=indices)


@dataclass
class SphereDesc:
    """Attributes of a sphere: identity, kinematics, size, mass and colours."""

    name: str = "NO_NAME"
    pos: Position = field(default_factory=Position)
    vel: Velocity = field(default_factory=Velocity)
    acc: Acceleration = field(default_factory=Acceleration)
    radius: Meter = field(default_factory=Meter)
    res: int = 50
    mass: float = 1.0
    top_color: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, 0.0))
    bot_color: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, 0.0))


class Sphere:
    """A body in the simulation together with its mesh."""

    NEAR_PLANE = 0.1
    FAR_PLANE = 1e25

    def __init__(self, desc=None):
        self.desc = copy.deepcopy(desc) if desc is not None else SphereDesc()
        self.mesh = create_sphere_mesh()

    def accelerate(self, acceleration, time_scale=DEFAULT_TIME_SCALE):
        """Record ``acceleration`` and apply it to the velocity for one step."""
        self.desc.acc = acceleration
        step = DELTA_TIME * time_scale
        self.desc.vel.set(self.desc.vel.get() + acceleration.get() * step)

    def update_position(self, time_scale=DEFAULT_TIME_SCALE):
        """Advance the position by the current velocity for one step."""
        step = DELTA_TIME * time_scale
        self.desc.pos.set(self.desc.pos.get() + self.desc.vel.get() * step)

    def model_matrix(self):
        """Return the model matrix placing and sizing the unit mesh in the scene."""
        model = translate(np.eye(4), self.desc.pos.get())
        scaled_radius = self.desc.radius.get(True) * METERS_PER_UNIT
        return scale(model, scaled_radius)

    def mvp(self, camera, aspect_ratio):
        """Return the combined projection, view and model matrix for ``camera``."""
        projection = perspective(
            math.radians(camera.zoom), aspect_ratio, self.NEAR_PLANE, self.FAR_PLANE
        )
        return projection @ camera.view_matrix() @ self.model_matrix()

    def __repr__(self):
        return f"{type(self).__name__}({self.desc.name!r})"