"""Gravity between bodies and the initial Earth-Moon system."""

import math

from spacesim.constants import DEFAULT_TIME_SCALE, G, METER_PER_KILOMETER
from spacesim.linalg import normalize, vec3
from spacesim.sphere import Sphere, SphereDesc
from spacesim.units import Acceleration

import numpy as np


def gravitational_force(mu, r):
    """Gravitational acceleration ``mu / r²`` at distance ``r``."""
    return mu / (r * r)


def orbital_velocity(other_mass, r):
    """Circular orbital speed around a body of ``other_mass`` at distance ``r``."""
    return math.sqrt(G * other_mass / r) / METER_PER_KILOMETER


def attract(obj, objects, time_scale=DEFAULT_TIME_SCALE):
    """Accelerate ``obj`` towards every other body in ``objects``.

    Raises ValueError if another body sits at exactly the same position.
    """
    for other in objects:
        if other is obj:
            continue
        diff = other.desc.pos.get() - obj.desc.pos.get()
        distance = float(np.linalg.norm(diff)) * METER_PER_KILOMETER
        unit = normalize(diff)
        force = (G * obj.desc.mass * other.desc.mass) / (distance * distance)
        acc = force / obj.desc.mass
        obj.accelerate(Acceleration(acc * unit), time_scale)


def create_solar_system():
    """Return the Earth and the Moon set up on a circular orbit with zero total momentum."""
    earth = SphereDesc(name="Earth", res=50, mass=5.972e24)
    earth.radius.set(12.5)
    earth.pos.set(vec3(0.0, 0.0, 0.0))
    earth.vel.set(vec3(0.0, 0.0, 0.0))
    earth.top_color = vec3(0.28, 0.56, 0.93)
    earth.bot_color = vec3(0.11, 0.23, 0.37)

    moon = SphereDesc(name="Moon", res=50, mass=7.342e22)
    moon.radius.set(3.0)
    moon.pos.set(vec3(384.400, 0.0, 0.0))

    orbital_speed = orbital_velocity(earth.mass, moon.pos.distance_to(earth.pos))
    moon.vel.set(vec3(0.0, 0.0, orbital_speed))

    earth_speed = -orbital_speed * (moon.mass / earth.mass)
    earth.vel.set(vec3(0.0, 0.0, earth_speed))

    moon.top_color = vec3(0.89, 0.96, 0.96)
    moon.bot_color = vec3(0.30, 0.41, 0.41)

    return [Sphere(earth), Sphere(moon)]