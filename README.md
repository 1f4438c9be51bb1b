# spacesim

spacesim is a small gravity simulation of the Earth–Moon system. Each body is a
sphere, and the bodies pull on each other by Newton's law of gravitation. A
free-flying camera looks at the scene and is steered by keyboard and mouse
input. The package covers the physics, the unit scaling, the camera maths and
the sphere meshes. It is written in plain Python with NumPy.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
spacesim
```

The command builds the Earth–Moon system and runs it without a display. At the
end it prints each body's position and velocity, followed by the camera's
position, yaw and pitch.

Options:

- `--steps N`: the number of frames to run. The default is 1000.
- `--time-scale X`: the multiplier for simulated time. The default is 1.0. The
  value is clamped to the range 0 to 10000.
- `--delta-time S`: the length of one frame in seconds. The default is 1/60.
- `--report-every N`: print the state every N frames as well as at the end.
  The default is 0, which prints only at the end.

If `--steps` or `--report-every` is negative, the command prints an error and
exits with status 2.

## Library use

```python
from spacesim.camera import Camera
from spacesim.space import create_solar_system
from spacesim.simulation import Simulation, format_simulation_info
from spacesim.linalg import vec3

objects = create_solar_system()
camera = Camera(vec3(0.0, 0.0, 25.0))
sim = Simulation(objects, camera, 1.0)

sim.set_time_scale(100.0)
matrices = sim.step(1 / 60, set())   # one MVP matrix per body

print(format_simulation_info(camera, objects))
```

### Modules

- `spacesim.constants`: physical constants (`G`, `MU`, the Earth radii,
  `DELTA_TIME`) and the scale between world metres and scene units
  (`METERS_PER_UNIT`). It also has the converters `to_world` and
  `to_normalized`.
- `spacesim.units`: `Meter`, and `ScaledVector` with its subclasses
  `Position`, `Velocity` and `Acceleration`. Each one holds a world value and a
  scene-unit value, and the two are kept in step. `Position.distance_to` gives
  the distance in world units.
- `spacesim.linalg`: `vec3`, `normalize`, `look_at`, `perspective`,
  `translate` and `scale`, which work on NumPy 4x4 matrices.
- `spacesim.camera`: `Camera` and `CameraMovement`. The camera is oriented by
  yaw and pitch, and its pitch is held within ±89° by default.
- `spacesim.sphere`: `Sphere`, `SphereDesc`, `SphereMesh` and
  `create_sphere_mesh`. `create_sphere_mesh` builds a unit sphere as one
  triangle strip. `Sphere` can accelerate, move, and give its model matrix and
  its model-view-projection matrix.
- `spacesim.space`: `gravitational_force`, `orbital_velocity`, `attract` and
  `create_solar_system`. `attract` raises `ValueError` if two bodies share the
  same position.
- `spacesim.controls`: `InputState`, with the enums `Key`, `MouseButton` and
  `ButtonAction`. `InputState` turns mouse and key events into camera motion.
  Mouse look and key movement only take effect while the right mouse button is
  held.
- `spacesim.simulation`: `Simulation` and `format_simulation_info`.
  `Simulation` provides `step`, `resize`, `set_time_scale` and `info`.
  `format_simulation_info` produces the text read-out.

## What it does not do

spacesim opens no window and draws nothing. There is no OpenGL rendering and no
on-screen control panel. Input events must be fed to `InputState` by the
caller. `Simulation.step` returns the transform matrices that a renderer would
need, but drawing the bodies with them is left to the caller.