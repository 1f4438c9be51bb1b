"""The simulation loop: gravity, motion, camera control and the info read-out."""

import argparse
import math

from spacesim.camera import Camera
from spacesim.constants import DEFAULT_TIME_SCALE
from spacesim.controls import InputState
from spacesim.linalg import vec3
from spacesim.space import attract, create_solar_system

TIME_SCALE_MIN = 0.0
TIME_SCALE_MAX = 10000.0

DEFAULT_SCENE_WIDTH = 1280
DEFAULT_SCENE_HEIGHT = 720

DEFAULT_CAMERA_POSITION = (0.0, 0.0, 25.0)


class Simulation:
    """Bodies under mutual gravity, viewed through a camera steered by input."""

    def __init__(self, objects=None, camera=None, time_scale=DEFAULT_TIME_SCALE):
        self.objects = list(objects) if objects is not None else create_solar_system()
        self.camera = camera if camera is not None else Camera(vec3(*DEFAULT_CAMERA_POSITION))
        self.input = InputState(self.camera)
        self.scene_width = DEFAULT_SCENE_WIDTH
        self.scene_height = DEFAULT_SCENE_HEIGHT
        self.time_scale = DEFAULT_TIME_SCALE
        self.set_time_scale(time_scale)

    @property
    def aspect_ratio(self):
        """Width over height of the scene view."""
        return self.scene_width / self.scene_height

    def set_time_scale(self, value):
        """Set how fast simulated time runs, kept within the control's range."""
        value = float(value)
        if math.isnan(value):
            raise ValueError("time scale must be a number")
        self.time_scale = min(max(value, TIME_SCALE_MIN), TIME_SCALE_MAX)
        return self.time_scale

    def resize(self, width, height):
        """Resize the scene view; return whether the size actually changed."""
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ValueError("scene size must be positive")
        if (width, height) == (self.scene_width, self.scene_height):
            return False
        self.scene_width = width
        self.scene_height = height
        return True

    def step(self, delta_time, pressed_keys=()):
        """Advance one frame that lasted ``delta_time`` seconds.

        The camera moves with the held keys only while the right mouse button
        is down. Every body is attracted by the others and moved in turn.
        Returns each body's model-view-projection matrix, in body order.
        """
        if self.input.right_button_down:
            self.input.process_keyboard(pressed_keys, delta_time)

        aspect = self.aspect_ratio
        matrices = []
        for body in self.objects:
            attract(body, self.objects, self.time_scale)
            body.update_position(self.time_scale)
            matrices.append(body.mvp(self.camera, aspect))
        return matrices

    def info(self):
        """Return the simulation read-out text."""
        return format_simulation_info(self.camera, self.objects)


def _triple(vector):
    x, y, z = (float(c) for c in vector)
    return f"({x:.2f}, {y:.2f}, {z:.2f})"


def format_simulation_info(camera, objects):
    """Describe every body and the camera as lines of text."""
    lines = [f"Objects: {len(objects)}"]
    for body in objects:
        lines.append(f"[{body.desc.name}]")
        lines.append(f"Pos: {_triple(body.desc.pos.get())}")
        lines.append(f"Vel: {_triple(body.desc.vel.get())}")
    lines.append("---")
    lines.append("Camera Info")
    lines.append(f"Position: {_triple(camera.position)}")
    lines.append(f"Yaw: {camera.yaw:.2f}")
    lines.append(f"Pitch: {camera.pitch:.2f}")
    return "\n".join(lines)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="spacesim", description="Run the Earth-Moon simulation and print its state."
    )
    parser.add_argument("--steps", type=int, default=1000, help="number of frames to run")
    parser.add_argument(
        "--time-scale", type=float, default=DEFAULT_TIME_SCALE, help="simulated time multiplier"
    )
    parser.add_argument(
        "--delta-time", type=float, default=1.0 / 60.0, help="seconds per frame"
    )
    parser.add_argument(
        "--report-every", type=int, default=0,
        help="print the state every N frames (0: only at the end)",
    )
    return parser


def main(argv=None):
    """Run the simulation without a display and print the read-out."""
    args = _build_parser().parse_args(argv)
    if args.steps < 0:
        print("error: --steps must not be negative")
        return 2
    if args.report_every < 0:
        print("error: --report-every must not be negative")
        return 2

    simulation = Simulation(time_scale=args.time_scale)
    for frame in range(1, args.steps + 1):
        simulation.step(args.delta_time)
        if args.report_every and frame % args.report_every == 0:
            print(f"Frame {frame}")
            print(simulation.info())
            print()
    print(simulation.info())
    return 0