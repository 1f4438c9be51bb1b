"""A free-flying first-person camera driven by yaw and pitch."""

import enum
import math

import numpy as np

from spacesim.linalg import look_at, normalize, vec3


class CameraMovement(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Camera:
    """Camera with a position and an orientation given by yaw and pitch in degrees."""

    PITCH_LIMIT = 89.0

    def __init__(self, position):
        self.position = np.array(position, dtype=float)
        self.front = vec3(0.0, 0.0, -1.0)
        self.world_up = vec3(0.0, 1.0, 0.0)
        self.up = vec3(0.0, 1.0, 0.0)
        self.right = vec3(1.0, 0.0, 0.0)
        self.yaw = -90.0
        self.pitch = 0.0
        self.movement_speed = 50.0
        self.movement_speed_multiplier = 3.5
        self.mouse_sensitivity = 0.1
        self.zoom = 45.0
        self._update_vectors()

    def view_matrix(self):
        """Return the view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction, delta_time):
        """Move the camera in ``direction`` for ``delta_time`` seconds."""
        direction = CameraMovement(direction)
        velocity = self.movement_speed * delta_time
        offsets = {
            CameraMovement.FORWARD: self.front,
            CameraMovement.BACKWARD: -self.front,
            CameraMovement.LEFT: -self.right,
            CameraMovement.RIGHT: self.right,
            CameraMovement.UP: self.world_up,
            CameraMovement.DOWN: -self.world_up,
        }
        self.position = self.position + offsets[direction] * velocity

    def process_mouse_movement(self, xoffset, yoffset, constrain_pitch=True):
        """Turn the camera by a mouse offset, optionally keeping pitch within ±89°."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -self.PITCH_LIMIT), self.PITCH_LIMIT)
        self._update_vectors()

    def _update_vectors(self):
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = normalize(front)
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))