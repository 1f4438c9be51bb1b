"""Mouse and keyboard handling that steers the camera."""

import enum


class Key(enum.Enum):
    W = "w"
    S = "s"
    A = "a"
    D = "d"
    SPACE = "space"
    LEFT_SHIFT = "left_shift"
    LEFT_CONTROL = "left_control"


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class ButtonAction(enum.Enum):
    PRESS = "press"
    RELEASE = "release"


class InputState:
    """Tracks the mouse and turns input events into camera motion.

    Holding the right mouse button captures the cursor; only then does mouse
    movement turn the camera.
    """

    _KEY_MOVES = (
        (Key.W, "forward"),
        (Key.S, "backward"),
        (Key.A, "left"),
        (Key.D, "right"),
        (Key.SPACE, "up"),
        (Key.LEFT_CONTROL, "down"),
    )

    def __init__(self, camera):
        self.camera = camera
        self.first_mouse = True
        self.last_x = 400.0
        self.last_y = 400.0
        self.right_button_down = False

    @property
    def cursor_captured(self):
        """Whether the cursor is hidden and locked to the window."""
        return self.right_button_down

    def mouse_button(self, button, action):
        """Handle a mouse button event."""
        if MouseButton(button) is not MouseButton.RIGHT:
            return
        action = ButtonAction(action)
        if action is ButtonAction.PRESS:
            self.right_button_down = True
            self.first_mouse = True
        else:
            self.right_button_down = False

    def mouse_moved(self, x, y):
        """Handle a cursor move to window coordinates ``x``, ``y``."""
        if not self.right_button_down:
            return
        x = float(x)
        y = float(y)
        if self.first_mouse:
            self.last_x = x
            self.last_y = y
            self.first_mouse = False

        xoffset = x - self.last_x
        yoffset = self.last_y - y  # window y grows downwards
        self.last_x = x
        self.last_y = y
        self.camera.process_mouse_movement(xoffset, yoffset)

    def process_keyboard(self, pressed_keys, delta_time):
        """Move the camera for the keys held down during ``delta_time`` seconds."""
        pressed = {Key(key) for key in pressed_keys}
        if Key.LEFT_SHIFT in pressed:
            delta_time *= self.camera.movement_speed_multiplier
        for key, direction in self._KEY_MOVES:
            if key in pressed:
                self.camera.process_keyboard(direction, delta_time)