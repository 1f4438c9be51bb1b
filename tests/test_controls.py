import numpy as np
import pytest

from spacesim.camera import Camera, CameraMovement
from spacesim.controls import ButtonAction, InputState, Key, MouseButton


@pytest.fixture
def state():
    return InputState(Camera((0.0, 0.0, 25.0)))


def test_initial_state(state):
    assert state.first_mouse is True
    assert state.right_button_down is False
    assert (state.last_x, state.last_y) == (400.0, 400.0)


def test_right_press_and_release(state):
    state.mouse_button(MouseButton.RIGHT, ButtonAction.PRESS)
    assert state.right_button_down is True
    assert state.cursor_captured is True
    state.mouse_button(MouseButton.RIGHT, ButtonAction.RELEASE)
    assert state.right_button_down is False
    assert state.cursor_captured is False


def test_press_resets_first_mouse(state):
    state.mouse_button(MouseButton.RIGHT, ButtonAction.PRESS)
    state.mouse_moved(10, 10)
    assert state.first_mouse is False
    state.mouse_button(MouseButton.RIGHT, ButtonAction.RELEASE)
    state.mouse_button(MouseButton.RIGHT, ButtonAction.PRESS)
    assert state.first_mouse is True


def test_other_buttons_ignored(state):
    state.mouse_button(MouseButton.LEFT, ButtonAction.PRESS)
    assert state.right_button_down is False


def test_unknown_button_rejected(state):
    with pytest.raises(ValueError):
        state.mouse_button("thumb", ButtonAction.PRESS)


def test_mouse_ignored_without_right_button(state):
    yaw = state.camera.yaw
    state.mouse_moved(100, 100)
    assert state.camera.yaw == yaw
    assert state.last_x == 400.0


def test_first_move_only_records_position(state):
    state.mouse_button(MouseButton.RIGHT, ButtonAction.PRESS)
    yaw, pitch = state.camera.yaw, state.camera.pitch
    state.mouse_moved(100, 200)
    assert (state.camera.yaw, state.camera.pitch) == (yaw, pitch)
    assert (state.last_x, state.last_y) == (100.0, 200.0)


def test_move_turns_camera(state):
    camera = state.camera
    state.mouse_button(MouseButton.RIGHT, ButtonAction.PRESS)
    state.mouse_moved(100, 200)
    yaw, pitch = camera.yaw, camera.pitch
    state.mouse_moved(110, 220)
    assert camera.yaw == pytest.approx(yaw + 10 * camera.mouse_sensitivity)
    assert camera.pitch == pytest.approx(pitch - 20 * camera.mouse_sensitivity)


def _reference(direction, delta_time):
    camera = Camera((0.0, 0.0, 25.0))
    camera.process_keyboard(direction, delta_time)
    return camera.position


def test_keyboard_forward(state):
    state.process_keyboard({Key.W}, 0.5)
    np.testing.assert_allclose(state.camera.position, _reference(CameraMovement.FORWARD, 0.5))


def test_keyboard_shift_speeds_up(state):
    state.process_keyboard([Key.D, Key.LEFT_SHIFT], 0.2)
    expected = _reference(
        CameraMovement.RIGHT, 0.2 * state.camera.movement_speed_multiplier
    )
    np.testing.assert_allclose(state.camera.position, expected)


def test_keyboard_up_and_down_cancel(state):
    state.process_keyboard({Key.SPACE, Key.LEFT_CONTROL}, 1.0)
    np.testing.assert_allclose(state.camera.position, [0.0, 0.0, 25.0], atol=1e-12)


def test_keyboard_no_keys_no_motion(state):
    state.process_keyboard(set(), 1.0)
    np.testing.assert_allclose(state.camera.position, [0.0, 0.0, 25.0])


def test_keyboard_backward_opposes_forward(state):
    state.process_keyboard({Key.S}, 0.3)
    back = state.camera.position - np.array([0.0, 0.0, 25.0])
    forward = _reference(CameraMovement.FORWARD, 0.3) - np.array([0.0, 0.0, 25.0])
    np.testing.assert_allclose(back, -forward)