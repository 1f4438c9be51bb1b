import numpy as np
import pytest

from spacesim.camera import Camera
from spacesim.controls import ButtonAction, Key, MouseButton
from spacesim.simulation import Simulation, format_simulation_info, main
from spacesim.sphere import Sphere, SphereDesc


def make_sim(**kwargs):
    return Simulation(**kwargs)


def test_default_system_has_earth_and_moon():
    sim = make_sim()
    assert [body.desc.name for body in sim.objects] == ["Earth", "Moon"]
    assert sim.time_scale == 1.0


def test_default_scene_size_and_aspect():
    sim = make_sim()
    assert (sim.scene_width, sim.scene_height) == (1280, 720)
    assert sim.aspect_ratio == pytest.approx(1280 / 720)


def test_resize_reports_change():
    sim = make_sim()
    assert sim.resize(1280, 720) is False
    assert sim.resize(800, 600) is True
    assert (sim.scene_width, sim.scene_height) == (800, 600)
    assert sim.resize(800, 600) is False


def test_resize_rejects_empty_size():
    sim = make_sim()
    with pytest.raises(ValueError):
        sim.resize(0, 100)


def test_time_scale_is_clamped():
    sim = make_sim()
    assert sim.set_time_scale(-5.0) == 0.0
    assert sim.set_time_scale(1e9) == 10000.0
    assert sim.set_time_scale(42.0) == 42.0
    assert sim.time_scale == 42.0


def test_time_scale_rejects_nan():
    sim = make_sim()
    with pytest.raises(ValueError):
        sim.set_time_scale(float("nan"))


def test_step_returns_one_matrix_per_body():
    sim = make_sim()
    matrices = sim.step(0.016)
    assert len(matrices) == len(sim.objects)
    assert all(m.shape == (4, 4) for m in matrices)


def test_step_moves_the_moon():
    sim = make_sim(time_scale=1000.0)
    moon = sim.objects[1]
    before = moon.desc.pos.get()
    sim.step(0.016)
    after = moon.desc.pos.get()
    assert after[2] > before[2]


def test_zero_time_scale_freezes_bodies():
    sim = make_sim(time_scale=0.0)
    before = [body.desc.pos.get() for body in sim.objects]
    for _ in range(5):
        sim.step(0.016)
    after = [body.desc.pos.get() for body in sim.objects]
    for b, a in zip(before, after):
        np.testing.assert_array_equal(b, a)


def test_keys_ignored_without_right_button():
    sim = make_sim()
    start = sim.camera.position.copy()
    sim.step(0.1, [Key.W])
    np.testing.assert_array_equal(sim.camera.position, start)


def test_keys_move_camera_with_right_button():
    sim = make_sim()
    reference = Camera(sim.camera.position.copy())
    reference.process_keyboard("forward", 0.1)
    sim.input.mouse_button(MouseButton.RIGHT, ButtonAction.PRESS)
    sim.step(0.1, [Key.W])
    np.testing.assert_allclose(sim.camera.position, reference.position)


def test_custom_objects_are_used():
    body = Sphere(SphereDesc(name="Lonely"))
    sim = make_sim(objects=[body])
    sim.step(0.016)
    assert sim.objects == [body]
    np.testing.assert_array_equal(body.desc.pos.get(), np.zeros(3))


def test_format_simulation_info_contents():
    camera = Camera(np.array([0.0, 0.0, 25.0]))
    sim = make_sim(camera=camera)
    text = format_simulation_info(camera, sim.objects)
    lines = text.splitlines()
    assert lines[0] == "Objects: 2"
    assert "[Earth]" in lines
    assert "[Moon]" in lines
    assert "Camera Info" in lines
    assert "Position: (0.00, 0.00, 25.00)" in lines
    assert "Yaw: -90.00" in lines
    assert "Pitch: 0.00" in lines


def test_info_matches_format():
    sim = make_sim()
    assert sim.info() == format_simulation_info(sim.camera, sim.objects)


def test_main_prints_state(capsys):
    assert main(["--steps", "3"]) == 0
    out = capsys.readouterr().out
    assert "Objects: 2" in out
    assert "[Moon]" in out


def test_main_reports_periodically(capsys):
    assert main(["--steps", "4", "--report-every", "2"]) == 0
    out = capsys.readouterr().out
    assert "Frame 2" in out
    assert "Frame 4" in out
    assert "Frame 3" not in out


def test_main_rejects_negative_steps(capsys):
    assert main(["--steps", "-1"]) == 2
    assert "error" in capsys.readouterr().out