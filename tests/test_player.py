import math

import pytest

from traffictrainer.geometry import Quat, Transform, Vec3
from traffictrainer.player import (
    MAX_PITCH,
    CarState,
    CursorGrabMode,
    Player,
    PlayerActions,
    PlayerMovement,
    PlayerSettings,
    Window,
    default_player_bindings,
    handle_player_look,
    set_grabmode,
    toggle_car,
)


def test_set_grabmode_on_confines_and_hides():
    window = Window()
    set_grabmode(window, True)
    assert window.grab_mode is CursorGrabMode.CONFINED
    assert window.cursor_visible is False


def test_set_grabmode_off_releases_and_shows():
    window = Window(grab_mode=CursorGrabMode.CONFINED, cursor_visible=False)
    set_grabmode(window, False)
    assert window.grab_mode is CursorGrabMode.NONE
    assert window.cursor_visible is True


def test_toggle_car_round_trip():
    assert toggle_car(CarState.OUT_CAR) is CarState.IN_CAR
    assert toggle_car(toggle_car(CarState.IN_CAR)) is CarState.IN_CAR


def test_toggle_car_rejects_other_values():
    with pytest.raises(TypeError):
        toggle_car("InCar")


def test_default_settings_and_movement():
    settings = PlayerSettings()
    assert settings.sensitivity == 75.0
    assert settings.speed == 10.0
    movement = PlayerMovement()
    assert movement.acceleration == 30.0
    assert movement.jump_impulse == 7.0
    assert movement.max_slope_angle == pytest.approx(math.pi * 0.45)


def test_bindings_cover_every_action():
    bindings = default_player_bindings()
    assert set(bindings) == set(PlayerActions)
    assert "Escape" in bindings[PlayerActions.TOGGLE_PAUSE]
    assert "KeyE" in bindings[PlayerActions.TOGGLE_CAR]


def test_look_ignored_without_grab():
    camera = Transform()
    handle_player_look(camera, Window(), PlayerSettings(), (50.0, 50.0), 0.016)
    forward = camera.forward()
    assert forward.x == pytest.approx(0.0)
    assert forward.y == pytest.approx(0.0)
    assert forward.z == pytest.approx(-1.0)


def test_look_down_with_grab():
    camera = Transform()
    window = Window(grab_mode=CursorGrabMode.CONFINED)
    handle_player_look(camera, window, PlayerSettings(), (0.0, 1.0), 0.016)
    assert camera.forward().y < 0.0


def test_look_pitch_is_clamped():
    camera = Transform()
    window = Window(grab_mode=CursorGrabMode.CONFINED)
    handle_player_look(camera, window, PlayerSettings(), (0.0, 1e6), 1.0)
    _, pitch, _ = camera.rotation.to_euler_yxz()
    assert pitch == pytest.approx(-MAX_PITCH)


def test_look_right_turns_yaw_negative():
    camera = Transform()
    window = Window(grab_mode=CursorGrabMode.LOCKED)
    handle_player_look(camera, window, PlayerSettings(), (1.0, 0.0), 0.016)
    yaw, _, _ = camera.rotation.to_euler_yxz()
    assert yaw < 0.0


def test_move_forward_follows_camera():
    player = Player()
    camera = Transform()
    player.move(camera, (0.0, 1.0), False, 0.5)
    assert player.velocity.z < 0.0
    assert player.velocity.x == pytest.approx(0.0)
    assert camera.translation == player.velocity


def test_move_input_is_clamped():
    a, b = Player(), Player()
    a.move(Transform(), (0.0, 5.0), False, 0.1)
    b.move(Transform(), (0.0, 1.0), False, 0.1)
    assert a.velocity == b.velocity


def test_sideways_move_is_normalized():
    player = Player()
    player.move(Transform(), (1.0, 0.0), False, 0.01)
    assert player.velocity.x == pytest.approx(1.0)


def test_jump_only_when_grounded():
    grounded = Player(grounded=True)
    grounded.move(Transform(), (0.0, 0.0), True, 0.1)
    assert grounded.velocity.y == grounded.movement.jump_impulse

    airborne = Player(velocity=Vec3(0.0, -2.0, 0.0))
    airborne.move(Transform(), (0.0, 0.0), True, 0.1)
    assert airborne.velocity.y == -2.0


def test_reset_outside_car():
    player = Player(
        transform=Transform(translation=Vec3(3.0, 4.0, 5.0)),
        velocity=Vec3(1.0, 2.0, 3.0),
    )
    assert player.reset(CarState.OUT_CAR) is True
    assert player.transform.translation == Vec3.ZERO
    assert player.velocity == Vec3.ZERO


def test_reset_ignored_in_car():
    player = Player(
        transform=Transform(translation=Vec3(3.0, 4.0, 5.0)),
        velocity=Vec3(1.0, 2.0, 3.0),
    )
    assert player.reset(CarState.IN_CAR) is False
    assert player.transform.translation == Vec3(3.0, 4.0, 5.0)
    assert player.velocity == Vec3(1.0, 2.0, 3.0)


def test_look_result_is_unit_rotation():
    camera = Transform(rotation=Quat.IDENTITY)
    window = Window(grab_mode=CursorGrabMode.CONFINED)
    handle_player_look(camera, window, PlayerSettings(), (3.0, -2.0), 0.02)
    assert camera.forward().length() == pytest.approx(1.0)