"""The on-foot player: input actions, mouse look, movement and cursor grabbing."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from traffictrainer.geometry import Quat, Transform, Vec3

logger = logging.getLogger(__name__)

# How much the player sensitivity is divided by.
SENSITIVITY_FACTOR = 10000.0
# Camera pitch limit in radians, just short of straight up or down.
MAX_PITCH = 1.54
# Dead zone applied to both gamepad sticks.
STICK_DEADZONE = 0.1


class PlayerActions(Enum):
    """Inputs available to a player on foot."""

    LOOK = "Look"
    MOVE = "Move"
    JUMP = "Jump"
    TOGGLE_CAR = "ToggleCar"
    TOGGLE_PAUSE = "TogglePause"
    DEBUG_RESET_PLAYER = "DebugResetPlayer"


def default_player_bindings() -> dict[PlayerActions, tuple[str, ...]]:
    """Return the default inputs bound to each player action, keyboard first."""
    return {
        PlayerActions.LOOK: ("RightStick",),
        PlayerActions.MOVE: ("WASD", "LeftStick"),
        PlayerActions.JUMP: ("Space", "South"),
        PlayerActions.TOGGLE_CAR: ("KeyE", "North"),
        PlayerActions.TOGGLE_PAUSE: ("Escape", "Start"),
        PlayerActions.DEBUG_RESET_PLAYER: ("KeyR",),
    }


class CarState(Enum):
    """Whether the player is sitting in the car."""

    IN_CAR = "InCar"
    OUT_CAR = "OutCar"


def toggle_car(state: CarState) -> CarState:
    """Return the car state the enter/exit key switches to."""
    if not isinstance(state, CarState):
        raise TypeError(f"not a car state: {state!r}")
    if state is CarState.IN_CAR:
        logger.info("Exited Car")
        return CarState.OUT_CAR
    logger.info("Entered Car")
    return CarState.IN_CAR


class CursorGrabMode(Enum):
    """How the window holds on to the mouse cursor."""

    NONE = "None"
    CONFINED = "Confined"
    LOCKED = "Locked"


@dataclass
class Window:
    """The primary window's size and cursor settings."""

    width: float = 1280.0
    height: float = 720.0
    grab_mode: CursorGrabMode = CursorGrabMode.NONE
    cursor_visible: bool = True


def set_grabmode(window: Window, mode: bool) -> None:
    """Grab and hide the cursor when ``mode`` is true, release and show it otherwise."""
    if mode:
        window.grab_mode = CursorGrabMode.CONFINED
        window.cursor_visible = False
    else:
        window.grab_mode = CursorGrabMode.NONE
        window.cursor_visible = True


@dataclass
class PlayerSettings:
    """Per-player preferences: look sensitivity (0-100) and speed multiplier."""

    sensitivity: float = 75.0
    speed: float = 10.0


@dataclass
class PlayerMovement:
    """Movement tuning of the character controller."""

    acceleration: float = 30.0
    damping: float = 0.9
    jump_impulse: float = 7.0
    max_slope_angle: float = math.pi * 0.45


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def handle_player_look(
    camera: Transform,
    window: Window,
    settings: PlayerSettings,
    mouse_delta: tuple[float, float],
    dt: float,
) -> None:
    """Turn ``camera`` by one mouse motion; the cursor must be grabbed to turn."""
    dx, dy = mouse_delta
    yaw, pitch, _ = camera.rotation.to_euler_yxz()

    if window.grab_mode is not CursorGrabMode.NONE:
        window_scale = min(window.height, window.width)
        factor = settings.sensitivity / SENSITIVITY_FACTOR
        pitch -= math.radians(factor * dy * window_scale) * dt
        yaw -= math.radians(factor * dx * window_scale) * dt

    pitch = _clamp(pitch, -MAX_PITCH, MAX_PITCH)
    camera.rotation = Quat.from_axis_angle(Vec3.Y, yaw) * Quat.from_axis_angle(
        Vec3.X, pitch
    )


@dataclass
class Player:
    """The local player on foot."""

    transform: Transform = field(default_factory=Transform)
    velocity: Vec3 = field(default_factory=Vec3)
    settings: PlayerSettings = field(default_factory=PlayerSettings)
    movement: PlayerMovement = field(default_factory=PlayerMovement)
    grounded: bool = False

    def move(
        self,
        camera: Transform,
        movement: tuple[float, float],
        jump_pressed: bool,
        dt: float,
    ) -> None:
        """Accelerate along the camera's view and jump if on the ground."""
        mx, my = (_clamp(v, -1.0, 1.0) for v in movement)
        speed = self.settings.speed

        forward = camera.forward() * (my * dt * speed)
        right = (camera.right() * (mx * dt * speed)).normalize_or_zero()

        vy = self.velocity.y
        if jump_pressed and self.grounded:
            vy = self.movement.jump_impulse

        self.velocity = Vec3(
            self.velocity.x + forward.x + right.x,
            vy,
            self.velocity.z + forward.z + right.z,
        )
        camera.translation = self.velocity

    def reset(self, car_state: CarState) -> bool:
        """Move the player back to the origin at rest unless sitting in the car."""
        if car_state is CarState.IN_CAR:
            return False
        self.transform.translation = Vec3.ZERO
        self.velocity = Vec3.ZERO
        logger.info("Reset Player")
        return True