"""The drivable car: its input actions, controls and per-frame physics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from traffictrainer.engine import Engine
from traffictrainer.geometry import Transform, Vec3
from traffictrainer.transmission import Transmission
from traffictrainer.wheels import DriveTrain, Wheels

logger = logging.getLogger(__name__)

# Maximum steering angle in degrees.
MAX_STEER_ANGLE = 30.0


class CarActions(Enum):
    """Inputs that drive the car."""

    THROTTLE = "Throttle"
    BRAKE = "Brake"
    TURN = "Turn"
    K_THROTTLE = "KThrottle"
    K_BRAKE = "KBrake"
    K_TURN_LEFT = "KTurnLeft"
    K_TURN_RIGHT = "KTurnRight"
    HAND_BRAKE = "HandBrake"
    GEAR_UP = "GearUp"
    GEAR_DOWN = "GearDown"
    TOGGLE_ON = "ToggleOn"


def default_car_bindings() -> dict[CarActions, tuple[str, ...]]:
    """Return the default inputs bound to each car action, gamepad first."""
    return {
        CarActions.THROTTLE: ("RightZ",),
        CarActions.BRAKE: ("LeftZ",),
        CarActions.TURN: ("RightStickX",),
        CarActions.K_THROTTLE: ("KeyW",),
        CarActions.K_BRAKE: ("KeyS",),
        CarActions.K_TURN_LEFT: ("KeyA",),
        CarActions.K_TURN_RIGHT: ("KeyD",),
        CarActions.HAND_BRAKE: ("West", "Space"),
        CarActions.GEAR_UP: ("RightTrigger", "KeyE"),
        CarActions.GEAR_DOWN: ("LeftTrigger", "KeyQ"),
        CarActions.TOGGLE_ON: ("Start", "KeyF"),
    }


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class CarInput:
    """The state of the car's inputs for one frame."""

    held: frozenset[CarActions] = frozenset()
    just_pressed: frozenset[CarActions] = frozenset()
    axes: dict[CarActions, float] = field(default_factory=dict)

    def pressed(self, action: CarActions) -> bool:
        return action in self.held

    def was_just_pressed(self, action: CarActions) -> bool:
        return action in self.just_pressed

    def value(self, action: CarActions) -> float:
        """Axis value clamped to [-1, 1]; 0 if the axis is idle."""
        return _clamp(self.axes.get(action, 0.0))


@dataclass
class Car:
    """A car with its parts, position and velocity."""

    id: int = 0
    engine: Engine = field(default_factory=Engine)
    transmission: Transmission = field(default_factory=Transmission)
    wheels: Wheels = field(default_factory=Wheels)
    transform: Transform = field(default_factory=Transform)
    velocity: Vec3 = field(default_factory=Vec3)
    angular_velocity: Vec3 = field(default_factory=Vec3)
    main: bool = False

    @classmethod
    def main_car(cls) -> Car:
        """The client's own car: id 0 with front-wheel drive."""
        return cls(id=0, wheels=Wheels.for_drivetrain(DriveTrain.FWD), main=True)

    def apply_controls(self, controls: CarInput) -> None:
        """Apply one frame of input: gear shifts, throttle and steering."""
        prev_ratio = self.transmission.ratio()

        if controls.was_just_pressed(CarActions.GEAR_UP):
            self.transmission.gear_up()
            self.engine.shift_rpm(prev_ratio, self.transmission.ratio())
            logger.info("↑ %s - %s", self.transmission.ratio(), self.engine.rpm)
        elif controls.was_just_pressed(CarActions.GEAR_DOWN):
            self.transmission.gear_down()
            self.engine.shift_rpm(prev_ratio, self.transmission.ratio())
            logger.info("↓ %s - %s", self.transmission.ratio(), self.engine.rpm)

        throttle = 1.0 if controls.pressed(CarActions.K_THROTTLE) else 0.0
        self.engine.set_throttle(throttle)

        turn = float(
            controls.pressed(CarActions.K_TURN_RIGHT)
            - controls.pressed(CarActions.K_TURN_LEFT)
        )
        self.wheels.tl.angle = turn * MAX_STEER_ANGLE
        self.wheels.tr.angle = turn * MAX_STEER_ANGLE

    def step(self, dt: float) -> None:
        """Advance the engine, wheel slip and braking by ``dt`` seconds."""
        self.engine.update_rpm(dt)
        total_ratio = self.transmission.ratio() * self.transmission.final_drive

        # No drive force is applied yet; only the wheel state is updated.
        force = Vec3.ZERO
        self.wheels.tl.calculate_slip_ratio(
            self.engine.rpm, total_ratio, self.transform, self.velocity
        )
        self.velocity = self.velocity + self.transform.rotation.rotate(force) * dt

        brakes = self.wheels.brakes
        brake_force = brakes.friction() * brakes.pressure * 1000.0
        self.velocity = self.velocity * (1.0 - brake_force * dt)