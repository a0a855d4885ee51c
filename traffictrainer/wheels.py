"""Wheels, drivetrain layout and brakes of a car."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from traffictrainer.geometry import Transform, Vec3

# Radius used when turning wheel RPM into ground speed.
_SLIP_WHEEL_RADIUS = 0.3
# Below this forward speed the slip ratio is taken as zero.
_MIN_SLIP_SPEED = 0.1


class DriveTrain(Enum):
    """Which wheels the engine drives."""

    FWD = "FWD"
    RWD = "RWD"
    AWD = "AWD"


def slip_ratio(rpm: float, speed: float) -> float:
    """Return the longitudinal slip of a wheel turning at ``rpm`` at ``speed``."""
    wheel_speed = rpm * 2.0 * math.pi * _SLIP_WHEEL_RADIUS / 60.0
    if abs(speed) < _MIN_SLIP_SPEED:
        return 0.0
    return (wheel_speed - speed) / abs(speed)


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf or nan for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass
class Wheel:
    """A single wheel."""

    radius: float = 0.3
    angle: float = 0.0
    rpm: float = 0.0
    grip: float = 0.8
    slip: float = 0.0
    powered: bool = False

    @classmethod
    def powered_wheel(cls) -> Wheel:
        """A default wheel that the engine drives."""
        return cls(powered=True)

    def calculate_slip_ratio(
        self,
        rpm: float,
        total_ratio: float,
        transform: Transform,
        velocity: Vec3,
    ) -> None:
        """Update the wheel RPM and slip from the engine RPM; unpowered wheels are left alone."""
        if not self.powered:
            return
        self.rpm = _divide(rpm, abs(total_ratio))
        self.slip = slip_ratio(self.rpm, transform.forward().dot(velocity))


@dataclass
class Brakes:
    """Brake system: ``pressure`` is the pedal input, ``power`` its strength."""

    pressure: float = 0.0
    power: float = 100.0

    def friction(self) -> float:
        return 1.0 - self.power * self.pressure


@dataclass
class Wheels:
    """The four wheels of a car with its drivetrain and brakes."""

    tl: Wheel = field(default_factory=Wheel)
    tr: Wheel = field(default_factory=Wheel)
    bl: Wheel = field(default_factory=Wheel)
    br: Wheel = field(default_factory=Wheel)
    drivetrain: DriveTrain = DriveTrain.RWD
    brakes: Brakes = field(default_factory=Brakes)

    @classmethod
    def for_drivetrain(cls, drivetrain: DriveTrain) -> Wheels:
        """Wheels with the driven ones powered according to ``drivetrain``."""
        front = drivetrain in (DriveTrain.FWD, DriveTrain.AWD)
        rear = drivetrain in (DriveTrain.RWD, DriveTrain.AWD)
        return cls(
            tl=Wheel(powered=front),
            tr=Wheel(powered=front),
            bl=Wheel(powered=rear),
            br=Wheel(powered=rear),
            drivetrain=drivetrain,
        )

    def __iter__(self):
        yield from (self.tl, self.tr, self.bl, self.br)