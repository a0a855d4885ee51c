"""Engine model: RPM that follows the throttle between idle and redline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EngineSetup(Enum):
    """Cylinder layout of an engine."""

    I4 = "I4"
    I6 = "I6"
    V6 = "V6"
    V8 = "V8"


@dataclass
class Engine:
    """A car engine. Defaults are those of an EK9 engine."""

    rpm: float = 0.0
    initial: float = 950.0
    redline: float = 8700.0
    throttle: float = 0.0
    accel_rate: float = 6000.0
    decel_rate: float = 4000.0
    on: bool = False
    sound_id: int = 0
    setup: EngineSetup = EngineSetup.I4

    @classmethod
    def with_specs(
        cls,
        initial: float,
        redline: float,
        accel_rate: float,
        decel_rate: float,
        sound_id: int,
    ) -> Engine:
        """Create a switched-off engine sitting at its idle RPM."""
        return cls(
            rpm=initial,
            initial=initial,
            redline=redline,
            accel_rate=accel_rate,
            decel_rate=decel_rate,
            sound_id=sound_id,
        )

    def set_throttle(self, throttle: float) -> None:
        """Set the throttle; ignored while the engine is off."""
        if self.on:
            self.throttle = throttle

    def toggle_on(self) -> None:
        self.on = not self.on

    def update_rpm(self, dt: float) -> None:
        """Move the RPM towards the throttle's target over ``dt`` seconds."""
        if not self.on:
            self.rpm = 0.0
            return
        target = self.initial + self.throttle * (self.redline - self.initial)
        if self.rpm < target:
            self.rpm = min(self.rpm + self.accel_rate * dt, target)
        else:
            self.rpm = max(self.rpm - self.decel_rate * dt, target)

    def shift_rpm(self, prev_ratio: float, ratio: float) -> None:
        """Scale the RPM for a gear change; no change to or from neutral."""
        if prev_ratio == 0.0 or ratio == 0.0:
            return
        self.rpm *= ratio / prev_ratio