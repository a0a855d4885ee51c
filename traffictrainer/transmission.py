"""Manual gearbox with reverse, neutral and forward gears."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Transmission:
    """A gearbox. Defaults are Honda Civic EK9 ratios, in neutral.

    ``gear`` is -1 for reverse, 0 for neutral and 1..N for forward gears.
    """

    ratios: tuple[float, ...] = (3.230, 2.105, 1.458, 1.107, 0.848)
    reverse: float = 3.000
    final_drive: float = 4.400
    gear: int = 0

    def gear_string(self) -> str:
        """Return ``"R"``, ``"N"`` or the forward gear number."""
        if self.gear == -1:
            return "R"
        if self.gear == 0:
            return "N"
        return str(self.gear)

    def ratio(self) -> float:
        """Ratio of the selected gear; negative in reverse, zero in neutral."""
        if self.gear == -1:
            return -self.reverse
        if self.gear == 0:
            return 0.0
        return self.ratios[self.gear - 1]

    def gear_up(self) -> None:
        if self.gear + 1 <= len(self.ratios):
            self.gear += 1

    def gear_down(self) -> None:
        if self.gear != -1:
            self.gear -= 1

    def turn_off(self) -> None:
        """Select neutral."""
        self.gear = 0

    def direction(self) -> float:
        """Return -1.0 in reverse and 1.0 otherwise."""
        return -1.0 if self.gear == -1 else 1.0