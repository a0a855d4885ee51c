"""Game session flow: loading, menu, setting up a singleplayer world and leaving it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from traffictrainer.car import Car, CarActions, default_car_bindings
from traffictrainer.geometry import Transform, Vec3
from traffictrainer.states import (
    SUB_STATE_SOURCES,
    ClientState,
    GameState,
    MainMenuState,
    SingleplayerState,
    default_state,
    state_label,
)

logger = logging.getLogger(__name__)

FONT_PATH = "fonts/burbank.otf"
CAR_SCENE = "mesh/car.glb"
CAR_SPAWN = Vec3(0.0, 5.0, -5.0)
CAR_HALF_EXTENTS = Vec3(1.430, 0.408, 2.470)
CAR_FRICTION = 0.5


@dataclass
class Platform:
    """The static ground the singleplayer world is made of."""

    name: str = "Platform"
    size: Vec3 = field(default_factory=lambda: Vec3(100.0, 1.0, 100.0))
    translation: Vec3 = field(default_factory=lambda: Vec3(0.0, -5.0, 0.0))
    color: tuple[int, int, int] = (252, 148, 3)


@dataclass
class Game:
    """The game's state machines and the objects they spawn and remove."""

    state: GameState = GameState.LOADING
    sub_states: dict[type[Enum], Enum] = field(default_factory=dict)
    status_text: str = ""
    font: str | None = None
    camera: Transform | None = None
    platform: Platform | None = None
    car: Car | None = None
    car_bindings: dict[CarActions, tuple[str, ...]] | None = None
    _pending: dict[type[Enum], Enum] = field(default_factory=dict, repr=False)
    _started: bool = field(default=False, repr=False)

    def request(self, state: Enum) -> None:
        """Queue a transition that takes effect on the next update."""
        state_label(state)
        self._pending[type(state)] = state

    def update(self) -> None:
        """Run one frame: apply queued transitions and refresh the status text."""
        pending, self._pending = self._pending, {}

        if not self._started:
            self._started = True
            self._enter(self.state)
            self._sync_sub_states()

        target = pending.pop(GameState, None)
        if target is not None and target is not self.state:
            self._exit(self.state)
            self.state = target
            self._enter(target)
            self._sync_sub_states()

        for kind, value in pending.items():
            current = self.sub_states.get(kind)
            if current is None or current is value:
                continue
            self._exit(current)
            self.sub_states[kind] = value
            self._enter(value)
            self._sync_sub_states()

        if self.status_text:
            self.status_text = state_label(self.state)

    def run_until_running(self) -> int:
        """Start a singleplayer game and update until it runs; return the frame count."""
        frames = 0
        while self.state is not GameState.RUNNING:
            self.update()
            frames += 1
            if self.state is GameState.RUNNING or self._pending:
                continue
            if self.state is GameState.MAIN_MENU:
                self.request(GameState.SPAWN_SERVER)
            else:
                raise RuntimeError(f"game stalled in state {state_label(self.state)}")
        return frames

    def exit_to_menu(self) -> None:
        """Leave the running game for the main menu."""
        self.request(GameState.MAIN_MENU)
        self.update()

    def _current(self, kind: type[Enum]) -> Enum | None:
        if kind is GameState:
            return self.state
        return self.sub_states.get(kind)

    def _sync_sub_states(self) -> None:
        for kind, source in SUB_STATE_SOURCES.items():
            active = self._current(type(source)) is source
            if active and kind not in self.sub_states:
                value = default_state(kind)
                self.sub_states[kind] = value
                self._enter(value)
            elif not active and kind in self.sub_states:
                self._exit(self.sub_states.pop(kind))

    def _enter(self, state: Enum) -> None:
        if state is GameState.LOADING:
            self.status_text = "State: "
            self.camera = Transform()
            self.font = FONT_PATH
            self.request(GameState.MAIN_MENU)
        elif state is GameState.SPAWN_SERVER:
            self.request(SingleplayerState.SPAWN_WORLD)
        elif state is SingleplayerState.SPAWN_WORLD:
            self.platform = Platform()
            self.request(SingleplayerState.SPAWN_VEHICLES)
        elif state is SingleplayerState.SPAWN_VEHICLES:
            car = Car.main_car()
            car.transform = Transform(translation=CAR_SPAWN)
            self.car = car
            self.car_bindings = default_car_bindings()
            self.request(SingleplayerState.FINISHED)
        elif state is SingleplayerState.FINISHED:
            self.request(GameState.RUNNING)

    def _exit(self, state: Enum) -> None:
        if state is GameState.RUNNING:
            self.platform = None
            self.car = None


__all__ = [
    "CAR_FRICTION",
    "CAR_HALF_EXTENTS",
    "CAR_SCENE",
    "CAR_SPAWN",
    "FONT_PATH",
    "ClientState",
    "Game",
    "MainMenuState",
    "Platform",
]