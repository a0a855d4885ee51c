"""Game state machines: the top-level game state and its sub-states."""

from __future__ import annotations

from enum import Enum


class GameState(Enum):
    """Top-level state of the game."""

    LOADING = "Loading"
    MAIN_MENU = "MainMenu"
    SPAWN_SERVER = "SpawnServer"
    RUNNING = "Running"


class MainMenuState(Enum):
    """Screen shown while the game is in the main menu."""

    MAIN = "Main"
    SINGLEPLAYER = "Singleplayer"
    MULTIPLAYER = "Multiplayer"
    SETTINGS = "Settings"


class SelectMenuState(Enum):
    """Step of the singleplayer selection screen."""

    NAME = "Name"
    CAR = "Car"
    MAP = "Map"


class SettingsMenuState(Enum):
    """Page of the settings menu."""

    SETTINGS = "Settings"
    AUDIO = "Audio"
    CONTROLS = "Controls"


class SingleplayerState(Enum):
    """Steps taken while a singleplayer session is being set up."""

    SPAWN_WORLD = "SpawnWorld"
    SPAWN_VEHICLES = "SpawnVehicles"
    FINISHED = "Finished"


class MultiplayerState(Enum):
    """Steps taken while a multiplayer session is being set up."""

    SPAWN_SERVER = "SpawnServer"
    SPAWN_WORLD = "SpawnWorld"
    SPAWN_PLAYER = "SpawnPlayer"
    SPAWN_VEHICLES = "SpawnVehicles"
    FINISHED = "Finished"


class ClientState(Enum):
    """Whether the local client is playing or paused."""

    RUNNING = "Running"
    PAUSED = "Paused"


# Each sub-state exists only while its parent is in the given state.
SUB_STATE_SOURCES: dict[type[Enum], Enum] = {
    MainMenuState: GameState.MAIN_MENU,
    SelectMenuState: MainMenuState.SINGLEPLAYER,
    SettingsMenuState: MainMenuState.SETTINGS,
    SingleplayerState: GameState.SPAWN_SERVER,
    MultiplayerState: GameState.SPAWN_SERVER,
    ClientState: GameState.RUNNING,
}

_STATE_KINDS = (GameState, *SUB_STATE_SOURCES)


def state_label(state: Enum) -> str:
    """Return the display name of a state, e.g. ``"MainMenu"``."""
    if not isinstance(state, _STATE_KINDS):
        raise TypeError(f"not a game state: {state!r}")
    return state.value


def toggle_pause(state: ClientState) -> ClientState:
    """Return the client state that the pause key switches to."""
    if not isinstance(state, ClientState):
        raise TypeError(f"not a client state: {state!r}")
    if state is ClientState.RUNNING:
        return ClientState.PAUSED
    return ClientState.RUNNING


def default_state(kind: type[Enum]) -> Enum:
    """Return the state a state machine of the given kind starts in."""
    if kind not in _STATE_KINDS:
        raise TypeError(f"not a game state kind: {kind!r}")
    return next(iter(kind))