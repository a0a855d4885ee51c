import pytest

from traffictrainer.flow import CAR_SPAWN, FONT_PATH, Game
from traffictrainer.states import (
    ClientState,
    GameState,
    MainMenuState,
    MultiplayerState,
    SettingsMenuState,
    SingleplayerState,
)


def test_first_update_runs_loading():
    game = Game()
    assert game.font is None
    game.update()
    assert game.state is GameState.LOADING
    assert game.font == FONT_PATH
    assert game.camera is not None and game.camera.translation.length() == 0.0
    assert game.status_text == "Loading"


def test_loading_moves_to_main_menu():
    game = Game()
    game.update()
    game.update()
    assert game.state is GameState.MAIN_MENU
    assert game.sub_states[MainMenuState] is MainMenuState.MAIN
    assert game.status_text == "MainMenu"


def test_run_until_running_spawns_world_and_car():
    game = Game()
    frames = game.run_until_running()
    assert frames > 0
    assert game.state is GameState.RUNNING
    assert game.platform is not None
    assert game.car is not None
    assert game.car.main is True
    assert game.car.transform.translation == CAR_SPAWN
    assert game.sub_states.get(ClientState) is ClientState.RUNNING
    assert SingleplayerState not in game.sub_states
    assert MultiplayerState not in game.sub_states
    assert MainMenuState not in game.sub_states


def test_run_until_running_when_already_running():
    game = Game()
    game.run_until_running()
    assert game.run_until_running() == 0


def test_exit_to_menu_cleans_up():
    game = Game()
    game.run_until_running()
    game.exit_to_menu()
    assert game.state is GameState.MAIN_MENU
    assert game.car is None
    assert game.platform is None
    assert ClientState not in game.sub_states
    assert game.sub_states[MainMenuState] is MainMenuState.MAIN


def test_pause_while_running():
    game = Game()
    game.run_until_running()
    game.request(ClientState.PAUSED)
    game.update()
    assert game.sub_states[ClientState] is ClientState.PAUSED


def test_inactive_sub_state_request_is_dropped():
    game = Game()
    game.update()
    game.update()
    game.request(ClientState.PAUSED)
    game.update()
    assert ClientState not in game.sub_states
    assert game.state is GameState.MAIN_MENU


def test_settings_menu_creates_nested_state():
    game = Game()
    game.update()
    game.update()
    game.request(MainMenuState.SETTINGS)
    game.update()
    assert game.sub_states[MainMenuState] is MainMenuState.SETTINGS
    assert game.sub_states[SettingsMenuState] is SettingsMenuState.SETTINGS

    game.request(MainMenuState.MAIN)
    game.update()
    assert SettingsMenuState not in game.sub_states


def test_request_rejects_non_states():
    game = Game()
    with pytest.raises(TypeError):
        game.request("Running")