# traffictrainer

This package holds the game logic of a small driving trainer in plain Python. It covers the game's state machines, the session start-up flow, a simple car model, an on-foot player and the helpers behind the menus. Nothing in it draws or plays sound, so all of it can be driven and tested headless.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `traffictrainer.states`

This module defines the state enums:
- `GameState` is the top-level state: `LOADING`, `MAIN_MENU`, `SPAWN_SERVER` or `RUNNING`.
- `MainMenuState`, `SelectMenuState`, `SettingsMenuState`, `SingleplayerState`, `MultiplayerState` and `ClientState` are its sub-states.
- `SUB_STATE_SOURCES` maps each sub-state kind to the parent state it exists under.

It also has three helpers:
- `state_label(state)` returns the display name, such as `"MainMenu"`.
- `toggle_pause(state)` switches between `ClientState.RUNNING` and `ClientState.PAUSED`.
- `default_state(kind)` gives the state a machine starts in.

`state_label` and `toggle_pause` raise `TypeError` for values of the wrong kind. `default_state` does the same for a kind that is not a state kind.

### `traffictrainer.geometry`

This module holds the 3D maths:
- `Vec3` is an immutable vector with `dot`, `cross`, `length` and `normalize_or_zero`.
- `Quat` is a rotation with `from_axis_angle`, `rotate` and `to_euler_yxz`. Multiplying a `Quat` by another `Quat` composes the two rotations, and multiplying it by a `Vec3` rotates the vector.
- `Transform` has `forward()` (local -Z), `right()` (local +X) and `look_at(target, up)`.
- `follow_camera(car, camera)` puts the camera at the offset `(0, 5, -10)` in the car's frame and aims it at the car. It does nothing when `car` is `None`.

### `traffictrainer.engine`

`Engine` defaults to idle 950 and redline 8700, with acceleration 6000 and deceleration 4000 per second. Its methods:
- `with_specs(...)` builds an engine that is off and sitting at idle RPM.
- `set_throttle` is ignored while the engine is off.
- `toggle_on` switches the engine on or off.
- `update_rpm(dt)` moves the RPM towards `idle + throttle * (redline - idle)`. When the engine is off, it sets the RPM to 0.
- `shift_rpm(prev_ratio, ratio)` rescales the RPM on a gear change. It does nothing when either ratio is 0, which is neutral.

`EngineSetup` lists the layouts `I4`, `I6`, `V6` and `V8`.

### `traffictrainer.transmission`

`Transmission` has five forward ratios, a reverse ratio of 3.0 and a final drive of 4.4, and starts in neutral. `gear` is -1 for reverse, 0 for neutral and 1 to N for the forward gears. Its methods:
- `gear_string()` returns `"R"`, `"N"` or the gear number.
- `ratio()` is negative in reverse and 0 in neutral.
- `gear_up()` and `gear_down()` stop at the top gear and at reverse.
- `turn_off()` selects neutral.
- `direction()` returns -1.0 in reverse and 1.0 otherwise.

### `traffictrainer.wheels`

This module has four classes:
- `DriveTrain` is one of `FWD`, `RWD` or `AWD`.
- `Wheel` has `powered_wheel()` and `calculate_slip_ratio(rpm, total_ratio, transform, velocity)`. The calculation only changes powered wheels.
- `Brakes` has `friction()`, which is `1 - power * pressure`.
- `Wheels.for_drivetrain(drivetrain)` sets up the four wheels with the driven ones powered. Iterating over a `Wheels` yields the wheels in the order `tl`, `tr`, `bl`, `br`.

`slip_ratio(rpm, speed)` is 0 when the speed is below 0.1.

### `traffictrainer.car`

The car itself:
- `CarActions` lists the car's inputs.
- `default_car_bindings()` returns the default key and pad names for each action.
- `CarInput` holds one frame of input: the `held` actions, the `just_pressed` actions and the axis values.

`Car` brings the parts together:
- `Car.main_car()` is the client's own front-wheel-drive car.
- `apply_controls(controls)` handles one frame of input:
  - It shifts gears and rescales the engine RPM.
  - It sets the throttle from `K_THROTTLE`.
  - It steers the front wheels by ±30° from `K_TURN_LEFT` and `K_TURN_RIGHT`.
- `step(dt)` updates the engine RPM and the front-left wheel's RPM and slip, then scales the velocity by the brake term.

No drive force is applied yet, so the car does not accelerate by itself.

### `traffictrainer.ui`

The menu helpers:
- `parse_color(hex_code)` takes `RGB`, `RGBA`, `RRGGBB` or `RRGGBBAA`, with an optional `#`. It returns a float tuple and raises `ValueError` on bad input.
- `CycleButton` steps through its labels with `next()`, wrapping around at the end.
- `Ease` is a value kept within its bounds, and `XYEase` is a pair of such values. Each has `add`/`sub`, and `XYEase` also has `add_xy`/`sub_xy`. `UiFadeEase`, `UiScaleEase` and `UiPositionEase` are named variants.
- `Button` holds a button's text, colours, scale and ease, and `Interaction` is one of `NONE`, `HOVERED` or `PRESSED`.
- `highlight_button(button, interaction)` recolours the button and sets which way it eases.
- `ease_button(button)` moves the scale by 0.0125 per call, between 1.0 and 1.1.
- `DebugMarker` formats labels with `format(value)`, giving `"label: value"`, and with `format_f32(value)`, which keeps two decimals.

The colour and size constants (`BUTTON_NONE`, `TEXT_COLOR` and the rest) live here too.

### `traffictrainer.player`

The on-foot player:
- `PlayerActions` lists the player's inputs, and `default_player_bindings()` gives their default keys and pad inputs.
- `CarState` says whether the player is in the car, and `toggle_car(state)` flips it.
- `Window` and `CursorGrabMode` describe the window's cursor. `set_grabmode(window, mode)` confines and hides the cursor, or releases and shows it.
- `handle_player_look(camera, window, settings, mouse_delta, dt)` turns the camera from mouse motion while the cursor is grabbed. Pitch is clamped to ±1.54 rad.
- `PlayerSettings` holds sensitivity (default 75) and speed (default 10).
- `PlayerMovement` holds the controller's tuning.

`Player` has two methods:
- `move(camera, movement, jump_pressed, dt)` accelerates along the camera's view and jumps only when grounded.
- `reset(car_state)` puts the player back at the origin unless they are in the car.

### `traffictrainer.flow`

`Game` runs the session's state machines.
- `request(state)` queues a transition, and `update()` applies the queued transitions once per frame. The sub-states are created and removed together with their parent state.
- Entering `LOADING` sets up the camera and font and moves on to the main menu.
- Entering `SPAWN_SERVER` starts the singleplayer setup. That setup spawns the `Platform`, then spawns the main car at `(0, 5, -5)` with the default bindings, then switches to `RUNNING`.
- `run_until_running()` drives all of this from start-up, choosing singleplayer at the main menu. It returns the number of frames it took and raises `RuntimeError` if the flow stalls.
- `exit_to_menu()` goes back to the main menu and removes the platform and the car.

## Examples

```python
from traffictrainer.car import Car, CarActions, CarInput

car = Car.main_car()
car.engine.toggle_on()
car.apply_controls(
    CarInput(
        held=frozenset({CarActions.K_THROTTLE}),
        just_pressed=frozenset({CarActions.GEAR_UP}),
    )
)
car.step(0.016)
print(car.transmission.gear_string(), car.engine.rpm)
```

```python
from traffictrainer.flow import Game
from traffictrainer.states import GameState

game = Game()
game.run_until_running()
assert game.state is GameState.RUNNING
game.exit_to_menu()
assert game.state is GameState.MAIN_MENU
```

## What it does not do

The package has no window, no rendering, no audio and no command to start a game. It does not read the real keyboard or gamepad either: bindings are names only, and input is passed in as values. Physics is limited to what the classes above compute, with no collisions and no rigid-body simulation. The multiplayer states exist, but nothing sets up a multiplayer session. Menu screens are not built: only the button, ease and colour helpers are provided.