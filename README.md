# Estibador de Ilusiones

A small game built on pygame. It opens a 1280×720 window and draws a
1920×1080 scene scaled to fit. On start it shows a main menu with three
buttons: "Nueva Partida", "Opciones" and "Salir". A button shows its
highlighted frame while the mouse is over it.

## Installing

```
pip install .
```

## Running

The game loads its textures and font from an `assets` directory:

```
assets/fonts/Monaco.ttf
assets/textures/menu_background.png
assets/textures/gui_button.png
assets/textures/box_container.png
```

Start it from the directory that holds `assets`:

```
estibador
```

or point it at that directory:

```
estibador --assets-root path/to/game
```

If a texture or the font cannot be loaded, the game stops with
`ResourceError`. Closing the window ends the game.

A debug overlay in the top-left corner shows the frame rate, the last frame
time, the window resolution and the view size. Press F1 to also list the
current state and the whole state stack.

## Using it from Python

```python
from estibador.game import Game
from estibador.states import SettingsState

game = Game(".")          # directory that holds assets/
print(game.state_names()) # ['MenuState']
game.push_state(SettingsState(game.context))
game.run()
```

`Game` keeps a stack of states. Only the top state gets input, updates and
drawing. Use `push_state`, `pop_state` and `change_state` to change it,
`current_state()` and `state_names()` to inspect it, and `close()` to end
`run()` after the current frame.

The states live in `estibador.states`: `MenuState`, `SettingsState` and the
abstract `GameState` they derive from, all sharing a `GameContext` that holds
the assets and maps the mouse from window pixels to view coordinates. When a
menu button is clicked with the left mouse button, `MenuState.selected` is set
to the matching `MenuOption`.

The assets are handled by `estibador.resources.ResourceHolder`. Look them up
with `texture(TextureID...)` and `font(FontID...)`. A missing or unreadable
file, or an unknown id, raises `ResourceError`.

`estibador.button.Button` is the textured menu button used by both screens.

## What it does not do

There is no gameplay yet. Clicking "Nueva Partida" only prints `NEW_GAME`;
"Opciones" does not open the settings screen and "Salir" does not close the
window. The settings screen can be pushed from Python, but its "Atras" button
does not return to the menu.

## Tests

```
pip install ".[test]"
pytest
```