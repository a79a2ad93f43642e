import os
import shutil
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from estibador.definitions import (
    BUTTON_PATH,
    CONTAINER_PATH,
    FONT_PATH,
    MENU_BACKGROUND_PATH,
)
from estibador.game import Game, main
from estibador.resources import ResourceError
from estibador.states import SettingsState


def _make_assets(base: Path) -> None:
    sizes = {
        MENU_BACKGROUND_PATH: (192, 108),
        BUTTON_PATH: (400, 210),
        CONTAINER_PATH: (64, 48),
    }
    for rel, size in sizes.items():
        target = base / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        pygame.image.save(pygame.Surface(size), str(target))
    font_target = base / FONT_PATH
    font_target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy(Path(pygame.__file__).parent / pygame.font.get_default_font(), font_target)


@pytest.fixture
def game(tmp_path):
    _make_assets(tmp_path)
    instance = Game(tmp_path)
    yield instance
    pygame.quit()


def test_starts_in_menu(game):
    assert game.current_state().name() == "MenuState"
    assert game.state_names() == ["MenuState"]


def test_push_and_pop(game):
    game.push_state(SettingsState(game.context))
    assert game.state_names() == ["MenuState", "SettingsState"]
    game.pop_state()
    assert game.state_names() == ["MenuState"]


def test_push_none_is_ignored(game):
    game.push_state(None)
    assert game.state_names() == ["MenuState"]


def test_pop_on_empty_stack_is_harmless(game):
    game.pop_state()
    game.pop_state()
    assert game.state_names() == []
    assert game.current_state() is None


def test_change_state_replaces_top(game):
    game.change_state(SettingsState(game.context))
    assert game.state_names() == ["SettingsState"]


def test_run_stops_on_quit_event(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert game.state_names() == ["MenuState"]
    assert game.current_state().name() == "MenuState"
    assert pygame.display.get_init() is False


def test_run_stops_after_close(game):
    game.push_state(SettingsState(game.context))
    game.close()
    game.run()
    assert game.state_names() == ["MenuState", "SettingsState"]
    assert game.current_state().name() == "SettingsState"
    assert pygame.display.get_init() is False


def test_main_reports_missing_assets(tmp_path):
    with pytest.raises(ResourceError, match="Failed to load texture"):
        main(["--assets-root", str(tmp_path)])
    pygame.quit()