"""The game's screens: a shared context, the state interface, menu and settings."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Callable

import pygame

from estibador.button import Button
from estibador.definitions import (
    BASE_WINDOW_HEIGHT,
    BASE_WINDOW_WIDTH,
    BUTTON_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from estibador.resources import FontID, ResourceHolder, TextureID

MENU_SPACING = 32
MENU_OPTIONS = ("Nueva Partida", "Opciones", "Salir")


@dataclass
class GameContext:
    """What every state shares: the assets and the window-to-view mapping."""

    assets: ResourceHolder
    window_size: tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)
    view_size: tuple[float, float] = (BASE_WINDOW_WIDTH, BASE_WINDOW_HEIGHT)
    mouse_position: Callable[[], tuple[int, int]] = field(default=pygame.mouse.get_pos)

    def view_mouse_position(self) -> tuple[float, float]:
        """The mouse position mapped from window pixels to view coordinates."""
        px, py = self.mouse_position()
        return (
            px * self.view_size[0] / self.window_size[0],
            py * self.view_size[1] / self.window_size[1],
        )


class GameState(abc.ABC):
    """One screen of the game."""

    def __init__(self, context):
        self.context = context

    @abc.abstractmethod
    def handle_input(self, event) -> None: ...

    @abc.abstractmethod
    def update(self, dt) -> None: ...

    @abc.abstractmethod
    def draw(self, surface) -> None: ...

    @abc.abstractmethod
    def name(self) -> str: ...


class MenuOption(enum.Enum):
    NEW_GAME = 0
    SETTINGS = 1
    EXIT = 2


class MenuState(GameState):
    """The main menu: a background and a column of buttons."""

    def __init__(self, context):
        super().__init__(context)
        assets = context.assets
        self.background = assets.texture(TextureID.MENU_BG)
        self.selected: MenuOption | None = None
        self.buttons: list[Button] = []
        menu_x = BASE_WINDOW_WIDTH / 2 - BUTTON_SIZE[0] / 2
        menu_y = BASE_WINDOW_HEIGHT / 2
        for text in MENU_OPTIONS:
            button = Button(
                menu_x,
                menu_y,
                text,
                assets.font(FontID.MAIN_FONT),
                assets.texture(TextureID.BUTTON_BG),
            )
            self.buttons.append(button)
            menu_y += button.bounds().height + MENU_SPACING

    def handle_input(self, event) -> None:
        mouse = self.context.view_mouse_position()
        released_left = (
            event.type == pygame.MOUSEBUTTONUP
            and getattr(event, "button", None) == pygame.BUTTON_LEFT
        )
        for option, button in zip(MenuOption, self.buttons):
            button.handle_input(event, mouse)
            if released_left and button.is_hovered:
                self.selected = option
                if option is MenuOption.NEW_GAME:
                    print("NEW_GAME")

    def update(self, dt) -> None:
        for button in self.buttons:
            button.update(dt)

    def draw(self, surface) -> None:
        surface.blit(self.background, (0, 0))
        for button in self.buttons:
            button.draw(surface)

    def name(self) -> str:
        return "MenuState"


class SettingsState(GameState):
    """The settings screen: a back button over a framed container."""

    def __init__(self, context):
        super().__init__(context)
        assets = context.assets
        self.back_button = Button(
            50,
            50,
            "Atras",
            assets.font(FontID.MAIN_FONT),
            assets.texture(TextureID.BUTTON_BG),
        )
        self.background = assets.texture(TextureID.MENU_BG)
        self.container = assets.texture(TextureID.CONTAINER_BG)
        # Origin and position are both the background's centre.
        centre = self.background.get_rect().center
        origin = centre
        self.container_position = (centre[0] - origin[0], centre[1] - origin[1])

    def handle_input(self, event) -> None:
        self.back_button.handle_input(event, self.context.view_mouse_position())

    def update(self, dt) -> None:
        self.back_button.update(dt)

    def draw(self, surface) -> None:
        surface.blit(self.background, (0, 0))
        surface.blit(self.container, self.container_position)
        self.back_button.draw(surface)

    def name(self) -> str:
        return "SettingsState"