"""The window, the main loop and the stack of game states."""

from __future__ import annotations

import argparse

import pygame

from estibador.definitions import (
    BASE_WINDOW_HEIGHT,
    BASE_WINDOW_WIDTH,
    FRAMERATE,
    GAME_TITLE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from estibador.resources import ResourceHolder
from estibador.states import GameContext, MenuState

_DEBUG_COLOUR = (255, 255, 0)
_DEBUG_TOGGLE_KEY = pygame.K_F1


class Game:
    """Owns the window and runs whichever state is on top of the stack."""

    def __init__(self, base_dir=None):
        pygame.init()
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        self.view = pygame.Surface((int(BASE_WINDOW_WIDTH), int(BASE_WINDOW_HEIGHT)))
        self.clock = pygame.time.Clock()
        self.assets = ResourceHolder(base_dir)
        self.context = GameContext(self.assets, window_size=self.window.get_size())
        self._states = []
        self._open = True
        self._show_state_debug = False
        self._last_dt = 0.0
        self._debug_font = pygame.font.Font(None, 22)
        self.push_state(MenuState(self.context))

    def run(self) -> None:
        """Run frames until the window is closed, then shut pygame down."""
        try:
            while self._open:
                dt = self.clock.tick(FRAMERATE) / 1000.0
                self._handle_events()
                self._update(dt)
                self._render()
        finally:
            pygame.quit()

    def close(self) -> None:
        self._open = False

    def push_state(self, state) -> None:
        if state is not None:
            self._states.append(state)

    def pop_state(self) -> None:
        if self._states:
            self._states.pop()

    def change_state(self, state) -> None:
        self.pop_state()
        self.push_state(state)

    def current_state(self):
        return self._states[-1] if self._states else None

    def state_names(self) -> list[str]:
        return [state.name() for state in self._states]

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
            if event.type == pygame.KEYDOWN and event.key == _DEBUG_TOGGLE_KEY:
                self._show_state_debug = not self._show_state_debug
            if self._states:
                self._states[-1].handle_input(event)

    def _update(self, dt: float) -> None:
        self._last_dt = dt
        if self._states:
            self._states[-1].update(dt)

    def _debug_lines(self) -> list[str]:
        width, height = self.window.get_size()
        view_w, view_h = self.view.get_size()
        lines = [
            f"FPS: {self.clock.get_fps():.0f}",
            f"Delta Time: {self._last_dt:.4f}",
            "-- Window --",
            f"Resolution: {width}x{height}",
            f"View: {view_w:.0f}x{view_h:.0f}",
            "-- More --",
            "F1: show state info",
        ]
        if self._show_state_debug:
            current = self.current_state()
            lines.append(
                f"Current: {current.name()}" if current else "Current: No active state"
            )
            lines.append("States:")
            lines.extend(f"  * {name}" for name in self.state_names())
        return lines

    def _render(self) -> None:
        self.view.fill((0, 0, 0))
        if self._states:
            self._states[-1].draw(self.view)
        pygame.transform.scale(self.view, self.window.get_size(), self.window)
        y = 4
        for line in self._debug_lines():
            text = self._debug_font.render(line, True, _DEBUG_COLOUR)
            self.window.blit(text, (4, y))
            y += text.get_height() + 2
        pygame.display.flip()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="estibador", description=GAME_TITLE)
    parser.add_argument(
        "--assets-root",
        default=None,
        help="directory that holds the assets/ folder (default: current directory)",
    )
    args = parser.parse_args(argv)
    Game(args.assets_root).run()
    return 0