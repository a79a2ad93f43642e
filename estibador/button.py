"""A textured menu button with centred caption and hover highlight."""

from __future__ import annotations

import pygame

from estibador.definitions import BUTTON_HOVER_RECT, BUTTON_NORMAL_RECT, BUTTON_SIZE

_TEXT_COLOUR = (255, 255, 255)


class Button:
    """A clickable area drawn from a two-frame sprite sheet."""

    def __init__(self, x, y, text, font, texture):
        self.text = text
        self.texture = texture
        self.rect = pygame.Rect(round(x), round(y), *BUTTON_SIZE)
        self.texture_area = texture.get_rect()
        self.is_hovered = False
        self.title = font.render(text, True, _TEXT_COLOUR)
        self.title_rect = self.title.get_rect(center=self.rect.center)

    def handle_input(self, event, mouse_pos) -> None:
        """Refresh the hover flag from the mouse position in view coordinates."""
        self.is_hovered = bool(self.rect.collidepoint(mouse_pos))

    def update(self, dt) -> None:
        area = BUTTON_HOVER_RECT if self.is_hovered else BUTTON_NORMAL_RECT
        self.texture_area = pygame.Rect(area)

    def draw(self, surface) -> None:
        surface.blit(self.texture, self.rect.topleft, self.texture_area)
        surface.blit(self.title, self.title_rect)

    def bounds(self) -> pygame.Rect:
        return self.rect.copy()