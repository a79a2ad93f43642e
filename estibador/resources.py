"""Loading and lookup of the game's textures and fonts."""

from __future__ import annotations

import enum
from pathlib import Path

import pygame

from estibador.definitions import (
    BUTTON_PATH,
    BUTTON_TEXT_SIZE,
    CONTAINER_PATH,
    FONT_PATH,
    MENU_BACKGROUND_PATH,
)


class FontID(enum.Enum):
    MAIN_FONT = 0


class TextureID(enum.Enum):
    MENU_BG = 0
    BUTTON_BG = 1
    CONTAINER_BG = 2


class ResourceError(RuntimeError):
    """Raised when an asset cannot be loaded or is not known."""


def _id_number(value) -> str:
    return str(getattr(value, "value", value))


class ResourceHolder:
    """Owns every texture and font; loads the standard set on creation."""

    def __init__(self, base_dir=None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path()
        self._textures: dict[TextureID, pygame.Surface] = {}
        self._fonts: dict[FontID, pygame.font.Font] = {}
        self.load_texture(TextureID.MENU_BG, MENU_BACKGROUND_PATH)
        self.load_texture(TextureID.CONTAINER_BG, CONTAINER_PATH)
        self.load_texture(TextureID.BUTTON_BG, BUTTON_PATH)
        self.load_font(FontID.MAIN_FONT, FONT_PATH)

    def _resolve(self, path) -> Path:
        return self.base_dir / path

    def load_texture(self, texture_id, path) -> None:
        """Load an image file and store it under ``texture_id``."""
        full = self._resolve(path)
        try:
            texture = pygame.image.load(str(full))
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Failed to load texture: {full}") from exc
        self._textures[texture_id] = texture

    def load_font(self, font_id, path) -> None:
        """Load a font file at the button text size and store it under ``font_id``."""
        full = self._resolve(path)
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(str(full), BUTTON_TEXT_SIZE)
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Failed to load font: {full}") from exc
        self._fonts[font_id] = font

    def texture(self, texture_id) -> pygame.Surface:
        try:
            return self._textures[texture_id]
        except (KeyError, TypeError) as exc:
            raise ResourceError(
                f"Texture not found: {_id_number(texture_id)}"
            ) from exc

    def font(self, font_id) -> pygame.font.Font:
        try:
            return self._fonts[font_id]
        except (KeyError, TypeError) as exc:
            raise ResourceError(f"Font not found: {_id_number(font_id)}") from exc