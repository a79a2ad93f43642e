import pygame
import pytest

from estibador.button import Button
from estibador.definitions import BUTTON_HOVER_RECT, BUTTON_NORMAL_RECT, BUTTON_SIZE

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 32)


@pytest.fixture
def texture():
    sheet = pygame.Surface((BUTTON_SIZE[0], BUTTON_SIZE[1] * 2))
    sheet.fill(RED, pygame.Rect(BUTTON_NORMAL_RECT))
    sheet.fill(BLUE, pygame.Rect(BUTTON_HOVER_RECT))
    return sheet


def _motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0))


def test_bounds_match_position_and_size(font, texture):
    button = Button(50, 60, "Atras", font, texture)
    assert button.bounds() == pygame.Rect(50, 60, *BUTTON_SIZE)


def test_bounds_is_a_copy(font, texture):
    button = Button(50, 60, "Atras", font, texture)
    button.bounds().move_ip(10, 10)
    assert button.bounds().topleft == (50, 60)


def test_caption_centred_on_button(font, texture):
    button = Button(50, 60, "Opciones", font, texture)
    assert button.title_rect.center == button.bounds().center


def test_hover_inside_and_outside(font, texture):
    button = Button(50, 60, "Salir", font, texture)
    button.handle_input(_motion((50, 60)), (50, 60))
    assert button.is_hovered is True
    right_edge = (50 + BUTTON_SIZE[0], 60)
    button.handle_input(_motion(right_edge), right_edge)
    assert button.is_hovered is False


def test_update_selects_sprite_frame(font, texture):
    button = Button(0, 0, "Salir", font, texture)
    assert button.texture_area == texture.get_rect()
    button.update(0.016)
    assert button.texture_area == pygame.Rect(BUTTON_NORMAL_RECT)
    button.handle_input(_motion((5, 5)), (5, 5))
    button.update(0.016)
    assert button.texture_area == pygame.Rect(BUTTON_HOVER_RECT)


def test_draw_uses_current_frame(font, texture):
    button = Button(20, 30, "Salir", font, texture)
    surface = pygame.Surface((800, 600))
    button.update(0.0)
    button.draw(surface)
    assert surface.get_at((22, 32)) == RED
    button.handle_input(_motion((22, 32)), (22, 32))
    button.update(0.0)
    button.draw(surface)
    assert surface.get_at((22, 32)) == BLUE