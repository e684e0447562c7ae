import pygame
import pytest

from dtd.assets import Assets
from dtd.geometry import Rect, Vector
from dtd.ids import SpriteId
from dtd.renderer import BACKGROUND_COLOR, Renderer
from dtd.shape_renderer import BLACK, Color
from dtd.subrenderer import WINDOW_SIZE


@pytest.fixture
def renderer(tmp_path):
    window = pygame.Surface(WINDOW_SIZE)
    return Renderer(Assets(tmp_path), window=window)


def test_window_size_matches_window(renderer):
    assert renderer.window_size == Vector(*WINDOW_SIZE)


def test_clear_fills_background(renderer):
    renderer.clear()
    assert renderer.window.get_at((5, 5)) == pygame.Color(*BACKGROUND_COLOR)


def test_render_shows_shapes(renderer):
    renderer.clear()
    green = Color(0, 255, 0)
    renderer.shape_renderer.draw_fill_rect(Rect(10, 10, 20, 20), BLACK, green)
    renderer.render()
    assert renderer.window.get_at((20, 20)) == pygame.Color(*green.rgba)
    assert renderer.window.get_at((300, 300)) == pygame.Color(*BACKGROUND_COLOR)


def test_render_shows_sprites(renderer):
    renderer.clear()
    renderer.sprite_renderer.render_sprite(SpriteId.RECTANGLE_RED, Vector(100, 100))
    renderer.render()
    assert renderer.window.get_at((100, 100)) == pygame.Color(255, 0, 0)


def test_shapes_drawn_over_sprites(renderer):
    renderer.clear()
    renderer.sprite_renderer.render_sprite(SpriteId.RECTANGLE_RED, Vector(100, 100))
    green = Color(0, 255, 0)
    renderer.shape_renderer.draw_fill_rect(Rect(90, 90, 20, 20), BLACK, green)
    renderer.render()
    assert renderer.window.get_at((100, 100)) == pygame.Color(*green.rgba)


def test_clear_erases_layers(renderer):
    renderer.shape_renderer.draw_fill_rect(Rect(10, 10, 20, 20), BLACK, Color(0, 255, 0))
    renderer.clear()
    renderer.render()
    assert renderer.window.get_at((20, 20)) == pygame.Color(*BACKGROUND_COLOR)


def test_close_window_stops_drawing(renderer):
    renderer.clear()
    renderer.close_window()
    assert renderer.window_open is False
    renderer.shape_renderer.draw_fill_rect(Rect(10, 10, 20, 20), BLACK, Color(0, 255, 0))
    renderer.render()
    assert renderer.window.get_at((20, 20)) == pygame.Color(*BACKGROUND_COLOR)