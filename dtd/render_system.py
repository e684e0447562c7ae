"""Drawing of game entities through the renderers."""

from __future__ import annotations

from .components import DEFAULT_FRAME_DURATION, Health, Position, Registry, Sprite, SpriteAnimation
from .geometry import Rect, ScreenCoord
from .shape_renderer import Color

HEALTH_FILL_COLOR = Color(0, 255, 0)
HEALTH_OUTLINE_COLOR = Color(0, 0, 0)
HEALTH_BAR_OFFSET = (-10.0, -20.0)
HEALTH_BAR_HEIGHT = 4.0
HEALTH_PER_PIXEL = 5.0


def _screen_coord(pos: Position) -> ScreenCoord:
    return ScreenCoord(int(pos.x), int(pos.y))


def render_sprites(registry: Registry, renderer) -> None:
    """Draw every entity that has a sprite at its position."""
    for entity in registry.view(Position, Sprite):
        renderer.render_sprite(
            registry.get(entity, Sprite).sprite, _screen_coord(registry.get(entity, Position))
        )


def render_sprite_animations(registry: Registry, renderer, dt: float) -> None:
    """Draw the current frame of every animation and advance it by dt.

    Animations whose duration has run out are destroyed with their entity.
    """
    for entity in registry.view(Position, SpriteAnimation):
        anim = registry.get(entity, SpriteAnimation)
        if anim.duration <= 0.0:
            registry.destroy(entity)
            continue
        if anim.frame_duration <= 0.0:
            anim.cur_frame = (anim.cur_frame + 1) % len(anim.frames)
            anim.frame_duration += DEFAULT_FRAME_DURATION
        renderer.render_sprite(
            anim.frames[anim.cur_frame], _screen_coord(registry.get(entity, Position))
        )
        anim.duration -= dt
        anim.frame_duration -= dt


def render_hitpoints(registry: Registry, renderer) -> None:
    """Draw a health bar above every entity that has health."""
    dx, dy = HEALTH_BAR_OFFSET
    for entity in registry.view(Position, Health):
        pos = registry.get(entity, Position)
        health = registry.get(entity, Health)
        x, y = pos.x + dx, pos.y + dy
        outline = Rect(x, y, health.max_health / HEALTH_PER_PIXEL, HEALTH_BAR_HEIGHT)
        bar = Rect(x, y, health.health / HEALTH_PER_PIXEL, HEALTH_BAR_HEIGHT)
        renderer.draw_rect(outline, HEALTH_OUTLINE_COLOR)
        renderer.draw_fill_rect(bar, HEALTH_OUTLINE_COLOR, HEALTH_FILL_COLOR)


def render_hud(renderer) -> None:
    renderer.render_buy_menu()


def render_level(renderer) -> None:
    renderer.render_current_level()