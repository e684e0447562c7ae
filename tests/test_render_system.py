import pytest

from dtd.components import Health, Position, Registry, Sprite, SpriteAnimation
from dtd.geometry import Vector
from dtd.ids import SpriteId
from dtd.render_system import (
    HEALTH_FILL_COLOR,
    HEALTH_OUTLINE_COLOR,
    render_hitpoints,
    render_hud,
    render_level,
    render_sprite_animations,
    render_sprites,
)


class _SpriteRecorder:
    def __init__(self):
        self.calls = []

    def render_sprite(self, sprite_id, screen_coord):
        self.calls.append((sprite_id, screen_coord))


class _ShapeRecorder:
    def __init__(self):
        self.rects = []
        self.fills = []

    def draw_rect(self, rect, outline_color):
        self.rects.append((rect, outline_color))

    def draw_fill_rect(self, rect, outline_color, fill_color):
        self.fills.append((rect, outline_color, fill_color))


class _CallCounter:
    def __init__(self):
        self.buy_menu = 0
        self.level = 0

    def render_buy_menu(self):
        self.buy_menu += 1

    def render_current_level(self):
        self.level += 1


def test_sprites_drawn_at_truncated_position():
    registry = Registry()
    entity = registry.create()
    registry.emplace(entity, Position(10.7, 20.2))
    registry.emplace(entity, Sprite(SpriteId.BASIC_TOWER))
    recorder = _SpriteRecorder()
    render_sprites(registry, recorder)
    assert recorder.calls == [(SpriteId.BASIC_TOWER, Vector(10, 20))]


def _animation(registry, duration):
    entity = registry.create()
    registry.emplace(entity, Position(5.0, 6.0))
    registry.emplace(
        entity,
        SpriteAnimation(
            [SpriteId.BASIC_PROJECTILE_HIT_1, SpriteId.BASIC_PROJECTILE_HIT_2], duration
        ),
    )
    return entity


def test_animation_advances_frames():
    registry = Registry()
    _animation(registry, 0.5)
    recorder = _SpriteRecorder()
    render_sprite_animations(registry, recorder, 0.1)
    render_sprite_animations(registry, recorder, 0.1)
    assert [sprite for sprite, _ in recorder.calls] == [
        SpriteId.BASIC_PROJECTILE_HIT_1,
        SpriteId.BASIC_PROJECTILE_HIT_2,
    ]
    assert all(coord == Vector(5, 6) for _, coord in recorder.calls)


def test_finished_animation_is_destroyed():
    registry = Registry()
    entity = _animation(registry, 0.0)
    recorder = _SpriteRecorder()
    render_sprite_animations(registry, recorder, 0.1)
    assert not registry.valid(entity)
    assert recorder.calls == []


def test_animation_ends_after_its_duration():
    registry = Registry()
    entity = _animation(registry, 0.5)
    recorder = _SpriteRecorder()
    for _ in range(20):
        render_sprite_animations(registry, recorder, 0.1)
    assert not registry.valid(entity)
    assert 0 < len(recorder.calls) < 20


@pytest.mark.parametrize("health,max_health", [(50.0, 100.0), (25.0, 200.0), (80.0, 80.0)])
def test_health_bar_proportional_to_health(health, max_health):
    registry = Registry()
    entity = registry.create()
    registry.emplace(entity, Position(100.0, 100.0))
    registry.emplace(entity, Health(health, max_health))
    recorder = _ShapeRecorder()
    render_hitpoints(registry, recorder)
    (outline, outline_color), = recorder.rects
    (bar, bar_outline, fill), = recorder.fills
    assert bar.width / outline.width == pytest.approx(health / max_health)
    assert (bar.x, bar.y, bar.height) == (outline.x, outline.y, outline.height)
    assert outline_color == HEALTH_OUTLINE_COLOR
    assert bar_outline == HEALTH_OUTLINE_COLOR
    assert fill == HEALTH_FILL_COLOR


def test_hud_and_level_are_forwarded():
    counter = _CallCounter()
    render_hud(counter)
    render_level(counter)
    render_level(counter)
    assert (counter.buy_menu, counter.level) == (1, 2)