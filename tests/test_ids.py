import logging

from dtd.ids import (
    EnemyType,
    ProjectileType,
    SoundId,
    SpriteId,
    get_enemy_sprite,
    get_enemy_type,
    get_hit_sound,
    get_projectile_sprite,
)


def test_enemy_sprite_known():
    assert get_enemy_sprite("basic") is SpriteId.BASIC_ENEMY


def test_enemy_sprite_unknown_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        assert get_enemy_sprite("dragon") is SpriteId.RECTANGLE_BLACK
    assert "dragon" in caplog.text


def test_projectile_sprite_basic():
    assert get_projectile_sprite(ProjectileType.BASIC) is SpriteId.BASIC_PROJECTILE


def test_projectile_sprite_unmapped_falls_back():
    assert get_projectile_sprite("nonexistent") is SpriteId.RECTANGLE_BLACK


def test_hit_sound_basic():
    assert get_hit_sound(ProjectileType.BASIC) is SoundId.BASIC_PROJECTILE_HIT_1


def test_hit_sound_unmapped_is_silent():
    assert get_hit_sound("nonexistent") is SoundId.SILENT


def test_enemy_type_lookup():
    assert get_enemy_type("basic") is EnemyType.BASIC
    assert get_enemy_type("Basic") is EnemyType.UNKNOWN
    assert get_enemy_type("") is EnemyType.UNKNOWN