from dtd.components import EnemyShooter, Position, Projectile, Registry
from dtd.entities import create_debug_entity, create_enemy
from dtd.geometry import Vector
from dtd.shooting_system import PROJECTILE_DAMAGE, shoot_enemies


def _setup(target=True, enabled=True):
    registry = Registry()
    tower = create_debug_entity(registry, 0.0, 0.0)
    enemy = create_enemy(registry, "basic", Vector(50.0, 0.0), 0, 100.0)
    shooter = registry.get(tower, EnemyShooter)
    shooter.enabled = enabled
    if target:
        shooter.target_id = enemy
    return registry, tower


def _projectiles(registry):
    return list(registry.view(Projectile))


def test_shooter_fires_at_target():
    registry, tower = _setup()
    shoot_enemies(registry, 0.0)
    projectiles = _projectiles(registry)
    assert len(projectiles) == 1
    projectile = registry.get(projectiles[0], Projectile)
    assert projectile.target_pos == Vector(50.0, 0.0)
    assert projectile.damage == PROJECTILE_DAMAGE
    assert registry.get(projectiles[0], Position) == Position(0.0, 0.0)
    shooter = registry.get(tower, EnemyShooter)
    assert shooter.shooting_time == shooter.shooting_delay


def test_shooter_waits_for_reload():
    registry, _ = _setup()
    shoot_enemies(registry, 0.0)
    shoot_enemies(registry, 0.1)
    assert len(_projectiles(registry)) == 1


def test_shooter_without_target_does_not_fire():
    registry, _ = _setup(target=False)
    shoot_enemies(registry, 1.0)
    assert _projectiles(registry) == []


def test_disabled_shooter_does_not_fire():
    registry, _ = _setup(enabled=False)
    shoot_enemies(registry, 1.0)
    assert _projectiles(registry) == []