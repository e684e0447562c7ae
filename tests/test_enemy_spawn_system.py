import pytest

from dtd.components import Enemy, Health, Position, Registry, WaypointFollower
from dtd.enemy_spawn_system import EnemySpawnSystem
from dtd.geometry import Vector
from dtd.level import EnemyGroup, EnemyWave, Level, Waypoint, Waypoints


def _path(*points):
    return Waypoints([Waypoint(Vector(x, y)) for x, y in points])


def _level(waves, paths=None):
    if paths is None:
        paths = [_path((10.0, 20.0), (100.0, 20.0))]
    return Level(id="test", waves=waves, waypoints=paths)


def _enemies(registry):
    return list(registry.view(Enemy))


def _system(level):
    system = EnemySpawnSystem()
    system.set_level(level)
    return system


def test_first_enemy_spawns_immediately_at_path_start():
    registry = Registry()
    system = _system(_level([EnemyWave([EnemyGroup("basic", 3, 1.0, 40.0)])]))
    system.spawn_enemies(registry, 0.0)
    enemies = _enemies(registry)
    assert len(enemies) == 1
    pos = registry.get(enemies[0], Position)
    assert (pos.x, pos.y) == (10.0, 20.0)
    assert registry.get(enemies[0], Health).health == 40.0
    assert registry.get(enemies[0], WaypointFollower).spawn_index == 0


def test_spawn_interval_is_respected():
    registry = Registry()
    system = _system(_level([EnemyWave([EnemyGroup("basic", 3, 1.0, 40.0)])]))
    system.spawn_enemies(registry, 0.0)
    system.spawn_enemies(registry, 0.5)
    assert len(_enemies(registry)) == 1
    system.spawn_enemies(registry, 0.5)
    assert len(_enemies(registry)) == 2


def test_spawning_stops_at_group_count():
    registry = Registry()
    system = _system(_level([EnemyWave([EnemyGroup("basic", 2, 0.1, 40.0)])]))
    for _ in range(10):
        system.spawn_enemies(registry, 0.2)
    assert len(_enemies(registry)) == 2
    assert system.wave_states[0].spawned_counts == [2]


def test_one_wave_state_per_path():
    registry = Registry()
    paths = [_path((1.0, 2.0), (5.0, 5.0)), _path((7.0, 8.0), (5.0, 5.0))]
    system = _system(_level([EnemyWave([EnemyGroup("basic", 1, 1.0, 10.0)])], paths))
    assert len(system.wave_states) == 2
    system.spawn_enemies(registry, 0.0)
    enemies = _enemies(registry)
    spawn_indices = {registry.get(e, WaypointFollower).spawn_index for e in enemies}
    positions = {(registry.get(e, Position).x, registry.get(e, Position).y) for e in enemies}
    assert spawn_indices == {0, 1}
    assert positions == {(1.0, 2.0), (7.0, 8.0)}


def test_counters_start_at_zero_for_each_group():
    wave = EnemyWave([EnemyGroup("basic", 1, 1.0, 1.0), EnemyGroup("basic", 2, 1.0, 1.0)])
    system = _system(_level([wave]))
    state = system.wave_states[0]
    assert state.spawned_counts == [0, 0]
    assert state.remaining_spawn_times == [0.0, 0.0]
    assert state.current_wave is wave


def test_without_level_nothing_spawns():
    registry = Registry()
    system = EnemySpawnSystem()
    system.spawn_enemies(registry, 1.0)
    assert _enemies(registry) == []


def test_clearing_level_stops_spawning():
    registry = Registry()
    system = _system(_level([EnemyWave([EnemyGroup("basic", 3, 0.0, 1.0)])]))
    system.set_level(None)
    system.spawn_enemies(registry, 1.0)
    assert _enemies(registry) == []


def test_prepare_next_wave_moves_to_following_wave():
    registry = Registry()
    waves = [
        EnemyWave([EnemyGroup("basic", 1, 1.0, 10.0)]),
        EnemyWave([EnemyGroup("basic", 1, 1.0, 30.0)]),
    ]
    system = _system(_level(waves))
    system.spawn_enemies(registry, 0.0)
    system.prepare_next_wave()
    system.spawn_enemies(registry, 0.0)
    healths = sorted(registry.get(e, Health).health for e in _enemies(registry))
    assert healths == [10.0, 30.0]

    system.prepare_next_wave()
    system.prepare_next_wave()
    system.spawn_enemies(registry, 5.0)
    assert len(_enemies(registry)) == 2
    assert system.wave_states[0].all_waves_spawned


def test_level_without_waves_spawns_nothing():
    registry = Registry()
    system = _system(_level([]))
    system.spawn_enemies(registry, 1.0)
    assert _enemies(registry) == []
    assert system.wave_states[0].current_wave is None


@pytest.mark.parametrize("count", [1, 3, 5])
def test_total_spawned_equals_count(count):
    registry = Registry()
    system = _system(_level([EnemyWave([EnemyGroup("basic", count, 0.25, 1.0)])]))
    for _ in range(40):
        system.spawn_enemies(registry, 0.25)
    assert len(_enemies(registry)) == count