"""Spawning of enemy waves along the level's waypoint paths."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .components import Registry
from .entities import create_enemy
from .level import EnemyWave, Level


@dataclass
class WaveState:
    """Spawn progress of the level's waves on one waypoint path.

    The counters hold one entry per enemy group of the current wave.
    """

    waves: Sequence[EnemyWave]
    spawn_index: int
    wave_index: int = 0
    spawned_counts: list[int] = field(default_factory=list)
    remaining_spawn_times: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._reset_counters()

    @property
    def current_wave(self) -> EnemyWave | None:
        """The wave being spawned, or None once every wave is done."""
        if self.wave_index < len(self.waves):
            return self.waves[self.wave_index]
        return None

    @property
    def all_waves_spawned(self) -> bool:
        return self.wave_index >= len(self.waves)

    def _reset_counters(self) -> None:
        wave = self.current_wave
        group_count = len(wave.enemies) if wave is not None else 0
        self.spawned_counts = [0] * group_count
        self.remaining_spawn_times = [0.0] * group_count

    def _advance(self) -> None:
        if self.all_waves_spawned:
            return
        self.wave_index += 1
        if not self.all_waves_spawned:
            self._reset_counters()

    def _tick(self, delta_time: float) -> None:
        self.remaining_spawn_times = [t - delta_time for t in self.remaining_spawn_times]

    def _needs_spawn(self) -> bool:
        wave = self.current_wave
        if wave is None:
            return False
        return any(
            spawned < group.count and remaining <= 0
            for group, spawned, remaining in zip(
                wave.enemies, self.spawned_counts, self.remaining_spawn_times
            )
        )

    def _spawn(self, registry: Registry, level: Level) -> None:
        wave = self.current_wave
        if wave is None:
            return
        for i, group in enumerate(wave.enemies):
            if self.remaining_spawn_times[i] > 0:
                continue
            spawn_point = level.waypoints[self.spawn_index].waypoints[0].point
            create_enemy(registry, group.enemy_type, spawn_point, self.spawn_index, group.hitpoints)
            self.spawned_counts[i] += 1
            self.remaining_spawn_times[i] = group.spawn_time


class EnemySpawnSystem:
    """Spawns the enemies of the current wave at the start of every path."""

    def __init__(self) -> None:
        self._level: Level | None = None
        self._wave_states: list[WaveState] = []

    @property
    def wave_states(self) -> tuple[WaveState, ...]:
        return tuple(self._wave_states)

    def set_level(self, level: Level | None) -> None:
        """Use the given level; None stops all spawning."""
        self._level = level
        if level is not None:
            self._wave_states = [
                WaveState(level.waves, spawn_index) for spawn_index in range(len(level.waypoints))
            ]

    def prepare_next_wave(self) -> None:
        """Move every path on to its next wave."""
        for state in self._wave_states:
            state._advance()

    def spawn_enemies(self, registry: Registry, delta_time: float) -> None:
        """Advance spawn timers and create the enemies that are due."""
        level = self._level
        if level is None:
            return
        for state in self._wave_states:
            state._tick(delta_time)
            if state._needs_spawn():
                state._spawn(registry, level)