"""Mutable per-session aggregate shared by the engine and wave controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from outpost.config import GameContent
from outpost.core.game_state import Outcome
from outpost.entities.enemy import Enemy
from outpost.entities.projectile import Projectile
from outpost.entities.tower import Tower
from outpost.systems.economy_system import EconomySystem


@dataclass
class SessionState:
    economy: EconomySystem
    lives: int
    wave_count: int
    wave: int = 0
    enemies: dict[str, Enemy] = field(default_factory=dict)
    towers: list[Tower] = field(default_factory=list)
    projectiles: list[Projectile] = field(default_factory=list)
    spawning: bool = False
    game_over: bool = False
    win: bool = False
    outcome: Outcome | None = None
    _enemy_counter: int = field(default=0, init=False, repr=False)
    _tower_counter: int = field(default=0, init=False, repr=False)
    _projectile_counter: int = field(default=0, init=False, repr=False)

    @property
    def gold(self) -> int:
        return self.economy.gold

    def next_enemy_id(self) -> str:
        self._enemy_counter += 1
        return f"enemy_{self._enemy_counter:04d}"

    def next_tower_id(self) -> str:
        self._tower_counter += 1
        return f"tower_{self._tower_counter:03d}"

    def next_projectile_id(self) -> str:
        self._projectile_counter += 1
        return f"shot_{self._projectile_counter:05d}"

    def add_enemy(self, enemy: Enemy) -> None:
        self.enemies[enemy.enemy_id] = enemy

    def finish(self, outcome: Outcome) -> None:
        self.game_over = True
        self.win = outcome == Outcome.WIN
        self.outcome = outcome


def new_session(content: GameContent) -> SessionState:
    return SessionState(
        economy=EconomySystem(
            gold=content.map_config.starting_gold,
            tower_cost=content.tower_stats.cost,
            defeat_bonus=content.wave_rules.defeat_bonus,
        ),
        lives=content.map_config.starting_lives,
        wave_count=content.wave_rules.total_waves,
    )
