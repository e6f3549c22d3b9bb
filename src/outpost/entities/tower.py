"""Tower entity and tick-based fire cooldown."""

from __future__ import annotations

from dataclasses import dataclass

from outpost.config import TowerStats


@dataclass
class Tower:
    tower_id: str
    x: float
    y: float
    range: float
    fire_rate: int
    damage: float
    cooldown: int = 0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def tick_cooldown(self) -> None:
        self.cooldown = max(0, self.cooldown - 1)

    def can_fire(self) -> bool:
        return self.cooldown <= 0

    def reset_cooldown(self) -> None:
        self.cooldown = self.fire_rate


def create_tower(tower_id: str, x: float, y: float, stats: TowerStats) -> Tower:
    return Tower(
        tower_id=tower_id,
        x=x,
        y=y,
        range=stats.range,
        fire_rate=stats.fire_rate,
        damage=stats.damage,
    )
