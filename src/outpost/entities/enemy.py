"""Enemy entity, path movement and wave-scaled construction."""

from __future__ import annotations

from dataclasses import dataclass
import math
import random

from outpost.config import EnemyScaling
from outpost.systems.pathing import Path


@dataclass
class Enemy:
    enemy_id: str
    x: float
    y: float
    speed: float
    max_hp: float
    hp: float
    reward: int
    waypoint: int = 1
    radius: float = 12.0
    reached_end: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0

    @property
    def hp_ratio(self) -> float:
        if self.max_hp <= 0:
            return 0.0
        return self.hp / self.max_hp

    def progress(self, field_width: float) -> float:
        """How far along the route the enemy is; used for targeting."""
        return self.waypoint + self.x / field_width

    def apply_damage(self, amount: float) -> bool:
        if self.is_defeated:
            return False
        self.hp -= max(amount, 0.0)
        if self.hp <= 0:
            self.hp = 0
            return True
        return False

    def move(self, path: Path) -> bool:
        """Advance one tick along ``path``.

        Returns True on the tick the enemy runs out of waypoints. Overshoot
        snaps onto the waypoint instead of carrying over.
        """
        if self.reached_end:
            return False

        target = path.waypoint(self.waypoint)
        if target is None:
            self.reached_end = True
            return True

        dx = target[0] - self.x
        dy = target[1] - self.y
        length = math.hypot(dx, dy) or 1.0

        if length < self.speed:
            self.x, self.y = target
            self.waypoint += 1
            return False

        self.x += dx / length * self.speed
        self.y += dy / length * self.speed
        return False


def create_enemy(
    enemy_id: str,
    wave: int,
    path: Path,
    scaling: EnemyScaling,
    rng: random.Random | None = None,
) -> Enemy:
    roll = (rng or random).random()
    hp = scaling.hp_for(wave)
    x, y = path.start
    return Enemy(
        enemy_id=enemy_id,
        x=x,
        y=y,
        speed=scaling.speed_for(wave, roll),
        max_hp=hp,
        hp=hp,
        reward=scaling.reward_for(wave),
        waypoint=1,
        radius=scaling.radius,
    )
