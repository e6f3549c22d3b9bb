"""Tower targeting, projectile flight and hit resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from outpost.config import TowerStats
from outpost.core.session import SessionState
from outpost.entities.enemy import Enemy
from outpost.entities.projectile import Projectile
from outpost.entities.tower import Tower
from outpost.systems.geometry import distance, step_toward


@dataclass
class CombatTickResult:
    fired: list[Projectile]
    hits: list[tuple[Projectile, Enemy]]


class CombatSystem:
    def __init__(self, tower_stats: TowerStats, field_width: float) -> None:
        self._projectile_speed = tower_stats.projectile_speed
        self._field_width = field_width

    def tick(self, session: SessionState) -> CombatTickResult:
        fired = self.update_towers(session)
        hits = self.update_projectiles(session)
        return CombatTickResult(fired=fired, hits=hits)

    def update_towers(self, session: SessionState) -> list[Projectile]:
        fired: list[Projectile] = []
        for tower in session.towers:
            tower.tick_cooldown()
            if not tower.can_fire():
                continue

            target = self.select_target(tower, session.enemies.values())
            if target is None:
                continue

            tower.reset_cooldown()
            projectile = Projectile(
                projectile_id=session.next_projectile_id(),
                x=tower.x,
                y=tower.y,
                target_id=target.enemy_id,
                speed=self._projectile_speed,
                damage=tower.damage,
            )
            session.projectiles.append(projectile)
            fired.append(projectile)
        return fired

    def update_projectiles(self, session: SessionState) -> list[tuple[Projectile, Enemy]]:
        hits: list[tuple[Projectile, Enemy]] = []
        for projectile in session.projectiles:
            if projectile.hit:
                continue
            target = session.enemies.get(projectile.target_id)
            if target is None:
                continue

            # Homing: aim at where the target is now, not where it was.
            projectile.x, projectile.y = step_toward(projectile.position, target.position, projectile.speed)

            if distance(projectile.position, target.position) < target.radius:
                target.apply_damage(projectile.damage)
                projectile.hit = True
                hits.append((projectile, target))
        return hits

    def select_target(self, tower: Tower, enemies: Iterable[Enemy]) -> Enemy | None:
        best: Enemy | None = None
        furthest = -1.0
        for enemy in enemies:
            if distance(tower.position, enemy.position) > tower.range:
                continue
            progress = enemy.progress(self._field_width)
            if progress > furthest:
                best = enemy
                furthest = progress
        return best
