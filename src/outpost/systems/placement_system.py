"""Tower placement and clearance validation."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from outpost.config import TowerStats
from outpost.core.session import SessionState
from outpost.entities.tower import Tower, create_tower
from outpost.systems.geometry import distance
from outpost.systems.pathing import Path


@dataclass
class PlacementSystem:
    path: Path
    tower_stats: TowerStats
    path_clearance: float = 40.0
    tower_clearance: float = 42.0

    def rejection_reason(self, session: SessionState, x: float, y: float) -> str | None:
        if session.game_over:
            return "game over"
        if not session.economy.can_afford_tower():
            return "not enough gold"
        if self.path.is_near((x, y), self.path_clearance):
            return "too close to path"
        if any(distance(tower.position, (x, y)) < self.tower_clearance for tower in session.towers):
            return "too close to another tower"
        return None

    def place_tower(self, session: SessionState, x: float, y: float) -> Tower | None:
        """Build a tower at ``(x, y)``; invalid requests are ignored and return None."""
        reason = self.rejection_reason(session, x, y)
        if reason is not None:
            logger.debug(f"Placement at ({x:.1f}, {y:.1f}) rejected: {reason}")
            return None

        if not session.economy.buy_tower():
            return None
        tower = create_tower(session.next_tower_id(), x, y, self.tower_stats)
        session.towers.append(tower)
        return tower
