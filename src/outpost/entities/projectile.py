"""Homing projectile entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Projectile:
    """A shot in flight.

    ``target_id`` is a handle into the session's active enemy mapping. The
    projectile never holds the enemy itself, so a target removed by an
    earlier shot simply stops resolving.
    """

    projectile_id: str
    x: float
    y: float
    target_id: str
    speed: float
    damage: float
    hit: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)
