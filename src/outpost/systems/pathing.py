"""Fixed enemy route and proximity queries over its segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from outpost.config import Waypoint
from outpost.systems.geometry import Point, distance, project_to_segment


@dataclass
class Path:
    points: tuple[Waypoint, ...]

    def __post_init__(self) -> None:
        self.points = tuple(self.points)
        if len(self.points) < 2:
            raise ValueError("Path requires at least 2 points")
        for a, b in zip(self.points, self.points[1:]):
            if (a.x, a.y) == (b.x, b.y):
                raise ValueError(f"Consecutive waypoints must be distinct: ({a.x}, {a.y})")

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start(self) -> Point:
        return (self.points[0].x, self.points[0].y)

    def waypoint(self, index: int) -> Point | None:
        if index < 0 or index >= len(self.points):
            return None
        wp = self.points[index]
        return (wp.x, wp.y)

    def segments(self) -> Iterator[tuple[Point, Point]]:
        for a, b in zip(self.points, self.points[1:]):
            yield (a.x, a.y), (b.x, b.y)

    def is_near(self, point: Point, threshold: float) -> bool:
        for seg_a, seg_b in self.segments():
            nearest = project_to_segment(point, seg_a, seg_b)
            if distance(point, nearest) < threshold:
                return True
        return False
