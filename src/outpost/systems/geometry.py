"""Planar geometry helpers shared by targeting and placement."""

from __future__ import annotations

import math

Point = tuple[float, float]


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def project_to_segment(point: Point, seg_a: Point, seg_b: Point) -> Point:
    """Return the closest point to ``point`` on the closed segment ``seg_a``-``seg_b``.

    A zero-length segment is treated as having unit squared length, so the
    projection collapses onto ``seg_a`` instead of dividing by zero.
    """
    dx = seg_b[0] - seg_a[0]
    dy = seg_b[1] - seg_a[1]
    mag_sq = dx * dx + dy * dy or 1.0
    t = ((point[0] - seg_a[0]) * dx + (point[1] - seg_a[1]) * dy) / mag_sq
    t = max(0.0, min(1.0, t))
    return (seg_a[0] + t * dx, seg_a[1] + t * dy)


def step_toward(origin: Point, target: Point, step: float) -> Point:
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    length = math.hypot(dx, dy) or 1.0
    return (origin[0] + dx / length * step, origin[1] + dy / length * step)
