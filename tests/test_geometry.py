import pytest

from outpost.config import Waypoint
from outpost.systems.geometry import distance, project_to_segment
from outpost.systems.pathing import Path


def test_distance_is_euclidean() -> None:
    assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0


def test_projection_clamps_to_segment_ends() -> None:
    assert project_to_segment((5.0, 5.0), (0.0, 0.0), (10.0, 0.0)) == (5.0, 0.0)
    assert project_to_segment((-5.0, 3.0), (0.0, 0.0), (10.0, 0.0)) == (0.0, 0.0)
    assert project_to_segment((15.0, 3.0), (0.0, 0.0), (10.0, 0.0)) == (10.0, 0.0)


def test_projection_on_zero_length_segment() -> None:
    assert project_to_segment((3.0, 4.0), (1.0, 1.0), (1.0, 1.0)) == (1.0, 1.0)


def test_path_proximity_is_strict() -> None:
    path = Path([Waypoint(x=0.0, y=0.0), Waypoint(x=100.0, y=0.0), Waypoint(x=100.0, y=100.0)])
    assert path.is_near((50.0, 39.9), 40)
    assert not path.is_near((50.0, 40.0), 40)
    assert path.is_near((130.0, 60.0), 40)
    assert path.waypoint(3) is None
    assert path.start == (0.0, 0.0)


def test_path_validation() -> None:
    with pytest.raises(ValueError):
        Path([Waypoint(x=0.0, y=0.0)])
    with pytest.raises(ValueError, match="distinct"):
        Path([Waypoint(x=0.0, y=0.0), Waypoint(x=0.0, y=0.0), Waypoint(x=5.0, y=0.0)])
