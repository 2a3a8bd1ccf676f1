import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point2D:
    """Immutable (x, y) position in world coordinates."""
    x: float
    y: float

    def distance_to(self, other: Union["Point2D", object]) -> float:
        """Euclidean distance to a point or to anything carrying a `pos`."""
        p = other if isinstance(other, Point2D) else other.pos
        return math.hypot(self.x - p.x, self.y - p.y)


def distance_2d(a: Point2D, b: Point2D) -> float:
    """Calculate Euclidean distance between two 2D positions."""
    return math.hypot(b.x - a.x, b.y - a.y)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi]."""
    while angle > math.pi:
        angle -= 2.0 * math.pi
    while angle < -math.pi:
        angle += 2.0 * math.pi
    return angle


def angle_to(origin: Point2D, heading: float, point: Point2D) -> float:
    """Relative angle from a heading at origin to point, in [-pi, pi].

    Positive values mean the point lies clockwise of the heading in screen
    coordinates (y grows downwards), matching the simulator's turn sign.
    """
    absolute = math.atan2(point.y - origin.y, point.x - origin.x)
    return normalize_angle(absolute - heading)
