"""Lane routes and waypoint resolution.

Every route is ordered by decreasing distance to its last point. Given that,
"where am I on the path" is recomputed from position alone every tick: the
first waypoint that is closer to the terminus than we are is the one ahead.
"""
from typing import Dict, Sequence
from .geometry import Point2D
from .model import LaneType, Route
from .rng import DRNG

WAYPOINT_RADIUS = 100.0

# Lane pattern for wizard ids 1..5, repeated for 6..10 and beyond
_LANE_PATTERN = (LaneType.TOP, LaneType.TOP, LaneType.MIDDLE, LaneType.BOTTOM, LaneType.BOTTOM)

def lane_for_identity(unit_id: int) -> LaneType:
    """Stable lane assignment: 1,2,6,7 top; 3,8 middle; 4,5,9,10 bottom."""
    return _LANE_PATTERN[(unit_id - 1) % len(_LANE_PATTERN)]

def build_routes(map_size: float, rng: DRNG) -> Dict[LaneType, Route]:
    """Build the three lane routes for a square map of side map_size.

    The middle route takes one draw from rng to pick which side of the
    river bend to walk around.
    """
    s = map_size
    middle_bend = Point2D(600.0, s - 200.0) if rng.next_bool() else Point2D(200.0, s - 600.0)
    return {
        LaneType.MIDDLE: (
            Point2D(100.0, s - 100.0),
            middle_bend,
            Point2D(800.0, s - 800.0),
            Point2D(s - 600.0, 600.0),
        ),
        LaneType.TOP: (
            Point2D(100.0, s - 100.0),
            Point2D(100.0, s - 400.0),
            Point2D(200.0, s - 800.0),
            Point2D(200.0, s * 0.75),
            Point2D(200.0, s * 0.5),
            Point2D(200.0, s * 0.25),
            Point2D(200.0, 200.0),
            Point2D(s * 0.25, 200.0),
            Point2D(s * 0.5, 200.0),
            Point2D(s * 0.75, 200.0),
            Point2D(s - 200.0, 200.0),
        ),
        LaneType.BOTTOM: (
            Point2D(100.0, s - 100.0),
            Point2D(400.0, s - 100.0),
            Point2D(800.0, s - 200.0),
            Point2D(s * 0.25, s - 200.0),
            Point2D(s * 0.5, s - 200.0),
            Point2D(s * 0.75, s - 200.0),
            Point2D(s - 200.0, s - 200.0),
            Point2D(s - 200.0, s * 0.75),
            Point2D(s - 200.0, s * 0.5),
            Point2D(s - 200.0, s * 0.25),
            Point2D(s - 200.0, 200.0),
        ),
    }

def validate_route(waypoints: Sequence[Point2D]) -> None:
    """Raise ValueError unless distances to the terminus strictly decrease."""
    if len(waypoints) < 2:
        raise ValueError(f"Route needs at least two waypoints, got {len(waypoints)}")
    last = waypoints[-1]
    dists = [p.distance_to(last) for p in waypoints]
    for i in range(len(dists) - 1):
        if dists[i] <= dists[i + 1]:
            raise ValueError(
                f"Waypoint {i} {waypoints[i]} is not farther from the terminus "
                f"than waypoint {i + 1} {waypoints[i + 1]}")

def next_waypoint(waypoints: Sequence[Point2D], pos: Point2D,
                  radius: float = WAYPOINT_RADIUS) -> Point2D:
    """First waypoint ahead of pos, snapping forward when already on one."""
    last_idx = len(waypoints) - 1
    last = waypoints[last_idx]
    for i in range(last_idx):
        wp = waypoints[i]
        if wp.distance_to(pos) <= radius:
            return waypoints[i + 1]
        if last.distance_to(wp) < last.distance_to(pos):
            return wp
    return last

def previous_waypoint(waypoints: Sequence[Point2D], pos: Point2D,
                      radius: float = WAYPOINT_RADIUS) -> Point2D:
    """Same scan as next_waypoint, walking the route back to its start."""
    first = waypoints[0]
    for i in range(len(waypoints) - 1, 0, -1):
        wp = waypoints[i]
        if wp.distance_to(pos) <= radius:
            return waypoints[i - 1]
        if first.distance_to(wp) < first.distance_to(pos):
            return wp
    return first
