"""Test lane routes and waypoint resolution."""
import pytest
from strategy.geometry import Point2D
from strategy.model import LaneType
from strategy.rng import DRNG
from strategy.waypoints import (
    WAYPOINT_RADIUS, build_routes, lane_for_identity, next_waypoint,
    previous_waypoint, validate_route,
)

MAP_SIZE = 4000.0


def grid(step: float = 250.0):
    """Query points covering the whole map."""
    n = int(MAP_SIZE // step)
    return [Point2D(i * step, j * step) for i in range(n + 1) for j in range(n + 1)]


@pytest.fixture
def routes():
    return build_routes(MAP_SIZE, DRNG(7))


def test_lane_assignment_matches_identity_table():
    assert [lane_for_identity(i) for i in (1, 2, 6, 7)] == [LaneType.TOP] * 4
    assert [lane_for_identity(i) for i in (3, 8)] == [LaneType.MIDDLE] * 2
    assert [lane_for_identity(i) for i in (4, 5, 9, 10)] == [LaneType.BOTTOM] * 4


def test_lane_assignment_is_stable_for_any_id():
    for uid in range(1, 40):
        assert lane_for_identity(uid) == lane_for_identity(uid)
        assert lane_for_identity(uid) == lane_for_identity(uid + 5)


@pytest.mark.parametrize("seed", range(8))
def test_built_routes_keep_ordering(seed):
    """Every lane, whichever bend the middle lane takes, passes validation."""
    for route in build_routes(MAP_SIZE, DRNG(seed)).values():
        validate_route(route)


def test_middle_bend_depends_on_seed_only():
    bends = {build_routes(MAP_SIZE, DRNG(s))[LaneType.MIDDLE][1] for s in range(32)}
    assert bends == {Point2D(600.0, MAP_SIZE - 200.0), Point2D(200.0, MAP_SIZE - 600.0)}
    assert build_routes(MAP_SIZE, DRNG(3)) == build_routes(MAP_SIZE, DRNG(3))


def test_validate_route_rejects_bad_routes():
    with pytest.raises(ValueError):
        validate_route([Point2D(0, 0)])
    with pytest.raises(ValueError):
        validate_route([Point2D(0, 0), Point2D(500, 0), Point2D(100, 0)])


def test_next_waypoint_makes_progress(routes):
    """The waypoint we head for is never farther from the terminus than we are."""
    for route in routes.values():
        last = route[-1]
        for p in grid():
            wp = next_waypoint(route, p)
            assert wp == last or wp.distance_to(last) <= p.distance_to(last)


def test_next_is_previous_of_reversed_route(routes):
    for route in routes.values():
        backwards = tuple(reversed(route))
        for p in grid():
            assert next_waypoint(route, p) == previous_waypoint(backwards, p)
            assert previous_waypoint(route, p) == next_waypoint(backwards, p)


def test_arrival_snaps_to_following_waypoint(routes):
    top = routes[LaneType.TOP]
    near_second = Point2D(top[1].x + WAYPOINT_RADIUS * 0.5, top[1].y)
    assert next_waypoint(top, top[0]) == top[1]
    assert next_waypoint(top, near_second) == top[2]
    assert previous_waypoint(top, near_second) == top[0]


def test_ends_of_route(routes):
    top = routes[LaneType.TOP]
    assert next_waypoint(top, top[-1]) == top[-1]
    assert previous_waypoint(top, top[0]) == top[0]
    # Pushed off the map corner beyond the terminus
    assert next_waypoint(top, Point2D(MAP_SIZE, 0.0)) == top[-1]


def test_pushed_off_path_recovers_from_position(routes):
    """Knocked sideways between two waypoints, we still head for the one ahead."""
    bottom = routes[LaneType.BOTTOM]
    between = Point2D((bottom[4].x + bottom[5].x) / 2, bottom[4].y + 100.0)
    assert next_waypoint(bottom, between) == bottom[5]
    assert previous_waypoint(bottom, between) == bottom[4]
