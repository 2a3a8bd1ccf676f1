from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .commands import cast_at, go_to, strafe
from .geometry import Point2D
from .model import LaneType, Move, Route, TickInput
from .rng import DRNG
from .spatial import allies_in_range, enemies_in_range, nearest_ally_wizard, nearest_friendly_tower
from .targeting import acquire_target
from .waypoints import WAYPOINT_RADIUS, build_routes, lane_for_identity, next_waypoint, previous_waypoint

LOW_HP_FACTOR = 0.25
STRAFE_TICKS = 1100  # Opening phase during which we keep sidestepping

class Decision(Enum):
    """Branch taken by the policy on a given tick"""
    RETREAT_CRITICAL = "retreat_critical"
    RETREAT_OUTNUMBERED = "retreat_outnumbered"
    ATTACK = "attack"      # Cast issued
    ENGAGE = "engage"      # Turning toward a target, not yet in the cone
    ADVANCE = "advance"

@dataclass
class StrategyConfig:
    low_hp_factor: float = LOW_HP_FACTOR
    strafe_ticks: int = STRAFE_TICKS
    waypoint_radius: float = WAYPOINT_RADIUS
    outnumbered_ratio: float = 2.0

    def __post_init__(self):
        if not 0.0 <= self.low_hp_factor <= 1.0:
            raise ValueError(f"low_hp_factor must be within [0, 1]: {self.low_hp_factor}")
        if self.strafe_ticks < 0:
            raise ValueError(f"strafe_ticks cannot be negative: {self.strafe_ticks}")
        if self.waypoint_radius < 0:
            raise ValueError(f"waypoint_radius cannot be negative: {self.waypoint_radius}")

class AgentState:
    """Per-agent state that lives for the whole match.

    Built empty by the harness and filled on the first tick, once the
    simulator has told us the seed, the map size and who we are.
    """

    def __init__(self):
        self.rng: Optional[DRNG] = None
        self.lane: Optional[LaneType] = None
        self.routes: Dict[LaneType, Route] = {}
        self.waypoints: Route = ()

    @property
    def initialized(self) -> bool:
        return self.rng is not None

    def initialize(self, tick: TickInput) -> None:
        """Seed the rng and pick lane and route. No-op after the first call."""
        if self.initialized:
            return
        self.rng = DRNG(tick.game.random_seed)
        self.routes = build_routes(tick.game.map_size, self.rng)
        self.lane = lane_for_identity(tick.wizard.id)
        self.waypoints = self.routes[self.lane]

def _is_outnumbered(tick: TickInput, config: StrategyConfig) -> bool:
    me = tick.wizard
    enemies = enemies_in_range(tick, me.cast_range)
    allies = allies_in_range(tick, me.cast_range / 2)
    return (len(enemies) > len(allies) * config.outnumbered_ratio
            and me.life < me.max_life * config.low_hp_factor * 3)

def decide(state: AgentState, tick: TickInput,
           config: Optional[StrategyConfig] = None) -> Tuple[Move, Decision]:
    """Produce this tick's command and the branch that produced it."""
    config = config or StrategyConfig()
    state.initialize(tick)
    me = tick.wizard
    move = Move()

    if tick.world.tick_index < config.strafe_ticks:
        strafe(move, tick.game, state.rng)

    if me.life < me.max_life * config.low_hp_factor / 2:
        go_to(tick, move, previous_waypoint(state.waypoints, me.pos, config.waypoint_radius))
        return move, Decision.RETREAT_CRITICAL

    if _is_outnumbered(tick, config):
        go_to(tick, move, previous_waypoint(state.waypoints, me.pos, config.waypoint_radius))
        return move, Decision.RETREAT_OUTNUMBERED

    target = acquire_target(tick)
    if target is not None and me.distance_to(target) <= me.cast_range:
        if cast_at(tick, move, target):
            return move, Decision.ATTACK
        return move, Decision.ENGAGE

    go_to(tick, move, next_waypoint(state.waypoints, me.pos, config.waypoint_radius))
    return move, Decision.ADVANCE

def tower_hug(tick: TickInput, move: Move) -> bool:
    """Fall back to the nearest friendly tower when nobody is close by.

    Returns False when there is no tower left or we already have company.
    """
    tower = nearest_friendly_tower(tick)
    if tower is None:
        return False
    me = tick.wizard
    company = [a for a in allies_in_range(tick, me.cast_range / 5) if a.id != me.id]
    if company:
        return False
    go_to(tick, move, tower.pos)
    return True

def follow_ally(tick: TickInput, move: Move) -> bool:
    """Tag along just ahead of the nearest friendly wizard."""
    ally = nearest_ally_wizard(tick)
    if ally is None:
        return False
    x = ally.pos.x - ally.radius if ally.speed_x < 0 else ally.pos.x + ally.radius
    y = ally.pos.y - ally.radius if ally.speed_y < 0 else ally.pos.y + ally.radius
    go_to(tick, move, Point2D(x, y))
    return True

class Strategy:
    """Per-agent entry point: one call to move() per simulator tick."""

    def __init__(self, config: Optional[StrategyConfig] = None, state: Optional[AgentState] = None):
        self.config = config or StrategyConfig()
        self.state = state or AgentState()
        self.last_decision: Optional[Decision] = None

    def move(self, tick: TickInput) -> Move:
        move, self.last_decision = decide(self.state, tick, self.config)
        return move
