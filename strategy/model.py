from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from enum import Enum

from .geometry import Point2D, angle_to

class Faction(Enum):
    """Allegiance of a unit"""
    ACADEMY = "academy"
    RENEGADES = "renegades"
    NEUTRAL = "neutral"      # Never a combat target
    OTHER = "other"

class UnitClass(Enum):
    """Unit classification, used as the targeting class discriminator"""
    BUILDING = "building"    # Towers and faction bases
    WIZARD = "wizard"        # Heroic units, including self
    MINION = "minion"

class BuildingType(Enum):
    GUARDIAN_TOWER = "guardian_tower"
    FACTION_BASE = "faction_base"

class ActionType(Enum):
    NONE = "none"
    MAGIC_MISSILE = "magic_missile"

class LaneType(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

@dataclass
class Unit:
    id: int
    unit_class: UnitClass
    faction: Faction
    pos: Point2D
    radius: float
    life: float
    max_life: float
    speed_x: float = 0.0  # Velocity over the last tick
    speed_y: float = 0.0
    building_type: Optional[BuildingType] = None

    def distance_to(self, other) -> float:
        return self.pos.distance_to(other)

@dataclass
class Wizard(Unit):
    """The controlled unit: a wizard with a heading and a cast range."""
    angle: float = 0.0  # Heading in radians
    cast_range: float = 500.0

    def angle_to(self, point: Point2D) -> float:
        """Relative angle from the current heading to point, in [-pi, pi]."""
        return angle_to(self.pos, self.angle, point)

@dataclass(frozen=True)
class Game:
    """Immutable game constants, delivered with every tick"""
    map_size: float = 4000.0
    wizard_forward_speed: float = 4.0
    wizard_strafe_speed: float = 3.0
    staff_sector: float = 0.5235987755982988  # pi / 6, full width of the cast cone
    magic_missile_radius: float = 10.0
    random_seed: int = 0

@dataclass
class World:
    tick_index: int = 0
    buildings: List[Unit] = field(default_factory=list)
    wizards: List[Unit] = field(default_factory=list)
    minions: List[Unit] = field(default_factory=list)

    def all_units(self) -> List[Unit]:
        """Every unit in the snapshot: buildings, then wizards, then minions."""
        return [*self.buildings, *self.wizards, *self.minions]

@dataclass(frozen=True)
class TickInput:
    """Everything the strategy may read during one tick."""
    wizard: Wizard  # The controlled unit
    world: World
    game: Game

@dataclass
class Move:
    """Outbound command for one tick; unset fields stay no-ops."""
    turn: float = 0.0
    speed: float = 0.0
    strafe_speed: float = 0.0
    action: ActionType = ActionType.NONE
    cast_angle: float = 0.0
    min_cast_distance: float = 0.0

@dataclass
class Event:
    kind: str
    tick: int
    data: Dict

Route = Tuple[Point2D, ...]
