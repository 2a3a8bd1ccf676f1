from typing import Callable, Iterable, List, Optional
from .model import BuildingType, Faction, TickInput, Unit, UnitClass

FactionFilter = Callable[[Faction, Faction], bool]

ALL_CLASSES = (UnitClass.BUILDING, UnitClass.WIZARD, UnitClass.MINION)

def is_hostile(own: Faction, other: Faction) -> bool:
    """Neither neutral nor on our side."""
    return other != Faction.NEUTRAL and other != own

def is_allied(own: Faction, other: Faction) -> bool:
    return other == own and other != Faction.NEUTRAL

def units_in_range(tick: TickInput, range_: float, faction_filter: FactionFilter,
                   classes: Iterable[UnitClass] = ALL_CLASSES) -> List[Unit]:
    """All units passing faction_filter strictly closer to self than range_."""
    me = tick.wizard
    classes = set(classes)
    return [
        u for u in tick.world.all_units()
        if u.unit_class in classes
        and u.faction != Faction.NEUTRAL
        and faction_filter(me.faction, u.faction)
        and me.distance_to(u) < range_
    ]

def enemies_in_range(tick: TickInput, range_: float) -> List[Unit]:
    return units_in_range(tick, range_, is_hostile)

def allies_in_range(tick: TickInput, range_: float) -> List[Unit]:
    """Supporting allies: friendly wizards and minions, buildings excluded."""
    return units_in_range(tick, range_, is_allied, (UnitClass.WIZARD, UnitClass.MINION))

def nearest_friendly_tower(tick: TickInput) -> Optional[Unit]:
    """Closest own-faction guardian tower, or None if every tower has fallen."""
    me = tick.wizard
    best: Optional[Unit] = None
    best_dist = float('inf')
    for b in tick.world.buildings:
        if b.faction != me.faction or b.building_type != BuildingType.GUARDIAN_TOWER:
            continue
        dist = me.distance_to(b)
        if dist < best_dist:
            best = b
            best_dist = dist
    return best

def nearest_ally_wizard(tick: TickInput) -> Optional[Unit]:
    """Closest friendly wizard other than self."""
    me = tick.wizard
    best: Optional[Unit] = None
    best_dist = float('inf')
    for w in tick.world.wizards:
        if w.id == me.id or w.faction != me.faction:
            continue
        dist = me.distance_to(w)
        if dist < best_dist:
            best = w
            best_dist = dist
    return best
