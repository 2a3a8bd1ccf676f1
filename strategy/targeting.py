from typing import Dict, List, Optional, Tuple
from .model import Faction, TickInput, Unit, UnitClass

# Wizards dominate targeting; buildings soak damage and rank last
CLASS_WEIGHTS: Dict[UnitClass, float] = {
    UnitClass.BUILDING: 5.0,
    UnitClass.WIZARD: 250.0,
    UnitClass.MINION: 10.0,
}

def target_priority(unit: Unit) -> Optional[float]:
    """Inverse health ratio times class weight; None for units already dead."""
    if unit.life <= 0:
        return None
    return (unit.max_life / unit.life) * CLASS_WEIGHTS[unit.unit_class]

def _candidates(tick: TickInput) -> List[Tuple[Unit, float]]:
    me = tick.wizard
    out: List[Tuple[Unit, float]] = []
    for u in tick.world.all_units():
        if u.faction == Faction.NEUTRAL or u.faction == me.faction:
            continue
        priority = target_priority(u)
        if priority is None:
            continue
        out.append((u, priority))
    return out

def acquire_target(tick: TickInput) -> Optional[Unit]:
    """Pick the hostile unit with the best reach-adjusted priority.

    A candidate must be close enough for a cast to clear both radii:
    distance <= cast_range - self.radius - target.radius. Among those the
    highest (cast_range - distance) + priority wins; the first one evaluated
    keeps a tie.
    """
    me = tick.wizard
    best: Optional[Unit] = None
    best_score = 0.0
    for u, priority in _candidates(tick):
        dist = me.distance_to(u)
        if dist > me.cast_range - me.radius - u.radius:
            continue
        score = (me.cast_range - dist) + priority
        if best is None or score > best_score:
            best = u
            best_score = score
    return best
