from .geometry import Point2D
from .model import ActionType, Game, Move, TickInput, Unit
from .rng import DRNG

def go_to(tick: TickInput, move: Move, point: Point2D) -> None:
    """Turn toward point; only walk once roughly facing it."""
    angle = tick.wizard.angle_to(point)
    move.turn = angle
    if abs(angle) < tick.game.staff_sector / 4.0:
        move.speed = tick.game.wizard_forward_speed

def cast_at(tick: TickInput, move: Move, target: Unit) -> bool:
    """Face target and fire a magic missile if it is inside the cone.

    Returns True when a cast was issued.
    """
    me = tick.wizard
    angle = me.angle_to(target.pos)
    move.turn = angle
    if abs(angle) < tick.game.staff_sector / 2.0:
        move.action = ActionType.MAGIC_MISSILE
        move.cast_angle = angle
        move.min_cast_distance = me.distance_to(target) - target.radius + tick.game.magic_missile_radius
        return True
    return False

def strafe(move: Move, game: Game, rng: DRNG) -> None:
    """Sidestep left or right at random, harder to hit."""
    move.strafe_speed = game.wizard_strafe_speed if rng.next_bool() else -game.wizard_strafe_speed
