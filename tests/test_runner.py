"""Test the replay harness and its decision log."""
import pytest
from strategy.geometry import Point2D
from strategy.model import ActionType, Faction, Game, TickInput, Unit, UnitClass, Wizard, World
from strategy.policy import Strategy
from runtime.runner import TickRunner


def make_tick(tick_index: int, with_enemy: bool = False) -> TickInput:
    me = Wizard(id=1, unit_class=UnitClass.WIZARD, faction=Faction.ACADEMY, pos=Point2D(1000, 1000),
                radius=35, life=100, max_life=100, angle=0.0, cast_range=500)
    wizards = [me]
    if with_enemy:
        wizards.append(Unit(id=7, unit_class=UnitClass.WIZARD, faction=Faction.RENEGADES,
                            pos=Point2D(1200, 1000), radius=35, life=100, max_life=100))
    return TickInput(wizard=me, world=World(tick_index=tick_index, wizards=wizards),
                     game=Game(random_seed=11))


def test_run_once_logs_decision():
    runner = TickRunner(Strategy())
    move = runner.run_once(make_tick(2000, with_enemy=True))

    assert move.action == ActionType.MAGIC_MISSILE
    events, next_offset = runner.events.since(0)
    assert next_offset == 1
    assert events[0].kind == "Decision"
    assert events[0].tick == 2000
    assert events[0].data["decision"] == "attack"
    assert events[0].data["move"]["action"] == "magic_missile"


@pytest.mark.asyncio
async def test_loop_decides_every_queued_tick():
    runner = TickRunner(Strategy())
    await runner.start()
    await runner.enqueue([make_tick(i) for i in range(3)])
    await runner.enqueue([make_tick(3, with_enemy=True)])
    moves = await runner.drain()
    await runner.stop()

    assert len(moves) == 4
    assert [e.tick for e in runner.events.since(0)[0]] == [0, 1, 2, 3]
    assert moves[-1].action == ActionType.MAGIC_MISSILE


def test_event_log_offsets():
    runner = TickRunner(Strategy())
    for i in range(5):
        runner.run_once(make_tick(2000 + i))
    chunk, next_offset = runner.events.since(3, limit=10)
    assert [e.tick for e in chunk] == [2003, 2004]
    assert next_offset == 5
    assert len(runner.events) == 5
