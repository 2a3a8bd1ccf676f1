import asyncio
from dataclasses import asdict
from typing import List
from strategy.model import Event, Move, TickInput
from strategy.policy import Strategy
from .eventlog import EventLog

class TickRunner:
    """Async driver that replays snapshots through a strategy, one per tick."""

    def __init__(self, strategy: Strategy, idle_sleep_s: float = 0.001):
        self.strategy = strategy
        self.idle_sleep_s = idle_sleep_s
        self._ticks: asyncio.Queue[List[TickInput]] = asyncio.Queue()
        self.events = EventLog()
        self.moves: List[Move] = []
        self._task: asyncio.Task | None = None
        self._lock = asyncio.Lock()

    async def start(self):
        """Start the tick loop."""
        if self._task:
            return
        self._task = asyncio.create_task(self._loop())

    async def stop(self):
        """Stop the tick loop gracefully."""
        if not self._task:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    def run_once(self, tick: TickInput) -> Move:
        """Decide a single tick and record the outcome."""
        move = self.strategy.move(tick)
        decision = self.strategy.last_decision
        self.moves.append(move)
        self.events.append_many([Event("Decision", tick.world.tick_index, {
            "wizard_id": tick.wizard.id,
            "decision": decision.value if decision else None,
            "move": {k: (v.value if hasattr(v, "value") else v) for k, v in asdict(move).items()},
        })])
        return move

    async def _loop(self):
        """Main tick loop - drain queued snapshots, decide each in order."""
        while True:
            batched: List[TickInput] = []
            while not self._ticks.empty():
                try:
                    batched += self._ticks.get_nowait()
                except asyncio.QueueEmpty:
                    break

            if batched:
                async with self._lock:
                    for tick in batched:
                        self.run_once(tick)
                print(f"[TickRunner] Decided {len(batched)} ticks, last: {self.strategy.last_decision}")
            await asyncio.sleep(self.idle_sleep_s)

    async def enqueue(self, ticks: List[TickInput]):
        """Queue snapshots to be decided on the next loop iteration."""
        print(f"[TickRunner] Enqueuing {len(ticks)} ticks")
        await self._ticks.put(ticks)

    async def drain(self, timeout_s: float = 1.0):
        """Wait until every queued snapshot has been decided."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout_s
        while not self._ticks.empty():
            if loop.time() > deadline:
                raise TimeoutError("TickRunner did not drain queued ticks in time")
            await asyncio.sleep(self.idle_sleep_s)
        async with self._lock:
            return list(self.moves)
