"""The dining philosophers, as cooperating asyncio tasks."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from typing import Any, AsyncIterator, Iterable, Optional, Sequence

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_RETRY_DELAY = 0.001
_EATING_TIME = 0.005
_DONE = object()


async def _try_acquire(lock: asyncio.Lock) -> bool:
    if lock.locked():
        return False
    # An unlocked lock is taken without suspending, so nothing can intervene.
    await lock.acquire()
    return True


@dataclass
class AsyncPhilosopher:
    """A philosopher who thinks and eats with two forks, cooperatively."""

    name: str
    left_fork: asyncio.Lock
    right_fork: asyncio.Lock
    thoughts: "asyncio.Queue[Any]"

    async def think(self) -> None:
        """Send a new idea to the thoughts queue."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Keep trying until both forks are free, then eat a while."""
        while True:
            have_left = await _try_acquire(self.left_fork)
            have_right = await _try_acquire(self.right_fork)
            if have_left and have_right:
                break
            if have_left:
                self.left_fork.release()
            if have_right:
                self.right_fork.release()
            await asyncio.sleep(_RETRY_DELAY)
        try:
            print(f"{self.name} is eating...")
            await asyncio.sleep(_EATING_TIME)
        finally:
            self.left_fork.release()
            self.right_fork.release()


async def dine(
    names: Iterable[str] = PHILOSOPHERS, rounds: int = 100
) -> AsyncIterator[str]:
    """Seat the philosophers at a round table and yield their thoughts.

    Each philosopher thinks and then eats ``rounds`` times.
    """
    names = list(names)
    if len(names) == 1:
        raise ValueError("a single philosopher has only one fork")
    thoughts: "asyncio.Queue[Any]" = asyncio.Queue(maxsize=10)
    forks = [asyncio.Lock() for _ in names]
    philosophers = [
        AsyncPhilosopher(name, forks[index], forks[(index + 1) % len(forks)], thoughts)
        for index, name in enumerate(names)
    ]

    async def run(philosopher: AsyncPhilosopher) -> None:
        for _ in range(rounds):
            await philosopher.think()
            await philosopher.eat()

    tasks = [asyncio.create_task(run(philosopher)) for philosopher in philosophers]

    async def close() -> None:
        try:
            await asyncio.gather(*tasks)
        finally:
            await thoughts.put(_DONE)

    closer = asyncio.create_task(close())
    try:
        while (thought := await thoughts.get()) is not _DONE:
            yield thought
        await closer
    finally:
        for task in (*tasks, closer):
            task.cancel()


async def _print_thoughts(rounds: int) -> None:
    async for thought in dine(PHILOSOPHERS, rounds):
        print(f"Here is a thought: {thought}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Let the philosophers dine and print their thoughts."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    asyncio.run(_print_thoughts(args.rounds))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())