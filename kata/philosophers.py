"""The dining philosophers, with threads and locks."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_EATING_TIME = 0.01
_DONE = object()


@dataclass
class Philosopher:
    """A philosopher who thinks and eats with two forks."""

    name: str
    left_fork: threading.Lock
    right_fork: threading.Lock
    thoughts: "queue.Queue[object]"

    def think(self) -> None:
        """Send a new idea to the thoughts queue."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up the left fork, then the right one, and eat a while."""
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            time.sleep(_EATING_TIME)


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Seat the philosophers at a round table and yield their thoughts.

    Each philosopher eats and then thinks ``rounds`` times.
    """
    names = list(names)
    if len(names) == 1:
        raise ValueError("a single philosopher has only one fork")
    thoughts: "queue.Queue[object]" = queue.Queue(maxsize=10)
    forks = [threading.Lock() for _ in names]

    def run(philosopher: Philosopher) -> None:
        try:
            for _ in range(rounds):
                philosopher.eat()
                philosopher.think()
        finally:
            thoughts.put(_DONE)

    for index, name in enumerate(names):
        left, right = forks[index], forks[(index + 1) % len(forks)]
        # The last philosopher reaches the other way round to avoid deadlock.
        if index == len(forks) - 1:
            left, right = right, left
        philosopher = Philosopher(name, left, right, thoughts)
        threading.Thread(target=run, args=(philosopher,), daemon=True).start()

    remaining = len(names)
    while remaining:
        thought = thoughts.get()
        if thought is _DONE:
            remaining -= 1
        else:
            yield thought


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Let the philosophers dine and print their thoughts."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    for thought in dine(PHILOSOPHERS, args.rounds):
        print(thought)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())