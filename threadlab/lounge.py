"""A VIP lounge whose capacity is enforced with a semaphore."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import Callable, Iterable, TextIO

Sleep = Callable[[float], object]

CAPACITY = 20
PEOPLE = 100


class Lounge:
    """A room that admits at most capacity people at once."""

    def __init__(self, capacity: int = CAPACITY, output: TextIO | None = None) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._output = output
        self._slots = threading.Semaphore(capacity)
        self._lock = threading.Lock()
        self._occupancy = 0
        self._peak = 0

    @property
    def occupancy(self) -> int:
        with self._lock:
            return self._occupancy

    @property
    def peak(self) -> int:
        """The largest number of people inside at once."""
        with self._lock:
            return self._peak

    def _say(self, message: str) -> None:
        out = self._output if self._output is not None else sys.stdout
        out.write(message + "\n")
        out.flush()

    def visit(self, person_id: int, duration: float, sleep: Sleep = time.sleep) -> int:
        """Wait for a place, stay duration seconds, leave; return the count on entry."""
        with self._slots:
            with self._lock:
                self._occupancy += 1
                count = self._occupancy
                self._peak = max(self._peak, count)
                self._say(f"Pessoa {person_id} entrou. Total: {count}")
                if count == self.capacity:
                    self._say(f"--- CAMAROTE LOTADO ({self.capacity} pessoas) ---")
            sleep(duration)
            with self._lock:
                self._occupancy -= 1
                self._say(f"Pessoa {person_id} saiu. Total: {self._occupancy}")
        return count


def run_event(
    people: int = PEOPLE,
    capacity: int = CAPACITY,
    durations: Iterable[float] | None = None,
    sleep: Sleep = time.sleep,
    output: TextIO | None = None,
) -> Lounge:
    """Send people numbered from 1 into the lounge at once and return it afterwards.

    Without durations each person stays a random 2 to 12 seconds.
    """
    if people < 0:
        raise ValueError("people must not be negative")
    if durations is None:
        rng = random.Random()
        stays = [rng.randint(2, 12) for _ in range(people)]
    else:
        stays = list(durations)
        if len(stays) != people:
            raise ValueError("one duration is needed per person")
    lounge = Lounge(capacity, output)
    threads = [
        threading.Thread(target=lounge.visit, args=(person_id, stay, sleep))
        for person_id, stay in enumerate(stays, start=1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    out = output if output is not None else sys.stdout
    out.write(f"\nEvento encerrado. Pessoas restantes no camarote: {lounge.occupancy}\n")
    out.flush()
    return lounge


def main(argv: list[str] | None = None) -> int:
    """Simulate people visiting the lounge."""
    parser = argparse.ArgumentParser(description="Limit lounge capacity with a semaphore.")
    parser.add_argument("--people", type=int, default=PEOPLE)
    parser.add_argument("--capacity", type=int, default=CAPACITY)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    durations = None
    if args.seed is not None and args.people >= 0:
        rng = random.Random(args.seed)
        durations = [rng.randint(2, 12) for _ in range(args.people)]
    try:
        run_event(args.people, args.capacity, durations)
    except ValueError as error:
        parser.error(str(error))
    return 0