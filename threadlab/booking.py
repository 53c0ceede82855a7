"""Cinema seat booking from several cashiers without synchronization."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Iterable, TextIO

TOTAL_SEATS = 100
DEFAULT_REQUESTS = (60, 60)


class Cinema:
    """Seats shared by cashiers; reserve checks and updates without a lock."""

    def __init__(
        self,
        seats: int = TOTAL_SEATS,
        delay: float = 1.0,
        output: TextIO | None = None,
    ) -> None:
        self.available = seats
        self.delay = delay
        self._output = output

    def _say(self, message: str) -> None:
        print(message, file=self._output or sys.stdout, flush=True)

    def reserve(self, quantity: int) -> bool:
        """Try to book quantity seats and report whether the booking was confirmed."""
        if quantity <= self.available:
            self._say(f"Processando reserva de {quantity} assentos...")
            time.sleep(self.delay)
            self.available -= quantity
            self._say(f"Reserva confirmada. Assentos restantes: {self.available}")
            return True
        self._say(f"Reserva negada. Requeridos: {quantity}, Disponíveis: {self.available}")
        return False


def run_booking(
    requests: Iterable[int] = DEFAULT_REQUESTS,
    seats: int = TOTAL_SEATS,
    delay: float = 1.0,
    output: TextIO | None = None,
) -> int:
    """Run one cashier thread per request and return the seats left."""
    requests = list(requests)
    out = output or sys.stdout
    print(f"Iniciando sistema de reservas ({seats} assentos disponíveis)", file=out, flush=True)
    cinema = Cinema(seats, delay, out)
    cashiers = [threading.Thread(target=cinema.reserve, args=(q,)) for q in requests]
    for cashier in cashiers:
        cashier.start()
    for cashier in cashiers:
        cashier.join()
    print(
        f"\nAssentos finais disponíveis: {cinema.available} "
        f"(deveria ser {seats - sum(requests)})",
        file=out,
        flush=True,
    )
    return cinema.available


def main(argv: list[str] | None = None) -> int:
    """Simulate cashiers booking seats at the same time."""
    parser = argparse.ArgumentParser(description="Show a race between booking cashiers.")
    parser.add_argument("requests", type=int, nargs="*", default=list(DEFAULT_REQUESTS))
    parser.add_argument("--seats", type=int, default=TOTAL_SEATS)
    parser.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)
    run_booking(args.requests, args.seats, args.delay)
    return 0