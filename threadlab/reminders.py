"""Medication reminders, one thread per medication."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, TextIO

Sleep = Callable[[float], object]
Clock = Callable[[], datetime]

_PRINT_LOCK = threading.Lock()


@dataclass(frozen=True)
class Medication:
    """A medication taken every interval seconds, total times."""

    name: str
    interval: float
    total: int

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError("interval must not be negative")
        if self.total < 0:
            raise ValueError("total must not be negative")


DEFAULT_MEDICATIONS = (
    Medication("Paracetamol", 8, 10),
    Medication("Dorflex", 6, 12),
    Medication("Cataflan", 12, 8),
    Medication("Vitamina B12", 24, 6),
)

CONSUMED_MEDICATIONS = (
    Medication("Dorflex", 6, 10),
    Medication("Paracetamol", 8, 12),
    Medication("PILA", 24, 6),
)


def _say(out: TextIO | None, message: str) -> None:
    target = out if out is not None else sys.stdout
    with _PRINT_LOCK:
        target.write(message + "\n")
        target.flush()


def remind(
    medication: Medication,
    sleep: Sleep = time.sleep,
    clock: Clock = datetime.now,
    output: TextIO | None = None,
) -> list[str]:
    """Print a timed reminder for every dose and return the reminder lines."""
    lines = []
    for dose in range(1, medication.total + 1):
        line = f"[{clock():%H:%M:%S}] Tome {medication.name} ({dose}/{medication.total})"
        _say(output, line)
        lines.append(line)
        sleep(medication.interval)
    _say(output, f"--> {medication.name} finalizado")
    return lines


def consume(
    medication: Medication,
    sleep: Sleep = time.sleep,
    output: TextIO | None = None,
) -> list[str]:
    """Take every pill, reporting how many remain, and return the lines printed."""
    lines = []
    for remaining in reversed(range(medication.total)):
        status = f"Faltam {remaining} pílulas." if remaining else "Acabou fi!"
        line = f"Tomou o remédio {medication.name} | {status}"
        _say(output, line)
        lines.append(line)
        sleep(medication.interval)
    return lines


def run_reminders(
    medications: Iterable[Medication] = DEFAULT_MEDICATIONS,
    sleep: Sleep = time.sleep,
    clock: Clock = datetime.now,
    output: TextIO | None = None,
) -> list[list[str]]:
    """Remind every medication concurrently; return each one's reminder lines in order."""
    medications = list(medications)
    _say(output, "Sistema de Lembretes Iniciado")
    _say(output, "=============================")
    with ThreadPoolExecutor(max_workers=max(1, len(medications))) as executor:
        results = list(
            executor.map(lambda med: remind(med, sleep, clock, output), medications)
        )
    _say(output, "\n=============================")
    _say(output, "Todos os lembretes concluídos!")
    return results


def _run_consumption(medications: Iterable[Medication], sleep: Sleep) -> None:
    medications = list(medications)
    with ThreadPoolExecutor(max_workers=max(1, len(medications))) as executor:
        list(executor.map(lambda med: consume(med, sleep), medications))


def main(argv: list[str] | None = None) -> int:
    """Run the medication reminders."""
    parser = argparse.ArgumentParser(description="Remind medications from several threads.")
    parser.add_argument("--mode", choices=["remind", "consume"], default="remind")
    args = parser.parse_args(argv)
    if args.mode == "consume":
        _run_consumption(CONSUMED_MEDICATIONS, time.sleep)
    else:
        run_reminders()
    return 0