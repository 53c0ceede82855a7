"""Condition variables: one thread signalling another."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, TextIO

DEFAULT_DELAY = 5.0


def _printer(output: TextIO | None) -> Callable[[str], None]:
    out = output if output is not None else sys.stdout
    lock = threading.Lock()

    def say(message: str) -> None:
        with lock:
            out.write(message + "\n")
            out.flush()

    return say


def wait_and_signal(delay: float = DEFAULT_DELAY, output: TextIO | None = None) -> list[int]:
    """Start a waiting thread, then after delay a signalling one.

    Returns the identifiers of the two threads in the order they were created.
    """
    if delay < 0:
        raise ValueError("delay must not be negative")
    say = _printer(output)
    condition = threading.Condition()
    done = 1
    idents: list[int] = []

    def execute() -> None:
        nonlocal done
        ident = threading.get_ident()
        with condition:
            if done == 1:
                done = 2
                say(f"Thread {ident}: Esperando por cond1...")
            else:
                say(f"Thread {ident}: Sinalizando cond1...")
                condition.notify()
        say(f"Thread {ident}: Finalizando execução")

    say("Main: Criando thread 1")
    first = threading.Thread(target=execute)
    first.start()
    time.sleep(delay)
    say(f"Main: Criando thread 2 após {delay:g} segundos")
    second = threading.Thread(target=execute)
    second.start()

    first.join()
    second.join()
    idents.extend(thread.ident for thread in (first, second) if thread.ident is not None)
    say("Main: Todas threads finalizadas")
    return idents


def timer_alarm(delay: float = DEFAULT_DELAY, output: TextIO | None = None) -> float:
    """Let a timer thread wake an alarm thread after delay seconds.

    Returns the seconds between starting the threads and the alarm ringing.
    """
    if delay < 0:
        raise ValueError("delay must not be negative")
    say = _printer(output)
    condition = threading.Condition()
    timer_done = False
    rang_at = 0.0

    def timer() -> None:
        nonlocal timer_done
        say(f"Timer started. Waiting for {delay:g} seconds...")
        time.sleep(delay)
        with condition:
            timer_done = True
            condition.notify()

    def alarm() -> None:
        nonlocal rang_at
        with condition:
            condition.wait_for(lambda: timer_done)
            rang_at = time.monotonic()
            say("Timer done! Alarm ringing!")

    started = time.monotonic()
    threads = [threading.Thread(target=timer), threading.Thread(target=alarm)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return rang_at - started


def main(argv: list[str] | None = None) -> int:
    """Run one of the condition variable demonstrations."""
    parser = argparse.ArgumentParser(description="Signal between threads with a condition.")
    parser.add_argument("demo", nargs="?", choices=["condition", "timer"], default="condition")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY)
    args = parser.parse_args(argv)
    try:
        if args.demo == "timer":
            timer_alarm(args.delay)
        else:
            wait_and_signal(args.delay)
    except ValueError as error:
        parser.error(str(error))
    return 0