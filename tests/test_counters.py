import threading

import pytest

from threadlab.counters import AtomicCounter, Strategy, count_visitors, main


@pytest.mark.parametrize("strategy", [Strategy.MUTEX, Strategy.SEMAPHORE, Strategy.ATOMIC])
def test_synchronized_strategies_count_every_visitor(strategy):
    assert count_visitors(strategy, 4, 5000) == 4 * 5000


def test_strategy_accepts_its_value():
    assert count_visitors("mutex", 2, 100) == 2 * 100


def test_race_never_exceeds_total():
    total = count_visitors(Strategy.RACE, 4, 20000)
    assert 0 < total <= 4 * 20000


def test_atomic_increment_returns_distinct_previous_values():
    counter = AtomicCounter()
    seen = []
    seen_lock = threading.Lock()

    def work():
        local = [counter.increment() for _ in range(1000)]
        with seen_lock:
            seen.extend(local)

    workers = [threading.Thread(target=work) for _ in range(4)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    assert sorted(seen) == list(range(4 * 1000))
    assert counter.value == 4 * 1000


def test_atomic_increment_by_amount():
    counter = AtomicCounter(10)
    assert counter.increment(5) == 10
    assert counter.value == 10 + 5


def test_invalid_arguments():
    with pytest.raises(ValueError):
        count_visitors(Strategy.MUTEX, 0, 10)
    with pytest.raises(ValueError):
        count_visitors(Strategy.MUTEX, 2, -1)
    with pytest.raises(ValueError):
        count_visitors("spinlock", 2, 10)


def test_main_prints_total(capsys):
    assert main(["--strategy", "atomic", "--threads", "2", "--iterations", "10"]) == 0
    assert capsys.readouterr().out == f"Público final: {2 * 10} (esperado: {2 * 10})\n"