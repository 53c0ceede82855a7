import io

import pytest

from threadlab import hello


def test_greet_pair_counts():
    out = io.StringIO()
    hello.greet_pair(3, 2, 4, 0, out)
    lines = out.getvalue().splitlines()
    assert [line for line in lines if line.startswith("Hello1 ")] == ["Hello1 0", "Hello1 1", "Hello1 2"]
    assert [line for line in lines if line.startswith("Hello2 ")] == ["Hello2 0", "Hello2 1"]
    assert [line for line in lines if line.startswith("Principal ")] == [
        f"Principal {i}" for i in range(4)
    ]
    assert len(lines) == 9


def test_greet_pair_rejects_negative():
    with pytest.raises(ValueError):
        hello.greet_pair(-1, 2, 3, 0, io.StringIO())


def test_run_hello_threads_output():
    out = io.StringIO()
    hello.run_hello_threads(5, 0, None, out)
    lines = out.getvalue().splitlines()
    assert lines[-1] == "Programa encerrado"
    assert "Thread principal criou todas as threads" in lines
    joined = [line for line in lines if line.endswith(" finalizada")]
    assert joined == [f"Thread {rank} finalizada" for rank in range(5)]
    started = sorted(line for line in lines if "iniciada" in line)
    assert started == sorted(f"Thread {rank} iniciada (de 5)" for rank in range(5))


def test_limit_bounds_concurrency():
    out = io.StringIO()
    peak = hello.run_hello_threads(6, 0.02, 2, out)
    assert 1 <= peak <= 2


def test_limit_of_one_serialises():
    peak = hello.run_hello_threads(4, 0.01, 1, io.StringIO())
    assert peak == 1


def test_callable_work_receives_each_rank():
    ranks = []

    def work(rank):
        ranks.append(rank)
        return 0

    out = io.StringIO()
    peak = hello.run_hello_threads(5, work, 3, out)
    assert 1 <= peak <= 3
    assert sorted(ranks) == list(range(5))
    assert out.getvalue().splitlines()[-1] == "Programa encerrado"


def test_zero_threads():
    out = io.StringIO()
    assert hello.run_hello_threads(0, 0, None, out) == 0
    assert out.getvalue().splitlines() == [
        "Thread principal criou todas as threads",
        "Programa encerrado",
    ]


@pytest.mark.parametrize("count, limit", [(-1, None), (3, 0)])
def test_invalid_arguments(count, limit):
    with pytest.raises(ValueError):
        hello.run_hello_threads(count, 0, limit, io.StringIO())


def test_main(capsys):
    assert hello.main(["--count", "3", "--work", "0", "--limit", "2"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Programa encerrado"