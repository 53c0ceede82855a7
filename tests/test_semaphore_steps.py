import io
import threading

import pytest

from threadlab.semaphore_steps import CountingSemaphore, main, run_steps


def test_acquire_and_release_change_value():
    semaphore = CountingSemaphore(2)
    semaphore.acquire()
    assert semaphore.value == 1
    semaphore.acquire()
    assert semaphore.value == 0
    semaphore.release()
    assert semaphore.value == 1


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        CountingSemaphore(-1)


def test_acquire_blocks_until_release():
    semaphore = CountingSemaphore(0)
    waiter = threading.Thread(target=semaphore.acquire)
    waiter.start()
    waiter.join(0.2)
    assert waiter.is_alive()
    semaphore.release()
    waiter.join(2)
    assert not waiter.is_alive()
    assert semaphore.value == 0


def test_context_manager_restores_value():
    semaphore = CountingSemaphore(1)
    with semaphore:
        assert semaphore.value == 0
    assert semaphore.value == 1


def test_run_steps_output_and_final_value():
    out = io.StringIO()
    assert run_steps(out) == 2
    lines = out.getvalue().splitlines()
    assert lines[0] == "Semáforo inicializado (valor=2)"
    assert "[2] PASS (valor=0)" in lines
    assert "[3] sem_post (liberando 1 acesso)" in lines
    assert "[4] sem_post (liberando mais 1 acesso)" in lines
    assert lines[-2:] == ["Liberando todos os acessos...", "Semáforo destruído"]
    passes = [line for line in lines if "PASS" in line]
    assert passes == [
        "[1] PASS (valor=1)",
        "[2] PASS (valor=0)",
        "[3] PASS (valor=0)",
        "[4] PASS (valor=0)",
    ]


def test_main_prints_steps(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Semáforo inicializado (valor=2)\n")
    assert out.endswith("Semáforo destruído\n")