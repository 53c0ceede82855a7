import io
import threading
from datetime import datetime

import pytest

from threadlab import reminders
from threadlab.reminders import Medication


def _fixed_clock():
    return datetime(2024, 1, 1, 8, 5, 9)


def test_remind_lines_and_sleeps():
    out = io.StringIO()
    sleeps = []
    med = Medication("Dorflex", 6, 3)
    lines = reminders.remind(med, sleeps.append, _fixed_clock, out)
    assert lines == [
        "[08:05:09] Tome Dorflex (1/3)",
        "[08:05:09] Tome Dorflex (2/3)",
        "[08:05:09] Tome Dorflex (3/3)",
    ]
    assert sleeps == [6, 6, 6]
    assert out.getvalue().splitlines()[-1] == "--> Dorflex finalizado"


def test_consume_counts_down():
    out = io.StringIO()
    sleeps = []
    lines = reminders.consume(Medication("PILA", 24, 3), sleeps.append, out)
    assert lines == [
        "Tomou o remédio PILA | Faltam 2 pílulas.",
        "Tomou o remédio PILA | Faltam 1 pílulas.",
        "Tomou o remédio PILA | Acabou fi!",
    ]
    assert sleeps == [24, 24, 24]
    assert out.getvalue().splitlines() == lines


def test_consume_nothing_left():
    sleeps = []
    assert reminders.consume(Medication("Dorflex", 6, 0), sleeps.append, io.StringIO()) == []
    assert sleeps == []


@pytest.mark.parametrize("interval, total", [(-1, 3), (6, -1)])
def test_medication_rejects_negative(interval, total):
    with pytest.raises(ValueError):
        Medication("Dorflex", interval, total)


def test_run_reminders_defaults():
    out = io.StringIO()
    lock = threading.Lock()
    sleeps = []

    def sleep(seconds):
        with lock:
            sleeps.append(seconds)

    results = reminders.run_reminders(reminders.DEFAULT_MEDICATIONS, sleep, _fixed_clock, out)
    assert [len(lines) for lines in results] == [m.total for m in reminders.DEFAULT_MEDICATIONS]
    assert len(sleeps) == sum(m.total for m in reminders.DEFAULT_MEDICATIONS)
    printed = out.getvalue().splitlines()
    assert printed[0] == "Sistema de Lembretes Iniciado"
    assert printed[-1] == "Todos os lembretes concluídos!"
    for med in reminders.DEFAULT_MEDICATIONS:
        assert f"--> {med.name} finalizado" in printed


def test_run_reminders_each_medication_in_order():
    out = io.StringIO()
    meds = [Medication("Cataflan", 12, 2), Medication("Vitamina B12", 24, 1)]
    results = reminders.run_reminders(meds, lambda s: None, _fixed_clock, out)
    assert results[1] == ["[08:05:09] Tome Vitamina B12 (1/1)"]
    assert all("Cataflan" in line for line in results[0])


def test_run_reminders_empty():
    out = io.StringIO()
    assert reminders.run_reminders([], lambda s: None, _fixed_clock, out) == []
    assert out.getvalue().splitlines()[-1] == "Todos os lembretes concluídos!"