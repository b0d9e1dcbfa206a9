import threading
import time

import pytest

from workerkit.threadbase import ThreadBase


class Spinner(ThreadBase):
    def __init__(self):
        super().__init__()
        self.runs = 0
        self.ticks = 0
        self.ticked = threading.Event()

    def run(self):
        self.runs += 1
        while self.running:
            self.ticks += 1
            self.ticked.set()
            time.sleep(0.005)


@pytest.fixture
def spinner():
    worker = Spinner()
    yield worker
    ThreadBase.stop(worker)


def _assert_idle(worker):
    ticks = worker.ticks
    time.sleep(0.05)
    assert worker.ticks == ticks
    assert worker.running is False


def test_cannot_instantiate_abstract_base():
    with pytest.raises(TypeError):
        ThreadBase()


def test_stop_without_start(spinner):
    assert spinner.running is False
    ThreadBase.stop(spinner)
    assert spinner.running is False
    assert spinner.runs == 0


@pytest.mark.parametrize("starts", [1, 2])
def test_start_runs_one_worker(spinner, starts):
    for _ in range(starts):
        ThreadBase.start(spinner)
    assert spinner.running is True
    assert spinner.ticked.wait(2.0)
    ThreadBase.stop(spinner)
    _assert_idle(spinner)
    assert spinner.runs == 1


def test_restart_after_stop(spinner):
    for _ in range(2):
        ThreadBase.start(spinner)
        ThreadBase.stop(spinner)
    assert spinner.runs == 2
    assert spinner.running is False


def test_context_manager_starts_and_stops():
    with Spinner() as worker:
        assert worker.running is True
        assert worker.ticked.wait(2.0)
    _assert_idle(worker)
    ThreadBase.stop(worker)
    assert worker.running is False
    assert worker.runs == 1