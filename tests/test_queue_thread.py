import threading

import pytest

from workerkit.queue_thread import QueueThread


@pytest.fixture
def queue():
    with QueueThread() as worker:
        yield worker


def _run_and_wait(queue, *tasks):
    """Queue the tasks followed by a marker and wait until the marker runs."""
    done = threading.Event()
    for task in [*tasks, done.set]:
        queue.put(task)
    return done.wait(2.0)


def test_running_after_construction(queue):
    assert queue.running is True


def test_tasks_run_in_order(queue):
    results = []
    tasks = [lambda value=value: results.append(value) for value in range(20)]
    assert _run_and_wait(queue, *tasks)
    assert queue.pending == 0
    assert results == list(range(20))


def test_tasks_run_on_worker_thread(queue):
    seen = []
    record = lambda: seen.append(threading.get_ident())  # noqa: E731
    assert _run_and_wait(queue, record, record)
    assert queue.pending == 0
    assert len(seen) == 2
    assert seen[0] == seen[1]
    assert threading.get_ident() not in seen


def test_task_can_queue_another_task(queue):
    done = threading.Event()
    queue.put(lambda: queue.put(done.set))
    assert done.wait(2.0)


def test_put_rejects_non_callable(queue):
    with pytest.raises(TypeError):
        queue.put(42)
    assert queue.pending == 0


def test_stop_ends_worker():
    worker = QueueThread()
    worker.stop()
    assert worker.running is False
    ran = threading.Event()
    worker.put(ran.set)
    assert ran.wait(0.1) is False
    assert worker.pending == 1


def test_context_manager_stops_on_exit():
    with QueueThread() as worker:
        assert _run_and_wait(worker)
    assert worker.running is False