# workerkit

A few small building blocks for threaded programs:

- `workerkit.threadbase.ThreadBase`: owns one worker thread that can be started and stopped. Subclass it and put the work in `run()`.
- `workerkit.queue_thread.QueueThread`: a worker thread that runs queued callables one at a time, first in first out. It starts as soon as it is created.
- `workerkit.timer.Timer`: calls `on_timeout()` on its own thread when an armed timer expires, once or at a fixed interval.
- `workerkit.observer.Observer` and `workerkit.observer.Subject`: a plain observer pattern.

## Installation

```
pip install workerkit
```

Python 3.10 or later is needed. The package has no runtime dependencies.

## Usage

### Your own worker thread

```python
from workerkit.threadbase import ThreadBase

class Poller(ThreadBase):
    def run(self):
        while self.running:
            ...  # do one unit of work

poller = Poller()
poller.start()   # does nothing if the thread is already running
poller.stop()    # clears the running flag and waits for the thread to exit
```

`run()` is expected to return once `running` turns false. `stop()` waits for the
thread unless it is called from the worker thread itself. A `ThreadBase` is also a
context manager: entering it calls `start()`, leaving it calls `stop()`. Worker
threads are daemon threads and carry the class name as their thread name.

### Running tasks on a background thread

```python
import threading
from workerkit.queue_thread import QueueThread

done = threading.Event()
worker = QueueThread()          # the worker is already running
worker.put(lambda: print("first"))
worker.put(lambda: print("second"))
worker.put(done.set)
done.wait()
worker.stop()
```

`put()` takes a callable with no arguments and raises `TypeError` for anything
that is not callable. Tasks run one after another in the order they were put.
`pending` tells how many tasks are still waiting.

`stop()` does not drain the queue: it wakes the worker, lets at most the task it
is picking up run, and waits for the thread to exit. Tasks still queued stay there
and run if `start()` is called again. Wait for your own signal, as above, when
every task must have run.

### A timer

```python
import time
from workerkit.timer import Timer

class Heartbeat(Timer):
    def on_timeout(self):
        print("tick")

timer = Heartbeat()
timer.set_timer(500, 1000)   # first tick after 500 ms, then every 1000 ms
timer.start()
time.sleep(3)
print(timer.get_timer())     # milliseconds until the next tick
timer.stop()
```

- Times are in milliseconds, measured on a monotonic clock. Negative values raise `ValueError`.
- An interval of `0` (the default) gives a one-shot timer; a delay of `0` disarms the timer.
- `set_timer()` can be called before or after `start()`, and again to re-arm.
- `get_timer()` returns the whole milliseconds until the next expiry, or `0` when none is due.
- Expirations that pile up while `on_timeout()` is busy, or before `start()`, are reported by a single call.
- `stop()` disarms the timer and stops the thread; arm it again with `set_timer()` before starting it anew.

### Observers

```python
from workerkit.observer import Observer, Subject

class Printer(Observer):
    def update(self, params):
        print("got", params)

subject = Subject()
printer = Printer()
subject.attach(printer)
subject.notify({"level": 3})   # params defaults to None
subject.detach(printer)
print(len(subject))            # number of attachments: 0
```

Observers are notified in the order they were attached; attaching one twice makes
it notified twice. `detach()` removes every attachment of that observer and ignores
observers that are not attached. Observers may attach or detach during a
notification; the change takes effect from the next `notify()`.

## What it does not do

- There is no thread pool: each `QueueThread` and `Timer` runs on exactly one thread.
- Tasks and `on_timeout()` are not guarded: an exception raised by one ends the
  worker thread and is reported by Python's thread exception hook.
- Tasks return nothing to the caller; there are no futures or results.

## Running the tests

```
pip install -e ".[test]"
pytest
```