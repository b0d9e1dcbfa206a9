"""Threading building blocks: a worker thread base, a task-queue thread, a timer and observers."""

__version__ = "0.1.0"
__all__ = ["observer", "queue_thread", "threadbase", "timer"]