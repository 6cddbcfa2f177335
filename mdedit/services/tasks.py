from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

from mdedit.domain.interfaces import ITaskRunner

log = logging.getLogger(__name__)


class _TaskSignals(QObject):
    """Signals emitted by background export tasks."""

    succeeded = pyqtSignal(object)
    failed = pyqtSignal(object)


class _Task(QRunnable):
    def __init__(self, fn: Callable[[], object]) -> None:
        super().__init__()
        self.fn = fn
        self.signals = _TaskSignals()

    def run(self) -> None:
        try:
            result = self.fn()
        except Exception as e:
            self.signals.failed.emit(e)
        else:
            self.signals.succeeded.emit(result)


class QtTaskRunner(ITaskRunner):
    """
    Runs callables on a QThreadPool. Callbacks are delivered on the thread that
    called submit() (the UI thread), via queued signal connections.
    No cancellation and no timeout: a task runs to completion or fails.
    """

    def __init__(self, pool: QThreadPool | None = None) -> None:
        self._pool = pool or QThreadPool.globalInstance()
        self._in_flight: set[_Task] = set()

    def submit(
        self,
        fn: Callable[[], object],
        on_success: Callable[[object], None],
        on_failure: Callable[[Exception], None],
    ) -> None:
        task = _Task(fn)
        task.setAutoDelete(False)
        self._in_flight.add(task)

        def _done_ok(result: object) -> None:
            self._in_flight.discard(task)
            on_success(result)

        def _done_err(error: object) -> None:
            self._in_flight.discard(task)
            log.debug("Background task failed: %s", error)
            on_failure(error if isinstance(error, Exception) else RuntimeError(str(error)))

        task.signals.succeeded.connect(_done_ok)
        task.signals.failed.connect(_done_err)
        self._pool.start(task)

    @property
    def pending(self) -> int:
        return len(self._in_flight)

    def wait(self, msecs: int = -1) -> bool:
        """Block until the pool is idle (used on shutdown and in tests)."""
        return self._pool.waitForDone(msecs)
