"""Background workers that run controller tasks off the GUI thread."""

from typing import Callable, List

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from core.utils import ErrorCallback, SuccessCallback


class TaskWorker(QThread):
    """Runs one callable in a background thread."""

    succeeded = pyqtSignal(object)   # TaskWorker
    failed = pyqtSignal(object)      # TaskWorker

    def __init__(
        self,
        task: Callable[[], object],
        on_success: SuccessCallback,
        on_error: ErrorCallback,
        parent=None,
    ):
        super().__init__(parent)
        self._task = task
        self.on_success = on_success
        self.on_error = on_error
        self.value = None
        self.exception = None

    def run(self):
        try:
            self.value = self._task()
        except Exception as e:
            self.exception = e
            self.failed.emit(self)
        else:
            self.succeeded.emit(self)


class QtTaskRunner(QObject):
    """Task runner for WorkflowController backed by QThread workers.

    Completion callbacks run on the thread that owns the runner (the GUI
    thread), so the controller is only ever mutated from there.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._workers: List[TaskWorker] = []

    def submit(self, task: Callable[[], object], on_success: SuccessCallback, on_error: ErrorCallback):
        worker = TaskWorker(task, on_success, on_error, parent=self)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(self._on_finished)
        self._workers.append(worker)
        worker.start()

    def _on_succeeded(self, worker: TaskWorker):
        worker.on_success(worker.value)

    def _on_failed(self, worker: TaskWorker):
        worker.on_error(worker.exception)

    def _on_finished(self):
        worker = self.sender()
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def pending_count(self) -> int:
        return len(self._workers)

    def wait_all(self, timeout_ms: int = 5000):
        """Block until outstanding workers finish. Used on shutdown."""
        for worker in list(self._workers):
            if worker.isRunning() and not worker.wait(timeout_ms):
                worker.terminate()
                worker.wait(2000)
