"""Tests for workers.task_worker module."""

import threading
import time

import pytest

from core.inference_client import InferenceClient
from core.utils import WorkflowState
from core.workflow import WorkflowController
from workers.task_worker import QtTaskRunner


@pytest.fixture
def runner(qapp):
    runner = QtTaskRunner()
    yield runner
    runner.wait_all()


@pytest.fixture
def controller(config, fake_session, runner):
    return WorkflowController(config, client=InferenceClient(config, session=fake_session), runner=runner)


@pytest.fixture
def listener_threads(controller):
    """Record, per notification, whether it ran on the main thread."""
    calls = []
    controller.subscribe(lambda c: calls.append(threading.current_thread() is threading.main_thread()))
    return calls


def _drain(qapp, runner, timeout=5.0):
    deadline = time.monotonic() + timeout
    while runner.pending_count():
        assert time.monotonic() < deadline, "workers did not finish in time"
        qapp.processEvents()
        time.sleep(0.01)
    qapp.processEvents()


class TestQtTaskRunner:
    def test_completions_delivered_on_main_thread(self, qapp, runner, controller, listener_threads, sample_selection):
        controller.select_image(sample_selection)
        _drain(qapp, runner)
        assert controller.preview is not None

        assert controller.analyze() is True
        _drain(qapp, runner)

        assert controller.state == WorkflowState.RESULT_READY
        assert controller.view_model.label == "Normal"
        # select, preview, analyze, result
        assert len(listener_threads) == 4
        assert all(listener_threads)

    def test_reset_before_delivery_discards_result(
        self, qapp, runner, controller, listener_threads, sample_selection, fake_session
    ):
        controller.select_image(sample_selection)
        _drain(qapp, runner)
        controller.analyze()
        controller.reset()
        _drain(qapp, runner)

        fake_session.post.assert_called_once()
        assert controller.state == WorkflowState.IDLE
        assert controller.result is None
        assert all(listener_threads)

    def test_failure_delivered_on_main_thread(
        self, qapp, runner, controller, listener_threads, sample_selection, fake_session, response_factory
    ):
        fake_session.post.return_value = response_factory(500, reason="Internal Server Error")
        controller.select_image(sample_selection)
        controller.analyze()
        _drain(qapp, runner)

        assert controller.state == WorkflowState.FAILED
        assert "500" in controller.error_message
        assert all(listener_threads)

    def test_pending_count_tracks_workers(self, qapp, runner):
        started = threading.Event()
        release = threading.Event()
        values = []

        def task():
            started.set()
            release.wait(5)
            return 42

        runner.submit(task, values.append, pytest.fail)
        assert started.wait(5)
        assert runner.pending_count() == 1
        release.set()
        _drain(qapp, runner)
        assert values == [42]
