"""Tests for ui.eye_widget module."""

from unittest.mock import MagicMock

import pytest

from core.inference_client import InferenceClient
from core.utils import WorkflowState
from core.workflow import WorkflowController
from ui.eye_widget import EyeWidget
from workers.task_worker import QtTaskRunner


@pytest.fixture
def controller(config, fake_session, deferred_runner):
    return WorkflowController(config, client=InferenceClient(config, session=fake_session), runner=deferred_runner)


@pytest.fixture
def widget(qapp, controller):
    widget = EyeWidget(controller, MagicMock(spec=QtTaskRunner))
    yield widget
    widget.deleteLater()


class TestResetButton:
    def test_hidden_when_idle(self, widget):
        assert widget._reset_btn.isHidden()

    def test_visible_without_preview(self, widget, controller, broken_selection, deferred_runner):
        controller.select_image(broken_selection)
        deferred_runner.run_all()
        assert controller.preview is None
        assert not widget._reset_btn.isHidden()

    def test_hidden_again_after_reset(self, widget, controller, sample_selection):
        controller.select_image(sample_selection)
        controller.reset()
        assert widget._reset_btn.isHidden()


class TestResultRendering:
    def test_result_drawn_once_per_change(self, widget, controller, sample_selection, deferred_runner):
        card = widget._result_card
        card.show_result = MagicMock(wraps=card.show_result)
        card.reset = MagicMock(wraps=card.reset)

        controller.select_image(sample_selection)
        controller.analyze()
        deferred_runner.run_all()
        assert controller.state == WorkflowState.RESULT_READY
        card.show_result.assert_called_once_with(controller.view_model)

        # A notification with an unchanged result leaves the card alone
        widget._render(controller)
        card.show_result.assert_called_once()

        controller.reset()
        card.reset.assert_called_once()
        card.show_result.assert_called_once()


class TestCleanup:
    def test_closes_client(self, widget, fake_session):
        widget.cleanup()
        widget._runner.wait_all.assert_called_once()
        fake_session.close.assert_called_once()
