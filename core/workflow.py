"""Analysis workflow controller: selection, submission, and result state."""

import logging
from functools import partial
from typing import Callable, List, Optional

from core.config import AppConfig
from core.errors import ConfigurationError, TransportError, ValidationError, WorkflowError
from core.image_preprocessor import create_preview
from core.inference_client import InferenceClient
from core.presentation import present
from core.utils import (
    AnalysisResult,
    ErrorCallback,
    Selection,
    SuccessCallback,
    ViewModel,
    WorkflowState,
)

logger = logging.getLogger(__name__)

Listener = Callable[["WorkflowController"], None]


class ImmediateRunner:
    """Runs each task synchronously on the calling thread."""

    def submit(self, task: Callable[[], object], on_success: SuccessCallback, on_error: ErrorCallback):
        try:
            value = task()
        except Exception as e:
            on_error(e)
        else:
            on_success(value)


class WorkflowController:
    """State machine behind the eye analysis screen.

    Idle -> ImageSelected -> Analyzing -> ResultReady | Failed, with reset()
    returning to Idle from anywhere. The preview derivation and the inference
    request run through ``runner``; their completions are tagged with the
    generation current at submit time and dropped if a later select_image()
    or reset() has moved the generation on.

    All mutation happens on the thread that owns the controller. Runners must
    call back on that thread (QtTaskRunner does, through queued signals).
    """

    def __init__(
        self,
        config: AppConfig,
        client: Optional[InferenceClient] = None,
        runner=None,
    ):
        if config is None:
            raise ConfigurationError("An inference service configuration is required.")
        self._config = config
        self._client = client or InferenceClient(config)
        self._runner = runner or ImmediateRunner()
        self._listeners: List[Listener] = []

        self._generation = 0
        self._selection: Optional[Selection] = None
        self._preview: Optional[str] = None
        self._result: Optional[AnalysisResult] = None
        self._error: Optional[WorkflowError] = None
        self._loading = False

    # --- Observers ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(controller)`` after every state change."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        logger.debug("Workflow state -> %s (generation %d)", self.state.value, self._generation)
        for listener in list(self._listeners):
            listener(self)

    # --- Read-only state ---

    @property
    def state(self) -> WorkflowState:
        if self._loading:
            return WorkflowState.ANALYZING
        if self._error is not None:
            return WorkflowState.FAILED
        if self._result is not None:
            return WorkflowState.RESULT_READY
        if self._selection is not None:
            return WorkflowState.IMAGE_SELECTED
        return WorkflowState.IDLE

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def selection(self) -> Optional[Selection]:
        return self._selection

    @property
    def preview(self) -> Optional[str]:
        return self._preview

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self._result

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[WorkflowError]:
        return self._error

    @property
    def error_message(self) -> Optional[str]:
        """Human-readable text for the current error, if any."""
        if self._error is None:
            return None
        from i18n import t

        if isinstance(self._error, ValidationError):
            return str(self._error)
        return t(
            "errors.analysis_failed",
            reason=str(self._error),
            endpoint=self._config.predict_url,
        )

    @property
    def view_model(self) -> Optional[ViewModel]:
        if self._result is None:
            return None
        return present(self._result)

    # --- Transitions ---

    def select_image(self, selection: Selection) -> int:
        """Make ``selection`` the current image and start deriving its preview.

        Returns the new generation.
        """
        self._generation += 1
        self._selection = selection
        self._preview = None
        self._result = None
        self._error = None
        self._loading = False
        logger.info("Selected %r", selection)
        self._notify()

        generation = self._generation
        self._runner.submit(
            partial(create_preview, selection),
            partial(self._on_preview_ready, generation),
            partial(self._on_preview_failed, generation),
        )
        return generation

    def analyze(self) -> bool:
        """Upload the current selection. Returns False if no request was issued."""
        from i18n import t

        if self._selection is None:
            self._result = None
            self._error = ValidationError(t("errors.no_image_selected"))
            self._notify()
            return False
        if self._loading:
            logger.warning("analyze() called while a request is in flight; ignored")
            return False

        self._loading = True
        self._error = None
        self._result = None
        self._notify()

        generation = self._generation
        self._runner.submit(
            partial(self._client.predict, self._selection),
            partial(self._on_analysis_done, generation),
            partial(self._on_analysis_failed, generation),
        )
        return True

    def reset(self):
        """Return to Idle. Pending completions become stale."""
        self._generation += 1
        self._selection = None
        self._preview = None
        self._result = None
        self._error = None
        self._loading = False
        self._notify()

    def close(self):
        """Release the inference client's connection pool."""
        self._client.close()

    # --- Completions ---

    def _is_stale(self, generation: int, what: str) -> bool:
        if generation != self._generation:
            logger.debug(
                "Dropping stale %s (generation %d, current %d)",
                what, generation, self._generation,
            )
            return True
        return False

    def _on_preview_ready(self, generation: int, preview: str):
        if self._is_stale(generation, "preview"):
            return
        self._preview = preview
        self._notify()

    def _on_preview_failed(self, generation: int, error: Exception):
        if self._is_stale(generation, "preview failure"):
            return
        logger.warning("No preview for %s: %s", self._selection.filename, error)

    def _on_analysis_done(self, generation: int, result: AnalysisResult):
        if self._is_stale(generation, "analysis result"):
            return
        self._loading = False
        self._error = None
        self._result = result
        logger.info("Prediction: %s (%.3f)", result.disease_label.value, result.confidence)
        self._notify()

    def _on_analysis_failed(self, generation: int, error: Exception):
        if self._is_stale(generation, "analysis failure"):
            return
        if not isinstance(error, WorkflowError):
            logger.error("Unexpected analysis failure", exc_info=error)
            error = TransportError(str(error), cause=error)
        logger.error("Analysis failed against %s: %s", self._config.predict_url, error)
        self._loading = False
        self._result = None
        self._error = error
        self._notify()
