"""HTTP client for the remote eye disease classification service."""

import logging
from numbers import Real
from typing import Optional

import requests

from core.config import AppConfig
from core.errors import ResponseFormatError, ServiceError, TransportError, UnknownDiseaseError
from core.utils import AnalysisResult, DiseaseLabel, Selection

logger = logging.getLogger(__name__)


def parse_prediction(payload) -> AnalysisResult:
    """Normalize a decoded response body into an AnalysisResult.

    Expected shape:
        {"status": "success", "result": {"disease": "<label>", "confidence": <0-100>}}
    """
    if not isinstance(payload, dict) or payload.get("status") != "success":
        raise ResponseFormatError("Invalid response format")
    result = payload.get("result")
    if not isinstance(result, dict):
        raise ResponseFormatError("Invalid response format")

    disease = result.get("disease")
    confidence = result.get("confidence")
    if not isinstance(disease, str):
        raise ResponseFormatError("Invalid response format: 'disease' must be a string")
    if isinstance(confidence, bool) or not isinstance(confidence, Real):
        raise ResponseFormatError("Invalid response format: 'confidence' must be a number")
    if not 0 <= confidence <= 100:
        raise ResponseFormatError(
            f"Invalid response format: confidence {confidence} is outside 0-100"
        )

    try:
        label = DiseaseLabel(disease)
    except ValueError:
        raise UnknownDiseaseError(disease) from None

    return AnalysisResult(disease_label=label, confidence=float(confidence) / 100)


class InferenceClient:
    """Uploads one image per call and returns the normalized prediction."""

    def __init__(self, config: AppConfig, session: Optional[requests.Session] = None):
        self._endpoint = config.predict_url
        self._timeout = config.timeout
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def predict(self, selection: Selection) -> AnalysisResult:
        """POST the selection as multipart field ``file`` and parse the answer."""
        files = {"file": (selection.filename, selection.data, selection.mime_type)}
        logger.info("Uploading %s to %s", selection.filename, self._endpoint)

        try:
            response = self._session.post(self._endpoint, files=files, timeout=self._timeout)
        except requests.RequestException as e:
            raise TransportError(str(e), cause=e) from e

        logger.info("Inference service answered %s", response.status_code)
        if not 200 <= response.status_code < 300:
            raise ServiceError(response.status_code, response.reason or "")

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(f"Malformed response body: {e}", cause=e) from e

        return parse_prediction(payload)

    def close(self):
        self._session.close()
