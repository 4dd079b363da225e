"""Startup configuration for the inference backend."""

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.errors import ConfigurationError

API_URL_ENV = "EYESCAN_API_URL"
API_TIMEOUT_ENV = "EYESCAN_API_TIMEOUT"
DEFAULT_TIMEOUT = 60.0
PREDICT_PATH = "/predict"


@dataclass(frozen=True)
class AppConfig:
    """Where and how to reach the inference service."""
    api_url: str
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        url = (self.api_url or "").strip().rstrip("/")
        if not url:
            raise ConfigurationError(
                f"{API_URL_ENV} is not defined. Set it to the inference service base URL."
            )
        if not url.startswith(("http://", "https://")):
            raise ConfigurationError(f"{API_URL_ENV} must be an http(s) URL, got {url!r}")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigurationError(
                f"{API_TIMEOUT_ENV} must be a positive number of seconds, got {self.timeout}"
            )
        object.__setattr__(self, "api_url", url)

    @property
    def predict_url(self) -> str:
        return f"{self.api_url}{PREDICT_PATH}"


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Read the configuration from the environment.

    There is no default endpoint: a missing EYESCAN_API_URL raises
    ConfigurationError instead of falling back to localhost.
    """
    env = os.environ if environ is None else environ

    raw_timeout = env.get(API_TIMEOUT_ENV, "").strip()
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"{API_TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}"
            ) from None

    return AppConfig(api_url=env.get(API_URL_ENV, ""), timeout=timeout)
