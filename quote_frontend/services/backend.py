from __future__ import annotations

"""Interest backend client.

Two read-only endpoints on the same host:
    - GET /api/v1/interest -> plain-text integer percentage
    - GET /version         -> plain-text version string

Clients are stateless; one instance is built per process from Settings and
shared by all requests.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import urlunsplit

from quote_frontend.core.config import Settings
from quote_frontend.services.http_client import HttpError, get_text

logger = logging.getLogger("frontend.backend")

INTEREST_PATH = "api/v1/interest"
VERSION_PATH = "version"
UNKNOWN_VERSION = "unknown"


class InterestBackend(ABC):
    @abstractmethod
    def fetch_interest_rate(self) -> str:
        """Return the raw interest body; raise HttpError on any failure."""
        raise NotImplementedError

    @abstractmethod
    def fetch_version(self) -> str:
        raise NotImplementedError

    def find_backend_version(self) -> str:
        """Backend version for display; never raises."""
        try:
            return self.fetch_version()
        except HttpError as e:
            logger.warning("Interest error : %s", e)
            return UNKNOWN_VERSION


class HttpInterestBackend(InterestBackend):
    def __init__(self, host: str, port: int, timeout: Optional[float] = None):
        self.host = host
        self.port = port
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpInterestBackend":
        return cls(
            settings.backend_host,
            settings.backend_port,
            timeout=settings.backend_timeout_seconds,
        )

    def url_for(self, path: str) -> str:
        return urlunsplit(("http", f"{self.host}:{self.port}", "/" + path, "", ""))

    def _call(self, path: str) -> str:
        return get_text(self.url_for(path), timeout=self.timeout)

    def fetch_interest_rate(self) -> str:
        return self._call(INTEREST_PATH)

    def fetch_version(self) -> str:
        return self._call(VERSION_PATH)


__all__ = [
    "InterestBackend",
    "HttpInterestBackend",
    "UNKNOWN_VERSION",
]
