from __future__ import annotations

"""Minimal plain-text HTTP GET used to talk to the interest backend.

Uses stdlib urllib. One attempt per call: no retry and no backoff. Any
outcome other than a 200 response with a fully read body is reported as a
single HttpError carrying the URL, so callers never branch on the cause.
"""
import http.client
import logging
import urllib.error
import urllib.request
from typing import Any, Dict, Optional

logger = logging.getLogger("frontend.http")


class HttpError(Exception):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not access {url}: {reason}")
        self.url = url
        self.reason = reason


def get_text(url: str, *, timeout: Optional[float] = None) -> str:
    """GET `url` and return the decoded body.

    timeout=None leaves the socket blocking with no deadline.
    """
    kwargs: Dict[str, Any] = {}
    if timeout is not None:
        kwargs["timeout"] = timeout
    try:
        with urllib.request.urlopen(url, **kwargs) as resp:  # nosec B310
            if resp.status != 200:
                logger.warning("Non-OK HTTP status from %s: %s", url, resp.status)
                raise HttpError(url, f"HTTP {resp.status}")
            logger.info("Response status of %s: %s %s", url, resp.status, resp.reason)
            data = resp.read()
    except urllib.error.HTTPError as e:
        logger.warning("Non-OK HTTP status from %s: %s", url, e.code)
        raise HttpError(url, f"HTTP {e.code}") from e
    except (OSError, http.client.HTTPException, ValueError) as e:
        # URLError, refused connections, timeouts and truncated bodies land here
        logger.warning("Could not access %s, got %s", url, e)
        raise HttpError(url, str(e)) from e
    return data.decode("utf-8", errors="replace")
