"""Quote computation shared by the membership and orders frontends.

Rules:
  - Amounts and interest rates arrive as text (form field / backend body)
    and are parsed with one policy: anything that is not a plain base-10
    integer becomes 0. Parse failures are never reported.
  - A non-positive amount produces an empty quote and no backend call.
  - total = amount * rate / 100, integer division truncating toward zero.
  - Backend failures collapse into INTEREST_UNAVAILABLE.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Protocol

from quote_frontend.services.http_client import HttpError

logger = logging.getLogger("frontend.quote")

INTEREST_UNAVAILABLE = "Could not get interest. Sorry!"
QUOTE_TEMPLATE = "With rate {rate}% you will pay  {total} extra interest"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class InterestSource(Protocol):
    def fetch_interest_rate(self) -> str: ...


def parse_int_or_zero(raw: Optional[str]) -> int:
    if raw is None or not _INT_PATTERN.fullmatch(raw):
        return 0
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


def parse_amount(raw_form_value: Optional[str]) -> int:
    """Parse the submitted amount; may be negative, never raises."""
    return parse_int_or_zero(raw_form_value)


def parse_interest_rate(body: str) -> int:
    return parse_int_or_zero(body)


def _truncating_div(numerator: int, denominator: int) -> int:
    q = abs(numerator) // abs(denominator)
    return q if (numerator >= 0) == (denominator > 0) else -q


def compute_quote(amount: int, interest_rate: int) -> str:
    if amount <= 0:
        return ""
    total = _truncating_div(amount * interest_rate, 100)
    return QUOTE_TEMPLATE.format(rate=interest_rate, total=total)


class QuoteService:
    """Combines a parsed amount with the backend's current interest rate."""

    def __init__(self, backend: InterestSource):
        self._backend = backend

    def quote_for(self, amount: int) -> str:
        if amount <= 0:
            return ""
        try:
            body = self._backend.fetch_interest_rate()
        except HttpError as e:
            logger.warning("Interest error : %s", e)
            return INTEREST_UNAVAILABLE
        logger.info("Found interest rate %s", body)
        return compute_quote(amount, parse_interest_rate(body))


__all__ = [
    "INTEREST_UNAVAILABLE",
    "QuoteService",
    "compute_quote",
    "parse_amount",
    "parse_int_or_zero",
    "parse_interest_rate",
]
