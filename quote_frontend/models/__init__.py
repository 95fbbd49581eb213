"""Pydantic domain models for the quote frontends."""

from .variant import FrontendVariant, MEMBERSHIP, ORDERS, VARIANTS  # re-export

__all__ = [
    "FrontendVariant",
    "MEMBERSHIP",
    "ORDERS",
    "VARIANTS",
]
