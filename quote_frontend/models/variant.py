from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict


class FrontendVariant(BaseModel):
    """One of the two frontends sharing this code base.

    `form_field` is the exact name of the posted form field holding the amount.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    form_field: str
    title: str
    amount_label: str


MEMBERSHIP = FrontendVariant(
    name="membership",
    form_field="Membership",
    title="Membership",
    amount_label="Membership amount",
)

ORDERS = FrontendVariant(
    name="orders",
    form_field="order",
    title="Orders",
    amount_label="Order amount",
)

VARIANTS: Dict[str, FrontendVariant] = {v.name: v for v in (MEMBERSHIP, ORDERS)}
