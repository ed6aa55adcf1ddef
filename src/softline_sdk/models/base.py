"""Base model for Softline SDK."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SoftlineModel(BaseModel):
    """Base model for gateway payloads.

    Payloads are opaque to the SDK: fields it does not know about are kept
    and forwarded unchanged.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )
