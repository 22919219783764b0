"""Raw opportunity representation before normalization."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawOpportunity(BaseModel):
    """
    Flexible raw record from a source connector.
    Holds one item of the listing response exactly as decoded from JSON.
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] = Field(default_factory=dict)
