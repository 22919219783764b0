"""Opportunity models mirroring the Cantina listing payload.

Attribute names are snake_case; the camelCase wire names are aliases.
All models are frozen once validated.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class Reward(BaseModel):
    """Maximum payout offered for one severity level."""

    model_config = _MODEL_CONFIG

    severity: str
    max_reward: Optional[str] = Field(
        default=None,
        alias="maxReward",
        description="Free-text amount, e.g. '50000' or '0.00'",
    )


class AssetGroup(BaseModel):
    """One scope partition of an opportunity with its own reward schedule."""

    model_config = _MODEL_CONFIG

    out_of_scope: bool = Field(..., alias="outOfScope")
    rewards: list[Reward] = Field(default_factory=list)


class Timeframe(BaseModel):
    """Active window of an opportunity; RFC3339 strings as sent by the API."""

    model_config = _MODEL_CONFIG

    start: str
    end: Optional[str] = Field(default=None, description="None while ongoing")


class Opportunity(BaseModel):
    """A single bounty or contest listing."""

    model_config = _MODEL_CONFIG

    id: str
    name: str
    kind: str = Field(..., description="Free text, e.g. 'public_bounty'")
    timeframe: Timeframe
    status: str
    currency_code: str = Field(..., alias="currencyCode")
    total_reward_pot: str = Field(..., alias="totalRewardPot")
    total_findings: int = Field(..., alias="totalFindings", ge=0)
    asset_groups: list[AssetGroup] = Field(..., alias="assetGroups")
