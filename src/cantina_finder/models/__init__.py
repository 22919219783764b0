"""Data models for marketplace opportunities."""

from cantina_finder.models.opportunity import (
    AssetGroup,
    Opportunity,
    Reward,
    Timeframe,
)
from cantina_finder.models.raw import RawOpportunity

__all__ = [
    "AssetGroup",
    "Opportunity",
    "RawOpportunity",
    "Reward",
    "Timeframe",
]
