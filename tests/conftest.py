"""Pytest fixtures for cantina-finder tests."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable
from unittest.mock import patch

import pytest

from cantina_finder.models.opportunity import Opportunity

FIXTURES = Path(__file__).parent / "fixtures"


def make_item(**overrides: Any) -> dict[str, Any]:
    """Listing item in wire (camelCase) shape with sensible defaults."""
    item: dict[str, Any] = {
        "id": "opp-1",
        "name": "Example Protocol",
        "kind": "public_bounty",
        "timeframe": {"start": "2026-01-01T00:00:00Z"},
        "status": "live",
        "currencyCode": "USDC",
        "totalRewardPot": "50000",
        "totalFindings": 3,
        "assetGroups": [],
    }
    item.update(overrides)
    return item


@pytest.fixture
def fixed_now() -> datetime:
    """Reference instant used in place of the wall clock."""
    return datetime(2026, 10, 19, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_opportunity() -> Callable[..., Opportunity]:
    """Factory building validated Opportunity models from wire-shaped overrides."""

    def _make(**overrides: Any) -> Opportunity:
        return Opportunity.model_validate(make_item(**overrides))

    return _make


@pytest.fixture
def listing_payload() -> dict[str, Any]:
    """Synthetic three-item listing (two bounties, one contest)."""
    return json.loads((FIXTURES / "cantina_listing.json").read_text(encoding="utf-8"))


@pytest.fixture
def expected_report() -> str:
    """Exact report text for listing_payload at fixed_now."""
    return (FIXTURES / "expected_report.txt").read_text(encoding="utf-8")


@pytest.fixture
def cantina_connector_patched(listing_payload: dict[str, Any]):
    """Context manager that patches CantinaConnector._fetch_json with the sample listing."""
    return patch(
        "cantina_finder.connectors.cantina.connector.CantinaConnector._fetch_json",
        return_value=listing_payload,
    )
