"""Unit tests for BaseConnector interface."""

from cantina_finder.connectors.base import BaseConnector
from cantina_finder.models.opportunity import Opportunity
from cantina_finder.models.raw import RawOpportunity


class ConcreteConnector(BaseConnector):
    """Concrete implementation for testing base behavior."""

    source_id = "test"

    def search(self, filters=None):
        return [
            RawOpportunity(data={"id": "1", "name": "A"}),
            RawOpportunity(data={"id": "2", "name": "B"}),
        ]

    def normalize(self, raw: RawOpportunity) -> Opportunity:
        return Opportunity(
            id=raw.data["id"],
            name=raw.data["name"],
            kind="public_bounty",
            timeframe={"start": "2026-01-01T00:00:00Z"},
            status="live",
            currency_code="USDC",
            total_reward_pot="0",
            total_findings=0,
            asset_groups=[],
        )


class TestBaseConnector:
    """Tests for BaseConnector default implementations."""

    def test_fetch_all_uses_search_and_normalize(self) -> None:
        """fetch_all calls search then normalizes each result."""
        connector = ConcreteConnector()
        results = connector.fetch_all()
        assert len(results) == 2
        assert results[0].name == "A"
        assert results[1].name == "B"
        assert results[0].id == "1"
