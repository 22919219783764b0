"""Abstract base class for source connectors."""

from abc import ABC, abstractmethod
from typing import Optional

from cantina_finder.models.opportunity import Opportunity
from cantina_finder.models.raw import RawOpportunity


class BaseConnector(ABC):
    """
    Standard interface for opportunity sources.
    Connectors fetch raw records and normalize them into Opportunity models.
    """

    source_id: str = ""

    @abstractmethod
    def search(self, filters: Optional[dict] = None) -> list[RawOpportunity]:
        """
        List opportunities; returns raw format from source.
        """
        pass

    @abstractmethod
    def normalize(self, raw: RawOpportunity) -> Opportunity:
        """
        Convert raw record to Opportunity.
        """
        pass

    def fetch_all(self) -> list[Opportunity]:
        """
        Fetch all opportunities and return normalized list.
        Default implementation: search (no filters), then normalize each.
        Override for sources that validate a whole response at once.
        """
        raw_list = self.search()
        return [self.normalize(r) for r in raw_list]
