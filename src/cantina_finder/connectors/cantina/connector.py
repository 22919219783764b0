"""Cantina connector using the public opportunities JSON endpoint."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from cantina_finder.connectors.base import BaseConnector
from cantina_finder.errors import ListingFetchError, ListingFormatError, ListingHTTPError
from cantina_finder.models.opportunity import Opportunity
from cantina_finder.models.raw import RawOpportunity

from .constants import API_BASE_URL, ITEMS_KEY, LISTING_KINDS, LISTING_LIMIT, OPPORTUNITIES_PATH

logger = logging.getLogger(__name__)


class CantinaConnector(BaseConnector):
    """
    Connector for Cantina bounties and audit contests.
    Issues one GET for up to LISTING_LIMIT items; no paging, no retries.
    """

    source_id = "cantina"

    DEFAULT_HEADERS = {
        "User-Agent": "cantina-finder/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )

    @property
    def listing_url(self) -> str:
        return self._base_url + OPPORTUNITIES_PATH

    def listing_params(self) -> dict[str, Any]:
        """Query parameters for the single listing request."""
        return {"limit": LISTING_LIMIT, "kinds": ",".join(LISTING_KINDS)}

    def _fetch_json(self) -> Any:
        """GET the listing and decode the body; maps failures to run errors."""
        url = self.listing_url
        logger.info("Fetching opportunities from %s", url)
        try:
            response = self._client.get(url, params=self.listing_params())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Listing request failed with HTTP %d", status)
            raise ListingHTTPError(f"GET {url} returned HTTP {status}", status_code=status) from e
        except httpx.RequestError as e:
            logger.warning("Listing request failed: %s", e)
            raise ListingFetchError(f"GET {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ListingFormatError(f"Listing response is not valid JSON: {e}") from e

    def _extract_items(self, payload: Any) -> list[dict]:
        if not isinstance(payload, dict) or not isinstance(payload.get(ITEMS_KEY), list):
            raise ListingFormatError(f"Listing response has no '{ITEMS_KEY}' list")
        items = payload[ITEMS_KEY]
        if not all(isinstance(item, dict) for item in items):
            raise ListingFormatError("Listing items must be JSON objects")
        return items

    def search(self, filters: Optional[dict] = None) -> list[RawOpportunity]:
        """
        Fetch the listing and return one raw record per item.
        The endpoint takes no client-side filters; `filters` is ignored.
        """
        items = self._extract_items(self._fetch_json())
        logger.info("Fetched %d opportunities", len(items))
        return [RawOpportunity(data=item) for item in items]

    def normalize(self, raw: RawOpportunity) -> Opportunity:
        """Validate one raw listing item into an Opportunity."""
        try:
            return Opportunity.model_validate(raw.data)
        except ValidationError as e:
            item_id = raw.data.get("id", "?")
            raise ListingFormatError(f"Opportunity {item_id} does not match schema: {e}") from e
