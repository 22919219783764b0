"""Pipeline orchestration: fetch → classify → sort → render."""

from datetime import datetime
from typing import Iterable, Optional

from cantina_finder.connectors.base import BaseConnector
from cantina_finder.connectors.cantina import CantinaConnector
from cantina_finder.models.opportunity import Opportunity
from cantina_finder.ranking import classify, sort_bounties, sort_contests
from cantina_finder.report import render_report
from cantina_finder.timeframes import utc_now


def build_report(
    opportunities: Iterable[Opportunity],
    *,
    now: Optional[datetime] = None,
) -> str:
    """
    Classify, sort and render already-fetched opportunities.
    A single `now` is used for sorting fallbacks and time-left labels.
    """
    now = now or utc_now()
    classified = classify(opportunities)
    return render_report(
        sort_bounties(classified.bounties, now),
        sort_contests(classified.contests, now),
        now,
    )


def run_report(
    connector: Optional[BaseConnector] = None,
    *,
    now: Optional[datetime] = None,
) -> str:
    """
    Fetch the listing and return the text report.
    Fetch and format errors propagate as CantinaFinderError subclasses.
    """
    connector = connector or CantinaConnector()
    return build_report(connector.fetch_all(), now=now)
