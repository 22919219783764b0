"""Split opportunities into bounties and contests and order each group."""

import logging
from datetime import datetime
from enum import Enum
from typing import Iterable, NamedTuple

from cantina_finder.models.opportunity import Opportunity
from cantina_finder.timeframes import opportunity_duration, opportunity_start

logger = logging.getLogger(__name__)


class OpportunityCategory(str, Enum):
    """Report section an opportunity belongs to."""

    BOUNTY = "bounty"
    CONTEST = "contest"
    UNCLASSIFIED = "unclassified"


class ClassifiedOpportunities(NamedTuple):
    bounties: list[Opportunity]
    contests: list[Opportunity]


def categorize(kind: str) -> OpportunityCategory:
    """
    Map a free-text kind to a category by case-insensitive substring.
    "bounty" wins over "contest" when both appear.
    """
    k = kind.lower()
    if "bounty" in k:
        return OpportunityCategory.BOUNTY
    if "contest" in k:
        return OpportunityCategory.CONTEST
    return OpportunityCategory.UNCLASSIFIED


def classify(items: Iterable[Opportunity]) -> ClassifiedOpportunities:
    """
    Partition items into bounties and contests, keeping input order.
    Unclassified kinds appear in neither bucket.
    """
    bounties: list[Opportunity] = []
    contests: list[Opportunity] = []
    dropped = 0
    for opp in items:
        category = categorize(opp.kind)
        if category is OpportunityCategory.BOUNTY:
            bounties.append(opp)
        elif category is OpportunityCategory.CONTEST:
            contests.append(opp)
        else:
            dropped += 1
            logger.debug("Skipping %s (%s): unknown kind %r", opp.id, opp.name, opp.kind)
    if dropped:
        logger.info("Skipped %d opportunities with unrecognized kind", dropped)
    return ClassifiedOpportunities(bounties=bounties, contests=contests)


def sort_bounties(bounties: Iterable[Opportunity], now: datetime) -> list[Opportunity]:
    """Newest start first; ties keep their original order."""
    return sorted(bounties, key=lambda o: opportunity_start(o, now), reverse=True)


def sort_contests(contests: Iterable[Opportunity], now: datetime) -> list[Opportunity]:
    """Longest (end - start) first; open-ended contests count as zero length."""
    return sorted(contests, key=lambda o: opportunity_duration(o, now), reverse=True)
