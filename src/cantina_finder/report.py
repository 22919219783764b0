"""Line-oriented text report of bounties and competitions."""

from datetime import datetime
from typing import Iterable

from cantina_finder.models.opportunity import Opportunity
from cantina_finder.ranking import OpportunityCategory
from cantina_finder.severities import accepted_severities, format_severities
from cantina_finder.timeframes import time_left

SITE_URL = "https://cantina.xyz"
BLOCK_SEPARATOR = "---"

_URL_SECTIONS = {
    OpportunityCategory.BOUNTY: "bounties",
    OpportunityCategory.CONTEST: "competitions",
}


def opportunity_url(opp: Opportunity, category: OpportunityCategory) -> str:
    """Public page of the opportunity on cantina.xyz."""
    try:
        section = _URL_SECTIONS[category]
    except KeyError:
        raise ValueError(f"No public page for {category.value} opportunities") from None
    return f"{SITE_URL}/{section}/{opp.id}"


def render_opportunity(
    opp: Opportunity,
    category: OpportunityCategory,
    now: datetime,
) -> list[str]:
    """Lines for one opportunity, ending with the block separator."""
    lines = [
        f"Name: {opp.name}",
        f"Kind: {opp.kind}",
        f"Start: {opp.timeframe.start}",
    ]
    end = opp.timeframe.end
    if end is not None:
        lines.append(f"End:   {end}")
        if category is OpportunityCategory.CONTEST:
            lines.append(f"Time Left: {time_left(end, now)}")
    lines.extend(
        [
            f"URL: {opportunity_url(opp, category)}",
            f"Status: {opp.status}",
            f"Currency: {opp.currency_code}",
            f"Total Reward Pot: {opp.total_reward_pot}",
            f"Accepted Severities: {format_severities(accepted_severities(opp.asset_groups))}",
            f"Total Findings: {opp.total_findings}",
            BLOCK_SEPARATOR,
        ]
    )
    return lines


def _render_section(
    title: str,
    items: list[Opportunity],
    category: OpportunityCategory,
    now: datetime,
) -> list[str]:
    lines = [f"=== {title} ({len(items)})"]
    for opp in items:
        lines.extend(render_opportunity(opp, category, now))
    return lines


def render_report(
    bounties: Iterable[Opportunity],
    contests: Iterable[Opportunity],
    now: datetime,
) -> str:
    """
    Full report: bounties section, a blank line, then competitions.
    Items are rendered in the order given; sorting happens upstream.
    """
    lines = _render_section("BOUNTIES", list(bounties), OpportunityCategory.BOUNTY, now)
    lines.append("")
    lines.extend(_render_section("COMPETITIONS", list(contests), OpportunityCategory.CONTEST, now))
    return "\n".join(lines) + "\n"
