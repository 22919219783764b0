"""Accepted severities derived from an opportunity's asset groups."""

from typing import Iterable

from cantina_finder.models.opportunity import AssetGroup

# Compared as text, not as numbers: "0.0" or "00" count as a reward.
_ZERO_REWARDS = frozenset({"0", "0.00"})


def has_reward(max_reward: str | None) -> bool:
    """True when a maxReward string names a payout."""
    value = (max_reward or "").strip()
    return bool(value) and value not in _ZERO_REWARDS


def accepted_severities(groups: Iterable[AssetGroup]) -> list[str]:
    """
    Severities with a nonzero max reward in at least one in-scope group,
    deduplicated and sorted ascending.
    """
    found: set[str] = set()
    for group in groups:
        if group.out_of_scope:
            continue
        for reward in group.rewards:
            if has_reward(reward.max_reward):
                found.add(reward.severity)
    return sorted(found)


def format_severities(severities: list[str]) -> str:
    """Comma-joined severities, or "None" when there are none."""
    return ", ".join(severities) if severities else "None"
