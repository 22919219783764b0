#!/usr/bin/env python3
"""Quick live check of the Cantina opportunities endpoint.

Run:
  poetry run python scripts/fetch_cantina_live.py
"""

import sys

from cantina_finder.connectors.cantina import CantinaConnector
from cantina_finder.errors import CantinaFinderError
from cantina_finder.ranking import classify


def main() -> None:
    connector = CantinaConnector()
    print(f"Fetching {connector.listing_url} ...")
    try:
        opportunities = connector.fetch_all()
    except CantinaFinderError as e:
        print(f"\n⚠️ Fetch failed: {e}")
        sys.exit(1)

    classified = classify(opportunities)
    print(
        f"Got {len(opportunities)} opportunities: "
        f"{len(classified.bounties)} bounties, {len(classified.contests)} contests"
    )
    for i, opp in enumerate(opportunities[:5], 1):
        print(f"  {i}. [{opp.kind}] {opp.name} (id={opp.id})")
    print("\n✅ Listing fetch and validation succeeded.")


if __name__ == "__main__":
    main()
