"""Main CLI entry point."""

import argparse
import logging
import sys

from cantina_finder.errors import CantinaFinderError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main() -> None:
    """Fetch the Cantina listing and print the bounty/competition report."""
    parser = argparse.ArgumentParser(
        prog="cantina-finder",
        description="List active and upcoming Cantina bounties and audit competitions",
    )
    parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    _run_report()


def _run_report() -> None:
    """Run the report and exit non-zero on any fatal run error."""
    from cantina_finder.pipeline import run_report

    try:
        report = run_report()
    except CantinaFinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    sys.stdout.write(report)


if __name__ == "__main__":
    main()
