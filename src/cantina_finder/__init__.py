"""Bounty and contest listings from the Cantina security marketplace."""

__version__ = "0.1.0"
