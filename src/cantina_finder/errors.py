"""Fatal errors for a listing run.

Each failure that aborts the report maps to exactly one subclass of
CantinaFinderError; the CLI turns any of them into a non-zero exit.
Malformed timestamps are not errors (see timeframes.parse_instant).
"""

from typing import Optional


class CantinaFinderError(Exception):
    """Base class for unrecoverable run failures."""


class ListingFetchError(CantinaFinderError):
    """Request failure: connection, DNS, TLS, timeout, redirect loop or body decoding."""


class ListingHTTPError(CantinaFinderError):
    """Listing endpoint answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ListingFormatError(CantinaFinderError):
    """Response body is not valid JSON or does not match the listing schema."""
