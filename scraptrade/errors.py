# scraptrade/errors.py
"""Error types raised by the repository and service layers.

The HTTP layer maps them to status codes in `scraptrade.main`.
"""


class ScrapTradeError(Exception):
    pass


class ValidationError(ScrapTradeError):
    """Listing input is missing a required field or has a bad value."""


class NotFoundError(ScrapTradeError):
    """No listing exists for the given id."""

    def __init__(self, listing_id):
        super().__init__(f"Listing {listing_id} not found")
        self.listing_id = listing_id


class StorageError(ScrapTradeError):
    """The database could not be reached or the query failed."""
