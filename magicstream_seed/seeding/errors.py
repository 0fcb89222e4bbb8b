"""Failures raised by a seeding run.

Every error is fatal to the run. Pairs processed before the failure keep
their new contents; nothing is rolled back.
"""

from typing import Optional


class SeedError(Exception):
    """Base class. collection and fixture name the pair being processed."""

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        fixture: Optional[str] = None,
    ):
        super().__init__(message)
        self.collection = collection
        self.fixture = fixture


class FixtureNotFound(SeedError):
    pass


class FixtureParseError(SeedError):
    pass


class SeedConnectionError(SeedError):
    """The database could not be reached or probed."""


class WriteError(SeedError):
    """delete_many or insert_many failed against the store."""
