from enum import Enum

from pydantic import BaseModel


class SeedMode(str, Enum):
    """How a run treats collections that already hold data.

    overwrite always replaces the four collections. skip_if_populated leaves
    the database alone when any of them holds at least one document.
    """

    OVERWRITE = "overwrite"
    SKIP_IF_POPULATED = "skip_if_populated"


class FixtureSpec(BaseModel):
    """One fixture file and the collection it replaces."""

    collection: str  # Target collection, e.g. "movies"
    filename: str  # File inside the fixture directory, e.g. "movies.json"


# Processing order is fixed: Movies -> Genres -> Users -> Rankings
FIXTURES: tuple[FixtureSpec, ...] = (
    FixtureSpec(collection="movies", filename="movies.json"),
    FixtureSpec(collection="genres", filename="genres.json"),
    FixtureSpec(collection="users", filename="users.json"),
    FixtureSpec(collection="rankings", filename="rankings.json"),
)


class CollectionSeedResult(BaseModel):
    collection: str
    fixture: str
    deleted: int  # Documents removed by delete_many({})
    inserted: int  # Documents written by insert_many (0 for an empty fixture)


class SeedSummary(BaseModel):
    """Outcome of a seeding run.

    A skipped run has no per-collection results; populated names the
    collections that already held documents when the probe ran.
    """

    database: str
    mode: SeedMode
    skipped: bool = False
    populated: list[str] = []
    collections: list[CollectionSeedResult] = []

    @property
    def total_deleted(self) -> int:
        return sum(c.deleted for c in self.collections)

    @property
    def total_inserted(self) -> int:
        return sum(c.inserted for c in self.collections)
