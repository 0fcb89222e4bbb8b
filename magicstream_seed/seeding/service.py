import logging
from pathlib import Path

from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import BulkWriteError, PyMongoError

from magicstream_seed.seeding.errors import SeedConnectionError, WriteError
from magicstream_seed.seeding.fixtures import load_fixture
from magicstream_seed.seeding.models import (
    FIXTURES,
    CollectionSeedResult,
    FixtureSpec,
    SeedMode,
    SeedSummary,
)

logger = logging.getLogger(__name__)


async def find_populated(db: AsyncIOMotorDatabase) -> list[str]:
    """Return the seeded collections that currently hold at least one document."""
    populated = []
    for spec in FIXTURES:
        try:
            count = await db[spec.collection].estimated_document_count()
        except PyMongoError as e:
            raise SeedConnectionError(
                f"Could not count documents in '{spec.collection}': {e}",
                collection=spec.collection,
                fixture=spec.filename,
            ) from e
        if count > 0:
            populated.append(spec.collection)
    return populated


async def seed_collection(
    db: AsyncIOMotorDatabase, spec: FixtureSpec, fixture_dir: Path
) -> CollectionSeedResult:
    """Replace one collection's contents with its fixture file.

    The fixture is parsed before anything is deleted, so a bad file leaves
    the collection as it was.
    """
    docs = load_fixture(fixture_dir, spec)
    collection = db[spec.collection]

    try:
        delete_result = await collection.delete_many({})
    except PyMongoError as e:
        raise WriteError(
            f"Failed to clear '{spec.collection}': {e}",
            collection=spec.collection,
            fixture=spec.filename,
        ) from e

    inserted = 0
    if docs:
        try:
            result = await collection.insert_many(docs, ordered=True)
        except BulkWriteError as e:
            raise WriteError(
                f"Insert into '{spec.collection}' stopped after "
                f"{e.details.get('nInserted', 0)} of {len(docs)} documents",
                collection=spec.collection,
                fixture=spec.filename,
            ) from e
        except (PyMongoError, BSONError, OverflowError) as e:
            # BSONError/OverflowError: a document could not be encoded client-side
            raise WriteError(
                f"Failed to insert into '{spec.collection}': {e}",
                collection=spec.collection,
                fixture=spec.filename,
            ) from e
        inserted = len(result.inserted_ids)

    logger.info(
        "Seeded %s: deleted=%d inserted=%d", spec.collection, delete_result.deleted_count, inserted
    )
    return CollectionSeedResult(
        collection=spec.collection,
        fixture=spec.filename,
        deleted=delete_result.deleted_count,
        inserted=inserted,
    )


async def run(
    fixture_dir: Path,
    db: AsyncIOMotorDatabase,
    mode: SeedMode = SeedMode.OVERWRITE,
) -> SeedSummary:
    """Replace movies, genres, users and rankings with the fixture contents.

    Pairs are processed one at a time in FIXTURES order with no transaction
    around them: a failure part way through leaves earlier collections
    already replaced. In SKIP_IF_POPULATED mode nothing is written when any
    of the four collections holds data.
    """
    summary = SeedSummary(database=db.name, mode=mode)

    if mode == SeedMode.SKIP_IF_POPULATED:
        populated = await find_populated(db)
        if populated:
            logger.warning(
                "Database '%s' already seeded (%s not empty), skipping",
                db.name,
                ", ".join(populated),
            )
            summary.skipped = True
            summary.populated = populated
            return summary

    for spec in FIXTURES:
        summary.collections.append(await seed_collection(db, spec, fixture_dir))
    return summary
