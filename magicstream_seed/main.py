import asyncio
import logging

from magicstream_seed.config import settings
from magicstream_seed.database import open_database
from magicstream_seed.seeding.errors import SeedError
from magicstream_seed.seeding.models import SeedSummary
from magicstream_seed.seeding.service import run

logger = logging.getLogger(__name__)


def report(summary: SeedSummary) -> None:
    if summary.skipped:
        print(
            f"Data already exists in '{summary.database}' "
            f"({', '.join(summary.populated)}), skipping seed"
        )
        return
    for result in summary.collections:
        print(f"Seeded {result.inserted} {result.collection} (deleted {result.deleted})")
    print(
        f"Seeding complete for '{summary.database}': "
        f"{summary.total_inserted} inserted, {summary.total_deleted} deleted"
    )


async def seed() -> SeedSummary:
    async with open_database() as db:
        return await run(settings.SEED_DATA_DIR, db, settings.SEED_MODE)


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(), format="%(asctime)s [%(name)s] %(message)s"
    )
    try:
        summary = asyncio.run(seed())
    except SeedError as e:
        logger.error(
            "Seeding failed (%s) at collection=%s fixture=%s: %s",
            type(e).__name__,
            e.collection or "-",
            e.fixture or "-",
            e,
        )
        return 1
    report(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
