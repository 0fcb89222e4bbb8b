"""MongoDB connection lifecycle management.

open_database() pings the server, yields the database and always closes the
client, on both success and failure paths. Callers pass the yielded handle
explicitly; there is no module-level client.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from magicstream_seed.config import settings
from magicstream_seed.seeding.errors import SeedConnectionError


@asynccontextmanager
async def open_database(
    uri: Optional[str] = None, name: Optional[str] = None
) -> AsyncIterator[AsyncIOMotorDatabase]:
    uri = uri or settings.MONGODB_URI
    client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=settings.SERVER_SELECTION_TIMEOUT_MS)
    try:
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            raise SeedConnectionError(f"MongoDB is unreachable at {uri}: {e}") from e
        yield client[name or settings.DATABASE_NAME]
    finally:
        client.close()
