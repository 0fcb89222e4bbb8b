import json
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def sample_fixtures():
    return {
        "movies": [
            {"imdb_id": "tt0111161", "title": "The Shawshank Redemption", "genre": [{"genre_id": 3}]},
            {"imdb_id": "tt0068646", "title": "The Godfather", "genre": [{"genre_id": 3}]},
        ],
        "genres": [
            {"genre_id": 1, "genre_name": "Comedy"},
            {"genre_id": 3, "genre_name": "Drama"},
            {"genre_id": 4, "genre_name": "Fantasy"},
        ],
        "users": [
            {
                "user_id": "68385b9981097c6b4042dab4",
                "first_name": "Bob",
                "last_name": "Jones",
                "email": "bobjones@hotmail.com",
                "role": "ADMIN",
                "favourite_genres": [
                    {"genre_id": 1, "genre_name": "Comedy"},
                    {"genre_id": 4, "genre_name": "Fantasy"},
                ],
            }
        ],
        "rankings": [
            {"ranking_name": "Excellent", "ranking_value": 1},
            {"ranking_name": "Terrible", "ranking_value": 5},
        ],
    }


@pytest.fixture
def fixture_dir(tmp_path, sample_fixtures):
    for name, docs in sample_fixtures.items():
        (tmp_path / f"{name}.json").write_text(json.dumps(docs), encoding="utf-8")
    return tmp_path


def _make_mock_collection(store: list):
    async def delete_many(filter):
        deleted = len(store)
        store.clear()
        return MagicMock(deleted_count=deleted)

    async def insert_many(docs, ordered=True):
        store.extend(dict(d) for d in docs)
        return MagicMock(inserted_ids=list(range(len(docs))))

    async def estimated_document_count():
        return len(store)

    mock_collection = MagicMock()
    mock_collection.delete_many = AsyncMock(side_effect=delete_many)
    mock_collection.insert_many = AsyncMock(side_effect=insert_many)
    mock_collection.estimated_document_count = AsyncMock(side_effect=estimated_document_count)
    return mock_collection


def _make_mock_db(existing=None):
    """In-memory stand-in for a Motor database.

    mock_db.stores maps collection name to the list of stored documents.
    """
    stores = {name: list(docs) for name, docs in (existing or {}).items()}
    collections = {}

    def getitem(name):
        if name not in collections:
            collections[name] = _make_mock_collection(stores.setdefault(name, []))
        return collections[name]

    mock_db = MagicMock()
    mock_db.name = "magic-stream-movies"
    mock_db.__getitem__.side_effect = getitem
    mock_db.stores = stores
    return mock_db


@pytest.fixture
def make_db():
    return _make_mock_db


@pytest.fixture
def mock_db():
    return _make_mock_db()
