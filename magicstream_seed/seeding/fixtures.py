import json
from pathlib import Path
from typing import Any

from magicstream_seed.seeding.errors import FixtureNotFound, FixtureParseError
from magicstream_seed.seeding.models import FixtureSpec


def load_fixture(fixture_dir: Path, spec: FixtureSpec) -> list[dict[str, Any]]:
    """Read a fixture file into an ordered list of documents.

    The file must hold a JSON array of objects; an empty array is allowed.
    Documents are returned as parsed, without any schema checks.
    """
    path = Path(fixture_dir) / spec.filename
    try:
        with open(path, encoding="utf-8") as f:
            docs = json.load(f)
    except FileNotFoundError as e:
        raise FixtureNotFound(
            f"Fixture file not found: {path}",
            collection=spec.collection,
            fixture=spec.filename,
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FixtureParseError(
            f"{spec.filename} is not valid JSON: {e}",
            collection=spec.collection,
            fixture=spec.filename,
        ) from e

    if not isinstance(docs, list):
        raise FixtureParseError(
            f"{spec.filename} must contain a JSON array, got {type(docs).__name__}",
            collection=spec.collection,
            fixture=spec.filename,
        )
    for index, doc in enumerate(docs):
        if not isinstance(doc, dict):
            raise FixtureParseError(
                f"{spec.filename}[{index}] is not a JSON object",
                collection=spec.collection,
                fixture=spec.filename,
            )
    return docs
