"""Seed the movies, genres, users and rankings collections from JSON fixtures.

Replaces all existing documents in those four collections. Set
SEED_MODE=skip_if_populated to leave an already seeded database untouched.

Usage: .venv/bin/python scripts/seed_db.py
"""

from magicstream_seed.main import main

if __name__ == "__main__":
    raise SystemExit(main())
