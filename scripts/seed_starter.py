#!/usr/bin/env python3
"""Seed starter data script.

Creates missing tables and supported languages, then fills an empty
catalog with demo categories, collections and items.

Usage:
    python scripts/seed_starter.py
    python scripts/seed_starter.py --create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from plumbing.application.starter_service import StarterService
from plumbing.domain.exceptions import AlreadySeededError
from plumbing.infrastructure import models  # noqa: F401
from plumbing.infrastructure.database import Base, async_session_factory, engine
from plumbing.infrastructure.models import Language
from plumbing.repositories.language import LanguageRepository

LANGUAGES = [
    ("ru", "Русский"),
    ("kgz", "Кыргызча"),
    ("en", "English"),
]


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ensure_languages() -> int:
    """Insert supported languages that are missing.

    Returns:
        Number of languages created.
    """
    async with async_session_factory() as session:
        repo = LanguageRepository(session)
        existing = {language.code for language in await repo.list_all()}
        missing = [Language(code=code, name=name) for code, name in LANGUAGES if code not in existing]
        if missing:
            await repo.save_all(missing)
            await session.commit()
        return len(missing)


async def seed() -> dict[str, int]:
    """Seed starter data in one transaction."""
    async with async_session_factory() as session:
        result = await StarterService(session).seed()
        await session.commit()
        return result


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed starter categories, collections and items",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from models instead of relying on migrations",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Plumbing Starter Seeder")
    print("=" * 60)

    if args.create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    created = await ensure_languages()
    print(f"  ✓ Languages created: {created}")

    try:
        result = await seed()
    except AlreadySeededError as e:
        print(f"  ✗ {e.message}")
    else:
        print(f"  ✓ Categories: {result['categories']}")
        print(f"  ✓ Collections: {result['collections']}")
        print(f"  ✓ Items: {result['items']}")
    finally:
        await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
