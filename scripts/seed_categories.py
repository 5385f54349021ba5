from __future__ import annotations

import argparse
import asyncio

from quiz_catalog.catalog.categories import CategoryStore
from quiz_catalog.catalog.errors import ConflictError
from quiz_catalog.core.config import get_settings
from quiz_catalog.core.logging import configure_logging
from quiz_catalog.db.session import Database

DEFAULT_TITLES = ("HTML", "CSS", "JavaScript")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the starter quiz categories.")
    parser.add_argument(
        "titles",
        nargs="*",
        default=list(DEFAULT_TITLES),
        help=(
            "Category titles to create (default: HTML CSS JavaScript). "
            "Slugs are derived from titles, so JavaScript seeds as 'javascript'."
        ),
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding (local databases only).",
    )
    return parser.parse_args()


async def _run(titles: list[str], *, create_schema: bool) -> int:
    settings = get_settings()
    async with Database(settings.database_url, echo=settings.database_echo) as database:
        if create_schema:
            await database.create_all()
        store = CategoryStore(database)
        created = 0
        for title in titles:
            try:
                category = await store.create_category(title)
            except ConflictError:
                print(f"seed_categories skipped title={title!r} reason=exists")  # noqa: T201
                continue
            created += 1
            print(f"seed_categories created slug={category.slug}")  # noqa: T201

    print(f"seed_categories done created={created} requested={len(titles)}")  # noqa: T201
    return 0


def main() -> int:
    args = _parse_args()
    configure_logging(get_settings().log_level)
    return asyncio.run(_run(args.titles, create_schema=args.create_schema))


if __name__ == "__main__":
    raise SystemExit(main())
