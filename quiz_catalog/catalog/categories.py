from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quiz_catalog.catalog.errors import CatalogValidationError, ConflictError
from quiz_catalog.catalog.internal import category_view, storage_failure
from quiz_catalog.catalog.types import CategoryPage, CategoryView
from quiz_catalog.catalog.validation import is_row_id, validate_category_title
from quiz_catalog.core.pagination import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT, resolve_page_window
from quiz_catalog.core.sanitize import sanitize
from quiz_catalog.core.slugs import slugify_title
from quiz_catalog.db.repo.categories_repo import CategoriesRepo
from quiz_catalog.db.repo.options_repo import OptionsRepo
from quiz_catalog.db.repo.questions_repo import QuestionsRepo
from quiz_catalog.db.session import Database

logger = structlog.get_logger(__name__)


def _title_and_slug(raw_title: object) -> tuple[str, str]:
    title = validate_category_title(raw_title)
    slug = slugify_title(title)
    if not slug:
        raise CatalogValidationError.for_field(
            "title",
            "title must contain at least one letter or digit",
        )
    return sanitize(title), slug


class CategoryStore:
    """Category CRUD keyed by slug.

    Every operation runs in its own transaction; deleting a category removes
    its questions and their options in that same transaction.
    """

    def __init__(
        self,
        database: Database,
        *,
        default_limit: int = DEFAULT_PAGE_LIMIT,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> None:
        self._database = database
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def list_categories(
        self,
        limit: int | None = None,
        page: int | None = None,
    ) -> CategoryPage:
        window = resolve_page_window(
            limit,
            page,
            default_limit=self._default_limit,
            max_limit=self._max_limit,
        )
        try:
            async with self._database.begin() as session:
                categories = await CategoriesRepo.list_page(
                    session,
                    limit=window.limit,
                    offset=window.offset,
                )
                total = await CategoriesRepo.count(session)
        except SQLAlchemyError as exc:
            raise storage_failure("list_categories", exc, page=window.page) from exc

        return CategoryPage(
            categories=tuple(category_view(category) for category in categories),
            total=total,
            page=window.page,
            limit=window.limit,
        )

    async def get_category(self, slug: str) -> CategoryView | None:
        try:
            async with self._database.begin() as session:
                category = await CategoriesRepo.get_by_slug(session, slug)
        except SQLAlchemyError as exc:
            raise storage_failure("get_category", exc, slug=slug) from exc
        return category_view(category) if category is not None else None

    async def get_category_by_id(self, category_id: int) -> CategoryView | None:
        if not is_row_id(category_id):
            return None
        try:
            async with self._database.begin() as session:
                category = await CategoriesRepo.get_by_id(session, category_id)
        except SQLAlchemyError as exc:
            raise storage_failure("get_category_by_id", exc, category_id=category_id) from exc
        return category_view(category) if category is not None else None

    async def create_category(self, title: object) -> CategoryView:
        sanitized_title, slug = _title_and_slug(title)
        try:
            async with self._database.begin() as session:
                category = await CategoriesRepo.create(session, title=sanitized_title, slug=slug)
        except IntegrityError as exc:
            logger.info("catalog_category_conflict", slug=slug)
            raise ConflictError(f"category already exists: {slug}") from exc
        except SQLAlchemyError as exc:
            raise storage_failure("create_category", exc, slug=slug) from exc

        logger.info("catalog_category_created", category_id=category.id, slug=category.slug)
        return category_view(category)

    async def update_category(self, slug: str, title: object) -> CategoryView | None:
        """Renames a category. The slug is re-derived, so the old slug stops resolving."""
        sanitized_title, next_slug = _title_and_slug(title)
        try:
            async with self._database.begin() as session:
                category = await CategoriesRepo.get_by_slug_for_update(session, slug)
                if category is None:
                    return None
                category.title = sanitized_title
                category.slug = next_slug
                await session.flush()
        except IntegrityError as exc:
            logger.info("catalog_category_conflict", slug=next_slug, previous_slug=slug)
            raise ConflictError(f"category already exists: {next_slug}") from exc
        except SQLAlchemyError as exc:
            raise storage_failure("update_category", exc, slug=slug) from exc

        if next_slug != slug:
            logger.info(
                "catalog_category_slug_changed",
                category_id=category.id,
                previous_slug=slug,
                next_slug=next_slug,
            )
        return category_view(category)

    async def delete_category(self, slug: str) -> CategoryView | None:
        try:
            async with self._database.begin() as session:
                category = await CategoriesRepo.get_by_slug_for_update(session, slug)
                if category is None:
                    return None
                deleted_options = await OptionsRepo.delete_for_category(session, category.id)
                deleted_questions = await QuestionsRepo.delete_for_category(session, category.id)
                await CategoriesRepo.delete_by_id(session, category.id)
        except SQLAlchemyError as exc:
            raise storage_failure("delete_category", exc, slug=slug) from exc

        logger.info(
            "catalog_category_deleted",
            category_id=category.id,
            slug=slug,
            deleted_questions=deleted_questions,
            deleted_options=deleted_options,
        )
        return category_view(category)
