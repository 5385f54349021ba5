from __future__ import annotations

from collections.abc import Sequence

import structlog

from quiz_catalog.catalog.errors import StorageError
from quiz_catalog.catalog.types import CategoryView, OptionView, QuestionView
from quiz_catalog.core.sanitize import sanitize
from quiz_catalog.db.models.categories import Category
from quiz_catalog.db.models.options import Option
from quiz_catalog.db.models.questions import Question

logger = structlog.get_logger(__name__)


def storage_failure(operation: str, exc: Exception, **context: object) -> StorageError:
    """Logs a persistence failure and returns the opaque error to raise in its place."""
    logger.exception(
        "catalog_storage_failed",
        operation=operation,
        error_type=type(exc).__name__,
        **context,
    )
    return StorageError()


def category_view(category: Category) -> CategoryView:
    return CategoryView(
        id=category.id,
        title=sanitize(category.title),
        slug=category.slug,
    )


def option_view(option: Option) -> OptionView:
    return OptionView(
        id=option.id,
        text=sanitize(option.text),
        is_correct=bool(option.is_correct),
        question_id=option.question_id,
    )


def question_view(question: Question, options: Sequence[Option]) -> QuestionView:
    return QuestionView(
        id=question.id,
        text=sanitize(question.text),
        category_id=question.category_id,
        options=tuple(option_view(option) for option in options),
    )
