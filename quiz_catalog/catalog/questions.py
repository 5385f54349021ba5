from __future__ import annotations

from collections.abc import Sequence

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quiz_catalog.catalog.errors import CatalogValidationError
from quiz_catalog.catalog.internal import question_view, storage_failure
from quiz_catalog.catalog.types import QuestionPage, QuestionView
from quiz_catalog.catalog.validation import (
    OptionToCreate,
    ensure_correct_option,
    is_row_id,
    validate_question_to_create,
    validate_question_to_update,
)
from quiz_catalog.core.pagination import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    PageWindow,
    resolve_page_window,
)
from quiz_catalog.core.sanitize import sanitize
from quiz_catalog.db.repo.categories_repo import CategoriesRepo
from quiz_catalog.db.repo.options_repo import OptionsRepo
from quiz_catalog.db.repo.questions_repo import QuestionsRepo
from quiz_catalog.db.session import Database

logger = structlog.get_logger(__name__)


def _sanitized_options(options: Sequence[OptionToCreate]) -> list[tuple[str, bool]]:
    return [(sanitize(option.text), option.is_correct) for option in options]


async def _ensure_category_exists(session: AsyncSession, category_id: int) -> None:
    if await CategoriesRepo.get_by_id(session, category_id) is None:
        raise CatalogValidationError.for_field("categoryId", "category does not exist")


class QuestionStore:
    """Questions together with the options they own.

    Options are never edited in place: an update that carries options deletes
    the current set and inserts the new one in the same transaction.
    """

    def __init__(
        self,
        database: Database,
        *,
        require_correct_option: bool = False,
        default_limit: int = DEFAULT_PAGE_LIMIT,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> None:
        self._database = database
        self._require_correct_option = require_correct_option
        self._default_limit = default_limit
        self._max_limit = max_limit

    def _window(self, limit: int | None, page: int | None) -> PageWindow:
        return resolve_page_window(
            limit,
            page,
            default_limit=self._default_limit,
            max_limit=self._max_limit,
        )

    async def _list_page(self, window: PageWindow, *, category_id: int | None) -> QuestionPage:
        async with self._database.begin() as session:
            questions = await QuestionsRepo.list_page(
                session,
                limit=window.limit,
                offset=window.offset,
                category_id=category_id,
            )
            options_by_question = await OptionsRepo.list_for_questions(
                session,
                [question.id for question in questions],
            )
            total = await QuestionsRepo.count(session, category_id=category_id)

        return QuestionPage(
            questions=tuple(
                question_view(question, options_by_question[question.id])
                for question in questions
            ),
            total=total,
            page=window.page,
            limit=window.limit,
        )

    async def list_questions(
        self,
        limit: int | None = None,
        page: int | None = None,
    ) -> QuestionPage:
        window = self._window(limit, page)
        try:
            return await self._list_page(window, category_id=None)
        except SQLAlchemyError as exc:
            raise storage_failure("list_questions", exc, page=window.page) from exc

    async def list_questions_by_category(
        self,
        category_id: int,
        limit: int | None = None,
        page: int | None = None,
    ) -> QuestionPage:
        window = self._window(limit, page)
        if not is_row_id(category_id):
            return QuestionPage(questions=(), total=0, page=window.page, limit=window.limit)
        try:
            return await self._list_page(window, category_id=category_id)
        except SQLAlchemyError as exc:
            raise storage_failure(
                "list_questions_by_category",
                exc,
                category_id=category_id,
                page=window.page,
            ) from exc

    async def get_question_by_id(self, question_id: int) -> QuestionView | None:
        if not is_row_id(question_id):
            return None
        try:
            async with self._database.begin() as session:
                question = await QuestionsRepo.get_by_id(session, question_id)
                if question is None:
                    return None
                options = await OptionsRepo.list_for_question(session, question.id)
        except SQLAlchemyError as exc:
            raise storage_failure("get_question_by_id", exc, question_id=question_id) from exc
        return question_view(question, options)

    async def create_question(self, data: object) -> QuestionView:
        payload = validate_question_to_create(data)
        if self._require_correct_option:
            ensure_correct_option(payload.options)

        try:
            async with self._database.begin() as session:
                await _ensure_category_exists(session, payload.category_id)
                question = await QuestionsRepo.create(
                    session,
                    text=sanitize(payload.text),
                    category_id=payload.category_id,
                )
                options = await OptionsRepo.create_many(
                    session,
                    question_id=question.id,
                    options=_sanitized_options(payload.options),
                )
        except SQLAlchemyError as exc:
            raise storage_failure(
                "create_question",
                exc,
                category_id=payload.category_id,
            ) from exc

        logger.info(
            "catalog_question_created",
            question_id=question.id,
            category_id=question.category_id,
            options_total=len(options),
        )
        return question_view(question, options)

    async def update_question(self, question_id: int, data: object) -> QuestionView | None:
        """Applies a partial update.

        ``options``, when present, replaces the whole option set; when absent
        the stored options stay as they are.
        """
        payload = validate_question_to_update(data)
        if payload.options is not None and self._require_correct_option:
            ensure_correct_option(payload.options)
        if not is_row_id(question_id):
            return None

        try:
            async with self._database.begin() as session:
                question = await QuestionsRepo.get_by_id_for_update(session, question_id)
                if question is None:
                    return None
                if payload.category_id is not None and payload.category_id != question.category_id:
                    await _ensure_category_exists(session, payload.category_id)
                    question.category_id = payload.category_id
                if payload.text is not None:
                    question.text = sanitize(payload.text)
                if payload.options is not None:
                    await OptionsRepo.delete_for_question(session, question.id)
                    await OptionsRepo.create_many(
                        session,
                        question_id=question.id,
                        options=_sanitized_options(payload.options),
                    )
                await session.flush()
                options = await OptionsRepo.list_for_question(session, question.id)
        except SQLAlchemyError as exc:
            raise storage_failure("update_question", exc, question_id=question_id) from exc

        logger.info(
            "catalog_question_updated",
            question_id=question.id,
            options_replaced=payload.options is not None,
        )
        return question_view(question, options)

    async def delete_question(self, question_id: int) -> bool:
        """Deletes the question and its options; a missing id is a no-op returning False."""
        if not is_row_id(question_id):
            return False
        try:
            async with self._database.begin() as session:
                deleted_options = await OptionsRepo.delete_for_question(session, question_id)
                deleted_questions = await QuestionsRepo.delete_by_id(session, question_id)
        except SQLAlchemyError as exc:
            raise storage_failure("delete_question", exc, question_id=question_id) from exc

        if deleted_questions:
            logger.info(
                "catalog_question_deleted",
                question_id=question_id,
                deleted_options=deleted_options,
            )
        return deleted_questions > 0
