from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from quiz_catalog.db.models.options import Option
from quiz_catalog.db.models.questions import Question


class OptionsRepo:
    @staticmethod
    async def list_for_question(session: AsyncSession, question_id: int) -> list[Option]:
        stmt = select(Option).where(Option.question_id == question_id).order_by(Option.id.asc())
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def list_for_questions(
        session: AsyncSession,
        question_ids: Sequence[int],
    ) -> dict[int, list[Option]]:
        ids = tuple(question_ids)
        grouped: dict[int, list[Option]] = {question_id: [] for question_id in ids}
        if not ids:
            return grouped
        stmt = (
            select(Option)
            .where(Option.question_id.in_(ids))
            .order_by(Option.question_id.asc(), Option.id.asc())
        )
        result = await session.execute(stmt)
        for option in result.scalars().all():
            grouped[option.question_id].append(option)
        return grouped

    @staticmethod
    async def create_many(
        session: AsyncSession,
        *,
        question_id: int,
        options: Sequence[tuple[str, bool]],
    ) -> list[Option]:
        created = [
            Option(text=text, is_correct=is_correct, question_id=question_id)
            for text, is_correct in options
        ]
        session.add_all(created)
        await session.flush()
        return created

    @staticmethod
    async def delete_for_question(session: AsyncSession, question_id: int) -> int:
        stmt = (
            delete(Option)
            .where(Option.question_id == question_id)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return int(getattr(result, "rowcount", 0) or 0)

    @staticmethod
    async def delete_for_category(session: AsyncSession, category_id: int) -> int:
        question_ids = select(Question.id).where(Question.category_id == category_id)
        stmt = (
            delete(Option)
            .where(Option.question_id.in_(question_ids))
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return int(getattr(result, "rowcount", 0) or 0)
