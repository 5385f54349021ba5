from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quiz_catalog.db.models.questions import Question


class QuestionsRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, question_id: int) -> Question | None:
        return await session.get(Question, question_id)

    @staticmethod
    async def get_by_id_for_update(session: AsyncSession, question_id: int) -> Question | None:
        stmt = select(Question).where(Question.id == question_id).with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_page(
        session: AsyncSession,
        *,
        limit: int,
        offset: int,
        category_id: int | None = None,
    ) -> list[Question]:
        stmt = select(Question).order_by(Question.id.asc()).offset(offset).limit(limit)
        if category_id is not None:
            stmt = stmt.where(Question.category_id == category_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def count(session: AsyncSession, *, category_id: int | None = None) -> int:
        stmt = select(func.count(Question.id))
        if category_id is not None:
            stmt = stmt.where(Question.category_id == category_id)
        return int((await session.execute(stmt)).scalar_one() or 0)

    @staticmethod
    async def create(session: AsyncSession, *, text: str, category_id: int) -> Question:
        question = Question(text=text, category_id=category_id)
        session.add(question)
        await session.flush()
        return question

    @staticmethod
    async def delete_by_id(session: AsyncSession, question_id: int) -> int:
        stmt = (
            delete(Question)
            .where(Question.id == question_id)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return int(getattr(result, "rowcount", 0) or 0)

    @staticmethod
    async def delete_for_category(session: AsyncSession, category_id: int) -> int:
        stmt = (
            delete(Question)
            .where(Question.category_id == category_id)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return int(getattr(result, "rowcount", 0) or 0)
