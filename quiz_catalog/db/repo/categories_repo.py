from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quiz_catalog.db.models.categories import Category


class CategoriesRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, category_id: int) -> Category | None:
        return await session.get(Category, category_id)

    @staticmethod
    async def get_by_slug(session: AsyncSession, slug: str) -> Category | None:
        stmt = select(Category).where(Category.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_slug_for_update(session: AsyncSession, slug: str) -> Category | None:
        stmt = select(Category).where(Category.slug == slug).with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_page(session: AsyncSession, *, limit: int, offset: int) -> list[Category]:
        stmt = select(Category).order_by(Category.id.asc()).offset(offset).limit(limit)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def count(session: AsyncSession) -> int:
        stmt = select(func.count(Category.id))
        return int((await session.execute(stmt)).scalar_one() or 0)

    @staticmethod
    async def create(session: AsyncSession, *, title: str, slug: str) -> Category:
        category = Category(title=title, slug=slug)
        session.add(category)
        await session.flush()
        return category

    @staticmethod
    async def delete_by_id(session: AsyncSession, category_id: int) -> int:
        stmt = (
            delete(Category)
            .where(Category.id == category_id)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return int(getattr(result, "rowcount", 0) or 0)
