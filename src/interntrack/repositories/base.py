"""Base repository: one table, flush-only writes. Services own the commit."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from interntrack.db.base import Base

RowT = TypeVar("RowT", bound=Base)


class BaseRepository(Generic[RowT]):
    """Async data access for ``model``, keyed by the ``pk`` column."""

    model: type[RowT]
    pk: str

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, pk_value: str) -> RowT | None:
        return await self.find_one(getattr(self.model, self.pk) == pk_value)

    async def find(self, *criteria, order_by=None, limit: int | None = None) -> list[RowT]:
        """Rows matching every criterion, optionally ordered and capped."""
        stmt = select(self.model).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        if limit:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_one(self, *criteria, order_by=None) -> RowT | None:
        rows = await self.find(*criteria, order_by=order_by, limit=1)
        return rows[0] if rows else None

    async def create(self, **values: Any) -> RowT:
        row = self.model(**values)
        self.session.add(row)
        await self.session.flush()
        return row

    async def update(self, row: RowT, **values: Any) -> RowT:
        for key, value in values.items():
            setattr(row, key, value)
        await self.session.flush()
        return row
