"""Persistence adapters: create / find_by_pk / find_all / update / destroy.

Repositories hand out pydantic records rather than ORM rows, so services never
touch SQLAlchemy sessions or lazy relationships.
"""
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from courses_api.models.course import Course
from courses_api.models.user import User
from courses_api.schemas.course import CourseOutSchema
from courses_api.schemas.user import UserRecord

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(Generic[RecordT]):
    model: type
    record: type[RecordT]
    load_options: tuple = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self):
        # IMPORTANT: with AsyncSession don't rely on lazy relationship loading
        return select(self.model).options(*self.load_options).execution_options(populate_existing=True)

    def _to_record(self, row) -> RecordT:
        return self.record.model_validate(row)

    async def create(self, values: dict[str, Any]) -> RecordT:
        row = self.model(**values)
        self.db.add(row)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return await self.find_by_pk(row.id)

    async def find_by_pk(self, pk: int) -> RecordT | None:
        result = await self.db.execute(self._select().where(self.model.id == pk))
        row = result.scalar_one_or_none()
        return self._to_record(row) if row is not None else None

    async def find_all(self) -> list[RecordT]:
        result = await self.db.execute(self._select().order_by(self.model.id.asc()))
        return [self._to_record(row) for row in result.scalars().all()]

    async def update(self, pk: int, values: dict[str, Any]) -> int:
        result = await self.db.execute(update(self.model).where(self.model.id == pk).values(**values))
        await self.db.commit()
        return result.rowcount

    async def destroy(self, pk: int) -> int:
        result = await self.db.execute(delete(self.model).where(self.model.id == pk))
        await self.db.commit()
        return result.rowcount


class UserRepository(Repository[UserRecord]):
    model = User
    record = UserRecord

    async def find_by_email(self, email_address: str) -> UserRecord | None:
        result = await self.db.execute(self._select().where(User.email_address == email_address))
        row = result.scalar_one_or_none()
        return self._to_record(row) if row is not None else None


class CourseRepository(Repository[CourseOutSchema]):
    model = Course
    record = CourseOutSchema
    load_options = (selectinload(Course.owner),)
