"""SQLAlchemy repository implementations."""

from __future__ import annotations

import logging

from sqlalchemy import Delete, Insert, Select, Update, delete, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import storage_errors
from app.adapters.persistence.models import CounterModel, DemoModel
from app.application.ports.demo_repo import DemoRepository
from app.application.ports.sequence_allocator import SequenceAllocator
from app.domain.entities.demo import Demo
from app.domain.errors import DuplicateKeyError

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE ... RETURNING
_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}

# ─── Mappers ─────────────────────────────────────────────────────────


def _demo_to_domain(m: DemoModel) -> Demo:
    return Demo(
        id=m.id,
        name=m.name,
        description=m.description,
        price=m.price,
        category=m.category,
    )


def _demo_values(demo: Demo) -> dict:
    return {
        "name": demo.name,
        "description": demo.description,
        "price": demo.price,
        "category": demo.category,
    }


# ─── Statements ──────────────────────────────────────────────────────


def build_increment_statement(name: str, dialect: str = "postgresql") -> Insert:
    """Single-statement create-or-increment of a named counter.

    INSERT ... ON CONFLICT DO UPDATE takes the row lock and bumps the value
    server-side, so concurrent callers can never read the same base value.
    """
    try:
        insert = _UPSERT_INSERTS[dialect]
    except KeyError:
        raise ValueError(f"No atomic upsert for dialect {dialect!r}") from None
    stmt = insert(CounterModel).values(name=name, value=1)
    return stmt.on_conflict_do_update(
        index_elements=[CounterModel.name],
        set_={"value": CounterModel.value + 1},
    ).returning(CounterModel.value)


def build_list_statement(search: str | None) -> Select:
    stmt = select(DemoModel)
    if search:
        # Literal substring match: % and _ in the search text are escaped.
        stmt = stmt.where(DemoModel.name.icontains(search, autoescape=True))
    return stmt.order_by(DemoModel.id)


def build_update_statement(demo_id: int, values: dict[str, object]) -> Update:
    """SET only the given columns; the others keep whatever is stored."""
    return (
        update(DemoModel)
        .where(DemoModel.id == demo_id)
        .values(**values)
        .returning(DemoModel)
    )


def build_delete_statement(demo_id: int) -> Delete:
    return delete(DemoModel).where(DemoModel.id == demo_id).returning(DemoModel)


def build_delete_many_statement(ids: list[int]) -> Delete:
    return delete(DemoModel).where(DemoModel.id.in_(ids))


# ─── Repositories ────────────────────────────────────────────────────


class SqlSequenceAllocator(SequenceAllocator):
    def __init__(self, session: AsyncSession, dialect: str = "postgresql"):
        self._s = session
        self._dialect = dialect

    async def next_value(self, name: str) -> int:
        with storage_errors(f"allocate the next '{name}' value"):
            result = await self._s.execute(build_increment_statement(name, self._dialect))
            return result.scalar_one()


class SqlDemoRepository(DemoRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_all(self, search: str | None = None) -> list[Demo]:
        with storage_errors("list demos"):
            result = await self._s.execute(build_list_statement(search))
            return [_demo_to_domain(m) for m in result.scalars()]

    async def get_by_id(self, demo_id: int) -> Demo | None:
        with storage_errors("load a demo"):
            m = await self._s.get(DemoModel, demo_id)
        return _demo_to_domain(m) if m else None

    async def create(self, demo: Demo) -> Demo:
        m = DemoModel(id=demo.id, **_demo_values(demo))
        with storage_errors("create a demo"):
            self._s.add(m)
            try:
                await self._s.flush()
            except IntegrityError as e:
                raise DuplicateKeyError(demo.id) from e
        return _demo_to_domain(m)

    async def update(self, demo_id: int, values: dict[str, object]) -> Demo | None:
        with storage_errors("update a demo"):
            result = await self._s.execute(build_update_statement(demo_id, values))
            m = result.scalar_one_or_none()
        return _demo_to_domain(m) if m else None

    async def delete(self, demo_id: int) -> Demo | None:
        with storage_errors("delete a demo"):
            result = await self._s.execute(build_delete_statement(demo_id))
            m = result.scalar_one_or_none()
        return _demo_to_domain(m) if m else None

    async def delete_many(self, ids: list[int]) -> int:
        with storage_errors("delete demos"):
            result = await self._s.execute(build_delete_many_statement(ids))
        return result.rowcount
