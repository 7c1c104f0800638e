"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import dialect_name, get_session
from app.adapters.persistence.repositories import SqlDemoRepository, SqlSequenceAllocator
from app.application.ports.demo_repo import DemoRepository
from app.application.ports.sequence_allocator import SequenceAllocator
from app.application.use_cases.create_demo import CreateDemoUseCase
from app.application.use_cases.delete_demo import BatchDeleteUseCase, DeleteDemoUseCase
from app.application.use_cases.list_demos import ListDemosUseCase
from app.application.use_cases.update_demo import UpdateDemoUseCase
from app.config import settings

# Re-export session dependency
get_db_session = get_session


def get_demo_repo(session: AsyncSession = Depends(get_session)) -> DemoRepository:
    return SqlDemoRepository(session)


def get_sequence_allocator(
    session: AsyncSession = Depends(get_session),
) -> SequenceAllocator:
    # Same session as the demo repository: the counter bump and the insert
    # commit or roll back together.
    return SqlSequenceAllocator(session, dialect=dialect_name())


def get_list_demos_uc(
    demo_repo: DemoRepository = Depends(get_demo_repo),
) -> ListDemosUseCase:
    return ListDemosUseCase(demo_repo)


def get_create_demo_uc(
    allocator: SequenceAllocator = Depends(get_sequence_allocator),
    demo_repo: DemoRepository = Depends(get_demo_repo),
) -> CreateDemoUseCase:
    return CreateDemoUseCase(
        allocator=allocator,
        demo_repo=demo_repo,
        sequence_name=settings.sequence_name,
    )


def get_update_demo_uc(
    demo_repo: DemoRepository = Depends(get_demo_repo),
) -> UpdateDemoUseCase:
    return UpdateDemoUseCase(demo_repo)


def get_delete_demo_uc(
    demo_repo: DemoRepository = Depends(get_demo_repo),
) -> DeleteDemoUseCase:
    return DeleteDemoUseCase(demo_repo)


def get_batch_delete_uc(
    demo_repo: DemoRepository = Depends(get_demo_repo),
) -> BatchDeleteUseCase:
    return BatchDeleteUseCase(demo_repo)
