"""Demo endpoints — list/search, create, full and partial update, delete."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import commit_session
from app.application.use_cases.create_demo import CreateDemoUseCase
from app.application.use_cases.delete_demo import BatchDeleteUseCase, DeleteDemoUseCase
from app.application.use_cases.list_demos import ListDemosUseCase
from app.application.use_cases.update_demo import UpdateDemoUseCase
from app.domain.entities.demo import MAX_ID, MIN_ID, Demo
from app.domain.value_objects.enums import UpdateMode
from app.infrastructure.api.dependencies import (
    get_batch_delete_uc,
    get_create_demo_uc,
    get_db_session,
    get_delete_demo_uc,
    get_list_demos_uc,
    get_update_demo_uc,
)
from app.infrastructure.api.schemas import BatchDeleteIn, DemoFieldsIn

router = APIRouter(prefix="/demo", tags=["demo"])

# Out-of-range ids are rejected with 400 before reaching the database.
DemoId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]


@router.get("")
async def list_demos(
    search: str = "",
    list_uc: ListDemosUseCase = Depends(get_list_demos_uc),
):
    """List all demos, or those whose Name contains *search* (case-insensitive)."""
    demos = await list_uc.execute(search)
    return [_serialize_demo(d) for d in demos]


@router.post("", status_code=201)
async def create_demo(
    body: DemoFieldsIn,
    create_uc: CreateDemoUseCase = Depends(get_create_demo_uc),
    session: AsyncSession = Depends(get_db_session),
):
    demo = await create_uc.execute(body.model_dump())
    await commit_session(session)
    return {"message": "Data added successfully", "demo": _serialize_demo(demo)}


# Registered before /{demo_id} routes; POST is the only verb on this path.
@router.post("/delete")
async def delete_many_demos(
    body: BatchDeleteIn,
    batch_uc: BatchDeleteUseCase = Depends(get_batch_delete_uc),
    session: AsyncSession = Depends(get_db_session),
):
    deleted = await batch_uc.execute(body.ids)
    await commit_session(session)
    return {"success": True, "message": "Data deleted successfully", "deleted": deleted}


@router.put("/{demo_id}")
async def replace_demo(
    demo_id: DemoId,
    body: DemoFieldsIn,
    update_uc: UpdateDemoUseCase = Depends(get_update_demo_uc),
    session: AsyncSession = Depends(get_db_session),
):
    """Full update: fields missing from the body are reset to their defaults."""
    demo = await update_uc.execute(demo_id, body.model_dump(), UpdateMode.FULL)
    await commit_session(session)
    return {"message": "Data updated successfully", "demo": _serialize_demo(demo)}


@router.patch("/{demo_id}")
async def patch_demo(
    demo_id: DemoId,
    body: DemoFieldsIn,
    update_uc: UpdateDemoUseCase = Depends(get_update_demo_uc),
    session: AsyncSession = Depends(get_db_session),
):
    """Partial update: only the fields present in the body change."""
    changes = body.model_dump(exclude_unset=True)
    demo = await update_uc.execute(demo_id, changes, UpdateMode.PARTIAL)
    await commit_session(session)
    return {"message": "Data updated successfully", "demo": _serialize_demo(demo)}


@router.delete("/{demo_id}")
async def delete_demo(
    demo_id: DemoId,
    delete_uc: DeleteDemoUseCase = Depends(get_delete_demo_uc),
    session: AsyncSession = Depends(get_db_session),
):
    demo = await delete_uc.execute(demo_id)
    await commit_session(session)
    return {"message": "Data deleted successfully", "demo": _serialize_demo(demo)}


def _serialize_demo(d: Demo) -> dict:
    """Convert a Demo to its API shape (capitalised keys, lowercase id)."""
    return {
        "id": d.id,
        "Name": d.name,
        "Description": d.description,
        "Price": d.price,
        "Category": d.category,
    }
