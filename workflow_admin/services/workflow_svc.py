"""Workflow CRUD service."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.workflow import Workflow

logger = logging.getLogger(__name__)


async def list_workflows(db: AsyncSession, group_id: uuid.UUID | None = None) -> list[Workflow]:
    stmt = select(Workflow).options(selectinload(Workflow.group)).order_by(Workflow.name)
    if group_id is not None:
        stmt = stmt.where(Workflow.workflow_group_id == group_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_workflow(db: AsyncSession, workflow_id: uuid.UUID) -> Workflow | None:
    stmt = (
        select(Workflow)
        .where(Workflow.id == workflow_id)
        .options(selectinload(Workflow.group))
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_workflow(
    db: AsyncSession,
    name: str,
    description: str | None = None,
    status: str = "draft",
    workflow_group_id: uuid.UUID | None = None,
) -> Workflow:
    workflow = Workflow(
        name=name,
        description=description,
        status=status,
        workflow_group_id=workflow_group_id,
    )
    db.add(workflow)
    await db.commit()
    await db.refresh(workflow)
    logger.info("Created workflow %s (%s)", workflow.id, workflow.name)
    return workflow


async def update_workflow(
    db: AsyncSession, workflow_id: uuid.UUID, **kwargs
) -> Workflow | None:
    workflow = await get_workflow(db, workflow_id)
    if not workflow:
        return None
    for key, value in kwargs.items():
        if hasattr(workflow, key):
            setattr(workflow, key, value)
    await db.commit()
    await db.refresh(workflow)
    return workflow


async def assign_group(
    db: AsyncSession, workflow_id: uuid.UUID, group_id: uuid.UUID | None
) -> Workflow | None:
    """Move a workflow into a group, or out of any group when ``group_id`` is None."""
    return await update_workflow(db, workflow_id, workflow_group_id=group_id)


async def delete_workflow(db: AsyncSession, workflow_id: uuid.UUID) -> bool:
    stmt = select(Workflow).where(Workflow.id == workflow_id)
    result = await db.execute(stmt)
    workflow = result.scalar_one_or_none()
    if not workflow:
        return False
    await db.delete(workflow)
    await db.commit()
    logger.info("Deleted workflow %s", workflow_id)
    return True
