"""WorkflowGroup CRUD service."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.workflow import Workflow, WorkflowGroup

logger = logging.getLogger(__name__)


async def list_groups(db: AsyncSession) -> list[tuple[WorkflowGroup, int]]:
    """All groups with their workflow counts, empty groups included."""
    stmt = (
        select(WorkflowGroup, func.count(Workflow.id))
        .outerjoin(Workflow, Workflow.workflow_group_id == WorkflowGroup.id)
        .group_by(WorkflowGroup.id)
        .order_by(WorkflowGroup.name, WorkflowGroup.id)
    )
    result = await db.execute(stmt)
    return [(group, count) for group, count in result.all()]


async def get_group(db: AsyncSession, group_id: uuid.UUID) -> WorkflowGroup | None:
    result = await db.execute(select(WorkflowGroup).where(WorkflowGroup.id == group_id))
    return result.scalar_one_or_none()


async def get_group_by_name(db: AsyncSession, name: str) -> WorkflowGroup | None:
    stmt = select(WorkflowGroup).where(WorkflowGroup.name == name).order_by(WorkflowGroup.id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def create_group(db: AsyncSession, name: str) -> WorkflowGroup:
    group = WorkflowGroup(name=name)
    db.add(group)
    await db.commit()
    await db.refresh(group)
    logger.info("Created workflow group %s (%s)", group.id, group.name)
    return group


async def rename_group(db: AsyncSession, group_id: uuid.UUID, name: str) -> WorkflowGroup | None:
    group = await get_group(db, group_id)
    if not group:
        return None
    group.name = name
    await db.commit()
    await db.refresh(group)
    return group


async def delete_group(db: AsyncSession, group_id: uuid.UUID) -> bool:
    """Delete a group; its workflows stay and become ungrouped."""
    group = await get_group(db, group_id)
    if not group:
        return False
    # SQLite does not enforce ON DELETE SET NULL unless foreign keys are switched on
    await db.execute(
        update(Workflow)
        .where(Workflow.workflow_group_id == group_id)
        .values(workflow_group_id=None)
        .execution_options(synchronize_session="fetch")
    )
    await db.delete(group)
    await db.commit()
    logger.info("Deleted workflow group %s", group_id)
    return True
