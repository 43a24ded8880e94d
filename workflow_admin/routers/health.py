"""Health and readiness checks for the workflow admin service."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.workflow import Workflow, WorkflowGroup

router = APIRouter()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    await db.execute(text("SELECT 1"))
    return {"status": "healthy", "service": "workflow_admin"}


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Ready once both tables answer; a missing migration fails the probe."""
    workflows = (await db.execute(select(func.count(Workflow.id)))).scalar_one()
    groups = (await db.execute(select(func.count(WorkflowGroup.id)))).scalar_one()
    return {
        "status": "ready",
        "service": "workflow_admin",
        "workflows": workflows,
        "groups": groups,
    }
