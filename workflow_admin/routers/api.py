"""JSON API for workflows, groups and the list page's tabs."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.workflow import Workflow, WorkflowGroup
from ..pages.list_workflows import ListWorkflowsPage
from ..schemas.workflow import GroupCreate, GroupUpdate, WorkflowCreate, WorkflowUpdate
from ..services import group_svc, workflow_svc

router = APIRouter(prefix="/api")

page = ListWorkflowsPage(resource=Workflow, group_model=WorkflowGroup)


def _workflow_out(wf: Workflow) -> dict:
    return {
        "id": str(wf.id),
        "name": wf.name,
        "description": wf.description,
        "status": wf.status,
        "workflow_group_id": str(wf.workflow_group_id) if wf.workflow_group_id else None,
    }


def _group_out(group: WorkflowGroup, workflow_count: int | None = None) -> dict:
    data = {"id": str(group.id), "name": group.name}
    if workflow_count is not None:
        data["workflow_count"] = workflow_count
    return data


async def _require_group(db: AsyncSession, group_id: uuid.UUID | None) -> None:
    if group_id is not None and not await group_svc.get_group(db, group_id):
        raise HTTPException(status_code=404, detail="Workflow group not found")


# ── Tabs ─────────────────────────────────────────────────────────────────

@router.get("/workflows/tabs")
async def workflow_tabs(db: AsyncSession = Depends(get_db)):
    tabs = await page.get_tabs(db)
    return {
        "default_tab": page.get_default_active_tab(),
        "tabs": [tab.to_dict() for tab in tabs.values()],
        "actions": [
            {"name": action.name, "label": action.label, "url": action.url}
            for action in page.get_actions()
        ],
    }


# ── Workflows ────────────────────────────────────────────────────────────

@router.get("/workflows")
async def list_workflows(
    tab: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    view = await page.load(db, tab)
    return {
        "tab": view.active_tab,
        "workflows": [_workflow_out(wf) for wf in view.records],
    }


@router.post("/workflows")
async def create_workflow(
    data: WorkflowCreate,
    db: AsyncSession = Depends(get_db),
):
    await _require_group(db, data.workflow_group_id)
    wf = await workflow_svc.create_workflow(
        db,
        name=data.name,
        description=data.description,
        status=data.status,
        workflow_group_id=data.workflow_group_id,
    )
    return _workflow_out(wf)


@router.get("/workflows/{workflow_id}")
async def get_workflow(
    workflow_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    wf = await workflow_svc.get_workflow(db, workflow_id)
    if not wf:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return _workflow_out(wf)


@router.patch("/workflows/{workflow_id}")
async def update_workflow(
    workflow_id: uuid.UUID,
    data: WorkflowUpdate,
    db: AsyncSession = Depends(get_db),
):
    changes = data.model_dump(exclude_unset=True)
    await _require_group(db, changes.get("workflow_group_id"))
    wf = await workflow_svc.update_workflow(db, workflow_id, **changes)
    if not wf:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return _workflow_out(wf)


@router.delete("/workflows/{workflow_id}")
async def delete_workflow(
    workflow_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    if not await workflow_svc.delete_workflow(db, workflow_id):
        raise HTTPException(status_code=404, detail="Workflow not found")
    return {"deleted": True}


# ── Groups ───────────────────────────────────────────────────────────────

@router.get("/groups")
async def list_groups(db: AsyncSession = Depends(get_db)):
    groups = await group_svc.list_groups(db)
    return [_group_out(group, count) for group, count in groups]


@router.post("/groups")
async def create_group(
    data: GroupCreate,
    db: AsyncSession = Depends(get_db),
):
    group = await group_svc.create_group(db, name=data.name)
    return _group_out(group)


@router.patch("/groups/{group_id}")
async def rename_group(
    group_id: uuid.UUID,
    data: GroupUpdate,
    db: AsyncSession = Depends(get_db),
):
    group = await group_svc.rename_group(db, group_id, data.name)
    if not group:
        raise HTTPException(status_code=404, detail="Workflow group not found")
    return _group_out(group)


@router.delete("/groups/{group_id}")
async def delete_group(
    group_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    if not await group_svc.delete_group(db, group_id):
        raise HTTPException(status_code=404, detail="Workflow group not found")
    return {"deleted": True}
