"""Workflow list page and create/delete routes (HTML form-based)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..app import templates
from ..database import get_db
from ..models.workflow import WORKFLOW_STATUSES, Workflow, WorkflowGroup
from ..pages.list_workflows import ListWorkflowsPage
from ..schemas.workflow import NAME_MAX_LENGTH
from ..services import group_svc, workflow_svc

router = APIRouter(prefix="/workflows")

page = ListWorkflowsPage(resource=Workflow, group_model=WorkflowGroup)


def _parse_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


@router.get("/")
async def workflow_list(
    request: Request,
    tab: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    view = await page.load(db, tab)
    return templates.TemplateResponse(
        request,
        "workflows/list.html",
        {"view": view},
    )


@router.get("/new")
async def new_workflow_form(request: Request, db: AsyncSession = Depends(get_db)):
    groups = await group_svc.list_groups(db)
    return templates.TemplateResponse(
        request,
        "workflows/new.html",
        {
            "groups": [group for group, _ in groups],
            "statuses": WORKFLOW_STATUSES,
        },
    )


@router.post("/new")
async def create_workflow(
    name: str = Form(...),
    description: str = Form(""),
    status: str = Form("draft"),
    workflow_group_id: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    name = name.strip()
    if not name or len(name) > NAME_MAX_LENGTH:
        return RedirectResponse("/workflows/new", status_code=303)

    group = None
    if workflow_group_id:
        group_id = _parse_uuid(workflow_group_id)
        group = await group_svc.get_group(db, group_id) if group_id else None
        if not group:
            return RedirectResponse("/workflows/new", status_code=303)
    if status not in WORKFLOW_STATUSES:
        status = "draft"

    await workflow_svc.create_workflow(
        db,
        name=name,
        description=description or None,
        status=status,
        workflow_group_id=group.id if group else None,
    )
    return RedirectResponse("/workflows/", status_code=303)


@router.post("/{workflow_id}/delete")
async def delete_workflow(
    workflow_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    await workflow_svc.delete_workflow(db, workflow_id)
    return RedirectResponse("/workflows/", status_code=303)
