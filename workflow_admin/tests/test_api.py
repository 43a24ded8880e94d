"""Tests for the JSON API and the HTML list page."""

from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from workflow_admin.services import group_svc, workflow_svc


@pytest.mark.asyncio
async def test_tabs_endpoint_empty(client: AsyncClient):
    res = await client.get("/api/workflows/tabs")
    assert res.status_code == 200
    data = res.json()
    assert data["default_tab"] == "all"
    assert data["tabs"] == [{"key": "all", "label": "All", "badge": 0, "badge_color": "success"}]
    assert data["actions"] == [{"name": "create", "label": "New workflow", "url": "/workflows/new"}]


@pytest.mark.asyncio
async def test_tabs_endpoint_scenario(client: AsyncClient, finance_hr):
    res = await client.get("/api/workflows/tabs")
    tabs = res.json()["tabs"]
    assert [(t["key"], t["badge"]) for t in tabs] == [("all", 5), ("Finance", 3)]


@pytest.mark.asyncio
async def test_list_workflows_by_tab(client: AsyncClient, finance_hr):
    res = await client.get("/api/workflows", params={"tab": "Finance"})
    assert res.status_code == 200
    data = res.json()
    assert data["tab"] == "Finance"
    assert len(data["workflows"]) == 3

    res = await client.get("/api/workflows", params={"tab": "nope"})
    assert res.json()["tab"] == "all"
    assert len(res.json()["workflows"]) == 5


@pytest.mark.asyncio
async def test_create_workflow_via_api(client: AsyncClient, db: AsyncSession):
    group = await group_svc.create_group(db, "Ops")
    res = await client.post(
        "/api/workflows",
        json={"name": "Deploy", "workflow_group_id": str(group.id)},
    )
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "Deploy"
    assert data["status"] == "draft"
    assert data["workflow_group_id"] == str(group.id)


@pytest.mark.asyncio
async def test_create_workflow_unknown_group(client: AsyncClient):
    res = await client.post(
        "/api/workflows",
        json={"name": "Orphan", "workflow_group_id": str(uuid.uuid4())},
    )
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_create_workflow_validation(client: AsyncClient):
    res = await client.post("/api/workflows", json={"name": "", "status": "running"})
    assert res.status_code == 422


@pytest.mark.asyncio
async def test_get_workflow_via_api(client: AsyncClient, db: AsyncSession):
    wf = await workflow_svc.create_workflow(db, name="Fetch")
    res = await client.get(f"/api/workflows/{wf.id}")
    assert res.status_code == 200
    assert res.json()["name"] == "Fetch"
    assert (await client.get(f"/api/workflows/{uuid.uuid4()}")).status_code == 404


@pytest.mark.asyncio
async def test_update_workflow_group_via_api(client: AsyncClient, db: AsyncSession):
    group = await group_svc.create_group(db, "Sales")
    wf = await workflow_svc.create_workflow(db, name="Lead intake")

    res = await client.patch(f"/api/workflows/{wf.id}", json={"workflow_group_id": str(group.id)})
    assert res.status_code == 200
    assert res.json()["workflow_group_id"] == str(group.id)

    res = await client.patch(f"/api/workflows/{wf.id}", json={"workflow_group_id": None})
    assert res.json()["workflow_group_id"] is None


@pytest.mark.asyncio
async def test_update_workflow_not_found(client: AsyncClient):
    res = await client.patch(f"/api/workflows/{uuid.uuid4()}", json={"name": "x"})
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_delete_workflow_via_api(client: AsyncClient, db: AsyncSession):
    wf = await workflow_svc.create_workflow(db, name="Gone")
    res = await client.delete(f"/api/workflows/{wf.id}")
    assert res.status_code == 200
    assert res.json()["deleted"] is True
    assert (await client.delete(f"/api/workflows/{wf.id}")).status_code == 404


@pytest.mark.asyncio
async def test_groups_via_api(client: AsyncClient):
    res = await client.post("/api/groups", json={"name": "Support"})
    assert res.status_code == 200
    group_id = res.json()["id"]

    listed = (await client.get("/api/groups")).json()
    assert listed == [{"id": group_id, "name": "Support", "workflow_count": 0}]

    res = await client.patch(f"/api/groups/{group_id}", json={"name": "Customer Support"})
    assert res.json()["name"] == "Customer Support"

    assert (await client.delete(f"/api/groups/{group_id}")).json()["deleted"] is True
    assert (await client.delete(f"/api/groups/{group_id}")).status_code == 404


@pytest.mark.asyncio
async def test_root_redirects_to_list(client: AsyncClient):
    res = await client.get("/", follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/workflows/"


@pytest.mark.asyncio
async def test_list_page_renders_tabs(client: AsyncClient, finance_hr):
    res = await client.get("/workflows/")
    assert res.status_code == 200
    assert 'data-tab="all"' in res.text
    assert 'data-tab="Finance"' in res.text
    assert 'data-tab="HR"' not in res.text
    assert "New workflow" in res.text


@pytest.mark.asyncio
async def test_list_page_group_tab(client: AsyncClient, finance_hr):
    res = await client.get("/workflows/", params={"tab": "Finance"})
    assert res.status_code == 200
    assert "Payroll run" in res.text
    assert "Welcome email" not in res.text


@pytest.mark.asyncio
async def test_list_page_empty(client: AsyncClient):
    res = await client.get("/workflows/")
    assert res.status_code == 200
    assert "No workflows in All." in res.text


@pytest.mark.asyncio
async def test_new_workflow_form(client: AsyncClient, finance_hr):
    res = await client.get("/workflows/new")
    assert res.status_code == 200
    assert "Finance" in res.text


@pytest.mark.asyncio
async def test_create_workflow_form(client: AsyncClient, db: AsyncSession):
    group = await group_svc.create_group(db, "Finance")
    res = await client.post(
        "/workflows/new",
        data={"name": "Form WF", "description": "via form", "workflow_group_id": str(group.id)},
        follow_redirects=False,
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/workflows/"

    tabs = (await client.get("/api/workflows/tabs")).json()["tabs"]
    assert [(t["key"], t["badge"]) for t in tabs] == [("all", 1), ("Finance", 1)]


@pytest.mark.asyncio
async def test_create_workflow_form_unknown_group(client: AsyncClient):
    res = await client.post(
        "/workflows/new",
        data={"name": "Bad", "workflow_group_id": "not-a-uuid"},
        follow_redirects=False,
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/workflows/new"


@pytest.mark.asyncio
async def test_delete_workflow_form(client: AsyncClient, db: AsyncSession):
    wf = await workflow_svc.create_workflow(db, name="Bye")
    res = await client.post(f"/workflows/{wf.id}/delete", follow_redirects=False)
    assert res.status_code == 303
    assert (await client.get("/api/workflows/tabs")).json()["tabs"][0]["badge"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "status"])
async def test_update_workflow_rejects_null_for_required_fields(
    client: AsyncClient, db: AsyncSession, field: str
):
    wf = await workflow_svc.create_workflow(db, name="Keep me", status="published")
    res = await client.patch(f"/api/workflows/{wf.id}", json={field: None})
    assert res.status_code == 422

    data = (await client.get(f"/api/workflows/{wf.id}")).json()
    assert data["name"] == "Keep me"
    assert data["status"] == "published"


@pytest.mark.asyncio
async def test_create_workflow_rejects_blank_name(client: AsyncClient):
    res = await client.post("/api/workflows", json={"name": "   "})
    assert res.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["   ", "x" * 201])
async def test_create_workflow_form_rejects_bad_name(client: AsyncClient, name: str):
    res = await client.post(
        "/workflows/new",
        data={"name": name},
        follow_redirects=False,
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/workflows/new"

    tabs = (await client.get("/api/workflows/tabs")).json()["tabs"]
    assert tabs[0]["badge"] == 0


@pytest.mark.asyncio
async def test_create_workflow_form_strips_name(client: AsyncClient):
    await client.post("/workflows/new", data={"name": "  Padded  "}, follow_redirects=False)
    workflows = (await client.get("/api/workflows")).json()["workflows"]
    assert [wf["name"] for wf in workflows] == ["Padded"]
