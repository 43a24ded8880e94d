"""Async test fixtures for Workflow Admin tests using SQLite."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from workflow_admin.database import create_session_factory, get_db
from workflow_admin.models import Base
from workflow_admin.services import group_svc, workflow_svc


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(engine):
    """HTTPX async test client against the Workflow Admin app."""
    from workflow_admin.app import app

    session_factory = create_session_factory(engine)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def finance_hr(db: AsyncSession):
    """Finance with 3 workflows, HR with none, and 2 ungrouped workflows."""
    finance = await group_svc.create_group(db, "Finance")
    hr = await group_svc.create_group(db, "HR")
    for name in ("Invoice approval", "Expense review", "Payroll run"):
        await workflow_svc.create_workflow(db, name=name, workflow_group_id=finance.id)
    for name in ("Welcome email", "Nightly cleanup"):
        await workflow_svc.create_workflow(db, name=name)
    return finance, hr
