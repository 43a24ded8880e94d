"""FastAPI application factory for Workflow Admin."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from .config import settings
from .i18n import translate


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Auto-create tables for SQLite (local dev)
    if "sqlite" in settings.database_url:
        from .database import engine
        from .models import Base
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield


app = FastAPI(title=settings.app_title, lifespan=lifespan)

templates = Jinja2Templates(directory=str(settings.templates_dir))
templates.env.globals["t"] = translate
templates.env.globals["app_title"] = settings.app_title

# Import and register routers
from .routers import (  # noqa: E402
    api,
    dashboard,
    health,
    workflows,
)

app.include_router(dashboard.router)
app.include_router(workflows.router)
app.include_router(api.router)
app.include_router(health.router)
