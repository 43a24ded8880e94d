"""Dashboard router: the root URL lands on the workflow list."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

router = APIRouter()


@router.get("/")
async def dashboard():
    return RedirectResponse("/workflows/", status_code=303)
