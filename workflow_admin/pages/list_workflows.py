"""List page for workflows, tabbed by workflow group.

Tabs are plain ``Tab`` records produced by ``build_tabs``; nothing here knows
about FastAPI or templates. ``ListWorkflowsPage`` is the seam the routers
render: it holds the injected resource model and exposes the page's actions,
tabs, default tab and records.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from .. import i18n
from ..config import settings
from ..models.workflow import Workflow, WorkflowGroup

logger = logging.getLogger(__name__)

ALL_TAB = "all"
ALL_TAB_LABEL_KEY = "workflows.sections.grouping.all"

QueryModifier = Callable[[Select], Select]


@dataclass(frozen=True)
class Tab:
    """One tab of the list page: a filtered view plus its count badge."""

    key: str
    label: str
    badge: int = 0
    badge_color: str = "success"
    modify_query: QueryModifier | None = field(default=None, compare=False, repr=False)

    def apply(self, stmt: Select) -> Select:
        if self.modify_query is None:
            return stmt
        return self.modify_query(stmt)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "badge": self.badge,
            "badge_color": self.badge_color,
        }


@dataclass(frozen=True)
class CreateAction:
    """Header action that links to the record-creation form."""

    label: str
    url: str
    name: str = "create"


@dataclass
class ListWorkflowsView:
    tabs: dict[str, Tab]
    active_tab: str
    records: list
    actions: list[CreateAction]

    @property
    def active(self) -> Tab:
        return self.tabs[self.active_tab]


def _where_group(resource, group_id) -> QueryModifier:
    def modify(stmt: Select) -> Select:
        return stmt.where(resource.workflow_group_id == group_id)

    return modify


def title_case(name: str) -> str:
    """Capitalize each whitespace-separated word; "o'neil 2fa" becomes "O'neil 2fa"."""
    return re.sub(r"\S+", lambda word: word.group(0).capitalize(), name)


async def _count(db: AsyncSession, stmt: Select) -> int:
    count_stmt = select(func.count()).select_from(stmt.subquery())
    return (await db.execute(count_stmt)).scalar() or 0


async def build_tabs(
    db: AsyncSession,
    resource=Workflow,
    group_model=WorkflowGroup,
    *,
    translate: Callable[..., str] = i18n.translate,
    badge_color: str | None = None,
) -> dict[str, Tab]:
    """Build the ordered tab mapping: "all" first, then one tab per non-empty group."""
    color = badge_color or settings.badge_color

    stmt = (
        select(group_model)
        .where(group_model.workflows.any())
        .options(selectinload(group_model.workflows))
        .order_by(group_model.name, group_model.id)
    )
    groups = (await db.execute(stmt)).scalars().unique().all()

    grouped: dict[str, Tab] = {}
    for group in groups:
        if group.name == ALL_TAB:
            logger.warning("Skipping workflow group %s: its name collides with the all tab", group.id)
            continue
        modify = _where_group(resource, group.id)
        grouped[group.name] = Tab(
            key=group.name,
            label=title_case(group.name),
            badge=await _count(db, modify(select(resource))),
            badge_color=color,
            modify_query=modify,
        )

    tabs = {
        ALL_TAB: Tab(
            key=ALL_TAB,
            label=translate(ALL_TAB_LABEL_KEY),
            badge=await _count(db, select(resource)),
            badge_color=color,
        ),
    }
    tabs.update(grouped)
    logger.debug("Built %d workflow tabs", len(tabs))
    return tabs


class ListWorkflowsPage:
    """The workflow list page, bound to an explicit resource model."""

    def __init__(
        self,
        resource=Workflow,
        group_model=WorkflowGroup,
        *,
        create_url: str = "/workflows/new",
        translate: Callable[..., str] = i18n.translate,
    ):
        self.resource = resource
        self.group_model = group_model
        self.create_url = create_url
        self.translate = translate

    def get_actions(self) -> list[CreateAction]:
        return [CreateAction(label=self.translate("workflows.actions.create"), url=self.create_url)]

    async def get_tabs(self, db: AsyncSession) -> dict[str, Tab]:
        return await build_tabs(db, self.resource, self.group_model, translate=self.translate)

    def get_default_active_tab(self) -> str:
        return ALL_TAB

    def resolve_active_tab(self, tabs: dict[str, Tab], requested: str | None) -> str:
        if requested and requested in tabs:
            return requested
        return self.get_default_active_tab()

    async def list_records(self, db: AsyncSession, tab: Tab) -> list:
        stmt = (
            tab.apply(select(self.resource))
            .options(selectinload(self.resource.group))
            .order_by(self.resource.name, self.resource.id)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def load(self, db: AsyncSession, requested_tab: str | None = None) -> ListWorkflowsView:
        """Everything the list template needs for one request."""
        tabs = await self.get_tabs(db)
        active = self.resolve_active_tab(tabs, requested_tab)
        return ListWorkflowsView(
            tabs=tabs,
            active_tab=active,
            records=await self.list_records(db, tabs[active]),
            actions=self.get_actions(),
        )
