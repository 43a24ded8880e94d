"""WorkflowGroup and Workflow models."""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, RecordMixin

WORKFLOW_STATUSES = ("draft", "published", "paused")


class WorkflowGroup(RecordMixin, Base):
    """A named category used to cluster workflows in the list page."""

    __tablename__ = "workflow_group"

    name: Mapped[str] = mapped_column(String(200))

    workflows: Mapped[list[Workflow]] = relationship(back_populates="group")

    def __repr__(self) -> str:
        return f"<WorkflowGroup {self.name!r}>"


class Workflow(RecordMixin, Base):
    """A workflow automation definition, optionally assigned to a group."""

    __tablename__ = "workflow"

    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    status: Mapped[str] = mapped_column(String(20), default="draft")  # draft/published/paused

    # Null when the workflow belongs to no group
    workflow_group_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("workflow_group.id", ondelete="SET NULL"), index=True, default=None
    )

    group: Mapped[WorkflowGroup | None] = relationship(back_populates="workflows")

    def __repr__(self) -> str:
        return f"<Workflow {self.name!r} ({self.status})>"
