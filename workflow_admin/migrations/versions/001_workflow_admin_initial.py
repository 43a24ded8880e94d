"""Initial workflow admin schema.

Revision ID: 001_workflow_admin_initial
Revises:
Create Date: 2026-10-19

"""

from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001_workflow_admin_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_table(bind, name: str) -> bool:
    return sa.inspect(bind).has_table(name)


def _has_index(bind, table_name: str, index_name: str) -> bool:
    indexes = sa.inspect(bind).get_indexes(table_name)
    return any(idx.get("name") == index_name for idx in indexes)


def upgrade() -> None:
    bind = op.get_bind()

    if not _has_table(bind, "workflow_group"):
        op.create_table(
            "workflow_group",
            sa.Column("name", sa.String(length=200), nullable=False),
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_workflow_group"),
        )

    if not _has_table(bind, "workflow"):
        op.create_table(
            "workflow",
            sa.Column("name", sa.String(length=200), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("status", sa.String(length=20), nullable=False, server_default="draft"),
            sa.Column("workflow_group_id", sa.Uuid(), nullable=True),
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.ForeignKeyConstraint(
                ["workflow_group_id"], ["workflow_group.id"], ondelete="SET NULL",
                name="fk_workflow_workflow_group_id_workflow_group",
            ),
            sa.PrimaryKeyConstraint("id", name="pk_workflow"),
        )

    if not _has_index(bind, "workflow", "ix_workflow_workflow_group_id"):
        op.create_index("ix_workflow_workflow_group_id", "workflow", ["workflow_group_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_workflow_workflow_group_id", table_name="workflow")
    op.drop_table("workflow")
    op.drop_table("workflow_group")
