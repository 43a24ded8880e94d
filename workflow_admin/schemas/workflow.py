"""Pydantic models for the workflow admin API."""

from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, Field, field_validator

WorkflowStatus = Literal["draft", "published", "paused"]
NAME_MAX_LENGTH = 200


class WorkflowCreate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = None
    status: WorkflowStatus = "draft"
    workflow_group_id: uuid.UUID | None = None


class WorkflowUpdate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = None
    status: WorkflowStatus | None = None
    workflow_group_id: uuid.UUID | None = None  # explicit null ungroups the workflow

    @field_validator("name", "status")
    @classmethod
    def reject_null(cls, value):
        # Omit the field to leave it unchanged; the columns are NOT NULL
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class GroupCreate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)


class GroupUpdate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
