"""Workflow Admin database models."""

from .base import Base
from .workflow import Workflow, WorkflowGroup

__all__ = [
    "Base",
    "Workflow",
    "WorkflowGroup",
]
