"""Workflow Admin configuration via pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class WorkflowAdminSettings(BaseSettings):
    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///workflow_admin.db"
    echo_sql: bool = False
    app_title: str = "Workflow Admin"
    locale: str = "en"
    fallback_locale: str = "en"
    badge_color: str = "success"

    model_config = {"env_prefix": "WFA_", "env_file": ".env", "extra": "ignore"}

    @property
    def base_dir(self) -> Path:
        return Path(__file__).resolve().parent

    @property
    def templates_dir(self) -> Path:
        return self.base_dir / "templates"

    @property
    def alembic_ini(self) -> Path:
        return self.base_dir / "alembic.ini"

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in {"prod", "production"}


settings = WorkflowAdminSettings()
