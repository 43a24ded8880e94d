"""Localized UI strings looked up by dotted key.

``translate("workflows.sections.grouping.all")`` walks the nested table for the
configured locale, then the fallback locale, and finally returns the key
itself so a missing string shows up in the UI instead of failing the render.
"""

from __future__ import annotations

from typing import Any

from .config import settings

TRANSLATIONS: dict[str, dict[str, Any]] = {
    "en": {
        "workflows": {
            "title": "Workflows",
            "sections": {
                "grouping": {
                    "all": "All",
                },
            },
            "actions": {
                "create": "New workflow",
                "delete": "Delete",
                "save": "Save",
                "cancel": "Cancel",
            },
            "fields": {
                "name": "Name",
                "description": "Description",
                "status": "Status",
                "group": "Group",
            },
            "empty": "No workflows in :tab.",
            "ungrouped": "No group",
        },
    },
    "es": {
        "workflows": {
            "title": "Flujos de trabajo",
            "sections": {
                "grouping": {
                    "all": "Todos",
                },
            },
            "actions": {
                "create": "Nuevo flujo",
                "delete": "Eliminar",
                "save": "Guardar",
                "cancel": "Cancelar",
            },
            "fields": {
                "name": "Nombre",
                "description": "Descripción",
                "status": "Estado",
                "group": "Grupo",
            },
            "empty": "No hay flujos en :tab.",
            "ungrouped": "Sin grupo",
        },
    },
}


def _lookup(table: dict[str, Any], key: str) -> Any:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def _replace(line: str, replace: dict[str, Any]) -> str:
    # Longest names first so ":tab_name" is not clobbered by ":tab"
    for name in sorted(replace, key=len, reverse=True):
        line = line.replace(f":{name}", str(replace[name]))
    return line


def translate(key: str, locale: str | None = None, **replace: Any) -> str:
    """Return the localized string for ``key``, or ``key`` when none exists."""
    for candidate in (locale or settings.locale, settings.fallback_locale):
        value = _lookup(TRANSLATIONS.get(candidate, {}), key)
        if isinstance(value, str):
            return _replace(value, replace)
    return key
