"""
Page Service for Sellin TN

Renders the landing page and the store pages from the HTML templates in
the package's templates folder.
"""
from __future__ import annotations
import html
import logging
from pathlib import Path
from string import Template
from typing import Optional
import aiofiles

from sellin.models.store import StoreRecord

logger = logging.getLogger(__name__)

TEMPLATES_PATH = Path(__file__).parent.parent / "templates"


def format_created_date(record: StoreRecord) -> str:
    """Creation date as e.g. ``January 5, 2025``."""
    created = record.created_at
    return f"{created.strftime('%B')} {created.day}, {created.year}"


class PageService:
    """
    Loads templates once and fills them in.

    Templates use ``$name`` placeholders (string.Template) so that CSS and
    script braces need no escaping. Every value is HTML-escaped.
    """

    def __init__(self, templates_path: Optional[Path] = None, app_name: str = "Sellin TN"):
        self.templates_path = templates_path or TEMPLATES_PATH
        self.app_name = app_name
        self._cache: dict[str, str] = {}

    async def render_home(self, apex_domain: str) -> str:
        return await self._render("home.html", {
            "app_name": self.app_name,
            "apex_domain": apex_domain,
        })

    async def render_store(self, record: StoreRecord, apex_domain: str) -> str:
        return await self._render("store.html", {
            "app_name": self.app_name,
            "name": record.name,
            "status": record.status,
            "created": format_created_date(record),
            "store_host": f"{record.subdomain}.{apex_domain}",
        })

    async def render_not_found(self, identifier: str) -> str:
        return await self._render("not_found.html", {
            "app_name": self.app_name,
            "name": identifier,
        })

    async def _render(self, template_name: str, values: dict) -> str:
        source = await self._read_template(template_name)
        escaped = {key: html.escape(str(value)) for key, value in values.items()}
        return Template(source).safe_substitute(escaped)

    async def _read_template(self, template_name: str) -> str:
        """Read a template with caching."""
        if template_name in self._cache:
            return self._cache[template_name]

        path = self.templates_path / template_name
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            content = await f.read()
        self._cache[template_name] = content
        logger.debug(f"Loaded template {path}")
        return content

