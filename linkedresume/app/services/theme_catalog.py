"""
Theme names for the index page, scraped from a third-party listing page.
Optional: disabled when themes_catalog_url is empty, and fetch failures yield [].
"""
from __future__ import annotations

from linkedresume.app.core.config import settings
from linkedresume.app.core.exceptions import FetchError
from linkedresume.app.core.logging_config import get_logger
from linkedresume.app.services.document_fetcher import fetch_document

logger = get_logger("services.theme_catalog")


def list_themes() -> list[str]:
    url = settings.themes_catalog_url
    if not url:
        return []
    try:
        doc = fetch_document(url)
    except FetchError as exc:
        logger.warning("Theme listing unavailable: %s", exc)
        return []

    names: list[str] = []
    for node in doc.select(settings.themes_catalog_selector):
        name = node.get_text(strip=True)
        if name and name not in names:
            names.append(name)
    logger.debug("Found %d themes at %s", len(names), url)
    return names
