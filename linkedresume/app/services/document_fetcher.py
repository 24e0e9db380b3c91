"""
Fetch a profile page and parse it into a BeautifulSoup tree.
No retries, no caching, no timeout: a fetch blocks until urllib returns or errors.
"""
from __future__ import annotations

from http.client import HTTPException
from urllib.request import urlopen

from bs4 import BeautifulSoup

from linkedresume.app.core.exceptions import FetchError
from linkedresume.app.core.logging_config import get_logger

logger = get_logger("services.document_fetcher")

PARSER = "html.parser"


def parse_document(
    markup: str | bytes,
    url: str = "<markup>",
    encoding: str | None = None,
) -> BeautifulSoup:
    """
    Parse markup already in hand. `url` is only used in error messages.
    `encoding` is the declared charset for byte markup; None lets bs4 detect it.
    """
    from_encoding = encoding if isinstance(markup, bytes) else None
    try:
        return BeautifulSoup(markup, PARSER, from_encoding=from_encoding)
    except Exception as exc:
        raise FetchError(url, f"unparseable content: {exc}") from exc


def fetch_document(url: str) -> BeautifulSoup:
    """GET `url` and return the parsed document. Raises FetchError."""
    try:
        with urlopen(url) as resp:
            data = resp.read()
            charset = resp.headers.get_content_charset()
    except (OSError, HTTPException, ValueError) as exc:
        logger.warning("Fetch failed url=%s error=%s", url, exc)
        raise FetchError(url, str(exc)) from exc

    logger.info("Fetched url=%s bytes=%d charset=%s", url, len(data), charset)
    return parse_document(data, url, encoding=charset)
