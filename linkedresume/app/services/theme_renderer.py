"""
Forward a resume to the theme rendering service and relay its reply.
Upstream error statuses are passed through as-is; only transport failures raise.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from http.client import HTTPException
from urllib.error import HTTPError
from urllib.parse import quote
from urllib.request import Request, urlopen

from linkedresume.app.core.config import settings
from linkedresume.app.core.exceptions import ThemeRenderError
from linkedresume.app.core.logging_config import get_logger
from linkedresume.app.schemas.resume import ResumeDocument

logger = get_logger("services.theme_renderer")

DEFAULT_CONTENT_TYPE = "text/html; charset=utf-8"


@dataclass(frozen=True)
class ThemeResponse:
    status_code: int
    body: bytes
    content_type: str


def theme_url(theme: str) -> str:
    return f"{settings.theme_service_url.rstrip('/')}/{quote(theme, safe='')}"


def render_theme(resume: ResumeDocument, theme: str) -> ThemeResponse:
    """POST {"resume": ...} to the theme service. Raises ThemeRenderError."""
    if not theme:
        raise ThemeRenderError(theme, "missing theme")

    payload = json.dumps({"resume": resume.model_dump(mode="json")}).encode("utf-8")
    req = Request(
        theme_url(theme),
        data=payload,
        headers={"Content-Type": "application/json"},
        method="POST",
    )

    try:
        with urlopen(req) as resp:
            status = resp.status
            body = resp.read()
            content_type = resp.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE
    except HTTPError as exc:
        status = exc.code
        body = exc.read()
        content_type = exc.headers.get("Content-Type") if exc.headers else None
        content_type = content_type or DEFAULT_CONTENT_TYPE
    except (OSError, HTTPException, ValueError) as exc:
        logger.warning("Theme service unreachable theme=%s error=%s", theme, exc)
        raise ThemeRenderError(theme, str(exc)) from exc

    logger.info("Rendered theme=%s status=%d bytes=%d", theme, status, len(body))
    return ThemeResponse(status_code=status, body=body, content_type=content_type)
