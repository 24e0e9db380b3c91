"""
Browser-facing routes - index page and themed resume rendering.
"""
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates

from linkedresume.app.core.config import settings
from linkedresume.app.core.logging_config import get_logger
from linkedresume.app.services.profile_extractor import resume_for_url
from linkedresume.app.services.theme_catalog import list_themes
from linkedresume.app.services.theme_renderer import render_theme

logger = get_logger("api.render")
router = APIRouter()
templates = Jinja2Templates(directory=settings.templates_dir)


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Landing page with the resume form and, when configured, the theme list."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"themes": list_themes(), "app_name": settings.app_name},
    )


@router.post("/resume")
def render_resume(url: str = Form(""), theme: str = Form("")) -> Response:
    """
    Extract the resume at `url` and render it with `theme`.

    The theme service's status code and body are relayed verbatim.
    """
    if not url:
        return JSONResponse(status_code=400, content={"error": "missing URL"})

    resume = resume_for_url(url)
    rendered = render_theme(resume, theme)
    return Response(
        content=rendered.body,
        status_code=rendered.status_code,
        media_type=rendered.content_type,
    )
