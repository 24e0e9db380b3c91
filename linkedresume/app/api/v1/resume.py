"""
Resume JSON API - scrapes a profile URL and returns the resume document.
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from linkedresume.app.core.logging_config import get_logger
from linkedresume.app.schemas.resume import ErrorOut, ResumeDocument
from linkedresume.app.services.profile_extractor import resume_for_url

logger = get_logger("api.resume")
router = APIRouter()


@router.get(
    "",
    response_model=ResumeDocument,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def get_resume(url: str = ""):
    """
    Extract a resume from the profile page at `url`.

    Returns the resume as JSON. Extraction is all-or-nothing: any missing
    field yields a 500 with `{"error": ...}`.
    """
    if not url:
        return JSONResponse(status_code=400, content={"error": "missing URL"})

    logger.info("Resume requested url=%s", url[:120])
    return resume_for_url(url)
