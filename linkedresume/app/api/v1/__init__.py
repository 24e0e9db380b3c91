"""API v1 module - resume JSON API and browser-facing render routes."""
from linkedresume.app.api.v1.render import router as render_router
from linkedresume.app.api.v1.resume import router as resume_router

__all__ = ["render_router", "resume_router"]
