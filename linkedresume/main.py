"""
FastAPI application entry point
"""
import argparse

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from linkedresume.app.api.v1 import render_router, resume_router
from linkedresume.app.core.config import settings
from linkedresume.app.core.exceptions import ResumeError
from linkedresume.app.core.logging_config import get_logger, setup_logging, uvicorn_log_config

logger = get_logger("main")

# Initialize FastAPI app
app = FastAPI(
    title="linkedresume",
    description="Profile page to JSON Resume converter",
    version=settings.app_version,
)


@app.exception_handler(ResumeError)
async def resume_error_handler(request: Request, exc: ResumeError) -> JSONResponse:
    """Every fetch/extraction/render failure becomes a 500 JSON error envelope."""
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


# Include routers
app.include_router(resume_router, prefix="/api/resume", tags=["resume"])
app.include_router(render_router, tags=["render"])


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the profile-to-resume converter.")
    parser.add_argument("--host", default=settings.host, help="interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="port to listen on")
    args = parser.parse_args()

    setup_logging()
    import uvicorn
    uvicorn.run(app, host=args.host, port=args.port, log_config=uvicorn_log_config())


if __name__ == "__main__":
    main()
