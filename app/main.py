"""
Resume Analytics Service - Main FastAPI Application

Deterministic resume scoring (ATS, completeness, job match) with optional
AI audits merged into the local results.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")

    if settings.gemini_api_key:
        logger.info(f"AI audits enabled with model {settings.gemini_model}")
    else:
        logger.warning("AI audits disabled: no Gemini API key, mock audits will be returned")

    yield

    # Shutdown
    logger.info("Shutting down Resume Analytics Service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
## Resume Analytics API

Scores resumes the way an Applicant Tracking System would and explains how to
improve them.

### Features

- **ATS Score**: Strict 0-100 score combining structure and writing impact
- **Job Match**: Keyword overlap with a pasted job description
- **Section Scores**: Contact info, summary, experience, education, skills,
  achievements, projects and certifications
- **Readability**: Bullet length, metric density and weak phrasing
- **AI Audit**: Optional Gemini audit merged into the local results

### Quick Start

1. Send your resume data to `/api/analytics`
2. Add a `jobDescription` to get a job match score
3. Use `/api/analytics/audit` for an AI-assisted review
        """,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Errors the routes did not turn into an HTTPException
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An internal error occurred",
                "detail": str(exc) if settings.debug else "Please try again later"
            }
        )

    # Include API routes
    app.include_router(router, prefix="/api")

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": app.docs_url,
            "api": "/api",
            "aiAudit": bool(get_settings().gemini_api_key),
        }

    return app


# Create the application instance
app = create_app()

