"""
API Routes for the Resume Analytics service.

Provides endpoints for:
- Scoring a resume (ATS, completeness, job match)
- Scoring a resume merged with an AI audit
- Normalizing description bullets the way the scorer sees them
- The default placeholder resume
- Health checks
"""
from datetime import datetime
import logging

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from app.models.analytics import (
    AnalyticsResponse,
    AuditedAnalyticsResponse,
    AuditRequest,
    HealthResponse,
    NormalizeBulletsRequest,
    NormalizeBulletsResponse,
)
from app.models.resume import ResumeData
from app.models.templates import default_resume
from app.services.ai_audit import FAILED_AUDIT, MOCK_AUDIT, audit_resume
from app.services.audit_merge import merge_audit_result
from app.services.cache import get_cached_audit, get_redis_client, store_audit
from app.services.nlp_utils import get_description_bullets
from app.services.resume_analytics import AnalyticsResult, get_resume_analyzer
from app.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


def to_response(result: AnalyticsResult) -> AnalyticsResponse:
    return AnalyticsResponse.model_validate(result.to_dict())


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns the service status, version, and whether AI audits are backed by a
    real model (as opposed to the mock audit).
    """
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow(),
        aiAuditAvailable=bool(settings.gemini_api_key),
        cacheEnabled=get_redis_client() is not None,
    )


@router.post("/analytics", response_model=AnalyticsResponse, tags=["Analytics"])
async def analyze_resume(resume_data: ResumeData):
    """
    Score a resume.

    Request body: the resume data in the editor format. Supplying a
    `jobDescription` longer than 20 characters enables job-match scoring.

    Returns:
    - atsScore, completeness, jobMatchScore (0-100)
    - sectionScores: per-section scores
    - keywords: lexicon counts and missing job keywords
    - readability: bullet statistics
    - strengths / improvements
    """
    try:
        result = get_resume_analyzer().analyze(resume_data)
        return to_response(result)
    except Exception as e:
        logger.error(f"Resume analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/analytics/audit", response_model=AuditedAnalyticsResponse, tags=["Analytics"])
async def analyze_resume_with_audit(request: AuditRequest):
    """
    Score a resume and merge in an AI audit.

    The audit's missing keywords are unioned into the local list (max 10) and
    its issues are prepended to the improvements with an "[AI Audit]" prefix.
    Scores always come from the local engine.
    """
    settings = get_settings()

    audit = await get_cached_audit(request.resume_data, request.target_role)
    if audit is None:
        audit = await run_in_threadpool(audit_resume, request.resume_data, request.target_role)
        if audit not in (FAILED_AUDIT, MOCK_AUDIT):
            await store_audit(request.resume_data, request.target_role, audit, ttl=settings.cache_ttl)

    try:
        local = get_resume_analyzer().analyze(request.resume_data)
        merged = merge_audit_result(local, audit)
        return AuditedAnalyticsResponse(analytics=to_response(merged), audit=audit)
    except Exception as e:
        logger.error(f"Audited analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/bullets/normalize", response_model=NormalizeBulletsResponse, tags=["Utilities"])
async def normalize_bullets(request: NormalizeBulletsRequest):
    """
    Split a description into bullets exactly as the scorer does.

    Accepts either newline-delimited text (leading "•", "-" or "*" markers are
    stripped) or a list of bullets (blank entries are dropped).
    """
    return NormalizeBulletsResponse(bullets=get_description_bullets(request.description))


@router.get("/templates/default", response_model=ResumeData, response_model_by_alias=True, tags=["Templates"])
async def get_default_template():
    """Return the placeholder resume new users start from."""
    return default_resume()
