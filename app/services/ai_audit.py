"""AI resume audit using Google Gemini (google-genai SDK)."""
import json
import logging

from google import genai
from google.genai import types

from app.config import get_settings
from app.models.analytics import AuditResult
from app.models.resume import ResumeData

logger = logging.getLogger(__name__)

MOCK_AUDIT = AuditResult(
    score=75,
    keywords=["Communication", "Leadership", "Problem Solving"],
    issues=["API key missing - using mock audit"],
)

FAILED_AUDIT = AuditResult(score=0, keywords=[], issues=["Failed to perform AI audit"])


AUDIT_PROMPT = """Act as a strict hiring manager and ATS system. Audit this resume for a "{target_role}" position.

RESUME DATA:
Summary: {summary}
Skills: {skills}
Experience: {experience}
Education: {education}

Analyze the resume for:
1. ATS Compatibility: formatting, keywords, structure.
2. Content Quality: action verbs, metrics, clarity, impact.
3. Relevance: alignment with a typical "{target_role}" role.

Return a JSON object with:
- "score": a number between 0-100. Be strict. Average resumes should be 60-70.
- "keywords": 3-5 critical keywords missing from the resume that are standard for this role.
- "issues": 3-5 specific, actionable issues to fix (e.g., "Missing metrics in latest role")."""


def build_audit_prompt(resume: ResumeData, target_role: str) -> str:
    experience = [exp.model_dump(by_alias=True, exclude={"id"}) for exp in resume.experience]
    education = [edu.model_dump(exclude={"id"}) for edu in resume.education]
    return AUDIT_PROMPT.format(
        target_role=target_role or "General",
        summary=resume.summary,
        skills=resume.skills,
        experience=json.dumps(experience, ensure_ascii=False),
        education=json.dumps(education, ensure_ascii=False),
    )


def audit_resume(resume: ResumeData, target_role: str = "General") -> AuditResult:
    """
    Ask Gemini for a strict audit of the resume.

    Args:
        resume: The resume to audit
        target_role: Role the resume is audited against

    Returns:
        AuditResult. A fixed mock result when no API key is configured, and a
        failure result when the request or response parsing fails.
    """
    settings = get_settings()

    if not settings.gemini_api_key:
        logger.warning("RESUME_ANALYTICS_GEMINI_API_KEY not configured, returning mock audit")
        return MOCK_AUDIT

    client = genai.Client(api_key=settings.gemini_api_key)

    try:
        logger.info(f"Sending resume to Gemini for audit (role={target_role})")

        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=build_audit_prompt(resume, target_role),
            config=types.GenerateContentConfig(
                temperature=settings.audit_temperature,
                response_mime_type="application/json",
                response_schema=AuditResult,
            ),
        )

        audit: AuditResult = response.parsed
        if audit is None:
            raise ValueError("Failed to parse audit response from Gemini")

        logger.info(f"AI audit complete: score={audit.score}")
        return audit

    except Exception as e:
        logger.error(f"AI audit failed: {e}")
        return FAILED_AUDIT
