"""Data models for the Resume Analytics service."""
from app.models.resume import (
    Experience,
    Education,
    Certification,
    Project,
    ResumeData,
)
from app.models.analytics import (
    AnalyticsResponse,
    AuditResult,
    AuditRequest,
    AuditedAnalyticsResponse,
    HealthResponse,
)

__all__ = [
    "Experience",
    "Education",
    "Certification",
    "Project",
    "ResumeData",
    "AnalyticsResponse",
    "AuditResult",
    "AuditRequest",
    "AuditedAnalyticsResponse",
    "HealthResponse",
]
