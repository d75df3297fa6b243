"""Request and response models for the analytics API."""
from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from app.models.resume import ResumeData


class SectionScoresResponse(BaseModel):
    """Per-section quality scores (0-100, unrounded)."""
    personal_info: float = Field(alias="personalInfo")
    summary: float
    experience: float
    education: float
    skills: float
    achievements: float
    projects: float
    certifications: float

    class Config:
        populate_by_name = True


class KeywordStatsResponse(BaseModel):
    """Lexicon hit counts and keywords missing for the target job."""
    action_verbs: int = Field(alias="actionVerbs")
    technical_skills: int = Field(alias="technicalSkills")
    soft_skills: int = Field(alias="softSkills")
    missing_keywords: List[str] = Field(alias="missingKeywords", default_factory=list)

    class Config:
        populate_by_name = True


class ReadabilityResponse(BaseModel):
    """Bullet-level writing statistics."""
    avg_word_count: float = Field(alias="avgWordCount")
    bullet_points: int = Field(alias="bulletPoints")
    metric_density: float = Field(alias="metricDensity", ge=0, le=1)
    quantifiable_achievements: int = Field(alias="quantifiableAchievements")
    weak_words: int = Field(alias="weakWords")

    class Config:
        populate_by_name = True


class AnalyticsResponse(BaseModel):
    """Complete analytics for one resume."""
    ats_score: int = Field(..., alias="atsScore", ge=0, le=100)
    completeness: int = Field(..., ge=0, le=100)
    job_match_score: int = Field(..., alias="jobMatchScore", ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    section_scores: SectionScoresResponse = Field(alias="sectionScores")
    keywords: KeywordStatsResponse
    readability: ReadabilityResponse

    class Config:
        populate_by_name = True


class AuditResult(BaseModel):
    """Result of an AI audit of a resume."""
    score: int = Field(0, ge=0, le=100, description="Strict 0-100 rating")
    keywords: List[str] = Field(default_factory=list, description="Critical keywords missing from the resume")
    issues: List[str] = Field(default_factory=list, description="Specific, actionable issues to fix")


class AuditRequest(BaseModel):
    """Request model for an AI-audited analysis."""
    resume_data: ResumeData = Field(..., alias="resumeData")
    target_role: str = Field("General", alias="targetRole", description="Role the resume is audited for")

    class Config:
        populate_by_name = True


class AuditedAnalyticsResponse(BaseModel):
    """Local analytics merged with the AI audit that produced them."""
    analytics: AnalyticsResponse
    audit: AuditResult


class NormalizeBulletsRequest(BaseModel):
    """Request model for bullet normalization."""
    description: Union[str, List[str], None] = None


class NormalizeBulletsResponse(BaseModel):
    bullets: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
    ai_audit_available: bool = Field(alias="aiAuditAvailable")
    cache_enabled: Optional[bool] = Field(None, alias="cacheEnabled")

    class Config:
        populate_by_name = True
