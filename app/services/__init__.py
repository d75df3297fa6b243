"""Services for the Resume Analytics service."""
from app.services.resume_analytics import ResumeAnalyzer, AnalyticsResult, analyze
from app.services.audit_merge import merge_audit_result

__all__ = ["ResumeAnalyzer", "AnalyticsResult", "analyze", "merge_audit_result"]
