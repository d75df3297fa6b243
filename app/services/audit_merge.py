"""Combine locally computed analytics with an AI audit result.

The audit arrives asynchronously and is non-deterministic, so it never feeds
back into the engine. Instead the two immutable values are merged here:
- Missing keywords are unioned (local first), de-duplicated and capped
- Audit issues are prefixed and placed ahead of local improvements
Scores are left untouched so they keep tracking live edits.
"""
from dataclasses import replace
from typing import Optional

from app.models.analytics import AuditResult
from app.services.resume_analytics import AnalyticsResult, MAX_MISSING_KEYWORDS

AUDIT_ISSUE_PREFIX = "[AI Audit] "


def merge_audit_result(
    local: AnalyticsResult,
    audit: Optional[AuditResult],
) -> AnalyticsResult:
    """Return a new AnalyticsResult enriched with the audit findings."""
    if audit is None:
        return local

    # Case-insensitive de-dup, keeping the first spelling seen
    missing: dict[str, str] = {}
    for keyword in list(local.keywords.missing_keywords) + list(audit.keywords):
        missing.setdefault(keyword.casefold(), keyword)
    keywords = replace(local.keywords, missing_keywords=tuple(list(missing.values())[:MAX_MISSING_KEYWORDS]))

    improvements = tuple(f"{AUDIT_ISSUE_PREFIX}{issue}" for issue in audit.issues) + local.improvements

    return replace(local, keywords=keywords, improvements=improvements)
