"""
Redis cache for AI audit results.

Audits are slow and billed per call, while the local analytics are cheap and
never cached. Caching is optional: without a redis_url every helper is a
no-op and audits simply run each time.
"""
from __future__ import annotations

import hashlib
import logging
from functools import lru_cache
from typing import Optional

from redis.asyncio import Redis, from_url

from app.config import get_settings
from app.models.analytics import AuditResult
from app.models.resume import ResumeData

logger = logging.getLogger(__name__)

AUDIT_KEY_PREFIX = "audit:v1"


@lru_cache(maxsize=1)
def get_redis_client() -> Optional[Redis]:
    """Create (or reuse) a Redis client if configured."""
    settings = get_settings()
    if not settings.redis_url:
        logger.info("Redis disabled: no redis_url configured")
        return None

    url = settings.redis_url
    if settings.redis_tls and url.startswith("redis://"):
        url = url.replace("redis://", "rediss://", 1)

    return from_url(url, encoding="utf-8", decode_responses=True)


def audit_cache_key(resume: ResumeData, target_role: str) -> str:
    """Key an audit by the exact resume content and the role it targets."""
    payload = f"{resume.model_dump_json()}\x1f{target_role}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]
    return f"{AUDIT_KEY_PREFIX}:{digest}"


async def get_cached_audit(resume: ResumeData, target_role: str) -> Optional[AuditResult]:
    client = get_redis_client()
    if not client:
        return None
    key = audit_cache_key(resume, target_role)
    try:
        value = await client.get(key)
        if value is None:
            return None
        return AuditResult.model_validate_json(value)
    except Exception as exc:  # pragma: no cover - best-effort cache
        logger.warning(f"Redis get failed for key={key}: {exc}")
        return None


async def store_audit(resume: ResumeData, target_role: str, audit: AuditResult, ttl: int) -> None:
    client = get_redis_client()
    if not client:
        return
    key = audit_cache_key(resume, target_role)
    try:
        await client.set(key, audit.model_dump_json(), ex=ttl)
    except Exception as exc:  # pragma: no cover - best-effort cache
        logger.warning(f"Redis set failed for key={key}: {exc}")
