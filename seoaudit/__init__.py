"""
Single-page SEO audit library.

    report = await free_seo_audit("https://example.com")
    report = await full_seo_audit("https://example.com/blog/post")
"""

from seoaudit.services.audit_service import (
    FREE_PROFILE,
    FULL_PROFILE,
    AuditProfile,
    Granularity,
    free_seo_audit,
    full_seo_audit,
    run_audit,
)

__all__ = [
    "FREE_PROFILE",
    "FULL_PROFILE",
    "AuditProfile",
    "Granularity",
    "free_seo_audit",
    "full_seo_audit",
    "run_audit",
]
