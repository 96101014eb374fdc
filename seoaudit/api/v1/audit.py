"""
Audit API Endpoints

Thin HTTP front end over the audit library. Reports are returned as-is,
including ``{"error": ...}`` reports: the report is the result.
"""

import logging
from typing import Any

from fastapi import APIRouter

from seoaudit.schemas.audit import AuditRequest
from seoaudit.services.audit_service import free_seo_audit, full_seo_audit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/audit", tags=["Audit"])


@router.post(
    "/free",
    response_model=dict,
    summary="Free page audit",
    description="Fetch one page and return the compact report.",
)
async def run_free_audit(request: AuditRequest) -> dict[str, Any]:
    url = str(request.url)
    logger.info(f"Free audit requested: {url}")
    return await free_seo_audit(url)


@router.post(
    "/full",
    response_model=dict,
    summary="Full page audit",
    description="""
    Fetch one page and return the full report: title and description
    statistics, head metadata, heading summary, anchor-text ratio, and
    the raw link and image lists.
    """,
)
async def run_full_audit(request: AuditRequest) -> dict[str, Any]:
    url = str(request.url)
    logger.info(f"Full audit requested: {url}")
    return await full_seo_audit(url)
