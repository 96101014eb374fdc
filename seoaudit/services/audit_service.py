"""
Single-page SEO audit.

Pipeline per call: fetch -> parse -> extract -> assemble. The free and the
full audit are two profiles of the same pipeline; they differ in report
granularity and in the link classification rule.

Every call is wrapped in one failure boundary: the caller receives either
a fully populated report or exactly ``{"error": <message>}``.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import urlparse

import httpx

from seoaudit.core.exceptions import AuditError, ExtractionFailure, FetchFailure
from seoaudit.services.document import ParsedDocument, parse_document
from seoaudit.services.extractors import (
    HEADING_LEVELS,
    LinkClassificationRule,
    count_body_words,
    extract_headings,
    extract_images,
    extract_links,
    extract_metadata_info,
    extract_word_stats,
    summarize_description,
    summarize_title,
)
from seoaudit.services.fetcher import FetchedPage, fetch_url_content

logger = logging.getLogger(__name__)

SIMULATED_RESPONSE_TIME = "Simulated"


class Granularity(str, Enum):
    BASIC = "basic"
    FULL = "full"


@dataclass(frozen=True)
class AuditProfile:
    granularity: Granularity
    link_rule: LinkClassificationRule


FREE_PROFILE = AuditProfile(Granularity.BASIC, LinkClassificationRule.HOSTNAME)
FULL_PROFILE = AuditProfile(Granularity.FULL, LinkClassificationRule.HREF_PREFIX)


def classify_input(url: str) -> str:
    """'Domain' when the URL has no path beyond slashes, else 'URL with path'."""
    if urlparse(url).path.strip("/") == "":
        return "Domain"
    return "URL with path"


def _http_section(url: str, page: FetchedPage) -> dict[str, Any]:
    return {
        "status": page.status_code,
        "using_https": url.startswith("https://"),
        "response_time": SIMULATED_RESPONSE_TIME,
    }


def build_basic_report(doc: ParsedDocument, page: FetchedPage, profile: AuditProfile = FREE_PROFILE) -> dict[str, Any]:
    title = summarize_title(doc)
    description = summarize_description(doc)
    headings = extract_headings(doc, levels=("h1", "h2", "h3"))
    links = extract_links(doc, profile.link_rule)
    images = extract_images(doc)

    return {
        "http": _http_section(page.url, page),
        "metadata": {
            "title": title.data or None,
            "title_length": title.length,
            "description": description.data or None,
            "description_length": description.length,
        },
        "content": {
            "word_count": count_body_words(doc),
            "h1_count": headings.count("h1"),
            "h2_count": headings.count("h2"),
            "h3_count": headings.count("h3"),
        },
        "links": {
            "total_links": links.total,
            "internal_links": links.internal,
            "external_links": links.external,
        },
        "images": {
            "total_images": images.total,
            "images_without_alt": images.without_alt,
        },
    }


def build_full_report(doc: ParsedDocument, page: FetchedPage, profile: AuditProfile = FULL_PROFILE) -> dict[str, Any]:
    title = summarize_title(doc)
    description = summarize_description(doc)
    headings = extract_headings(doc, levels=HEADING_LEVELS)
    words = extract_word_stats(doc)
    links = extract_links(doc, profile.link_rule, include_records=True)
    images = extract_images(doc, include_records=True)

    heading_summary: dict[str, Any] = {
        level.upper(): headings.count(level) for level in HEADING_LEVELS
    }
    heading_summary["H1 count"] = headings.count("h1")
    heading_summary["H1 Content"] = headings.first_h1

    return {
        "Input": {
            "URL": page.url,
            "Input type": classify_input(page.url),
        },
        "http": _http_section(page.final_url, page),
        "title": {
            "found": title.found_label,
            "data": title.data or "",
            "length": title.length,
            "characters": title.length,
            "words": title.words,
            "charPerWord": title.char_per_word,
            "tag number": title.tag_count,
        },
        "meta_description": {
            "found": description.found_label,
            "data": description.data or "",
            "length": description.length,
            "characters": description.length,
            "words": description.words,
            "charPerWord": description.char_per_word,
            "number": description.tag_count,
        },
        "metadata_info": extract_metadata_info(doc).to_dict(),
        "Page Headings summary": heading_summary,
        "word_count": {
            "total": words.total_words,
            "Corrected word count": words.total_words,
            "Anchor text words": words.anchor_words,
            "Anchor Percentage": words.anchor_percentage,
        },
        "links_summary": {
            "Total links": links.total,
            "External links": links.external,
            "Internal": links.internal,
            "Nofollow count": links.nofollow,
            "links": [record.to_dict() for record in links.records],
        },
        "images_analysis": {
            "summary": {
                "total": images.total,
                "No src tag": images.without_src,
                "No alt tag": images.without_alt,
            },
            "data": [record.to_dict() for record in images.records],
        },
    }


async def run_audit(
    url: str,
    profile: AuditProfile,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Run one audit of ``url`` with the given profile.

    Returns the assembled report, or ``{"error": ...}`` on any failure.
    """
    logger.info(f"Starting {profile.granularity.value} SEO audit for {url}")
    start_time = time.time()

    try:
        page = await fetch_url_content(url, client=client)
        if page is None or not page.text:
            raise FetchFailure()

        try:
            if profile.granularity is Granularity.FULL:
                doc = parse_document(page.text, page.final_url)
                report = build_full_report(doc, page, profile)
            else:
                doc = parse_document(page.text, page.url)
                report = build_basic_report(doc, page, profile)
        except Exception as e:
            logger.exception(f"Error during {profile.granularity.value} SEO audit of {url}")
            raise ExtractionFailure(e) from e

    except AuditError as e:
        logger.warning(f"Audit of {url} failed: {e.message}")
        return e.to_report()

    elapsed = time.time() - start_time
    logger.info(f"Audit of {url} complete in {elapsed:.2f}s")
    return report


async def free_seo_audit(url: str, client: httpx.AsyncClient | None = None) -> dict[str, Any]:
    """Compact report: title/description, H1-H3 counts, link and image counts."""
    return await run_audit(url, FREE_PROFILE, client=client)


async def full_seo_audit(url: str, client: httpx.AsyncClient | None = None) -> dict[str, Any]:
    """Full report with metadata info, heading summary, anchor stats and raw link/image lists."""
    return await run_audit(url, FULL_PROFILE, client=client)
