"""
Metric extractors. Each reads a ParsedDocument and returns one facet of
the audit report; none depends on another's output.
"""

from seoaudit.services.extractors.headings import HEADING_LEVELS, HeadingSummary, extract_headings
from seoaudit.services.extractors.images import ImageRecord, ImageSummary, extract_images
from seoaudit.services.extractors.links import (
    LinkClassificationRule,
    LinkRecord,
    LinkSummary,
    extract_links,
)
from seoaudit.services.extractors.metadata import (
    HreflangEntry,
    MetadataInfo,
    TagSummary,
    extract_metadata_info,
    summarize_description,
    summarize_title,
)
from seoaudit.services.extractors.words import WordStats, count_body_words, extract_word_stats

__all__ = [
    "HEADING_LEVELS",
    "HeadingSummary",
    "extract_headings",
    "ImageRecord",
    "ImageSummary",
    "extract_images",
    "LinkClassificationRule",
    "LinkRecord",
    "LinkSummary",
    "extract_links",
    "HreflangEntry",
    "MetadataInfo",
    "TagSummary",
    "extract_metadata_info",
    "summarize_description",
    "summarize_title",
    "WordStats",
    "count_body_words",
    "extract_word_stats",
]
