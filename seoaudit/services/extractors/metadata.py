"""
Metadata extractor: title, meta description and head metadata tags.
"""

from dataclasses import dataclass, field, asdict

from seoaudit.services.document import ParsedDocument

TITLE_SELECTOR = "title"
DESCRIPTION_SELECTOR = 'meta[name="description"]'
FAVICON_SELECTORS = ('link[rel="icon"]', 'link[rel="shortcut icon"]')

# MetadataInfo field -> selector of a meta tag whose ``content`` is reported
CONTENT_TAGS = {
    "viewport": 'meta[name="viewport"]',
    "keywords": 'meta[name="keywords"]',
    "locale": 'meta[property="og:locale"]',
    "content_type": 'meta[property="og:type"]',
    "site_name": 'meta[property="og:site_name"]',
    "site_image": 'meta[property="og:image"]',
    "robots": 'meta[name="robots"]',
}


def count_words(text: str) -> int:
    """Number of whitespace-separated words.

    Leading and trailing whitespace produce no empty tokens, so ``" a b "``
    counts 2 and ``""`` counts 0.
    """
    return len(text.split())


def chars_per_word(length: int, words: int) -> float:
    if words == 0:
        return 0
    return round(length / words, 2)


@dataclass
class TagSummary:
    """Single-valued tag such as <title>. ``data`` is None when the tag is absent."""

    data: str | None
    tag_count: int

    @property
    def found(self) -> bool:
        return self.data is not None

    @property
    def length(self) -> int:
        return len(self.data or "")

    @property
    def words(self) -> int:
        return count_words(self.data or "")

    @property
    def char_per_word(self) -> float:
        return chars_per_word(self.length, self.words)

    @property
    def found_label(self) -> str:
        return "Found" if self.found else "Not found"


@dataclass
class HreflangEntry:
    language: str
    url: str


@dataclass
class MetadataInfo:
    charset: str | None = None
    canonical: str | None = None
    favicon: str | None = None
    viewport: str | None = None
    keywords: str | None = None
    locale: str | None = None
    content_type: str | None = None
    site_name: str | None = None
    site_image: str | None = None
    robots: str | None = None
    hreflangs: list[HreflangEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        return {
            "charset": data["charset"],
            "canonical": data["canonical"],
            "favicon": data["favicon"],
            "viewport": data["viewport"],
            "keywords": data["keywords"],
            "locale": data["locale"],
            "contentType": data["content_type"],
            "site_name": data["site_name"],
            "site_image": data["site_image"],
            "robots": data["robots"],
            "hreflangs": data["hreflangs"],
        }


def summarize_title(doc: ParsedDocument) -> TagSummary:
    tag = doc.select_one(TITLE_SELECTOR)
    return TagSummary(
        data=doc.text_of(tag) if tag is not None else None,
        tag_count=doc.count(TITLE_SELECTOR),
    )


def summarize_description(doc: ParsedDocument) -> TagSummary:
    tag = doc.select_one(DESCRIPTION_SELECTOR)
    return TagSummary(
        data=doc.attr(tag, "content", "") if tag is not None else None,
        tag_count=doc.count(DESCRIPTION_SELECTOR),
    )


def _content_of(doc: ParsedDocument, selector: str) -> str | None:
    tag = doc.select_one(selector)
    if tag is None:
        return None
    return doc.attr(tag, "content", "")


def _resolved_href_of(doc: ParsedDocument, *selectors: str) -> str | None:
    for selector in selectors:
        tag = doc.select_one(selector)
        if tag is not None:
            return doc.resolve(doc.attr(tag, "href"))
    return None


def extract_metadata_info(doc: ParsedDocument) -> MetadataInfo:
    """Collect head metadata; absent tags are reported as None."""
    charset_tag = doc.select_one("meta[charset]")

    info = MetadataInfo(
        charset=doc.attr(charset_tag, "charset") if charset_tag is not None else None,
        canonical=_resolved_href_of(doc, 'link[rel="canonical"]'),
        favicon=_resolved_href_of(doc, *FAVICON_SELECTORS),
    )
    for key, selector in CONTENT_TAGS.items():
        setattr(info, key, _content_of(doc, selector))

    info.hreflangs = [
        HreflangEntry(
            language=doc.attr(tag, "hreflang", ""),
            url=doc.resolve(doc.attr(tag, "href")),
        )
        for tag in doc.select('link[rel="alternate"][hreflang]')
    ]
    return info
