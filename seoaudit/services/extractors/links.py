"""
Link extractor.

Two classification rules exist side by side:

* HOSTNAME: the href is resolved against the page URL and compared by
  hostname. Used by the free report.
* HREF_PREFIX: any resolved href starting with ``http`` is external. Used by
  the full report. Relative and same-origin links resolve to absolute http
  URLs and count as external; only anchors without an href and non-http
  schemes (mailto:, javascript:) stay internal. The free and full reports
  therefore disagree on the same page.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from urllib.parse import urlparse

from bs4 import Tag

from seoaudit.services.document import ParsedDocument


class LinkClassificationRule(str, Enum):
    HOSTNAME = "hostname"
    HREF_PREFIX = "href_prefix"


@dataclass
class LinkRecord:
    href: str
    text: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class LinkSummary:
    total: int = 0
    internal: int = 0
    external: int = 0
    nofollow: int = 0
    records: list[LinkRecord] = field(default_factory=list)


def is_external(doc: ParsedDocument, anchor: Tag, rule: LinkClassificationRule) -> bool:
    href = doc.attr(anchor, "href")
    if rule is LinkClassificationRule.HREF_PREFIX:
        # a missing href resolves to "", never to the page URL
        return doc.resolve(href).startswith("http")
    return urlparse(doc.resolve(href or "")).hostname != doc.hostname


def is_nofollow(doc: ParsedDocument, anchor: Tag) -> bool:
    return "nofollow" in doc.tokens(anchor, "rel")


def extract_links(
    doc: ParsedDocument,
    rule: LinkClassificationRule,
    include_records: bool = False,
) -> LinkSummary:
    anchors = doc.select("a")
    summary = LinkSummary(total=len(anchors))

    for anchor in anchors:
        if is_external(doc, anchor, rule):
            summary.external += 1
        else:
            summary.internal += 1
        if is_nofollow(doc, anchor):
            summary.nofollow += 1

    if include_records:
        summary.records = [
            LinkRecord(
                href=doc.resolve(doc.attr(link, "href")),
                text=doc.text_of(link).strip(),
            )
            for link in doc.select("a[href], area[href]")
        ]
    return summary
