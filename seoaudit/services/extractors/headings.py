"""
Heading extractor.
"""

from dataclasses import dataclass, field

from seoaudit.services.document import ParsedDocument

HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")


@dataclass
class HeadingSummary:
    counts: dict[str, int] = field(default_factory=dict)
    first_h1: str = ""

    def count(self, level: str) -> int:
        return self.counts.get(level, 0)


def extract_headings(doc: ParsedDocument, levels: tuple[str, ...] = HEADING_LEVELS) -> HeadingSummary:
    return HeadingSummary(
        counts={level: doc.count(level) for level in levels},
        first_h1=doc.text_of(doc.select_one("h1")),
    )
