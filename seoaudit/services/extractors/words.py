"""
Word and anchor-text statistics.
"""

import re
from dataclasses import dataclass

from seoaudit.services.document import ParsedDocument

WORD_PATTERN = re.compile(r"\b\w+\b")


@dataclass
class WordStats:
    total_words: int
    anchor_words: int

    @property
    def anchor_percentage(self) -> float:
        if self.total_words == 0:
            return 0
        return round(self.anchor_words / self.total_words * 100, 2)


def count_body_words(doc: ParsedDocument) -> int:
    """Whitespace-split word count of the body text.

    Empty tokens from leading or trailing whitespace are not counted.
    """
    return len(doc.body_text().split())


def count_anchor_words(doc: ParsedDocument) -> int:
    return sum(len(doc.text_of(a).strip().split()) for a in doc.select("a"))


def extract_word_stats(doc: ParsedDocument) -> WordStats:
    text = doc.body_text().lower()
    return WordStats(
        total_words=len(WORD_PATTERN.findall(text)),
        anchor_words=count_anchor_words(doc),
    )
