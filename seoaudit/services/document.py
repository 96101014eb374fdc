"""
Document model adapter.

Wraps BeautifulSoup so extractors can run CSS-selector queries against a
page and resolve relative references against the page URL. A new
ParsedDocument is built for every audit; nothing is shared between calls.
"""

from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag


class ParsedDocument:
    """Queryable view of one HTML document bound to its base URL."""

    def __init__(self, soup: BeautifulSoup, base_url: str):
        self.soup = soup
        self.base_url = base_url

    @property
    def hostname(self) -> str | None:
        return urlparse(self.base_url).hostname

    def select(self, selector: str) -> list[Tag]:
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Tag | None:
        return self.soup.select_one(selector)

    def count(self, selector: str) -> int:
        return len(self.soup.select(selector))

    def resolve(self, href: str | None) -> str:
        """Absolute form of ``href``; empty string when the attribute is absent."""
        if href is None:
            return ""
        return urljoin(self.base_url, href.strip())

    def body_text(self) -> str:
        body = self.soup.body
        if body is None:
            return ""
        return body.get_text()

    @staticmethod
    def text_of(tag: Tag | None) -> str:
        if tag is None:
            return ""
        return tag.get_text()

    @staticmethod
    def attr(tag: Tag, name: str, default: str | None = None) -> str | None:
        """Attribute value as a string; multi-valued attributes are space-joined."""
        value = tag.get(name)
        if value is None:
            return default
        if isinstance(value, list):
            return " ".join(value)
        # bs4 substitutes str subclasses for charset-bearing meta values
        return str(value)

    @staticmethod
    def tokens(tag: Tag, name: str) -> list[str]:
        """Attribute value split into whitespace-separated tokens, case kept (for ``rel``-style lists)."""
        value = tag.get(name)
        if not value:
            return []
        if isinstance(value, str):
            value = value.split()
        return list(value)


def parse_document(text: str, base_url: str) -> ParsedDocument:
    """Parse ``text`` permissively; malformed markup yields a best-effort tree."""
    soup = BeautifulSoup(text, "lxml")
    return ParsedDocument(soup, base_url)
