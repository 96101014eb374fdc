"""
Image extractor.
"""

from dataclasses import dataclass, field, asdict

from seoaudit.services.document import ParsedDocument


@dataclass
class ImageRecord:
    src: str = ""
    alt: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ImageSummary:
    total: int = 0
    without_alt: int = 0
    without_src: int = 0
    records: list[ImageRecord] = field(default_factory=list)


def extract_images(doc: ParsedDocument, include_records: bool = False) -> ImageSummary:
    """Count <img> elements; empty ``alt``/``src`` values count as missing."""
    records = [
        ImageRecord(
            src=doc.attr(img, "src") or "",
            alt=doc.attr(img, "alt") or "",
        )
        for img in doc.select("img")
    ]
    return ImageSummary(
        total=len(records),
        without_alt=sum(1 for record in records if not record.alt),
        without_src=sum(1 for record in records if not record.src),
        records=records if include_records else [],
    )
