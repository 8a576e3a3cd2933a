"""
Data models for the Subscene client.

All models are frozen dataclasses: records are value objects with no
reference back to the page they were parsed from, and ``to_dict()`` gives a
plain dict for JSON output (CLI / FastAPI layer).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, asdict
from typing import Iterator, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Search-result listing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchResult:
    """One row of a release-search listing page."""
    id: str
    name: str
    url: str
    language: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SubtitleResultSet:
    """Ordered rows of one listing page, in page order."""
    results: Tuple[SearchResult, ...] = ()
    page_title: str = ''

    def __iter__(self) -> Iterator[SearchResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index):
        return self.results[index]

    @property
    def instances(self) -> List[SearchResult]:
        """The rows as a fresh list."""
        return list(self.results)

    def to_dict(self) -> dict:
        return {
            'page_title': self.page_title,
            'results': [r.to_dict() for r in self.results],
        }


# ---------------------------------------------------------------------------
# Subtitle detail
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PartialSubtitle:
    """Everything a detail page tells us about a subtitle, except its id.

    The page does not reliably expose its own id, so the caller attaches it
    with :meth:`with_id` once the record is built.
    """
    title: str
    download_url: str
    release: Optional[str] = None
    releases: Tuple[str, ...] = ()
    language: Optional[str] = None
    uploader: Optional[str] = None
    uploader_url: Optional[str] = None
    comment: Optional[str] = None
    rating: Optional[str] = None
    rating_votes: Optional[int] = None
    upload_date: Optional[str] = None
    downloads: Optional[int] = None
    cover_url: Optional[str] = None
    details: Tuple[str, ...] = ()

    def with_id(self, subtitle_id) -> 'Subtitle':
        values = {f.name: getattr(self, f.name) for f in fields(PartialSubtitle)}
        return Subtitle(id=str(subtitle_id), **values)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Subtitle(PartialSubtitle):
    """A complete subtitle record with its caller-assigned id."""
    id: str = field(kw_only=True)
