"""
Subtitle detail-page parser.

Every field is extracted independently.  Optional fields that are missing
come back as None (or an empty tuple); only the title and the download
reference are required, and their absence raises :class:`ParseError` so a
layout change is reported instead of producing a half-empty record.

The subtitle id is never read from the page: callers attach it with
``PartialSubtitle.with_id``.
"""

from __future__ import annotations

import re
import logging
from typing import Dict, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from subscene.errors import ParseError
from subscene.models import PartialSubtitle
from subscene.parsers.common import (
    Document,
    clean_text,
    ensure_document,
    optional_text,
    parse_int,
)

logger = logging.getLogger(__name__)

_DOWNLOAD_BUTTON_LANG_RE = re.compile(r'Download\s+(.+?)\s+Subtitle', re.IGNORECASE)
_VOTES_RE = re.compile(r'(\d[\d,]*)\s*(?:users?|votes?)', re.IGNORECASE)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _extract_title(soup: BeautifulSoup) -> str:
    title = clean_text(soup.select_one('span[itemprop="name"]'))
    if title:
        return title
    # Fallback: the header without the trailing imdb link
    h1 = soup.select_one('div.header h1') or soup.find('h1')
    if h1:
        parts = [clean_text(child) if isinstance(child, Tag) else str(child).strip()
                 for child in h1.children
                 if not (isinstance(child, Tag) and child.name == 'a')]
        return ' '.join(p for p in parts if p)
    return ''


def _extract_download_link(soup: BeautifulSoup) -> Optional[Tag]:
    link = soup.select_one('div.download a[href]')
    if link is None:
        link = soup.select_one('a#downloadButton[href]')
    return link


def _extract_releases(soup: BeautifulSoup) -> Tuple[str, ...]:
    block = soup.select_one('li.release')
    if not block:
        return ()
    releases = [clean_text(div) for div in block.find_all('div')]
    return tuple(r for r in releases if r)


def _extract_language(soup: BeautifulSoup, download_link: Optional[Tag]) -> Optional[str]:
    lang = optional_text(soup.select_one('[itemprop="inLanguage"]'))
    if lang:
        return lang
    if download_link is not None:
        match = _DOWNLOAD_BUTTON_LANG_RE.search(clean_text(download_link))
        if match:
            return match.group(1)
    return None


def _extract_rating(soup: BeautifulSoup) -> Tuple[Optional[str], Optional[int]]:
    """Return ``(rating, votes)``; either may be None."""
    rating_div = soup.select_one('div.rating')
    if not rating_div:
        return None, None

    rating = None
    span = rating_div.find('span')
    if span:
        rating = optional_text(span)

    votes = None
    votes_match = _VOTES_RE.search(rating_div.get_text(' ', strip=True))
    if votes_match:
        votes = parse_int(votes_match.group(1))

    return rating, votes


def _extract_details(soup: BeautifulSoup) -> Tuple[Tuple[str, ...], Dict[str, str]]:
    """Read the ``#details`` list.

    Returns the raw lines and a ``{label: value}`` map keyed by the lower-cased
    text before the first ``:`` (e.g. ``'online'``, ``'downloads'``).
    """
    details_div = soup.find(id='details')
    if not details_div:
        return (), {}

    lines = []
    labelled = {}
    for li in details_div.find_all('li'):
        text = clean_text(li)
        if not text:
            continue
        lines.append(text)
        label, sep, value = text.partition(':')
        if sep:
            labelled[label.strip().lower()] = value.strip()
    return tuple(lines), labelled


def _extract_cover(soup: BeautifulSoup) -> Optional[str]:
    img = soup.select_one('div.poster img') or soup.find('img', alt='Poster')
    if img:
        return img.get('src') or None
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_detail_page(document: Document) -> PartialSubtitle:
    """Parse a subtitle detail page into a *PartialSubtitle* (no id).

    Raises:
        ParseError: when the title or the download reference is missing.
    """
    soup = ensure_document(document)

    title = _extract_title(soup)
    if not title:
        raise ParseError('title')

    download_link = _extract_download_link(soup)
    download_url = (download_link.get('href') or '').strip() if download_link else ''
    if not download_url:
        raise ParseError('download_url')

    releases = _extract_releases(soup)

    author_link = soup.select_one('li.author a')
    uploader = optional_text(author_link) or optional_text(soup.select_one('li.author'))
    if uploader and uploader.lower().startswith('author:'):
        uploader = uploader[len('author:'):].strip() or None
    uploader_url = author_link.get('href') if author_link else None

    rating, rating_votes = _extract_rating(soup)
    detail_lines, labelled = _extract_details(soup)

    subtitle = PartialSubtitle(
        title=title,
        download_url=download_url,
        release=releases[0] if releases else None,
        releases=releases,
        language=_extract_language(soup, download_link),
        uploader=uploader,
        uploader_url=uploader_url,
        comment=optional_text(soup.select_one('div.comment')),
        rating=rating,
        rating_votes=rating_votes,
        upload_date=labelled.get('online') or None,
        downloads=parse_int(labelled.get('downloads')),
        cover_url=_extract_cover(soup),
        details=detail_lines,
    )

    logger.debug(
        'Parsed detail: title=%s, release=%s, language=%s',
        subtitle.title[:40],
        subtitle.release,
        subtitle.language,
    )
    return subtitle
