"""
Release-search listing parser.

A listing page is a table whose rows each link to one subtitle's detail
page.  The first cell (``td.a1``) holds the link, with a language label
span followed by the release name span::

    <td class="a1">
      <a href="/subtitles/the-big-bang-theory-first-season/english/136037">
        <span class="l r positive-icon">English</span>
        <span>The.Big.Bang.Theory.S01E01.HDTV.XviD</span>
      </a>
    </td>

Rows that cannot be read (header rows, ads, missing id/name) are skipped,
not treated as errors.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4.element import Tag

from subscene.models import SearchResult, SubtitleResultSet
from subscene.parsers.common import (
    Document,
    clean_text,
    ensure_document,
    extract_id_from_url,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _find_rows(soup) -> List[Tag]:
    rows = soup.select('div.content table tbody tr')
    if rows:
        return rows
    # Markup drift: keep any row that still carries the link cell.
    return [td.find_parent('tr') for td in soup.select('tr > td.a1')]


def _parse_row(row: Tag) -> Optional[SearchResult]:
    """Parse one ``<tr>`` into a *SearchResult*, or None if unusable."""
    a = row.select_one('td.a1 a')
    if not a or not isinstance(a, Tag):
        return None

    href = (a.get('href') or '').strip()
    subtitle_id = extract_id_from_url(href)
    if not subtitle_id:
        logger.debug('Skipping row without id: href=%r', href)
        return None

    spans = a.find_all('span')
    if spans:
        name = clean_text(spans[-1])
        language = clean_text(spans[0]) if len(spans) > 1 else ''
    else:
        name = clean_text(a)
        language = ''

    if not name:
        logger.debug('Skipping row without name: id=%s', subtitle_id)
        return None

    return SearchResult(
        id=subtitle_id,
        name=name,
        url=href,
        language=language or None,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_search_page(document: Document) -> SubtitleResultSet:
    """Parse a release-search listing page and return every row in page order.

    An empty result set is a valid outcome; the explicit "no results" page
    is detected upstream by the response pipeline.
    """
    soup = ensure_document(document)

    title_tag = soup.find('title')
    page_title = title_tag.get_text(strip=True) if title_tag else ''

    rows = _find_rows(soup)
    if not rows:
        logger.warning('No result rows found on listing page')
        return SubtitleResultSet(page_title=page_title)

    results = []
    for row in rows:
        entry = _parse_row(row)
        if entry is not None:
            results.append(entry)

    logger.debug('Parsed %d of %d listing rows', len(results), len(rows))
    return SubtitleResultSet(results=tuple(results), page_title=page_title)
