"""
Shared parsing utilities used by both search and detail parsers.
"""

from __future__ import annotations

import re
import logging
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)

HTML_PARSER = 'html.parser'

Document = Union[BeautifulSoup, str, bytes]


# ---------------------------------------------------------------------------
# Document / text helpers
# ---------------------------------------------------------------------------

def ensure_document(document: Document) -> BeautifulSoup:
    """Return *document* as a ``BeautifulSoup`` tree, parsing it if needed.

    ``html.parser`` is lenient: malformed markup never raises.
    """
    if isinstance(document, BeautifulSoup):
        return document
    return BeautifulSoup(document or '', HTML_PARSER)


_WHITESPACE_RE = re.compile(r'\s+')


def clean_text(node: Optional[Tag]) -> str:
    """Text content of *node* with runs of whitespace collapsed."""
    if node is None or not isinstance(node, Tag):
        return ''
    return _WHITESPACE_RE.sub(' ', node.get_text(' ', strip=True)).strip()


def optional_text(node: Optional[Tag]) -> Optional[str]:
    """Like :func:`clean_text` but None when there is nothing to read."""
    return clean_text(node) or None


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse ``"1,234"`` style counters.  Returns None when no digits."""
    if not text:
        return None
    match = re.search(r'\d[\d,.\s]*', text)
    if not match:
        return None
    digits = re.sub(r'\D', '', match.group(0))
    return int(digits) if digits else None


# ---------------------------------------------------------------------------
# Id extraction
# ---------------------------------------------------------------------------

_TRAILING_ID_RE = re.compile(r'/(\d+)/?(?:[?#].*)?$')


def extract_id_from_url(href: str) -> str:
    """Extract the subtitle id from a detail href.

    Detail links look like ``/subtitles/the-big-bang-theory/english/136037``;
    the id is the trailing numeric path segment.  Returns '' when absent.
    """
    if not href:
        return ''
    match = _TRAILING_ID_RE.search(href.strip())
    return match.group(1) if match else ''


# ---------------------------------------------------------------------------
# "No results" marker
# ---------------------------------------------------------------------------

_NO_RESULTS_RE = re.compile(r'^no\s+results?\s+found\.?$', re.IGNORECASE)
_NO_RESULTS_CLASSES = ('no-result', 'no-results', 'noresult', 'noresults')

LISTING_ROW_SELECTOR = 'td.a1 a[href]'


def has_no_results_marker(document: Document) -> bool:
    """True when the page explicitly says nothing matched.

    This is the site's own "no results" block, which is different from a
    listing table that merely has no rows.  A page carrying listing rows
    never counts, whatever else it says.
    """
    soup = ensure_document(document)

    if soup.select_one(LISTING_ROW_SELECTOR):
        return False

    if soup.find(class_=lambda cls: cls in _NO_RESULTS_CLASSES):
        return True

    for container in soup.select('div.search-result'):
        for heading in container.find_all(['h2', 'h3'], recursive=False):
            if _NO_RESULTS_RE.match(heading.get_text(' ', strip=True)):
                return True
    return False


# ---------------------------------------------------------------------------
# Page-type detection
# ---------------------------------------------------------------------------

def detect_page_type(html_content: Document) -> str:
    """Attempt to determine what kind of Subscene page the HTML represents.

    Returns one of ``'search'``, ``'detail'`` or ``'unknown'``.
    """
    soup = ensure_document(html_content)

    if soup.select_one('div.download a, #downloadButton'):
        return 'detail'

    if soup.select_one('td.a1') or has_no_results_marker(soup):
        return 'search'

    return 'unknown'
