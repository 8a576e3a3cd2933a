"""
Subscene HTML parsers – public API.

Usage::

    from subscene.parsers import parse_search_page, parse_detail_page

Both accept raw HTML or an already-parsed ``BeautifulSoup`` document.
"""

from subscene.parsers.common import detect_page_type, has_no_results_marker
from subscene.parsers.detail_parser import parse_detail_page
from subscene.parsers.search_parser import parse_search_page

__all__ = [
    'parse_search_page',
    'parse_detail_page',
    'detect_page_type',
    'has_no_results_marker',
]
