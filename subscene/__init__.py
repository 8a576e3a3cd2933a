"""
Subscene client – structured access to subscene.com.

Subscene has no API; this package fetches its release-search and
subtitle-detail pages and parses them into immutable records.

Quick start (Python)::

    from subscene import SubsceneClient

    client = SubsceneClient()
    client.set_language_filter('English')
    for result in client.search('The Big Bang Theory s01e01'):
        print(result.id, result.name)

Quick start (REST)::

    uvicorn subscene.server:app --reload
"""

from subscene.client import ClientConfig, SubsceneClient, create_client_from_config
from subscene.errors import (
    SubsceneError,
    TransportError,
    HTTPError,
    ClientError,
    ServerError,
    NotFound,
    PageNotFound,
    ParseError,
)
from subscene.languages import LANGUAGE_IDS, LanguageFilter, encode_language_names
from subscene.models import (
    SearchResult,
    SubtitleResultSet,
    PartialSubtitle,
    Subtitle,
)
from subscene.parsers import (
    parse_search_page,
    parse_detail_page,
    detect_page_type,
)

__version__ = '0.2.0'

__all__ = [
    # Client
    'ClientConfig',
    'SubsceneClient',
    'create_client_from_config',
    # Errors
    'SubsceneError',
    'TransportError',
    'HTTPError',
    'ClientError',
    'ServerError',
    'NotFound',
    'PageNotFound',
    'ParseError',
    # Languages
    'LANGUAGE_IDS',
    'LanguageFilter',
    'encode_language_names',
    # Models
    'SearchResult',
    'SubtitleResultSet',
    'PartialSubtitle',
    'Subtitle',
    # Parsers
    'parse_search_page',
    'parse_detail_page',
    'detect_page_type',
]
