"""
Subscene client

Subscene.com is a very complete catalog of subtitles, but it has no API.
This module issues the HTTP requests and hands the pages to the parsers.

Subscene handles two kinds of searches: by film / show *title* ("The Big
Bang Theory") and by *release* ("The Big Bang Theory s01e01"). Only the
release search is supported, so format queries accordingly.

Usage:
    from subscene.client import SubsceneClient

    client = SubsceneClient()
    client.set_language_filter('English,Spanish')
    results = client.search('The Big Bang Theory s01e01')
    subtitle = client.find_by_url(results[0].id, results[0].url)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union
from urllib.parse import urljoin, urlsplit

import requests

from subscene import settings
from subscene.errors import ParseError, TransportError
from subscene.languages import LanguageFilter
from subscene.models import SearchResult, Subtitle
from subscene.parsers.detail_parser import parse_detail_page
from subscene.parsers.search_parser import parse_search_page
from subscene.response import PageResponse, process_response

logger = logging.getLogger(__name__)


@dataclass
class ClientConfig:
    """Configuration for the Subscene client"""
    base_url: str = settings.BASE_URL
    release_path: str = settings.RELEASE_PATH
    timeout: float = settings.REQUEST_TIMEOUT
    user_agent: str = settings.USER_AGENT
    language_filter: Optional[str] = settings.LANGUAGE_FILTER

    def __post_init__(self):
        self.base_url = self.base_url.rstrip('/')
        self.release_path = self.release_path.strip('/')


class SubsceneClient:
    """
    Client for release searches and subtitle lookups on Subscene.

    The language filter is held by the client: every request made through
    it carries the same ``LanguageFilter`` cookie until the filter is
    changed.  Share one client between threads only if a single thread
    changes the filter; otherwise the last writer wins.
    """

    DEFAULT_HEADERS = {
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.9',
        'Connection': 'keep-alive',
    }

    def __init__(self, config: Optional[ClientConfig] = None,
                 session: Optional[requests.Session] = None,
                 language_filter: Optional[LanguageFilter] = None):
        """
        Initialize the client.

        Args:
            config: ClientConfig instance with configuration settings
            session: Transport to use (defaults to a new requests.Session)
            language_filter: Shared LanguageFilter (defaults to one built
                from config.language_filter)
        """
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        self.language_filter = language_filter or LanguageFilter(self.config.language_filter)

    # ------------------------------------------------------------------
    # Language filter
    # ------------------------------------------------------------------

    def set_language_filter(self, names: str) -> Optional[str]:
        """Filter by language names, e.g. ``'English'`` or ``'English,Spanish'``.

        Unknown names are ignored. Returns the encoded ids.
        """
        return self.language_filter.set_names(names)

    def set_language_ids(self, ids) -> Optional[str]:
        """Filter by exact site ids, e.g. ``13`` or ``'13,38'`` (max 3)."""
        return self.language_filter.set_ids(ids)

    def get_language_filter(self) -> Optional[str]:
        return self.language_filter.value

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def build_url(self, path: str) -> str:
        """Resolve a relative path or pass an absolute URL through.

        Protocol-relative hrefs (``//host/path``) keep their host and take
        the scheme of the base URL.
        """
        path = str(path)
        parts = urlsplit(path)
        if not (parts.scheme or parts.netloc):
            path = path.lstrip('/')
        return urljoin(self.config.base_url + '/', path)

    def _build_headers(self, with_filter: bool) -> Dict[str, str]:
        headers = dict(self.DEFAULT_HEADERS)
        headers['User-Agent'] = self.config.user_agent
        cookie = self.language_filter.cookie() if with_filter else None
        if cookie:
            headers['Cookie'] = cookie
        return headers

    def _get(self, path: str, params: Optional[Dict[str, str]] = None,
             with_filter: bool = True) -> PageResponse:
        """Issue one GET request and run the response through the pipeline."""
        url = self.build_url(path)
        headers = self._build_headers(with_filter)
        logger.debug(f"Requesting: {url} params={params or {}} filter={headers.get('Cookie')}")

        try:
            response = self.session.get(url, params=params, headers=headers,
                                        timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error(f"Request failed for {url}: {e}")
            raise TransportError(str(e), url=url) from e

        logger.debug(f"Response: HTTP {response.status_code}, {len(response.content or b'')} bytes")
        return process_response(response)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def search(self, query: Optional[str] = None) -> List[SearchResult]:
        """
        Search for a particular release.

        Args:
            query: Release to look for, e.g. ``'The Big Bang Theory s01e01'``.
                None requests the unfiltered listing.

        Returns:
            The listing rows in page order.

        Raises:
            NotFound: the site reported that nothing matched.
        """
        params = {'q': query, 'l': '', 'r': 'true'} if query is not None else {}
        page = self._get(self.config.release_path, params=params)
        result_set = parse_search_page(self._document(page))
        logger.info(f"Search {query!r}: {len(result_set)} results")
        return result_set.instances

    def find_by_id(self, subtitle_id) -> Subtitle:
        """
        Fetch the detail page addressed by *subtitle_id* as a path segment.

        Best effort: some subtitles are only reachable through the relative
        link a listing page provides, in which case use find_by_url.
        """
        page = self._get(str(subtitle_id), with_filter=False)
        return parse_detail_page(self._document(page)).with_id(subtitle_id)

    def find_by_url(self, subtitle_id, url: str) -> Subtitle:
        """Fetch the detail page at *url* and label it with *subtitle_id*."""
        page = self._get(url)
        return parse_detail_page(self._document(page)).with_id(subtitle_id)

    def download(self, subtitle: Union[Subtitle, str]) -> bytes:
        """Download the subtitle archive behind a record's download reference."""
        url = subtitle if isinstance(subtitle, str) else subtitle.download_url
        page = self._get(url)
        if page.document is not None:
            # Got a page back instead of the archive
            raise ParseError('download_url', f"Expected a subtitle archive at {page.url}, got HTML")
        body = page.body
        return body.encode('utf-8') if isinstance(body, str) else body

    @staticmethod
    def _document(page: PageResponse):
        if page.document is None:
            raise ParseError('document', f"Expected an HTML page at {page.url}")
        return page.document


def create_client_from_config(session: Optional[requests.Session] = None,
                              **config_kwargs) -> SubsceneClient:
    """
    Create a SubsceneClient instance from configuration.

    Args:
        session: Optional requests.Session to use as transport
        **config_kwargs: Configuration parameters for ClientConfig

    Returns:
        Configured SubsceneClient instance
    """
    config = ClientConfig(**config_kwargs)
    return SubsceneClient(config=config, session=session)
