"""
Response processing pipeline.

A fetched page goes through an ordered list of stages before any parser
sees it::

    raise_for_status -> parse_html -> raise_for_soft_error

Each stage takes a :class:`PageResponse` and either returns one (possibly a
new instance with more information attached) or raises a
:class:`~subscene.errors.SubsceneError`.  A failure aborts the call; there
are no partial results.

Usage::

    from subscene.response import PageResponse, process_response

    page = process_response(PageResponse.from_requests(resp))
    page.document  # BeautifulSoup tree, or None for non-HTML bodies
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Optional, Sequence, Union

import requests
from bs4 import BeautifulSoup

from subscene.errors import ClientError, HTTPError, NotFound, PageNotFound, ServerError
from subscene.parsers.common import HTML_PARSER, has_no_results_marker

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPES = ('text/html', 'application/xhtml+xml')
_HTML_SNIFF_PREFIXES = (b'<!doctype html', b'<html')


@dataclass(frozen=True)
class PageResponse:
    """The parts of an HTTP response the pipeline cares about."""
    url: str
    status_code: int
    reason: str = ''
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Union[bytes, str] = b''
    document: Optional[BeautifulSoup] = None

    @classmethod
    def from_requests(cls, response: requests.Response) -> 'PageResponse':
        return cls(
            url=response.url or '',
            status_code=response.status_code,
            reason=response.reason or '',
            headers=response.headers,
            body=response.content or b'',
        )

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 400


Stage = Callable[[PageResponse], PageResponse]


# ---------------------------------------------------------------------------
# Error classifier
# ---------------------------------------------------------------------------

def raise_for_status(response: PageResponse) -> PageResponse:
    """Raise the matching :class:`HTTPError` subclass for a failed status."""
    if response.is_success:
        return response

    status = response.status_code
    logger.warning('HTTP %s %s for %s', status, response.reason, response.url)
    if status == 404:
        raise PageNotFound(status, response.reason, url=response.url)
    if 400 <= status < 500:
        raise ClientError(status, response.reason, url=response.url)
    if status >= 500:
        raise ServerError(status, response.reason, url=response.url)
    raise HTTPError(status, response.reason, url=response.url)


def raise_for_soft_error(response: PageResponse) -> PageResponse:
    """Turn a 200 page that says "no results" into :class:`NotFound`."""
    if response.document is not None and has_no_results_marker(response.document):
        logger.info('No results found at %s', response.url)
        raise NotFound(f"No results found ({response.url})")
    return response


# ---------------------------------------------------------------------------
# HTML classifier
# ---------------------------------------------------------------------------

def is_html(response: PageResponse) -> bool:
    """Decide whether the body is an HTML document.

    The ``Content-Type`` header wins when present; otherwise the start of
    the body is sniffed.
    """
    content_type = response.header('Content-Type')
    if content_type:
        media_type = content_type.split(';', 1)[0].strip().lower()
        return media_type in HTML_CONTENT_TYPES

    body = response.body
    if isinstance(body, str):
        body = body.encode('utf-8', errors='ignore')
    head = body[:512].lstrip().lower()
    return head.startswith(_HTML_SNIFF_PREFIXES)


def parse_html(response: PageResponse) -> PageResponse:
    """Attach a parsed document to HTML responses; leave others untouched."""
    if response.document is not None or not is_html(response):
        return response
    return replace(response, document=BeautifulSoup(response.body, HTML_PARSER))


DEFAULT_STAGES: Sequence[Stage] = (
    raise_for_status,
    parse_html,
    raise_for_soft_error,
)


def process_response(response: Any, stages: Sequence[Stage] = DEFAULT_STAGES) -> PageResponse:
    """Run *response* through *stages* in order and return the final result.

    Accepts a ``requests.Response`` or an existing :class:`PageResponse`.
    """
    if not isinstance(response, PageResponse):
        response = PageResponse.from_requests(response)
    for stage in stages:
        response = stage(response)
    return response
