"""
Pytest configuration and fixtures for Subscene client tests.
"""
import os
import sys

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from unittest.mock import MagicMock

import pytest
import requests


def _build_response(body='', status_code=200, content_type='text/html; charset=utf-8',
                    url='https://subscene.com/', reason=None):
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason if reason is not None else ('OK' if status_code < 400 else 'Error')
    response.url = url
    response._content = body.encode('utf-8') if isinstance(body, str) else body
    if content_type:
        response.headers['Content-Type'] = content_type
    return response


@pytest.fixture
def make_response():
    """Factory fixture: ``make_response(body, status_code=200, ...)``."""
    return _build_response


@pytest.fixture
def fake_session():
    """A stand-in for ``requests.Session`` whose ``get`` is a MagicMock."""
    session = MagicMock(spec=requests.Session)
    return session


@pytest.fixture
def sample_search_html():
    """Return sample release-search listing HTML with three rows."""
    return '''
    <html>
    <head><title>Subtitles for The Big Bang Theory s01e01 - Subscene</title></head>
    <body>
    <div id="content">
        <div class="content">
            <table>
                <thead>
                    <tr><td class="a1">Name</td><td class="a3">Files</td></tr>
                </thead>
                <tbody>
                    <tr>
                        <td class="a1">
                            <a href="/subtitles/the-big-bang-theory-first-season/english/136037">
                                <span class="l r positive-icon">English</span>
                                <span>
                                    The.Big.Bang.Theory.S01E01.HDTV.XviD-XOR
                                </span>
                            </a>
                        </td>
                        <td class="a3">1</td>
                        <td class="a5"><a href="/u/100">pichit</a></td>
                    </tr>
                    <tr>
                        <td class="a1">
                            <a href="/subtitles/the-big-bang-theory-first-season/spanish/136040">
                                <span class="l r neutral-icon">Spanish</span>
                                <span>The.Big.Bang.Theory.S01E01.720p.HDTV</span>
                            </a>
                        </td>
                        <td class="a3">1</td>
                    </tr>
                    <tr>
                        <td class="a1">
                            <a href="/subtitles/the-big-bang-theory-first-season/english/99">
                                <span class="l r positive-icon">English</span>
                                <span>The Big Bang Theory   S01E01 DVDRip</span>
                            </a>
                        </td>
                    </tr>
                    <tr>
                        <td class="banner" colspan="5"><div class="ad">advert</div></td>
                    </tr>
                </tbody>
            </table>
        </div>
    </div>
    </body>
    </html>
    '''


@pytest.fixture
def sample_empty_search_html():
    """Listing markup present but without any result rows."""
    return '''
    <html>
    <head><title>Subscene</title></head>
    <body>
    <div class="content">
        <table><tbody></tbody></table>
    </div>
    </body>
    </html>
    '''


@pytest.fixture
def sample_no_results_html():
    """The site's explicit "no results" page."""
    return '''
    <html>
    <head><title>Subscene</title></head>
    <body>
    <div class="search-result">
        <h2>No results found</h2>
        <p>Try a different release name.</p>
    </div>
    </body>
    </html>
    '''


@pytest.fixture
def sample_detail_html():
    """Return sample subtitle detail page HTML."""
    return '''
    <html>
    <head><title>Subscene - The Big Bang Theory - First Season English subtitle</title></head>
    <body>
    <div id="content">
        <div class="subtitle">
            <div class="top left">
                <div class="poster">
                    <a href="/subtitles/the-big-bang-theory-first-season">
                        <img src="https://i.jeded.com/i/the-big-bang-theory-first-season.jpg" alt="Poster" />
                    </a>
                </div>
                <div class="header">
                    <h1>
                        <span itemprop="name">The Big Bang Theory - First Season</span>
                        <a href="http://www.imdb.com/title/tt0898266/" class="imdb">Imdb</a>
                    </h1>
                    <ul>
                        <li class="author">
                            <strong>Author:</strong>
                            <a href="/u/100">pichit</a>
                        </li>
                        <li class="release">
                            <strong>Release info:</strong>
                            <div>The.Big.Bang.Theory.S01E01.HDTV.XviD-XOR</div>
                            <div>The.Big.Bang.Theory.S01E01.720p.HDTV</div>
                        </li>
                        <li class="comment-wrapper">
                            <div class="comment">Synced and corrected by pichit</div>
                        </li>
                    </ul>
                    <div class="download">
                        <a href="/subtitle/download?mac=abc123" rel="nofollow" id="downloadButton"
                           class="button positive">Download English Subtitle</a>
                    </div>
                </div>
            </div>
            <div class="rating">
                <span class="rating-bar">8</span> from 1,024 users
            </div>
            <div id="details">
                <ul>
                    <li><strong>Online:</strong> 12/1/2013 9:52 AM</li>
                    <li>Files: 1 (20,134 bytes)</li>
                    <li>Downloads: 45,120 (since 12/1/2013)</li>
                </ul>
            </div>
            <a href="/subtitles/the-big-bang-theory-first-season/english/555555" class="self">permalink</a>
        </div>
    </div>
    </body>
    </html>
    '''


@pytest.fixture
def sample_minimal_detail_html():
    """Detail page carrying only the required fields."""
    return '''
    <html><body>
        <div class="header">
            <h1><span itemprop="name">Minimal Show</span></h1>
            <div class="download"><a href="/subtitle/download?mac=min">Download</a></div>
        </div>
    </body></html>
    '''


@pytest.fixture
def sample_detail_without_download_html():
    """Detail page whose download button is gone."""
    return '''
    <html><body>
        <div class="header">
            <h1><span itemprop="name">The Big Bang Theory - First Season</span></h1>
            <ul><li class="author"><strong>Author:</strong> <a href="/u/100">pichit</a></li></ul>
        </div>
    </body></html>
    '''
