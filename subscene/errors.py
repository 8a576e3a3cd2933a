"""
Exception hierarchy for the Subscene client.

Every failure raised by the client derives from :class:`SubsceneError` and
carries a ``kind`` string so callers can branch without ``isinstance``
chains (``'transport'``, ``'client_error'``, ``'server_error'``,
``'not_found'``, ``'parse'``).
"""

from typing import Optional


class SubsceneError(Exception):
    """Base exception for the Subscene client"""
    kind = 'error'


class TransportError(SubsceneError):
    """Raised when the request could not be completed at all"""
    kind = 'transport'

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class HTTPError(SubsceneError):
    """Raised for any response whose status is outside the success range"""
    kind = 'http'

    def __init__(self, status_code: int, reason: str = '', url: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ''
        self.url = url
        message = f"HTTP {status_code}"
        if self.reason:
            message += f" {self.reason}"
        if url:
            message += f" ({url})"
        super().__init__(message)


class ClientError(HTTPError):
    """4xx status"""
    kind = 'client_error'


class ServerError(HTTPError):
    """5xx status"""
    kind = 'server_error'


class NotFound(SubsceneError):
    """Raised when the site reports that nothing matched"""
    kind = 'not_found'


class PageNotFound(ClientError, NotFound):
    """404 status: both an HTTP failure and a "nothing here" answer"""
    kind = 'not_found'


class ParseError(SubsceneError):
    """Raised when a required field cannot be located on a fetched page"""
    kind = 'parse'

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Could not locate required field '{field}'")
