"""
Exceptions raised by htmlsoup.

Queries never raise: a query with no matches simply yields nothing. These
exceptions come from the construction seams (parsing, fetching) and from
configuration loading.
"""

from typing import Optional


class SoupError(Exception):
    """Base class for all htmlsoup errors."""


class ParseError(SoupError):
    """Raised when a document cannot be parsed (strict mode or undecodable input)."""


class FetchError(SoupError):
    """
    Raised when a document cannot be fetched over HTTP.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status code, if a response was received
    """

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ConfigError(SoupError):
    """Raised when a configuration file cannot be read or decoded."""
