"""
HTTP fetching for htmlsoup.
This module downloads documents for ``Soup.from_url`` using a requests
session with retries.
"""

import logging
from typing import NamedTuple, Optional

import certifi
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import FetchError
from .config import Config
from .logging import log_exception

logger = logging.getLogger(__name__)


class FetchResult(NamedTuple):
    """A downloaded document."""
    url: str
    content: bytes
    encoding: Optional[str]
    status_code: int


def create_session(config: Optional[Config] = None) -> requests.Session:
    """
    Create a new requests session with appropriate configuration.

    Args:
        config: Configuration supplying ``http.*`` settings

    Returns:
        A configured requests session
    """
    config = config or Config()
    session = requests.Session()

    # Configure retry strategy
    retry_strategy = Retry(
        total=config.get("http.retries", 3),
        backoff_factor=config.get("http.backoff_factor", 0.5),
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET", "HEAD"]
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.verify = certifi.where()

    session.headers.update({
        "User-Agent": config.get("http.user_agent"),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    })

    return session


def declared_encoding(response: requests.Response) -> Optional[str]:
    """
    Get the charset named in the response's Content-Type header.

    requests falls back to ISO-8859-1 for any ``text/*`` response without a
    charset; that guess is ignored here so html5lib can sniff ``<meta>``
    declarations instead.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        return None
    return response.encoding


def fetch(url: str,
          session: Optional[requests.Session] = None,
          config: Optional[Config] = None) -> FetchResult:
    """
    Download a document.

    Args:
        url: The URL to fetch
        session: Session to use; a configured one is created when omitted
        config: Configuration supplying ``http.*`` settings

    Returns:
        The downloaded body with its declared encoding

    Raises:
        FetchError: On network failure or an HTTP error status
    """
    config = config or Config()
    session = session or create_session(config)
    timeout = config.get("http.timeout", 30)

    logger.debug(f"Fetching {url} (timeout: {timeout}s)")

    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else None
        logger.error(f"HTTP error fetching {url}: {e}")
        raise FetchError(f"HTTP error fetching {url}: {e}", url, status_code) from e
    except requests.RequestException as e:
        log_exception(logger, e, f"Error fetching {url}")
        raise FetchError(f"Error fetching {url}: {e}", url) from e

    logger.debug(f"Fetched {url}: {response.status_code}, {len(response.content)} bytes")

    return FetchResult(url=response.url or url,
                       content=response.content,
                       encoding=declared_encoding(response),
                       status_code=response.status_code)
