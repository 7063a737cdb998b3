"""
Soup: the entry point for parsing and querying a document.
"""

from typing import IO, Optional, Union

import requests

from .dom.document import Document
from .dom.tree_builder import parse_document
from .query.builder import QueryBuilderMixin
from .utils.config import Config
from .utils.network import fetch


class Soup(QueryBuilderMixin):
    """
    A parsed HTML document.

    Parsing is done by html5lib, which recovers from malformed markup the
    way browsers do, so constructing from a string never fails unless
    strict parsing is switched on in the configuration.

    Example:

        soup = Soup(html)
        title = soup.tag("title").find()
        links = [a.get("href") for a in soup.tag("a").find_all()]

    The Soup owns the tree. Nodes only hold weak references to their
    parents, so keep the Soup referenced for as long as ``parent`` and
    ``parents`` are used on nodes taken from it.
    """

    def __init__(self, html: Union[str, bytes], config: Optional[Config] = None,
                 encoding: Optional[str] = None, url: Optional[str] = None):
        """
        Parse a document.

        Args:
            html: The HTML content; bytes are decoded using ``encoding`` or
                html5lib's encoding sniffing
            config: Configuration supplying ``parser.*`` settings
            encoding: Transport-layer encoding for byte input
            url: The URL the content was loaded from, if any

        Raises:
            ParseError: In strict mode, when the input is not conforming HTML
        """
        self.config = config or Config()
        self.document: Document = parse_document(
            html,
            encoding=encoding,
            strict=self.config.get("parser.strict", False),
            namespace_html=self.config.get("parser.namespace_html", False),
            url=url,
        )

    @classmethod
    def from_reader(cls, reader: IO, encoding: Optional[str] = None,
                    config: Optional[Config] = None) -> 'Soup':
        """
        Parse a document read from a stream.

        Args:
            reader: A binary or text stream
            encoding: Transport-layer encoding for binary streams
            config: Configuration supplying ``parser.*`` settings

        Returns:
            The parsed Soup

        Raises:
            OSError: Whatever the stream raises while reading
            ParseError: In strict mode, when the input is not conforming HTML
        """
        content = reader.read()
        return cls(content, config=config, encoding=encoding)

    @classmethod
    def from_url(cls, url: str, session: Optional[requests.Session] = None,
                 config: Optional[Config] = None) -> 'Soup':
        """
        Fetch a document over HTTP and parse it.

        Args:
            url: The URL to fetch
            session: requests session to use; a retrying session is created when omitted
            config: Configuration supplying ``http.*`` and ``parser.*`` settings

        Returns:
            The parsed Soup

        Raises:
            FetchError: On network failure or an HTTP error status
        """
        config = config or Config()
        result = fetch(url, session=session, config=config)
        return cls(result.content, config=config, encoding=result.encoding, url=result.url)

    @property
    def text(self) -> str:
        """All text in the document, concatenated verbatim."""
        return self.document.text

    def _query_root(self) -> Document:
        return self.document

    def __str__(self) -> str:
        return "".join(child.display() for child in self.document.child_nodes)

    def __repr__(self) -> str:
        return f"<Soup url={self.document.url!r}>"
