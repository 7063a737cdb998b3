"""
Tree builder for the htmlsoup DOM.
This module runs html5lib over the input and converts the tree it produces
into htmlsoup nodes.
"""

import logging
from typing import Any, Optional, Union

import html5lib
from html5lib.html5parser import ParseError as Html5libParseError

from ..errors import ParseError
from ..utils.logging import OperationTimer
from .comment import Comment
from .document import Document, DocumentType, ProcessingInstruction
from .element import Element
from .node import Node, NodeType
from .text import Text

logger = logging.getLogger(__name__)


def parse_document(source: Union[str, bytes],
                   encoding: Optional[str] = None,
                   strict: bool = False,
                   namespace_html: bool = False,
                   url: Optional[str] = None) -> Document:
    """
    Parse HTML into a Document.

    Args:
        source: The HTML content, as text or as undecoded bytes
        encoding: Transport-layer encoding of ``source`` (bytes only), e.g.
            from an HTTP ``Content-Type`` header
        strict: Raise on the first parse error instead of recovering
        namespace_html: Ask html5lib to put HTML elements in the XHTML namespace
        url: The URL the content was loaded from, if any

    Returns:
        The parsed Document

    Raises:
        ParseError: In strict mode, when the input is not conforming HTML
    """
    parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"),
                                 strict=strict,
                                 namespaceHTMLElements=namespace_html)

    kwargs = {}
    if isinstance(source, bytes) and encoding:
        kwargs['transport_encoding'] = encoding

    try:
        with OperationTimer(logger, "html5lib parse"):
            parsed = parser.parse(source, **kwargs)
    except Html5libParseError as e:
        logger.error(f"Error in HTML parser: {e}")
        raise ParseError(f"Error parsing HTML: {e}") from e

    document = Document(url)
    with OperationTimer(logger, "tree conversion"):
        _convert_children(parsed, document)

    if isinstance(source, bytes):
        logger.debug(f"Parsed {len(source)} bytes (detected encoding: {parser.documentEncoding})")
    else:
        logger.debug(f"Parsed {len(source)} characters")

    return document


def _convert_children(parsed_root: Any, root: Node) -> None:
    """
    Convert the children of a parsed html5lib node into our DOM structure.

    Walks the parsed tree with an explicit stack so deeply nested markup
    does not hit the interpreter's recursion limit.

    Args:
        parsed_root: The parsed node from html5lib (a minidom node)
        root: The node in our DOM structure that receives the children
    """
    stack = [(child, root) for child in reversed(parsed_root.childNodes)]

    while stack:
        parsed, parent = stack.pop()
        node = _convert_node(parsed, parent)
        if node is None:
            continue

        if parsed.childNodes:
            stack.extend((child, node) for child in reversed(parsed.childNodes))


def _convert_node(parsed: Any, parent: Node) -> Optional[Node]:
    """
    Convert a single parsed node and append it to ``parent``.

    Adjacent text runs are merged into a single Text node.

    Args:
        parsed: The parsed node from html5lib
        parent: The parent node in our DOM structure

    Returns:
        The new node, or None if the parsed node was merged or skipped
    """
    node_type = parsed.nodeType

    if node_type in (parsed.TEXT_NODE, parsed.CDATA_SECTION_NODE):
        last = parent.child_nodes[-1] if parent.child_nodes else None
        if last is not None and last.node_type == NodeType.TEXT_NODE:
            last.append_data(parsed.data)
            return None
        return parent.append_child(Text(parsed.data))

    if node_type == parsed.ELEMENT_NODE:
        return parent.append_child(_convert_element(parsed))

    if node_type == parsed.COMMENT_NODE:
        return parent.append_child(Comment(parsed.data))

    if node_type == parsed.DOCUMENT_TYPE_NODE:
        return parent.append_child(DocumentType(parsed.name, parsed.publicId, parsed.systemId))

    if node_type == parsed.PROCESSING_INSTRUCTION_NODE:
        return parent.append_child(ProcessingInstruction(parsed.target, parsed.data))

    logger.warning(f"Skipping unsupported node type: {node_type}")
    return None


def _convert_element(parsed: Any) -> Element:
    """
    Convert an html5lib element to our Element implementation.

    Args:
        parsed: The element from html5lib to convert

    Returns:
        Our Element implementation, without children
    """
    element = Element(parsed.tagName, parsed.namespaceURI)

    # Copy attributes in parser order
    attributes = parsed.attributes
    for index in range(attributes.length):
        attr = attributes.item(index)
        element.set_attribute(attr.name, attr.value, attr.namespaceURI)

    return element
