"""
Document implementation for the DOM.
This module holds the root node of a parsed tree together with the
remaining non-element node kinds (doctype and processing instruction).
"""

from typing import Optional

from .node import Node, NodeType


class DocumentType(Node):
    """
    The ``<!DOCTYPE ...>`` node.

    Attributes:
        doctype_name: The doctype name, usually ``html``
        public_id: Public identifier, empty when absent
        system_id: System identifier, empty when absent
    """

    sentinel_name = "[doctype]"

    def __init__(self, name: str, public_id: str = "", system_id: str = ""):
        super().__init__(NodeType.DOCUMENT_TYPE_NODE)
        self.node_name = name
        self.doctype_name = name
        self.public_id = public_id or ""
        self.system_id = system_id or ""


class ProcessingInstruction(Node):
    """A processing instruction node (``<?target data?>``)."""

    sentinel_name = "[processing-instruction]"

    def __init__(self, target: str, data: str):
        super().__init__(NodeType.PROCESSING_INSTRUCTION_NODE)
        self.node_name = target
        self.target = target
        self.node_value = data


class Document(Node):
    """
    HTML Document implementation.

    The document is the root of every parsed tree. It is built by
    ``htmlsoup.dom.tree_builder`` and is never modified afterwards.
    """

    sentinel_name = "[document]"

    def __init__(self, url: Optional[str] = None):
        """
        Initialize a new Document.

        Args:
            url: The URL the document was loaded from, if any
        """
        super().__init__(NodeType.DOCUMENT_NODE)
        self.node_name = "#document"
        self.url = url

    @property
    def doctype(self) -> Optional[DocumentType]:
        """Get the document type node, if the source had one."""
        for child in self.child_nodes:
            if child.is_doctype():
                return child
        return None

    @property
    def document_element(self) -> Optional[Node]:
        """Get the root element (normally ``html``)."""
        for child in self.child_nodes:
            if child.is_element():
                return child
        return None
