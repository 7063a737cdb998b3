"""
Element implementation for the DOM.
This module implements HTML elements: a tag name plus an ordered attribute bag.
"""

from typing import Dict, List, Optional

from .attr import Attr
from .node import Node, NodeType


class Element(Node):
    """
    Element node implementation for the DOM.

    The tag name is stored exactly as the parser reports it. html5lib
    lowercases HTML element names, so name comparisons are case-sensitive.
    """

    def __init__(self, tag_name: str, namespace: Optional[str] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            namespace: Optional namespace URI
        """
        super().__init__(NodeType.ELEMENT_NODE)

        self.tag_name = tag_name
        self.namespace_uri = namespace
        self.node_name = tag_name

        # Attributes in insertion order
        self.attributes: List[Attr] = []

    @property
    def name(self) -> str:
        return self.tag_name

    def set_attribute(self, name: str, value: str, namespace: Optional[str] = None) -> Attr:
        """
        Add an attribute to the bag.

        Only the tree builder calls this. Duplicate names are kept, as HTML5
        parsers drop duplicates before they get here.

        Args:
            name: The attribute name
            value: The attribute value
            namespace: Namespace of a foreign attribute

        Returns:
            The new attribute
        """
        attr = Attr(name, value, namespace)
        self.attributes.append(attr)
        return attr

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name, compared case-insensitively
            default: Value returned when the attribute is absent

        Returns:
            The value of the first attribute whose name matches
        """
        wanted = name.lower()
        for attr in self.attributes:
            if attr.name.lower() == wanted:
                return attr.value
        return default

    @property
    def attrs(self) -> Dict[str, str]:
        """Attributes as a dict sorted by name; the first of duplicate names wins."""
        result: Dict[str, str] = {}
        for attr in sorted(self.attributes, key=lambda a: a.name):
            result.setdefault(attr.name, attr.value)
        return result

    @property
    def inner_html(self) -> str:
        """Get the rendered HTML of the element's children."""
        return "".join(child.display() for child in self.child_nodes)

    @property
    def outer_html(self) -> str:
        """Get the rendered HTML of the element, including the element itself."""
        return f"<{self.tag_name}{self._format_attributes()}>{self.inner_html}</{self.tag_name}>"

    def display(self) -> str:
        return self.outer_html

    def _format_attributes(self) -> str:
        """
        Format attributes as an HTML attribute string.

        Attributes are sorted by name and always quoted.

        Returns:
            Formatted attribute string, with a leading space when non-empty
        """
        result = []
        for name, value in self.attrs.items():
            # Escape quotes
            escaped_value = value.replace('"', '&quot;')
            result.append(f' {name}="{escaped_value}"')

        return "".join(result)
