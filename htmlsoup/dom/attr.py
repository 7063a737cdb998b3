"""
Attr implementation for the DOM.
This module implements the (name, value) pairs stored in an element's attribute bag.
"""

from typing import Optional


class Attr:
    """
    Attribute of an Element node.

    Names are kept exactly as the parser produced them; html5lib already
    lowercases HTML attribute names and adjusts SVG/MathML ones.
    """

    __slots__ = ('name', 'value', 'namespace_uri')

    def __init__(self, name: str, value: str, namespace_uri: Optional[str] = None):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name
            value: The attribute value
            namespace_uri: Namespace of foreign attributes such as ``xlink:href``
        """
        self.name = name
        self.value = value
        self.namespace_uri = namespace_uri

    def __iter__(self):
        # Allows ``name, value = attr``
        yield self.name
        yield self.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __repr__(self) -> str:
        return f"Attr({self.name!r}, {self.value!r})"
