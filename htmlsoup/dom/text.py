"""
Character data nodes: text runs and the shared base used by comments.
"""

from .node import Node, NodeType


class CharacterData(Node):
    """A node whose whole content is a string, stored in ``node_value``."""

    def __init__(self, node_type: NodeType, node_name: str, data: str):
        super().__init__(node_type)
        self.node_name = node_name
        self.node_value = data if data is not None else ""

    @property
    def data(self) -> str:
        return self.node_value

    def append_data(self, data: str) -> None:
        """Extend the content; the tree builder uses this to merge adjacent runs."""
        self.node_value += data


class Text(CharacterData):
    """
    A run of character data.

    Whitespace-only runs are kept, so concatenating the text nodes of a
    subtree reproduces its character content exactly.
    """

    sentinel_name = "[text]"

    def __init__(self, data: str):
        super().__init__(NodeType.TEXT_NODE, "#text", data)

    def display(self) -> str:
        # Raw contents, no escaping
        return self.node_value
