"""
Comment nodes.
"""

from .node import NodeType
from .text import CharacterData


class Comment(CharacterData):
    """An HTML comment. Its content does not count towards ``text``."""

    sentinel_name = "[comment]"

    def __init__(self, data: str):
        super().__init__(NodeType.COMMENT_NODE, "#comment", data)

    def display(self) -> str:
        return f"<!--{self.node_value}-->"
