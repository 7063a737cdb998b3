"""
Lazy tree walking.

``NodeWalker`` is the engine behind every query: a pre-order (document
order) walk over a subtree that yields the nodes accepted by a query,
bounded by an optional depth cap and an optional result limit. The walk
keeps an explicit stack of frames instead of recursing, so it holds
O(depth) state, never materializes a result list, and can be abandoned
at any point.
"""

from typing import List, Optional

from .predicates import EMPTY_QUERY, Query


class NodeWalker:
    """
    Iterator over the nodes of a subtree that satisfy a query.

    The root itself is at depth 0, its children at depth 1, and so on.

    Args:
        root: Node the walk starts from
        query: Predicate applied to every visited node (default: accept all)
        max_depth: Deepest level to visit below the root, or None for no bound
        limit: Maximum number of nodes to yield, or None for no bound
    """

    def __init__(self,
                 root,
                 query: Query = EMPTY_QUERY,
                 max_depth: Optional[int] = None,
                 limit: Optional[int] = None):
        self._query = query
        self._max_depth = max_depth
        self._remaining = limit

        self._pending_root = root
        # Frames of [node, index of next child, depth]
        self._frames: List[list] = []

    def __iter__(self) -> 'NodeWalker':
        return self

    def __next__(self):
        while self._remaining is None or self._remaining > 0:
            node = self._advance()
            if node is None:
                break

            if self._query.matches(node):
                if self._remaining is not None:
                    self._remaining -= 1
                return node

        # Exhausted or limit reached; release held nodes
        self._frames.clear()
        self._pending_root = None
        raise StopIteration

    def _advance(self):
        """Move to the next node in pre-order, or return None at the end."""
        if self._pending_root is not None:
            node = self._pending_root
            self._pending_root = None
            self._enter(node, 0)
            return node

        while self._frames:
            frame = self._frames[-1]
            node, index, depth = frame
            children = node.child_nodes
            if index < len(children):
                frame[1] = index + 1
                child = children[index]
                self._enter(child, depth + 1)
                return child
            self._frames.pop()

        return None

    def _enter(self, node, depth: int) -> None:
        """Schedule a visited node's children if the depth cap allows."""
        if self._max_depth is not None and depth >= self._max_depth:
            return
        if node.child_nodes:
            self._frames.append([node, 0, depth])


class ChildIterator:
    """Iterator over the direct children of a node, in document order."""

    def __init__(self, node):
        self._children = node.child_nodes
        self._index = 0

    def __iter__(self) -> 'ChildIterator':
        return self

    def __next__(self):
        if self._index >= len(self._children):
            raise StopIteration
        child = self._children[self._index]
        self._index += 1
        return child

    def __len__(self) -> int:
        return max(len(self._children) - self._index, 0)

    def __length_hint__(self) -> int:
        return len(self)


class AncestorIterator:
    """Iterator over the parent, grandparent, ... of a node, ending at the document."""

    def __init__(self, node):
        self._current = node

    def __iter__(self) -> 'AncestorIterator':
        return self

    def __next__(self):
        parent = self._current.parent if self._current is not None else None
        if parent is None:
            self._current = None
            raise StopIteration
        self._current = parent
        return parent
