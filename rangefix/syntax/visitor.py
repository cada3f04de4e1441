"""Visitor and transformer over the node union.

Same protocol as the standard library ``ast`` module: ``visit`` dispatches to
``visit_<ClassName>`` and falls back to ``generic_visit``, which walks the
child fields each node class declares in ``_fields``.
"""

from collections import deque
from collections.abc import Iterator
from typing import Any

from .nodes import Node


def iter_fields(node: Node) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` for each child field of ``node``."""
    for name in node._fields:
        yield name, getattr(node, name)


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct children of ``node``, skipping empty clauses."""
    for _, value in iter_fields(node):
        if isinstance(value, list):
            yield from value
        elif value is not None:
            yield value


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all its descendants, breadth first."""
    todo = deque([node])
    while todo:
        current = todo.popleft()
        todo.extend(iter_child_nodes(current))
        yield current


class NodeVisitor:
    """Read-only traversal. Subclasses define ``visit_<ClassName>`` methods."""

    def visit(self, node: Node) -> Any:
        method = getattr(self, "visit_" + type(node).__name__, self.generic_visit)
        return method(node)

    def generic_visit(self, node: Node) -> None:
        for child in iter_child_nodes(node):
            self.visit(child)


class NodeTransformer(NodeVisitor):
    """Traversal that may replace nodes.

    A ``visit_*`` method returns the node to put in place of the visited one.
    Returning the node itself keeps it. A method that does not call
    ``generic_visit`` stops the descent at that node. Returning None drops a
    list element; required fields must always get a node back.
    """

    def generic_visit(self, node: Node) -> Node:
        for name, old_value in iter_fields(node):
            if isinstance(old_value, list):
                new_values = []
                for value in old_value:
                    value = self.visit(value)
                    if value is not None:
                        new_values.append(value)
                old_value[:] = new_values
            elif old_value is not None:
                setattr(node, name, self.visit(old_value))
        return node
