"""Go syntax layer: node union, tree-sitter parser, visitors and printer."""

from .nodes import (
    COMPARISON_OPERATORS,
    Assignment,
    BinaryCondition,
    Identifier,
    Increment,
    IntLiteral,
    Loop,
    Module,
    Node,
    Opaque,
    RangeLoop,
)
from .parser import parse
from .printer import render
from .visitor import NodeTransformer, NodeVisitor, iter_child_nodes, walk

__all__ = [
    "COMPARISON_OPERATORS",
    "Assignment",
    "BinaryCondition",
    "Identifier",
    "Increment",
    "IntLiteral",
    "Loop",
    "Module",
    "Node",
    "Opaque",
    "RangeLoop",
    "parse",
    "render",
    "NodeTransformer",
    "NodeVisitor",
    "iter_child_nodes",
    "walk",
]
