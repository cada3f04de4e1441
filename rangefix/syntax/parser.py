"""Go parsing using tree-sitter.

The concrete tree from the tree-sitter Go grammar is lowered into the node
union in ``nodes.py``. Comments and anonymous tokens are not kept as nodes:
the printer recovers them from the source bytes between child spans.
"""

from typing import Any

from tree_sitter import Parser
from tree_sitter_language_pack import get_language

from ..errors import ParseError
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
)

GO_LANGUAGE = "go"


def _get_node_text(node: Any) -> str:
    """Extract text from a tree-sitter node."""
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _span(node: Any) -> tuple[int, int]:
    return node.start_byte, node.end_byte


def _syntax_children(node: Any) -> list[Any]:
    """Named children minus comments."""
    return [child for child in node.named_children if child.type != "comment"]


def _find_syntax_error(node: Any) -> Any | None:
    """Find the first ERROR or missing node, in source order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _find_syntax_error(child)
            if found is not None:
                return found
    return None


def _check_utf8(source: bytes, filename: str) -> None:
    """Reject bytes that are not UTF-8; tree-sitter would accept them."""
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        line_start = source.rfind(b"\n", 0, e.start) + 1
        raise ParseError(
            "illegal UTF-8 encoding",
            filename=filename,
            line=source.count(b"\n", 0, e.start) + 1,
            column=e.start - line_start + 1,
        ) from e


def parse(source: str | bytes, filename: str = "<file>") -> Module:
    """Parse Go source into a ``Module``.

    Raises:
        ParseError: If the source is not valid UTF-8, or tree-sitter reports
            any error or missing node
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    else:
        _check_utf8(source, filename)

    # A fresh parser per call keeps concurrent parses independent
    parser = Parser(get_language(GO_LANGUAGE))
    tree = parser.parse(source)
    root = tree.root_node

    if root.has_error:
        bad = _find_syntax_error(root) or root
        row, column = bad.start_point[0], bad.start_point[1]
        if bad.is_missing:
            message = f"missing {bad.type}"
        else:
            lines = _get_node_text(bad).strip().splitlines()
            snippet = lines[0][:40] if lines else ""
            message = f"syntax error near {snippet!r}" if snippet else "syntax error"
        raise ParseError(message, filename=filename, line=row + 1, column=column + 1)

    return Module(root=lower(root), source=source, filename=filename)


def lower(node: Any) -> Node:
    """Convert a tree-sitter node and its descendants into the node union."""
    kind = node.type

    if kind == "identifier":
        return Identifier(_get_node_text(node), span=_span(node))

    if kind == "int_literal":
        return IntLiteral(_get_node_text(node), span=_span(node))

    if kind == "short_var_declaration":
        return _lower_assignment(node, ":=")

    if kind == "assignment_statement":
        operator = node.child_by_field_name("operator")
        return _lower_assignment(node, _get_node_text(operator))

    if kind in ("inc_statement", "dec_statement"):
        operand = _syntax_children(node)[0]
        return Increment(
            target=lower(operand),
            operator="++" if kind == "inc_statement" else "--",
            span=_span(node),
        )

    if kind == "binary_expression":
        operator = node.child_by_field_name("operator").type
        if operator in COMPARISON_OPERATORS:
            return BinaryCondition(
                left=lower(node.child_by_field_name("left")),
                operator=operator,
                right=lower(node.child_by_field_name("right")),
                span=_span(node),
            )

    if kind == "for_statement":
        loop = _lower_for_statement(node)
        if loop is not None:
            return loop

    return Opaque(kind, [lower(child) for child in _syntax_children(node)], span=_span(node))


def _lower_assignment(node: Any, operator: str) -> Assignment:
    left = node.child_by_field_name("left")
    right = node.child_by_field_name("right")
    return Assignment(
        targets=[lower(child) for child in _syntax_children(left)],
        values=[lower(child) for child in _syntax_children(right)],
        declares=operator == ":=",
        operator=operator,
        span=_span(node),
    )


def _lower_for_statement(node: Any) -> Loop | None:
    """Lower a ``for`` statement, or return None for range loops."""
    body = node.child_by_field_name("body")
    header = [child for child in _syntax_children(node) if child.type != "block"]

    if not header:
        # for { ... }
        return Loop(None, None, None, lower(body), span=_span(node))

    clause = header[0]
    if clause.type == "range_clause":
        return None

    if clause.type == "for_clause":
        init = clause.child_by_field_name("initializer")
        cond = clause.child_by_field_name("condition")
        post = clause.child_by_field_name("update")
        return Loop(
            init=lower(init) if init is not None else None,
            cond=lower(cond) if cond is not None else None,
            post=lower(post) if post is not None else None,
            body=lower(body),
            span=_span(node),
        )

    # for cond { ... }
    return Loop(None, lower(clause), None, lower(body), span=_span(node))
