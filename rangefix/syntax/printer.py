"""Turn a (possibly rewritten) tree back into Go source.

Printing is span based: a node that came from the parser is printed as its
original bytes with each child's printed form spliced in at the child's
span. Untouched code, including comments and whitespace, comes out
byte-for-byte. Range loops built by the rewriter have no source text of
their own and are printed in gofmt style. Comments inside the replaced
``for`` header are lost (logged at debug level).

This is not gofmt: code that was not rewritten keeps its original layout.
"""

from ..errors import PrintError
from ..utils.logging import logger
from .nodes import Identifier, IntLiteral, Module, Node, RangeLoop
from .visitor import iter_child_nodes


def render(module: Module) -> str:
    """Print a module back to Go source text."""
    root = module.root
    if root.span is None:
        raise PrintError("root node has no source span")
    start, end = root.span
    # tree-sitter does not count leading/trailing whitespace as part of the root
    text = module.source[:start] + render_node(root, module.source) + module.source[end:]
    return text.decode("utf-8")


def render_node(node: Node, source: bytes) -> bytes:
    """Print one node against the source its spans refer to."""
    if isinstance(node, RangeLoop):
        return _render_range_loop(node, source)
    if isinstance(node, Identifier):
        return node.name.encode("utf-8")
    if isinstance(node, IntLiteral):
        return node.value.encode("utf-8")

    if node.span is None:
        raise PrintError(f"cannot print {type(node).__name__} node without a source span")

    start, end = node.span
    parts = []
    cursor = start
    for child in sorted(iter_child_nodes(node), key=_span_start):
        child_start, child_end = child.span
        if child_start < cursor or child_end > end:
            raise PrintError(
                f"{type(child).__name__} at bytes {child_start}-{child_end} does not fit "
                f"inside {type(node).__name__} at bytes {start}-{end}"
            )
        parts.append(source[cursor:child_start])
        parts.append(render_node(child, source))
        cursor = child_end
    parts.append(source[cursor:end])
    return b"".join(parts)


def _span_start(node: Node) -> int:
    if node.span is None:
        raise PrintError(f"{type(node).__name__} node has no source span to splice into")
    return node.span[0]


def _header_has_comment(node: RangeLoop, source: bytes) -> bool:
    """Whether the replaced ``for`` header held a comment outside the bound."""
    if node.span is None or node.body.span is None:
        return False
    header = source[node.span[0]:node.body.span[0]]
    if node.source.span is not None:
        start, end = node.source.span
        header = source[node.span[0]:start] + source[end:node.body.span[0]]
    return b"//" in header or b"/*" in header


def _render_range_loop(node: RangeLoop, source: bytes) -> bytes:
    if not isinstance(node.key, Identifier):
        raise PrintError(f"range loop key must be an identifier, got {type(node.key).__name__}")
    if _header_has_comment(node, source):
        line = source.count(b"\n", 0, node.span[0]) + 1
        logger.debug(f"Dropping comment from rewritten loop header at line {line}")
    return b"".join(
        [
            b"for ",
            render_node(node.key, source),
            b" := range ",
            render_node(node.source, source),
            b" ",
            render_node(node.body, source),
        ]
    )
