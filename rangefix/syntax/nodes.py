"""Node union for Go source files.

The tree-sitter concrete syntax tree is lowered into a small closed set of
dataclasses. Only the shapes the loop rewriter discriminates on get their own
class; everything else becomes an ``Opaque`` node that keeps its children so
nested loops are still reachable.

Every node records the byte span it covers in the original source. The
printer uses spans to splice rewritten subtrees back into untouched text, so
a node created during rewriting takes over the span of the node it replaces.
"""

from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias

Span: TypeAlias = tuple[int, int]

COMPARISON_OPERATORS = frozenset({"==", "!=", "<", "<=", ">", ">="})


@dataclass
class Identifier:
    """A bare name. Two identifiers are the same variable iff names match."""

    _fields: ClassVar[tuple[str, ...]] = ()

    name: str
    span: Span | None = None


@dataclass
class IntLiteral:
    """An integer literal, kept as its source text (``"0"``, ``"0x10"``...)."""

    _fields: ClassVar[tuple[str, ...]] = ()

    value: str
    span: Span | None = None


@dataclass
class Assignment:
    """``a, b := x, y`` or ``a = x`` or ``a += x``."""

    _fields: ClassVar[tuple[str, ...]] = ("targets", "values")

    targets: list["Node"]
    values: list["Node"]
    declares: bool
    operator: str = ":="
    span: Span | None = None


@dataclass
class BinaryCondition:
    """A comparison; other binary expressions stay opaque."""

    _fields: ClassVar[tuple[str, ...]] = ("left", "right")

    left: "Node"
    operator: str
    right: "Node"
    span: Span | None = None


@dataclass
class Increment:
    """``x++`` or ``x--``."""

    _fields: ClassVar[tuple[str, ...]] = ("target",)

    target: "Node"
    operator: str
    span: Span | None = None


@dataclass
class Loop:
    """A three-clause ``for`` statement.

    ``for cond {}`` and ``for {}`` are loops with the missing clauses set to
    None. Range loops already in the source are not ``Loop`` nodes.
    """

    _fields: ClassVar[tuple[str, ...]] = ("init", "cond", "post", "body")

    init: "Node | None"
    cond: "Node | None"
    post: "Node | None"
    body: "Node"
    span: Span | None = None


@dataclass
class RangeLoop:
    """``for key := range source body``. Only ever built by the rewriter."""

    _fields: ClassVar[tuple[str, ...]] = ("key", "source", "body")

    key: "Node"
    source: "Node"
    body: "Node"
    span: Span | None = None


@dataclass
class Opaque:
    """Any other syntax, identified by its tree-sitter node type."""

    _fields: ClassVar[tuple[str, ...]] = ("children",)

    kind: str
    children: list["Node"] = field(default_factory=list)
    span: Span | None = None


Node: TypeAlias = (
    Identifier | IntLiteral | Assignment | BinaryCondition | Increment | Loop | RangeLoop | Opaque
)


@dataclass
class Module:
    """A parsed file: the root node plus the bytes its spans point into."""

    root: Node
    source: bytes
    filename: str = "<file>"
