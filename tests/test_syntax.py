"""Tests for the Go syntax layer: parsing, visiting and printing."""

import pytest

from rangefix.errors import ParseError, PrintError
from rangefix.syntax import (
    Assignment,
    BinaryCondition,
    Identifier,
    Increment,
    IntLiteral,
    Loop,
    Module,
    NodeVisitor,
    Opaque,
    RangeLoop,
    parse,
    render,
    walk,
)


def loops_in(module: Module) -> list[Loop]:
    return [node for node in walk(module.root) if isinstance(node, Loop)]


def wrap(statements: str) -> str:
    return f"package main\n\nfunc main() {{\n{statements}\n}}\n"


class TestParseLoops:
    """Lowering of for statements into Loop nodes."""

    def test_three_clause_loop(self):
        module = parse(wrap("\tfor i := 0; i < 10; i++ {\n\t}"))

        [loop] = loops_in(module)
        assert isinstance(loop.init, Assignment)
        assert loop.init.declares is True
        assert loop.init.operator == ":="
        assert [t.name for t in loop.init.targets] == ["i"]
        assert loop.init.values[0] == IntLiteral("0", span=loop.init.values[0].span)
        assert isinstance(loop.cond, BinaryCondition)
        assert loop.cond.operator == "<"
        assert loop.cond.left.name == "i"
        assert loop.cond.right.value == "10"
        assert isinstance(loop.post, Increment)
        assert loop.post.operator == "++"
        assert loop.post.target.name == "i"
        assert isinstance(loop.body, Opaque)
        assert loop.body.kind == "block"

    def test_plain_assignment_does_not_declare(self):
        module = parse(wrap("\tvar i int\n\tfor i = 0; i < 10; i++ {\n\t}"))

        [loop] = loops_in(module)
        assert isinstance(loop.init, Assignment)
        assert loop.init.declares is False
        assert loop.init.operator == "="

    def test_compound_assignment_post(self):
        module = parse(wrap("\tfor i := 0; i < 10; i += 2 {\n\t}"))

        [loop] = loops_in(module)
        assert isinstance(loop.post, Assignment)
        assert loop.post.operator == "+="
        assert loop.post.declares is False

    def test_decrement(self):
        module = parse(wrap("\tfor i := 10; i > 0; i-- {\n\t}"))

        [loop] = loops_in(module)
        assert loop.post.operator == "--"
        assert loop.cond.operator == ">"

    def test_multiple_targets(self):
        module = parse(wrap("\tfor i, j := 0, 0; i < 10; i++ {\n\t\t_ = j\n\t}"))

        [loop] = loops_in(module)
        assert [t.name for t in loop.init.targets] == ["i", "j"]
        assert len(loop.init.values) == 2

    def test_missing_clauses(self):
        module = parse(wrap("\tfor ; ; {\n\t\tbreak\n\t}"))

        [loop] = loops_in(module)
        assert loop.init is None
        assert loop.cond is None
        assert loop.post is None

    def test_condition_only_loop(self):
        module = parse(wrap("\tn := 3\n\tfor n > 0 {\n\t\tn--\n\t}"))

        [loop] = loops_in(module)
        assert loop.init is None
        assert isinstance(loop.cond, BinaryCondition)
        assert loop.post is None

    def test_infinite_loop(self):
        module = parse(wrap("\tfor {\n\t\tbreak\n\t}"))

        [loop] = loops_in(module)
        assert (loop.init, loop.cond, loop.post) == (None, None, None)

    def test_range_loops_are_opaque(self):
        module = parse(wrap("\tfor i := range 10 {\n\t\t_ = i\n\t}\n\tfor range 3 {\n\t}"))

        assert loops_in(module) == []
        kinds = {node.kind for node in walk(module.root) if isinstance(node, Opaque)}
        assert "for_statement" in kinds

    def test_arithmetic_is_not_a_condition(self):
        module = parse(wrap("\tx := 1 + 2\n\t_ = x"))

        conditions = [n for n in walk(module.root) if isinstance(n, BinaryCondition)]
        assert conditions == []

    def test_nested_loops(self):
        code = wrap("\tfor i := 0; i < 3; i++ {\n\t\tfor j := 0; j < i; j++ {\n\t\t}\n\t}")

        loops = loops_in(parse(code))

        assert [loop.init.targets[0].name for loop in loops] == ["i", "j"]

    def test_spans_point_into_source(self):
        code = wrap("\tfor i := 0; i < limit; i++ {\n\t}")
        module = parse(code)

        [loop] = loops_in(module)
        start, end = loop.cond.right.span
        assert module.source[start:end] == b"limit"

    def test_bytes_input(self):
        module = parse(wrap("\tfor i := 0; i < 1; i++ {\n\t}").encode("utf-8"), "x.go")

        assert module.filename == "x.go"
        assert len(loops_in(module)) == 1


class TestParseErrors:
    """Invalid Go raises ParseError with a location."""

    def test_unclosed_function(self):
        with pytest.raises(ParseError) as excinfo:
            parse("package main\n\nfunc main() {\n\tfor i := 0; i < 10; i++ {\n", "broken.go")

        assert excinfo.value.filename == "broken.go"
        assert excinfo.value.line >= 1
        assert "broken.go" in str(excinfo.value)

    def test_garbage(self):
        with pytest.raises(ParseError):
            parse("package main\n\nfunc main() {\n\tfor i := 0; i < ; i++ {}\n}\n")

    def test_invalid_utf8(self):
        source = b'package main\n\nfunc main() {\n\ts := "\xff"\n\t_ = s\n}\n'

        with pytest.raises(ParseError) as excinfo:
            parse(source, "latin1.go")

        assert excinfo.value.line == 4
        assert excinfo.value.column == 8
        assert "illegal UTF-8 encoding" in str(excinfo.value)


class TestPrinter:
    """Span based printing."""

    @pytest.mark.parametrize(
        "code",
        [
            wrap("\tfor i := 0; i < 10; i++ {\n\t\tprintln(i) // keep me\n\t}"),
            "\n\n// leading comment\npackage main\n\nimport \"fmt\"\n\nfunc f() {\n\tfmt.Println(\"héllo\")\n}\n\n\n",
            "package main\r\n\r\nfunc f() {\r\n\tfor {\r\n\t}\r\n}\r\n",
        ],
    )
    def test_unmodified_tree_round_trips(self, code):
        assert render(parse(code)) == code

    def test_range_loop_rendering(self):
        code = wrap("\tfor i := 0; i < n+1; i++ {\n\t\tuse(i)\n\t}")
        module = parse(code)
        [loop] = loops_in(module)
        statement_list = next(
            n for n in walk(module.root) if isinstance(n, Opaque) and loop in n.children
        )
        index = statement_list.children.index(loop)
        statement_list.children[index] = RangeLoop(
            key=Identifier("i"), source=loop.cond.right, body=loop.body, span=loop.span
        )

        assert render(module) == wrap("\tfor i := range n+1 {\n\t\tuse(i)\n\t}")

    def test_synthetic_node_without_span_is_rejected(self):
        module = parse(wrap("\tx := 1\n\t_ = x"))
        module.root.children.append(Opaque("block"))

        with pytest.raises(PrintError):
            render(module)

    def test_range_key_must_be_identifier(self):
        module = parse(wrap("\tfor i := 0; i < 2; i++ {\n\t}"))
        [loop] = loops_in(module)
        parent = next(n for n in walk(module.root) if isinstance(n, Opaque) and loop in n.children)
        parent.children[parent.children.index(loop)] = RangeLoop(
            key=IntLiteral("0"), source=loop.cond.right, body=loop.body, span=loop.span
        )

        with pytest.raises(PrintError):
            render(module)


class TestVisitor:
    """Dispatch by node class name."""

    def test_visits_every_identifier(self):
        class Collector(NodeVisitor):
            def __init__(self):
                self.names = []

            def visit_Identifier(self, node):
                self.names.append(node.name)

        collector = Collector()
        collector.visit(parse(wrap("\tfor i := 0; i < n; i++ {\n\t\tuse(i)\n\t}")).root)

        assert collector.names.count("i") == 4
        assert "n" in collector.names
        assert "use" in collector.names
