"""Tree rewriter turning counting loops into range loops."""

from .matcher import match_counting_loop
from .syntax.nodes import Assignment, Identifier, Increment, Loop, Node, RangeLoop
from .syntax.visitor import NodeTransformer, walk


def assigns_to(body: Node, variable: str) -> bool:
    """Check whether ``body`` assigns, increments or decrements ``variable``.

    Names are compared without scope resolution, so a shadowing variable of
    the same name counts too.
    """
    for node in walk(body):
        if isinstance(node, Assignment) and not node.declares:
            if any(isinstance(t, Identifier) and t.name == variable for t in node.targets):
                return True
        elif isinstance(node, Increment):
            if isinstance(node.target, Identifier) and node.target.name == variable:
                return True
    return False


class RangeLoopRewriter(NodeTransformer):
    """Replace every ``for i := 0; i < n; i++`` loop with ``for i := range n``.

    One instance rewrites one tree. ``changed`` reports whether any loop was
    replaced, ``rewritten`` how many.

    With ``guard_mutated_counter`` set, loops whose body writes to the
    counter are left alone: ranging over an int ignores such writes, the
    three-clause loop does not.
    """

    def __init__(self, guard_mutated_counter: bool = False):
        self.guard_mutated_counter = guard_mutated_counter
        self.changed = False
        self.rewritten = 0
        self.skipped = 0

    def visit_Loop(self, node: Loop) -> Node:
        variable, bound = match_counting_loop(node)
        if variable is None:
            return self.generic_visit(node)

        if self.guard_mutated_counter and assigns_to(node.body, variable):
            self.skipped += 1
            return self.generic_visit(node)

        replacement = RangeLoop(
            key=Identifier(variable),
            source=bound,
            body=node.body,
            span=node.span,
        )
        self.changed = True
        self.rewritten += 1
        # Nested loops live in the moved body; visit it here, once
        return self.generic_visit(replacement)
