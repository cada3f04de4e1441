"""Structural matcher for zero-based counting loops."""

from .syntax.nodes import Assignment, BinaryCondition, Identifier, Increment, IntLiteral, Loop, Node


def match_counting_loop(loop: Loop) -> tuple[str, Node] | tuple[None, None]:
    """If possible, extract the variable name and range bound of a loop.

    Matches exactly ``for v := 0; v < E; v++`` and returns ``(v, E)``.
    Anything else returns ``(None, None)``. The checks run in a fixed order
    and stop at the first failure.

    ``E`` is accepted whatever its shape: in valid Go, ``v < E`` with ``v``
    an int means ``E`` is an integer too, even when it is a call like
    ``len(xs)`` whose type cannot be seen from the syntax tree.
    """
    no_match = (None, None)

    # Init: a single new variable set to literal 0
    init = loop.init
    if not isinstance(init, Assignment):
        return no_match
    if len(init.targets) != 1:
        return no_match
    target = init.targets[0]
    if not isinstance(target, Identifier):
        return no_match
    variable = target.name

    if not init.declares:
        return no_match
    if len(init.values) != 1:
        return no_match
    value = init.values[0]
    if not isinstance(value, IntLiteral) or value.value != "0":
        return no_match

    # Cond: variable < bound
    cond = loop.cond
    if not isinstance(cond, BinaryCondition) or cond.operator != "<":
        return no_match
    if not isinstance(cond.left, Identifier) or cond.left.name != variable:
        return no_match
    bound = cond.right

    # Post: variable++
    post = loop.post
    if not isinstance(post, Increment) or post.operator != "++":
        return no_match
    if not isinstance(post.target, Identifier) or post.target.name != variable:
        return no_match

    return variable, bound
