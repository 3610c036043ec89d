"""
Call reference extraction.

Collects the distinct bare-identifier callees of a function body. Property
calls (`arr.sort()`, `this.helper()`) never become call-graph edges; the
classifier inspects those for shape instead.
"""

from typing import Set

from complexity_lens.core.constants import CALL_DENYLIST
from complexity_lens.engine.syntax import callee_of, node_text, unwrap, walk_body


def extract_calls(body_node, denylist=CALL_DENYLIST) -> Set[str]:
    """Return the set of callee names referenced in `body_node`."""
    calls = set()
    if body_node is None:
        return calls

    for node in walk_body(body_node):
        if node.type != "call_expression":
            continue
        callee = unwrap(callee_of(node))
        if callee is None or callee.type != "identifier":
            continue
        name = node_text(callee)
        if name and name not in denylist:
            calls.add(name)
    return calls
