"""
Helpers over tree-sitter nodes shared by the extractors, the call extractor
and the classifier.

Only node kinds common to the JavaScript and TypeScript grammars are used, so
every helper works unchanged on either tree.
"""

import re
from typing import Iterator, Optional, Tuple

from complexity_lens.core.constants import FUNCTION_NODE_TYPES

BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
LINE_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)

METHOD_NAME_TYPES = ("property_identifier", "private_property_identifier", "identifier")
PAIR_KEY_TYPES = ("property_identifier", "identifier", "string")


def node_text(node) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def same_node(a, b) -> bool:
    if a is None or b is None:
        return False
    return (a.type, a.start_byte, a.end_byte) == (b.type, b.start_byte, b.end_byte)


def named_children(node):
    """Named children without comments."""
    return [child for child in node.named_children if child.type != "comment"]


def unwrap(node):
    """Strip any number of enclosing parentheses from an expression."""
    while node is not None and node.type == "parenthesized_expression":
        inner = named_children(node)
        node = inner[0] if inner else None
    return node


def numeric_value(node) -> Optional[float]:
    """Value of a numeric literal, or None when the node is not one."""
    node = unwrap(node)
    if node is None or node.type != "number":
        return None
    text = node_text(node).replace("_", "").rstrip("n")
    try:
        if text[:2].lower() in ("0x", "0o", "0b"):
            return float(int(text, 0))
        return float(text)
    except ValueError:
        return None


def operator_of(node) -> str:
    operator = node.child_by_field_name("operator")
    return operator.type if operator is not None else ""


def is_identifier(node) -> bool:
    node = unwrap(node)
    return node is not None and node.type == "identifier"


def is_function_node(node) -> bool:
    return node.is_named and node.type in FUNCTION_NODE_TYPES


def _binding_name(parent, child) -> Optional[str]:
    """Name a function expression takes from the construct it is bound by."""
    if parent.type == "variable_declarator":
        if same_node(parent.child_by_field_name("value"), child):
            target = parent.child_by_field_name("name")
            if target is not None and target.type == "identifier":
                return node_text(target)
    elif parent.type == "assignment_expression":
        if same_node(parent.child_by_field_name("right"), child):
            target = parent.child_by_field_name("left")
            if target is not None and target.type == "identifier":
                return node_text(target)
            if target is not None and target.type == "member_expression":
                prop = target.child_by_field_name("property")
                if prop is not None and prop.type in METHOD_NAME_TYPES:
                    return node_text(prop)
    elif parent.type == "pair":
        if same_node(parent.child_by_field_name("value"), child):
            key = parent.child_by_field_name("key")
            if key is not None and key.type in PAIR_KEY_TYPES:
                return node_text(key).strip("'\"") or None
    elif parent.type in ("field_definition", "public_field_definition"):
        if same_node(parent.child_by_field_name("value"), child):
            target = parent.child_by_field_name("property") or parent.child_by_field_name(
                "name"
            )
            if target is not None and target.type in METHOD_NAME_TYPES:
                return node_text(target)
    return None


def resolve_binding(node) -> Optional[Tuple[str, object]]:
    """
    Resolve the name of a function-like node.

    Returns:
        (name, anchor) where anchor is the node whose start is the declaration
        position, or None for anonymous functions.
    """
    if not is_function_node(node):
        return None

    if node.type in ("function_declaration", "generator_function_declaration"):
        name = node.child_by_field_name("name")
        return (node_text(name), node) if name is not None else None

    if node.type == "method_definition":
        name = node.child_by_field_name("name")
        if name is not None and name.type in METHOD_NAME_TYPES:
            return node_text(name), node
        return None

    child, parent = node, node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        child, parent = parent, parent.parent
    if parent is not None:
        bound = _binding_name(parent, child)
        if bound:
            return bound, parent

    # Named function expression that is not bound to anything
    own = node.child_by_field_name("name")
    if own is not None and own.type == "identifier":
        return node_text(own), node
    return None


def is_named_function(node) -> bool:
    return resolve_binding(node) is not None


def walk_body(node) -> Iterator:
    """
    Pre-order walk of a function body.

    Comments are skipped, and so are nested named functions: those are
    inventory records of their own. Anonymous callbacks are walked.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "comment":
            continue
        if current is not node and is_named_function(current):
            continue
        yield current
        stack.extend(reversed(current.children))


def iter_comments(node) -> Iterator:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "comment":
            yield current
            continue
        stack.extend(reversed(current.children))


def text_without_comments(node) -> str:
    """Source text of `node` with every comment inside it removed."""
    source = node.text or b""
    base = node.start_byte
    pieces = []
    cursor = 0
    for comment in sorted(iter_comments(node), key=lambda c: c.start_byte):
        pieces.append(source[cursor : comment.start_byte - base])
        cursor = comment.end_byte - base
    pieces.append(source[cursor:])
    return b"".join(pieces).decode("utf-8", errors="replace")


def strip_comments(text: str) -> str:
    """Remove block and line comments from raw source text."""
    return LINE_COMMENT_RE.sub("", BLOCK_COMMENT_RE.sub("", text))


def callee_of(call):
    """The `function` child of a call expression."""
    return call.child_by_field_name("function")


def member_property(node) -> Optional[str]:
    """Property name of `obj.prop` / `obj?.prop`, else None."""
    if node is None or node.type != "member_expression":
        return None
    prop = node.child_by_field_name("property")
    return node_text(prop) if prop is not None else None


def member_object(node):
    if node is None or node.type != "member_expression":
        return None
    return node.child_by_field_name("object")


def call_arguments(call):
    """Argument expressions of a call, in order."""
    arguments = call.child_by_field_name("arguments")
    if arguments is None or arguments.type != "arguments":
        return []
    return named_children(arguments)
