from typing import List, Optional

from complexity_lens.core.logging import log_debug
from complexity_lens.engine.records import FunctionRecord, SourcePosition
from complexity_lens.engine.syntax import (
    is_function_node,
    resolve_binding,
    text_without_comments,
)

from .base import FunctionExtractor, SourceDocument

METHOD_ANCHORS = ("method_definition", "field_definition", "public_field_definition", "pair")


class SyntaxTreeExtractor(FunctionExtractor):
    """Finds functions by walking the document's syntax tree in document order."""

    name = "tree"
    description = "Syntax-tree traversal (tree-sitter)"

    def extract(self, document: SourceDocument) -> List[FunctionRecord]:
        records = []
        stack = [document.tree.root_node]
        while stack:
            node = stack.pop()
            if is_function_node(node):
                record = self._record_for(node)
                if record is not None:
                    records.append(record)
            # Nested functions are recorded on their own
            stack.extend(reversed(node.children))
        return records

    def _record_for(self, node) -> Optional[FunctionRecord]:
        binding = resolve_binding(node)
        if binding is None:
            return None
        name, anchor = binding

        if node.has_error:
            log_debug(f"Dropping '{name}': its declaration contains a syntax error")
            return None

        body = node.child_by_field_name("body")
        if body is None:
            return None

        return FunctionRecord(
            name=name,
            position=SourcePosition(anchor.start_point[0], anchor.start_point[1]),
            body_text=text_without_comments(body),
            body_node=body,
            is_method=anchor.type in METHOD_ANCHORS,
        )
