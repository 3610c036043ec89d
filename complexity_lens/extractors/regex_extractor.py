"""
Degraded text-pattern extraction.

Function headers are located with regular expressions and bodies are
delimited by brace matching, without parsing the whole document. Each body
is then parsed on its own so the classifier still gets a subtree.
"""

import re
from typing import List, Optional

from complexity_lens.core.constants import CONTROL_KEYWORDS
from complexity_lens.core.logging import log_debug
from complexity_lens.engine.records import FunctionRecord, SourcePosition
from complexity_lens.engine.syntax import strip_comments

from .base import FunctionExtractor, SourceDocument

IDENT = r"[A-Za-z_$][\w$]*"
PARAMS = r"\(([^)]*)\)"
RETURN_TYPE = r"(?::\s*[^{;=]+)?"

# (label, pattern, name is anchored at the match start)
FUNCTION_PATTERNS = (
    (
        "declaration",
        re.compile(rf"\bfunction\s*\*?\s*({IDENT})\s*(?:<[^>]*>)?\s*{PARAMS}\s*{RETURN_TYPE}\{{"),
        True,
    ),
    (
        "function expression",
        re.compile(
            rf"({IDENT})\s*=\s*(?:async\s+)?function\b\s*\*?\s*(?:{IDENT})?\s*{PARAMS}\s*{RETURN_TYPE}\{{"
        ),
        False,
    ),
    (
        "arrow function",
        re.compile(rf"({IDENT})\s*=\s*(?:async\s*)?(?:{PARAMS}|{IDENT})\s*{RETURN_TYPE}=>\s*\{{"),
        False,
    ),
    (
        "method",
        re.compile(
            rf"^[ \t]*(?:(?:static|async|get|set|public|private|protected|override)\s+)*\*?\s*"
            rf"({IDENT})\s*{PARAMS}\s*{RETURN_TYPE}\{{",
            re.MULTILINE,
        ),
        False,
    ),
)

QUOTES = "'\"`"


def find_block_end(text: str, open_index: int) -> Optional[int]:
    """
    Index of the brace closing the block opened at `open_index`.

    Strings and comments are skipped. Returns None when the braces never
    balance.
    """
    depth = 0
    i = open_index
    length = len(text)
    while i < length:
        char = text[i]
        if char in QUOTES:
            i += 1
            while i < length and text[i] != char:
                i += 2 if text[i] == "\\" else 1
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
        elif text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = length if close == -1 else close + 1
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def position_at(text: str, offset: int) -> SourcePosition:
    line = text.count("\n", 0, offset)
    column = offset - (text.rfind("\n", 0, offset) + 1)
    return SourcePosition(line, column)


class RegexExtractor(FunctionExtractor):
    """Finds functions by matching common declaration shapes in the raw text."""

    name = "regex"
    description = "Text patterns with brace matching (degraded)"

    def extract(self, document: SourceDocument) -> List[FunctionRecord]:
        text = document.text
        records = []

        for label, pattern, anchored_at_start in FUNCTION_PATTERNS:
            for match in pattern.finditer(text):
                name = match.group(1)
                if name in CONTROL_KEYWORDS:
                    continue
                if label == "declaration" and text[: match.start()].rstrip().endswith("="):
                    # Bound function expressions are named by their target
                    continue

                open_index = match.end() - 1
                close_index = find_block_end(text, open_index)
                if close_index is None:
                    log_debug(f"Dropping '{name}': unbalanced braces in its body")
                    continue

                body_text = strip_comments(text[open_index + 1 : close_index])
                body_node = document.plugin.parse(body_text).root_node
                offset = match.start() if anchored_at_start else match.start(1)

                records.append(
                    FunctionRecord(
                        name=name,
                        position=position_at(text, offset),
                        body_text=body_text,
                        body_node=body_node,
                        is_method=label == "method",
                    )
                )

        records.sort(key=lambda record: record.position)
        return records
