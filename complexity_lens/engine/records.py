from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Set

from complexity_lens.engine.lattice import ComplexityClass


class SourcePosition(NamedTuple):
    """0-based line/column where a declaration begins."""

    line: int
    column: int


@dataclass
class FunctionRecord:
    """One statically discovered function-like unit of a document."""

    name: str
    position: SourcePosition
    body_text: str
    body_node: Any = None  # tree-sitter node the classifier walks
    is_method: bool = False
    calls: Set[str] = field(default_factory=set)
    local_complexity: ComplexityClass = ComplexityClass.CONSTANT
    complexity: ComplexityClass = ComplexityClass.CONSTANT
    evidence: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        """Unique identity: name plus declaration line."""
        return f"{self.name}@{self.position.line}"

    def raise_to(self, complexity: ComplexityClass, reason: Optional[str] = None) -> bool:
        """Raise the current complexity; never lowers it. Returns True on change."""
        if complexity <= self.complexity:
            return False
        self.complexity = complexity
        if reason:
            self.evidence.append(reason)
        return True

    def to_result(self) -> "FunctionResult":
        return FunctionResult(
            name=self.name,
            position=self.position,
            complexity=self.complexity,
            evidence=list(self.evidence),
            calls=frozenset(self.calls),
            local_complexity=self.local_complexity,
        )


@dataclass(frozen=True)
class FunctionResult:
    """What an analysis reports for one function."""

    name: str
    position: SourcePosition
    complexity: ComplexityClass
    evidence: List[str]
    calls: frozenset = frozenset()
    local_complexity: ComplexityClass = ComplexityClass.CONSTANT

    @property
    def line(self) -> int:
        return self.position.line

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "line": self.position.line + 1,
            "column": self.position.column + 1,
            "complexity": self.complexity.display,
            "local_complexity": self.local_complexity.display,
            "calls": sorted(self.calls),
            "evidence": list(self.evidence),
        }
