from complexity_lens.engine.analyzer import ComplexityAnalyzer, analyze
from complexity_lens.engine.lattice import ComplexityClass
from complexity_lens.engine.records import FunctionResult, SourcePosition

__version__ = "0.1.0"

__all__ = [
    "ComplexityAnalyzer",
    "ComplexityClass",
    "FunctionResult",
    "SourcePosition",
    "analyze",
]
