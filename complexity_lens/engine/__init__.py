from .lattice import LATTICE_HEIGHT, ComplexityClass, compare, join, join_all
from .records import FunctionRecord, FunctionResult, SourcePosition

__all__ = [
    "LATTICE_HEIGHT",
    "ComplexityClass",
    "FunctionRecord",
    "FunctionResult",
    "SourcePosition",
    "compare",
    "join",
    "join_all",
]
