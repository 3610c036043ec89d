"""
Complexity classes and their join-semilattice.

The classes form a fixed total order from CONSTANT (bottom) to FACTORIAL (top),
so `join` is simply the maximum under that order.
"""

from enum import Enum
from functools import reduce
from typing import Iterable


class ComplexityClass(Enum):
    """Asymptotic growth categories, declared in ascending order."""

    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log n)"
    LINEAR = "O(n)"
    LINEARITHMIC = "O(n log n)"
    QUADRATIC = "O(n^2)"
    CUBIC = "O(n^3)"
    EXPONENTIAL = "O(2^n)"
    FACTORIAL = "O(n!)"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def display(self) -> str:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, ComplexityClass):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, ComplexityClass):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, ComplexityClass):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, ComplexityClass):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_display(cls, text: str) -> "ComplexityClass":
        """Look up a class by its display string, e.g. 'O(n log n)'."""
        return cls(text.strip())


COMPLEXITY_ORDER = tuple(ComplexityClass)
_RANKS = {complexity: index for index, complexity in enumerate(COMPLEXITY_ORDER)}

BOTTOM = ComplexityClass.CONSTANT
TOP = ComplexityClass.FACTORIAL
LATTICE_HEIGHT = len(COMPLEXITY_ORDER)


def compare(a: ComplexityClass, b: ComplexityClass) -> int:
    """Return -1, 0 or 1 as `a` is below, equal to or above `b`."""
    return (a.rank > b.rank) - (a.rank < b.rank)


def join(a: ComplexityClass, b: ComplexityClass) -> ComplexityClass:
    """Least upper bound of two classes."""
    return a if a.rank >= b.rank else b


def join_all(complexities: Iterable[ComplexityClass]) -> ComplexityClass:
    """Join any number of classes; the empty join is CONSTANT."""
    return reduce(join, complexities, BOTTOM)


def from_loop_depth(depth: int) -> ComplexityClass:
    """Polynomial class for `depth` nested linear loops."""
    if depth <= 0:
        return ComplexityClass.CONSTANT
    if depth == 1:
        return ComplexityClass.LINEAR
    if depth == 2:
        return ComplexityClass.QUADRATIC
    return ComplexityClass.CUBIC


def from_loop_shape(linear_depth: int, log_depth: int) -> ComplexityClass:
    """Class for a nest of `linear_depth` linear loops and `log_depth` halving loops."""
    if linear_depth >= 2:
        return from_loop_depth(linear_depth)
    if log_depth <= 0:
        return from_loop_depth(linear_depth)
    if linear_depth == 1:
        return ComplexityClass.LINEARITHMIC
    return ComplexityClass.LOGARITHMIC
