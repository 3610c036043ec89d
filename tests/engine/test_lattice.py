import itertools

import pytest

from complexity_lens.engine.lattice import (
    BOTTOM,
    COMPLEXITY_ORDER,
    LATTICE_HEIGHT,
    TOP,
    ComplexityClass,
    compare,
    from_loop_depth,
    from_loop_shape,
    join,
    join_all,
)


def test_order():
    assert LATTICE_HEIGHT == 8
    assert BOTTOM is ComplexityClass.CONSTANT
    assert TOP is ComplexityClass.FACTORIAL
    assert [c.display for c in COMPLEXITY_ORDER] == [
        "O(1)",
        "O(log n)",
        "O(n)",
        "O(n log n)",
        "O(n^2)",
        "O(n^3)",
        "O(2^n)",
        "O(n!)",
    ]
    for lower, higher in zip(COMPLEXITY_ORDER, COMPLEXITY_ORDER[1:]):
        assert lower < higher
        assert compare(lower, higher) == -1
        assert compare(higher, lower) == 1


def test_join_laws():
    for a in ComplexityClass:
        assert join(a, a) is a
        assert join(BOTTOM, a) is a
        assert compare(a, a) == 0
    for a, b in itertools.product(ComplexityClass, repeat=2):
        assert join(a, b) is join(b, a)
        assert join(a, b) >= a and join(a, b) >= b
    for a, b, c in itertools.product(ComplexityClass, repeat=3):
        assert join(join(a, b), c) is join(a, join(b, c))


def test_join_all():
    assert join_all([]) is ComplexityClass.CONSTANT
    assert (
        join_all([ComplexityClass.LINEAR, ComplexityClass.CUBIC, ComplexityClass.LOGARITHMIC])
        is ComplexityClass.CUBIC
    )


def test_from_display():
    assert ComplexityClass.from_display(" O(n log n) ") is ComplexityClass.LINEARITHMIC
    assert str(ComplexityClass.EXPONENTIAL) == "O(2^n)"
    with pytest.raises(ValueError):
        ComplexityClass.from_display("O(n^4)")


def test_loop_shapes():
    assert from_loop_depth(0) is ComplexityClass.CONSTANT
    assert from_loop_depth(5) is ComplexityClass.CUBIC
    assert from_loop_shape(0, 0) is ComplexityClass.CONSTANT
    assert from_loop_shape(0, 2) is ComplexityClass.LOGARITHMIC
    assert from_loop_shape(1, 0) is ComplexityClass.LINEAR
    assert from_loop_shape(1, 1) is ComplexityClass.LINEARITHMIC
    assert from_loop_shape(2, 1) is ComplexityClass.QUADRATIC
    assert from_loop_shape(3, 0) is ComplexityClass.CUBIC
