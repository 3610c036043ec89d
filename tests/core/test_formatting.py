from complexity_lens.core.formatting import (
    format_calls,
    format_lens_title,
    format_lens_tooltip,
    format_position,
    format_time,
)


def test_format_time():
    assert format_time(0.0000001) == "100.00 ns"
    assert format_time(0.0001) == "100.00 μs"
    assert format_time(0.1) == "100.00 ms"
    assert format_time(10) == "10.000000 s"


def test_format_position():
    assert format_position(0, 0) == "1:1"
    assert format_position(9, 4) == "10:5"


def test_format_calls():
    assert format_calls(set()) == "-"
    assert format_calls({"merge", "helper"}) == "helper, merge"


def test_format_lens():
    assert format_lens_title("O(n log n)") == "Time Complexity: O(n log n)"
    assert format_lens_tooltip("mergeSort") == "Estimated time complexity of mergeSort"
