def format_time(seconds: float) -> str:
    """
    Format time in the most appropriate unit:
    - <1μs: ns
    - <1ms: μs
    - <1s: ms
    - >=1s: s
    Args:
        seconds: Time in seconds
    Returns:
        Formatted time string with unit
    """
    if seconds < 1e-6:
        return f"{seconds * 1e9:.2f} ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.2f} μs"
    elif seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    else:
        return f"{seconds:.6f} s"


def format_position(line: int, column: int) -> str:
    """Format a 0-based source position as a 1-based `line:column` label."""
    return f"{line + 1}:{column + 1}"


def format_lens_title(complexity: str) -> str:
    """Title shown above an analyzed function."""
    return f"Time Complexity: {complexity}"


def format_lens_tooltip(name: str) -> str:
    """Hover text for an analyzed function."""
    return f"Estimated time complexity of {name}"


def format_calls(calls) -> str:
    """
    Format a set of callee names for display.
    Args:
        calls: Iterable of callee names
    Returns:
        Comma separated, sorted names or a dash when empty
    """
    names = sorted(calls)
    if not names:
        return "-"
    return ", ".join(names)
