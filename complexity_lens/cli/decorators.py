"""
Decorators for Complexity Lens commands.
"""

from functools import wraps
from typing import Callable

import typer
from rich.console import Console

console = Console(stderr=True)


def with_error_handling(func: Callable) -> Callable:
    """Decorator to handle common error patterns in CLI commands."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            console.print(f"[bold red]Error in {func.__name__}:[/bold red] {e}", highlight=False)
            if kwargs.get("debug"):
                import traceback

                console.print(traceback.format_exc(), markup=False)
            raise typer.Exit(code=1)

    return wrapper
