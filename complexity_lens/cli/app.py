"""
Main Typer app and command definitions for Complexity Lens.
"""

from typing import Optional

import typer

from .completions import Completions
from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

# Create main typer app
app = typer.Typer(
    help="Complexity Lens - estimate the time complexity of JavaScript/TypeScript functions",
    add_completion=True,
    rich_markup_mode="markdown",
)


# ---- Commands ----


@app.command()
@with_error_handling
def analyze(
    path: str = typer.Argument(..., help="Source file to analyze"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Source language (inferred from the extension by default)",
        autocompletion=Completions.languages,
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="Function extraction strategy (tree or regex)",
        autocompletion=Completions.strategies,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: table, json or lens",
        autocompletion=Completions.formats,
    ),
    evidence: Optional[bool] = typer.Option(
        None, "--evidence/--no-evidence", help="Show why each verdict was reached"
    ),
    max_passes: Optional[int] = typer.Option(
        None, "--max-passes", help="Ceiling on call-graph propagation passes"
    ),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to a file"),
):
    """Estimate the time complexity of every function in a file."""
    options = resolve_options(
        language_override=language,
        strategy_override=strategy,
        format_override=output_format,
        evidence_override=evidence,
        max_passes_override=max_passes,
        config_override=config,
        debug_override=debug,
        verbose_override=verbose,
        log_file_override=log_file,
    )

    CommandHandlers.handle_analyze(options, path)


@app.command()
@with_error_handling
def languages():
    """List supported languages and extraction strategies."""
    CommandHandlers.handle_languages()


def main():
    app()


if __name__ == "__main__":
    main()
