import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from rich.box import ROUNDED
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from complexity_lens.core.formatting import (
    format_calls,
    format_lens_title,
    format_lens_tooltip,
    format_position,
    format_time,
)
from complexity_lens.engine.lattice import ComplexityClass
from complexity_lens.engine.records import FunctionResult

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console()

SUCCESS_STYLE = Style(color="green", bold=True)
WARNING_STYLE = Style(color="yellow", bold=True)
INFO_STYLE = Style(color="blue", bold=True)
BOLD_STYLE = Style(bold=True)
DIM_STYLE = Style(dim=True)
CYAN_STYLE = Style(color="cyan")

COMPLEXITY_STYLES = {
    ComplexityClass.CONSTANT: "green",
    ComplexityClass.LOGARITHMIC: "green",
    ComplexityClass.LINEAR: "cyan",
    ComplexityClass.LINEARITHMIC: "cyan",
    ComplexityClass.QUADRATIC: "yellow",
    ComplexityClass.CUBIC: "red",
    ComplexityClass.EXPONENTIAL: "bold red",
    ComplexityClass.FACTORIAL: "bold magenta",
}


@dataclass(frozen=True)
class Lens:
    """An inline annotation anchored at a source line."""

    line: int
    title: str
    tooltip: str


# ==============================================================================
# Private Helper Functions
# ==============================================================================


def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple = (1, 2),
    **kwargs: Any,
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=ROUNDED,
        **kwargs,
    )


def _create_table(
    title: Optional[str] = None,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any,
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=ROUNDED,
        show_header=show_header,
        header_style=header_style,
        **kwargs,
    )


def _print_status_message(icon: str, msg: str, style: Union[str, Style]):
    """Helper function to print simple status messages."""
    console.print(Text(f"{icon}  {msg}", style=style))


def _complexity_text(complexity: ComplexityClass) -> Text:
    return Text(complexity.display, style=COMPLEXITY_STYLES[complexity])


# ==============================================================================
# Simple Status Messages
# ==============================================================================


def print_warning(msg: str):
    """Print a warning message."""
    _print_status_message("⚠", msg, WARNING_STYLE)


def print_success(msg: str):
    """Print a success message."""
    _print_status_message("✓", msg, SUCCESS_STYLE)


# ==============================================================================
# Analysis Output
# ==============================================================================


def print_analysis_header(path: str, language: str, strategy: str):
    """Print the analysis banner."""
    header = Text.assemble(
        ("COMPLEXITY ANALYSIS", BOLD_STYLE),
        "\n",
        (f"{path} · {language} · {strategy} strategy", DIM_STYLE),
    )
    console.print(_create_panel(header, padding=(0, 2)))


def print_results_table(results: Sequence[FunctionResult]):
    """Display one row per analyzed function."""
    if not results:
        print_warning("No named functions found.")
        return

    table = _create_table()
    table.add_column("Line", style=DIM_STYLE, justify="right")
    table.add_column("Function", style=CYAN_STYLE)
    table.add_column("Complexity")
    table.add_column("Local")
    table.add_column("Calls", style=DIM_STYLE)

    for result in results:
        table.add_row(
            format_position(*result.position),
            result.name,
            _complexity_text(result.complexity),
            _complexity_text(result.local_complexity),
            format_calls(result.calls),
        )
    console.print(table)


def print_evidence(results: Sequence[FunctionResult]):
    """Display the evidence trail behind each verdict."""
    for result in results:
        tree = Tree(
            Text.assemble(
                (f"{result.name} ", BOLD_STYLE),
                _complexity_text(result.complexity),
                (f"  (line {result.position.line + 1})", DIM_STYLE),
            )
        )
        for reason in result.evidence:
            tree.add(Text(reason))
        console.print(tree)


def build_lenses(results: Iterable[FunctionResult]) -> List[Lens]:
    """Map each result to an annotation anchored at its declaration line."""
    return [
        Lens(
            line=result.position.line,
            title=format_lens_title(result.complexity.display),
            tooltip=format_lens_tooltip(result.name),
        )
        for result in results
    ]


def render_lens_view(text: str, results: Sequence[FunctionResult]) -> str:
    """Source text with a lens title line inserted above each analyzed function."""
    by_line: Dict[int, List[Lens]] = {}
    for lens in build_lenses(results):
        by_line.setdefault(lens.line, []).append(lens)

    rendered = []
    for index, line in enumerate(text.splitlines()):
        indent = line[: len(line) - len(line.lstrip())]
        for lens in by_line.get(index, []):
            rendered.append(f"{indent}// {lens.title}")
        rendered.append(line)
    return "\n".join(rendered)


def print_lens_view(text: str, results: Sequence[FunctionResult]):
    """Print the annotated source listing."""
    console.print(
        render_lens_view(text, results),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def results_to_json(results: Sequence[FunctionResult]) -> str:
    return json.dumps([result.to_dict() for result in results], indent=2)


def print_json(results: Sequence[FunctionResult]):
    console.print(
        results_to_json(results), markup=False, highlight=False, emoji=False, soft_wrap=True
    )


def print_summary(results: Sequence[FunctionResult], duration: float):
    """Print totals per complexity class."""
    counts: Dict[ComplexityClass, int] = {}
    for result in results:
        counts[result.complexity] = counts.get(result.complexity, 0) + 1

    parts = [f"{counts[c]} × {c.display}" for c in ComplexityClass if c in counts]
    summary = ", ".join(parts) if parts else "nothing to report"
    console.print(Rule(style=INFO_STYLE))
    print_success(f"{len(results)} function(s) analyzed in {format_time(duration)}: {summary}")


# ==============================================================================
# Registry Output
# ==============================================================================


def print_languages(plugins: Iterable[Any], strategies: Dict[str, str]):
    """Display registered languages and extraction strategies."""
    table = _create_table(title="[bold]Languages[/bold]")
    table.add_column("Language", style=CYAN_STYLE)
    table.add_column("Aliases")
    table.add_column("Extensions", style=DIM_STYLE)
    for plugin in plugins:
        table.add_row(plugin.name, ", ".join(plugin.aliases), ", ".join(plugin.extensions))
    console.print(table)

    table = _create_table(title="[bold]Strategies[/bold]")
    table.add_column("Strategy", style=CYAN_STYLE)
    table.add_column("Description")
    for name, description in strategies.items():
        table.add_row(name, description)
    console.print(table)
