"""
Command handlers for Complexity Lens - business logic separated from CLI interface.
"""

import time
from pathlib import Path

from complexity_lens import output
from complexity_lens.core.config import get_config
from complexity_lens.core.logging import log_context, log_info, timed
from complexity_lens.engine.analyzer import ComplexityAnalyzer
from complexity_lens.extractors import EXTRACTORS
from complexity_lens.plugins import PLUGINS

from .options import ResolvedOptions


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    @staticmethod
    def create_analyzer(options: ResolvedOptions, path: str) -> ComplexityAnalyzer:
        """Factory method to create ComplexityAnalyzer from the active configuration."""
        return ComplexityAnalyzer.from_config(get_config(), language=options.language, path=path)

    @staticmethod
    def handle_analyze(options: ResolvedOptions, path: str):
        """Handle the analyze command."""
        analyzer = CommandHandlers.create_analyzer(options, path)
        with log_context(document=path, language=analyzer.language), timed("analyze command"):
            log_info(f"Analyzing '{path}' with the {analyzer.strategy} strategy")

            start_time = time.time()
            results = analyzer.analyze_file(path)
            duration = time.time() - start_time

            if options.output_format == "json":
                output.print_json(results)
                return results

            if options.output_format == "lens":
                text = Path(path).read_bytes().decode("utf-8", errors="replace")
                output.print_lens_view(text, results)
                return results

            output.print_analysis_header(path, analyzer.language, analyzer.strategy)
            output.print_results_table(results)
            if options.show_evidence:
                output.print_evidence(results)
            output.print_summary(results, duration)
            return results

    @staticmethod
    def handle_languages():
        """Handle the languages command."""
        strategies = {name: extractor.description for name, extractor in EXTRACTORS.items()}
        output.print_languages(PLUGINS.values(), strategies)
