"""
Resolved options and configuration handling for Complexity Lens.
"""

from dataclasses import dataclass
from typing import Optional

from complexity_lens.core.config import (
    AnalysisConfig,
    ComplexityLensConfig,
    OutputConfig,
    set_config,
)
from complexity_lens.core.logging import configure_logging, log_debug, log_info
from complexity_lens.extractors import get_extractor
from complexity_lens.plugins.registry import resolve_language


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    language: Optional[str]
    strategy: str
    max_passes: Optional[int]
    output_format: str
    show_evidence: bool
    debug: bool


def resolve_options(
    language_override: Optional[str] = None,
    strategy_override: Optional[str] = None,
    format_override: Optional[str] = None,
    evidence_override: Optional[bool] = None,
    max_passes_override: Optional[int] = None,
    config_override: Optional[str] = None,
    debug_override: bool = False,
    verbose_override: bool = False,
    log_file_override: Optional[str] = None,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    # Configure logging first
    configure_logging(
        debug=debug_override, verbose=verbose_override, log_file=log_file_override
    )

    log_debug(f"Loading config file: {config_override or 'default locations'}")
    config = ComplexityLensConfig.from_file(config_override)

    if debug_override:
        config.debug = True

    # Language: flag, then config; None means infer from the file extension
    language = None
    if language_override:
        log_debug(f"Resolving language from override: {language_override}")
        language = resolve_language(language_override)
    elif config.language:
        log_debug(f"Using language from config: {config.language}")
        language = resolve_language(config.language)
    config.language = language

    # Command-line flags override config
    strategy = get_extractor(strategy_override or config.analysis.strategy).name
    max_passes = (
        max_passes_override
        if max_passes_override is not None
        else config.analysis.max_passes
    )
    config.analysis = AnalysisConfig(strategy=strategy, max_passes=max_passes)

    config.output = OutputConfig(
        format=format_override or config.output.format,
        show_evidence=(
            evidence_override
            if evidence_override is not None
            else config.output.show_evidence
        ),
    )
    set_config(config)

    resolved = ResolvedOptions(
        language=language,
        strategy=strategy,
        max_passes=max_passes,
        output_format=config.output.format,
        show_evidence=config.output.show_evidence,
        debug=config.debug,
    )

    log_info(
        f"Options resolved: language={resolved.language or 'auto'}, "
        f"strategy={resolved.strategy}, format={resolved.output_format}"
    )
    return resolved
