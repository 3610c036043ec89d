"""
Autocompletion functions for Complexity Lens.
"""

from typing import List

from complexity_lens.core import constants
from complexity_lens.core.config import OUTPUT_FORMATS
from complexity_lens.extractors import available_strategies


class Completions:
    """Autocompletion provider for Complexity Lens."""

    @staticmethod
    def languages(incomplete: str) -> List[str]:
        """Complete language names and aliases."""
        names = sorted(constants.SUPPORTED_LANGUAGES | set(constants.LANGUAGE_ALIASES))
        return [name for name in names if name.startswith(incomplete.lower())]

    @staticmethod
    def strategies(incomplete: str) -> List[str]:
        """Complete extraction strategy names."""
        return [name for name in available_strategies() if name.startswith(incomplete.lower())]

    @staticmethod
    def formats(incomplete: str) -> List[str]:
        """Complete output formats."""
        return [fmt for fmt in OUTPUT_FORMATS if fmt.startswith(incomplete.lower())]
