from typing import Dict, List

from complexity_lens.core.exceptions import PluginError

from .base import FunctionExtractor, SourceDocument
from .regex_extractor import RegexExtractor
from .tree_extractor import SyntaxTreeExtractor

EXTRACTORS: Dict[str, FunctionExtractor] = {}


def register_extractor(extractor_cls) -> None:
    """Register an extraction strategy under its name."""
    extractor = extractor_cls()
    EXTRACTORS[extractor.name] = extractor


def available_strategies() -> List[str]:
    return sorted(EXTRACTORS)


def get_extractor(name: str) -> FunctionExtractor:
    """Look up an extraction strategy by name."""
    extractor = EXTRACTORS.get(name.lower())
    if extractor is None:
        raise PluginError(
            f"Unknown extraction strategy: '{name}'. "
            f"Available strategies: {', '.join(available_strategies())}"
        )
    return extractor


register_extractor(SyntaxTreeExtractor)
register_extractor(RegexExtractor)

__all__ = [
    "EXTRACTORS",
    "FunctionExtractor",
    "RegexExtractor",
    "SourceDocument",
    "SyntaxTreeExtractor",
    "available_strategies",
    "get_extractor",
    "register_extractor",
]
