class ComplexityLensError(Exception):
    """Base exception for all Complexity Lens errors."""

    pass


class ConfigurationError(ComplexityLensError):
    """Raised when configuration is invalid or missing."""

    pass


class PluginError(ComplexityLensError):
    """Raised when a language plugin or extraction strategy cannot be resolved."""

    pass


class ParseError(PluginError):
    """Raised when a document cannot be turned into a syntax tree."""

    pass


class AnalysisError(ComplexityLensError):
    """Raised when an analysis request is malformed."""

    pass
