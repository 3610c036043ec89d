import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from complexity_lens.core.constants import CONFIG_FILENAME
from complexity_lens.core.exceptions import ConfigurationError

# Configuration defaults - all constants at the top
DEFAULT_LANGUAGE = "javascript"
DEFAULT_STRATEGY = "tree"
DEFAULT_OUTPUT_FORMAT = "table"
OUTPUT_FORMATS = ("table", "json", "lens")

# Global configuration instance
_config: Optional["ComplexityLensConfig"] = None


@dataclass
class AnalysisConfig:
    """Engine configuration."""

    strategy: str = DEFAULT_STRATEGY
    max_passes: Optional[int] = None  # Default: derived from lattice height

    def __post_init__(self):
        if self.max_passes is not None and self.max_passes < 1:
            raise ConfigurationError(
                f"max_passes must be a positive integer, got {self.max_passes}"
            )


@dataclass
class OutputConfig:
    """Presentation configuration."""

    format: str = DEFAULT_OUTPUT_FORMAT
    show_evidence: bool = False

    def __post_init__(self):
        if self.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format: '{self.format}'. "
                f"Supported formats: {', '.join(OUTPUT_FORMATS)}"
            )


@dataclass
class ComplexityLensConfig:
    """Main configuration class for Complexity Lens."""

    language: Optional[str] = None
    debug: bool = False
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Union[str, Path]] = None) -> "ComplexityLensConfig":
        """Load configuration from file."""
        config_data = load_config_file(config_path)
        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplexityLensConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Map JSON keys to config fields
        field_mapping = {
            "default_language": "language",
            "default_strategy": "analysis.strategy",
            "max_passes": "analysis.max_passes",
            "output_format": "output.format",
            "show_evidence": "output.show_evidence",
        }

        # Process mapped fields
        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                value = config_data.pop(json_key)
                if "." in config_key:  # Nested field
                    parent, child = config_key.split(".", 1)
                    if parent not in config_data:
                        config_data[parent] = {}
                    config_data[parent][child] = value
                else:
                    config_data[config_key] = value

        try:
            # Handle nested configurations
            if "analysis" in config_data and isinstance(config_data["analysis"], dict):
                config_data["analysis"] = AnalysisConfig(**config_data["analysis"])

            if "output" in config_data and isinstance(config_data["output"], dict):
                config_data["output"] = OutputConfig(**config_data["output"])

            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config_file(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load configuration from file."""
    paths = []

    if config_path:
        paths.append(Path(config_path))

    paths.extend(
        [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]
    )

    for path in paths:
        if path.exists():
            try:
                with open(path, "r") as f:
                    return json.load(f)
            except (json.JSONDecodeError, IOError):
                continue

    return {}


def get_config() -> ComplexityLensConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ComplexityLensConfig.from_file()
    return _config


def set_config(config: Optional[ComplexityLensConfig]) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
