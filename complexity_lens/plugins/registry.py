import os

from complexity_lens.core import constants
from complexity_lens.core.exceptions import PluginError


def resolve_language(lang: str) -> str:
    """Resolve language alias to standard name."""
    lowered = lang.lower()

    # Check if it's already a supported language
    if lowered in constants.SUPPORTED_LANGUAGES:
        return lowered

    # Check aliases
    resolved = constants.LANGUAGE_ALIASES.get(lowered)
    if resolved:
        return resolved

    # Language not found
    supported = ", ".join(sorted(constants.SUPPORTED_LANGUAGES))
    aliases = ", ".join(sorted(constants.LANGUAGE_ALIASES.keys()))
    raise PluginError(
        f"Unsupported language: '{lang}'. "
        f"Supported languages: {supported}. "
        f"Aliases: {aliases}"
    )


def language_for_path(path: str) -> str:
    """Infer the language of a file from its extension."""
    _, ext = os.path.splitext(path)
    language = constants.FILE_EXTENSIONS.get(ext.lower())
    if language:
        return language

    known = ", ".join(sorted(constants.FILE_EXTENSIONS.keys()))
    raise PluginError(
        f"Cannot infer language for '{path}'. "
        f"Known extensions: {known}. Pass --language explicitly."
    )


def load_plugin(language: str):
    """Get the plugin instance for a language name or alias."""
    # Import here to avoid circular dependency
    from . import get_plugin

    language = resolve_language(language)
    plugin = get_plugin(language)

    if not plugin:
        raise PluginError(f"No plugin found for language: {language}")

    return plugin
