from typing import Dict, Optional, Type

from .language_plugin import LanguagePlugin
from .registry import language_for_path, load_plugin, resolve_language

from .languages.javascript_plugin import JavaScriptPlugin
from .languages.typescript_plugin import TSXPlugin, TypeScriptPlugin

# Import constants to populate
from complexity_lens.core import constants


PLUGINS: Dict[str, LanguagePlugin] = {}


def register_plugin(plugin_cls: Type[LanguagePlugin]):
    """Register a plugin and update global constants."""
    plugin = plugin_cls()
    PLUGINS[plugin.name] = plugin

    # Update global constants
    constants.SUPPORTED_LANGUAGES.add(plugin.name)

    # Register aliases
    for alias in getattr(plugin, "aliases", []):
        constants.LANGUAGE_ALIASES[alias] = plugin.name

    # Register file extensions
    for ext in getattr(plugin, "extensions", []):
        constants.FILE_EXTENSIONS[ext] = plugin.name


def get_plugin(name: str) -> Optional[LanguagePlugin]:
    return PLUGINS.get(name)


# Register all available plugins
register_plugin(JavaScriptPlugin)
register_plugin(TypeScriptPlugin)
register_plugin(TSXPlugin)

__all__ = [
    "PLUGINS",
    "LanguagePlugin",
    "get_plugin",
    "language_for_path",
    "load_plugin",
    "register_plugin",
    "resolve_language",
]
