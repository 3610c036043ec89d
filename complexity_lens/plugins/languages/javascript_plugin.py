import tree_sitter_javascript

from ..language_plugin import LanguagePlugin


class JavaScriptPlugin(LanguagePlugin):
    """JavaScript (and JSX) language plugin."""

    name = "javascript"
    aliases = ["js", "node", "jsx"]
    extensions = [".js", ".mjs", ".cjs", ".jsx"]

    def load_grammar(self):
        return tree_sitter_javascript.language()
