import tree_sitter_typescript

from ..language_plugin import LanguagePlugin


class TypeScriptPlugin(LanguagePlugin):
    """TypeScript language plugin."""

    name = "typescript"
    aliases = ["ts"]
    extensions = [".ts", ".mts", ".cts"]

    def load_grammar(self):
        return tree_sitter_typescript.language_typescript()


class TSXPlugin(LanguagePlugin):
    """TypeScript with JSX. The TSX grammar is a separate tree-sitter language."""

    name = "tsx"
    aliases = ["typescriptreact"]
    extensions = [".tsx"]

    def load_grammar(self):
        return tree_sitter_typescript.language_tsx()
