from abc import ABC, abstractmethod
from typing import List, Optional

from tree_sitter import Tree

from complexity_lens.engine.records import FunctionRecord
from complexity_lens.plugins.language_plugin import LanguagePlugin


class SourceDocument:
    """
    One document snapshot handed to an extractor.

    The syntax tree is parsed lazily and at most once per snapshot.
    """

    def __init__(
        self,
        text: str,
        plugin: LanguagePlugin,
        path: Optional[str] = None,
        tree: Optional[Tree] = None,
    ):
        self.text = text
        self.plugin = plugin
        self.path = path
        self._tree = tree

    @classmethod
    def from_tree(
        cls, tree: Tree, plugin: LanguagePlugin, path: Optional[str] = None
    ) -> "SourceDocument":
        """Wrap an already-parsed tree, recovering its text."""
        root = tree.root_node
        row, column = root.start_point[0], root.start_point[1]
        body = (root.text or b"").decode("utf-8", errors="replace")
        # Pad so offsets in the text line up with tree positions
        text = "\n" * row + " " * column + body
        return cls(text, plugin, path=path, tree=tree)

    @property
    def language(self) -> str:
        return self.plugin.name

    @property
    def tree(self) -> Tree:
        if self._tree is None:
            self._tree = self.plugin.parse(self.text)
        return self._tree


class FunctionExtractor(ABC):
    """
    Strategy that turns a document into a function inventory.

    Extractors only discover functions: name, position, comment-free body
    text and body subtree. Calls and complexity are filled in afterwards by
    the inventory builder, so every strategy is analyzed the same way.
    """

    name: str = "base"
    description: str = ""

    @abstractmethod
    def extract(self, document: SourceDocument) -> List[FunctionRecord]:
        """
        Discover the function-like declarations of a document.

        Args:
            document: The document snapshot to scan

        Returns:
            Records in document order; duplicates are allowed and are
            removed by the inventory builder.

        Raises:
            ParseError: if the document cannot be parsed
        """
        pass
