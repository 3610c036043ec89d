from abc import ABC, abstractmethod
from typing import List, Union

from tree_sitter import Language, Parser, Tree

from complexity_lens.core.exceptions import ParseError


class LanguagePlugin(ABC):
    """
    Base class for all language plugins.

    A plugin is the parsing collaborator of the engine: it turns document text
    into a tree-sitter syntax tree. Each plugin must define:

    Attributes:
        name (str): Unique string identifier for the language (e.g., "javascript").
        aliases (list): Alternative names accepted on the command line.
        extensions (list): File extensions handled by this plugin (e.g., ".js").
    """

    name: str = "base"
    aliases: List[str] = []
    extensions: List[str] = []

    def __init__(self):
        self._language = None

    @abstractmethod
    def load_grammar(self):
        """
        Return the raw grammar handle from the grammar package.

        Returns:
            The object passed to `tree_sitter.Language`.
        """
        pass

    def get_language(self) -> Language:
        """The tree-sitter Language for this plugin, loaded once."""
        if self._language is None:
            self._language = Language(self.load_grammar())
        return self._language

    def parse(self, source: Union[str, bytes]) -> Tree:
        """
        Parse document text into a syntax tree.

        A fresh parser is created per call, so concurrent analyses never
        share parser state.

        Raises:
            ParseError: if the text cannot be encoded or parsed.
        """
        if isinstance(source, str):
            try:
                data = source.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ParseError(f"Cannot encode document for {self.name}: {e}") from e
        elif isinstance(source, (bytes, bytearray)):
            data = bytes(source)
        else:
            raise ParseError(
                f"Cannot parse a {type(source).__name__} as {self.name} source"
            )

        try:
            return Parser(self.get_language()).parse(data)
        except ValueError as e:
            raise ParseError(f"{self.name} parser failed: {e}") from e
