import logging
from pathlib import Path
from typing import List, Optional, Union

from tree_sitter import Tree

from complexity_lens.core.config import ComplexityLensConfig, DEFAULT_LANGUAGE, DEFAULT_STRATEGY
from complexity_lens.core.exceptions import AnalysisError, ParseError
from complexity_lens.core.logging import log_context, log_debug, log_info, log_warning, timed
from complexity_lens.engine.inventory import InventoryBuilder
from complexity_lens.engine.propagation import CallGraphPropagator
from complexity_lens.engine.records import FunctionResult
from complexity_lens.extractors import SourceDocument, get_extractor
from complexity_lens.plugins import language_for_path, load_plugin

Document = Union[str, bytes, Tree, SourceDocument]


class ComplexityAnalyzer:
    """
    Estimates the time complexity of every named function in a document.

    An analyzer holds only its settings; every call to `analyze` builds a
    fresh inventory, so one instance can serve many documents.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        strategy: str = DEFAULT_STRATEGY,
        max_passes: Optional[int] = None,
    ):
        self.plugin = load_plugin(language)
        self.language = self.plugin.name
        self.extractor = get_extractor(strategy)
        self.strategy = self.extractor.name
        self.max_passes = max_passes

    @classmethod
    def from_config(
        cls,
        config: ComplexityLensConfig,
        language: Optional[str] = None,
        path: Optional[str] = None,
    ) -> "ComplexityAnalyzer":
        """Build an analyzer from configuration; `path` is used to infer the language."""
        if not language:
            language = language_for_path(path) if path else config.language
        return cls(
            language=language or DEFAULT_LANGUAGE,
            strategy=config.analysis.strategy,
            max_passes=config.analysis.max_passes,
        )

    def analyze(self, document: Document, path: Optional[str] = None) -> List[FunctionResult]:
        """
        Analyze one document snapshot.

        Args:
            document: Source text, UTF-8 bytes, or an already-parsed tree
            path: Optional name of the document, used for logging

        Returns:
            One result per named function, in document order. An unparsable
            document yields an empty list.
        """
        with log_context(document=path, language=self.language), timed("analysis", logging.INFO):
            try:
                source = self._as_document(document, path)
                inventory = InventoryBuilder(self.extractor).build(source)
            except ParseError as e:
                log_warning(f"Could not parse document: {e}")
                return []

            report = CallGraphPropagator(self.max_passes).propagate(inventory)
            log_info(
                f"Analyzed {len(inventory)} function(s) with the {self.strategy} strategy "
                f"({report.passes} propagation pass(es), {report.promotions} promotion(s))"
            )
            return [record.to_result() for record in inventory]

    def analyze_file(self, path: Union[str, Path]) -> List[FunctionResult]:
        """Read a file and analyze its contents."""
        log_debug(f"Reading {path}", document=str(path))
        with open(path, "rb") as f:
            data = f.read()
        return self.analyze(data, path=str(path))

    def _as_document(self, document: Document, path: Optional[str]) -> SourceDocument:
        if isinstance(document, SourceDocument):
            return document
        if isinstance(document, Tree):
            return SourceDocument.from_tree(document, self.plugin, path=path)
        if isinstance(document, (bytes, bytearray)):
            try:
                document = bytes(document).decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError(f"Document is not valid UTF-8: {e}") from e
        if isinstance(document, str):
            return SourceDocument(document, self.plugin, path=path)
        raise AnalysisError(
            f"Cannot analyze a {type(document).__name__}; "
            "expected source text or a syntax tree"
        )


def analyze(
    document: Document,
    language: str = DEFAULT_LANGUAGE,
    strategy: str = DEFAULT_STRATEGY,
    max_passes: Optional[int] = None,
) -> List[FunctionResult]:
    """Analyze a document with a one-off analyzer."""
    return ComplexityAnalyzer(language, strategy, max_passes).analyze(document)
