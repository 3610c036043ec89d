from typing import List, Optional

from complexity_lens.core.logging import log_debug
from complexity_lens.engine.calls import extract_calls
from complexity_lens.engine.classifier import PatternClassifier
from complexity_lens.engine.records import FunctionRecord


class InventoryBuilder:
    """
    Builds the function inventory of one document.

    Runs an extraction strategy, drops duplicate declarations (same name on
    the same line), then fills in each record's calls and local estimate.
    """

    def __init__(self, extractor, classifier: Optional[PatternClassifier] = None):
        self.extractor = extractor
        self.classifier = classifier or PatternClassifier()

    def build(self, document) -> List[FunctionRecord]:
        records = []
        seen = set()
        for record in self.extractor.extract(document):
            if record.key in seen:
                continue
            seen.add(record.key)
            self._analyze_record(record)
            records.append(record)
        log_debug(f"Inventory built with {len(records)} function(s)")
        return records

    def _analyze_record(self, record: FunctionRecord) -> None:
        record.calls = extract_calls(record.body_node)
        local, evidence = self.classifier.classify(
            record.body_node, record.name, is_method=record.is_method
        )
        record.local_complexity = local
        record.complexity = local
        record.evidence = list(evidence)
        log_debug(
            f"{record.key}: local estimate {local.display}, calls {sorted(record.calls)}",
            function=record.name,
        )
