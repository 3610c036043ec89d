"""
Call-graph fixed-point propagation.

Each function's complexity is raised to the join of its local estimate and
the current complexities of the functions it calls, pass after pass, until a
full pass changes nothing. The lattice is finite and every update only goes
up, so this terminates after at most (LATTICE_HEIGHT - 1) * |records|
promotions.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from complexity_lens.core.logging import log_debug, log_warning
from complexity_lens.engine.lattice import LATTICE_HEIGHT, ComplexityClass
from complexity_lens.engine.records import FunctionRecord


@dataclass
class PropagationReport:
    """Outcome of one propagation run."""

    passes: int = 0
    promotions: int = 0
    converged: bool = True


def resolve_names(records: Sequence[FunctionRecord]) -> Dict[str, FunctionRecord]:
    """
    Map each name to the record a bare-name call resolves to.

    When several records share a name, the first one declared in document
    order wins, for the whole run.
    """
    resolved: Dict[str, FunctionRecord] = {}
    for record in records:
        resolved.setdefault(record.name, record)
    return resolved


def default_pass_limit(record_count: int) -> int:
    return LATTICE_HEIGHT * max(record_count, 1) + 1


class CallGraphPropagator:
    """Raises record complexities to a fixed point over the call graph."""

    def __init__(self, max_passes: Optional[int] = None):
        self.max_passes = max_passes

    def propagate(self, records: Sequence[FunctionRecord]) -> PropagationReport:
        """
        Run passes until nothing changes or the pass ceiling is reached.

        Every pass is transactional: callee complexities are read from a
        snapshot taken at the start of the pass and all updates are committed
        at its end, so the order of records within a pass does not matter.
        """
        report = PropagationReport()
        if not records:
            return report

        resolved = resolve_names(records)
        limit = self.max_passes or default_pass_limit(len(records))

        while report.passes < limit:
            report.passes += 1
            snapshot = {name: record.complexity for name, record in resolved.items()}
            updates = self._collect_updates(records, resolved, snapshot)

            for record, candidate, callee in updates:
                reason = f"calls {callee}() -> {candidate.display}" if callee else None
                record.raise_to(candidate, reason)
                log_debug(
                    f"Pass {report.passes}: {record.key} raised to {candidate.display} via {callee or 'local estimate'}",
                    function=record.name,
                )
            report.promotions += len(updates)

            if not updates:
                report.converged = True
                break
            report.converged = False

        if not report.converged:
            log_warning(
                f"Propagation stopped after {report.passes} passes without reaching "
                "a fixed point; reporting the best result so far"
            )
        else:
            log_debug(
                f"Propagation converged after {report.passes} pass(es) "
                f"with {report.promotions} promotion(s)"
            )
        return report

    def _collect_updates(
        self,
        records: Sequence[FunctionRecord],
        resolved: Dict[str, FunctionRecord],
        snapshot: Dict[str, ComplexityClass],
    ) -> List[tuple]:
        updates = []
        for record in records:
            candidate = record.local_complexity
            strongest = None
            for callee in sorted(record.calls):
                # Self recursion is already part of the local estimate; a
                # same-named call resolving to another record is a real edge
                if resolved.get(callee) is record:
                    continue
                value = snapshot.get(callee)
                if value is not None and value > candidate:
                    candidate, strongest = value, callee
            if candidate > record.complexity:
                updates.append((record, candidate, strongest))
        return updates
