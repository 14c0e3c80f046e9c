from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BatchOperation(str, Enum):
    INSERT = "insert"
    DELETE = "delete"


class OutcomeKind(str, Enum):
    """What happened to one submitted name.

    CONFLICT only occurs for inserts (the name is already stored) and MISSING
    only for deletes (no row matched). Both are expected, per-item results and
    never abort the batch.
    """

    APPLIED = "applied"
    CONFLICT = "conflict"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class ItemOutcome:
    index: int
    name: str
    kind: OutcomeKind

    @property
    def failed(self) -> bool:
        return self.kind is not OutcomeKind.APPLIED


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Every outcome of one committed batch, in submitted order.

    Invariant: len(applied) + len(failed) == submitted.
    """

    operation: BatchOperation
    outcomes: tuple[ItemOutcome, ...]

    @property
    def submitted(self) -> int:
        return len(self.outcomes)

    @property
    def applied(self) -> list[ItemOutcome]:
        return [o for o in self.outcomes if not o.failed]

    @property
    def failed(self) -> list[ItemOutcome]:
        return [o for o in self.outcomes if o.failed]

    @property
    def all_failed(self) -> bool:
        return len(self.failed) == self.submitted

    @property
    def all_applied(self) -> bool:
        return not self.failed
