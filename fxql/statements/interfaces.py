"""Typed interfaces for FXQL statement processing."""

from dataclasses import dataclass
from typing import Protocol

from fxql.domain import Diagnostic, TransactionRecord


class PersistenceCountMismatchError(RuntimeError):
    """Raised when storage reports a different row count than records submitted.

    Attributes:
        submitted_count: Number of records handed to the repository.
        stored_count: Number of rows the repository reported as inserted.
    """

    def __init__(self, submitted_count: int, stored_count: int):
        super().__init__(f"submitted {submitted_count} records but {stored_count} were stored")
        self.submitted_count = submitted_count
        self.stored_count = stored_count


class StatementProcessingError(RuntimeError):
    """Raised when statement processing fails for any reason other than invalid input."""


@dataclass(frozen=True)
class StatementProcessResult:
    """Result of processing one FXQL submission.

    Exactly one of `records` and `diagnostics` is non-empty unless the
    submission contained no statements, in which case both are empty.

    Attributes:
        records: Persisted transaction records in source order.
        diagnostics: Validation diagnostics when the submission was rejected.
    """

    records: tuple[TransactionRecord, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def accepted(self) -> bool:
        """Return whether the submission passed validation."""

        return not self.diagnostics


class StatementServicePort(Protocol):
    """Port definition for processing FXQL submissions."""

    def statement_process(self, raw_text: str) -> StatementProcessResult:
        """Parse, validate, and persist one FXQL submission.

        Args:
            raw_text: FXQL text as received.

        Returns:
            StatementProcessResult: Persisted records or validation diagnostics.

        Raises:
            PersistenceCountMismatchError: Raised when stored count differs.
            StatementProcessingError: Raised on any other processing failure.
        """
