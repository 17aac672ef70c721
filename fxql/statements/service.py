"""Statement service that parses FXQL submissions and persists accepted records."""

from __future__ import annotations

from fxql.db import TransactionPoolRepositoryPort
from fxql.domain import IdentifierSource, ParseFailure, domain_fxql_parse
from fxql.logging_setup import get_logger

from .interfaces import (
    PersistenceCountMismatchError,
    StatementProcessingError,
    StatementProcessResult,
    StatementServicePort,
)

_logger = get_logger("fxql.statements.service")


class FxqlStatementService(StatementServicePort):
    """Concrete statement service backed by a transaction pool repository."""

    def __init__(
        self,
        repository: TransactionPoolRepositoryPort,
        identifier_source: IdentifierSource | None = None,
    ):
        """Initialize statement service dependencies.

        Args:
            repository: DB-layer transaction pool repository.
            identifier_source: Optional identifier generator override.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when repository is None.
        """

        if repository is None:
            raise ValueError("repository must not be None")

        self._repository = repository
        self._identifier_source = identifier_source

    def statement_process(self, raw_text: str) -> StatementProcessResult:
        """Parse, validate, and persist one FXQL submission.

        Rejected submissions never reach the repository.

        Args:
            raw_text: FXQL text as received.

        Returns:
            StatementProcessResult: Persisted records or validation diagnostics.

        Raises:
            PersistenceCountMismatchError: Raised when stored count differs from submitted count.
            StatementProcessingError: Raised on any other processing failure.
        """

        try:
            outcome = domain_fxql_parse(raw_text, identifier_source=self._identifier_source)
        except Exception as error:
            _logger.exception("FXQL parsing failed unexpectedly")
            raise StatementProcessingError(f"parsing failed: {error}") from error

        if isinstance(outcome, ParseFailure):
            _logger.warning("FXQL submission rejected with %d diagnostics", len(outcome.diagnostics))
            return StatementProcessResult(diagnostics=outcome.diagnostics)

        records = outcome.records
        try:
            persist_result = self._repository.db_transaction_pool_insert_many(records)
        except Exception as error:
            _logger.exception("FXQL record persistence failed for %d records", len(records))
            raise StatementProcessingError(f"persistence failed: {error}") from error

        if persist_result.inserted_count != len(records):
            _logger.error(
                "FXQL persistence count mismatch: submitted=%d inserted=%d deduplicated=%d",
                len(records),
                persist_result.inserted_count,
                persist_result.deduplicated_count,
            )
            raise PersistenceCountMismatchError(
                submitted_count=len(records),
                stored_count=persist_result.inserted_count,
            )

        _logger.info("FXQL submission accepted with %d records", len(records))
        return StatementProcessResult(records=records)
