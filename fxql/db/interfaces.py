"""Typed interfaces for database-layer services.

All SQL access must remain in the db package and its submodules.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from fxql.domain import HealthStatus, TransactionRecord


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


@dataclass(frozen=True)
class TransactionPoolPersistResult:
    """Counters returned by one transaction pool batch insert.

    Attributes:
        inserted_count: Rows durably inserted.
        deduplicated_count: Rows skipped because their entry id already existed.
    """

    inserted_count: int
    deduplicated_count: int


class TransactionPoolRepositoryPort(Protocol):
    """Port definition for validated transaction record persistence."""

    def db_transaction_pool_insert_many(self, records: Sequence[TransactionRecord]) -> TransactionPoolPersistResult:
        """Insert validated records in one transaction.

        Args:
            records: Validated transaction records.

        Returns:
            TransactionPoolPersistResult: Inserted and deduplicated row counters.

        Raises:
            ValueError: Raised when records are invalid.
            RuntimeError: Raised when persistence fails.
        """
