"""Database service for validated FXQL transaction record persistence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from fxql.db.interfaces import TransactionPoolPersistResult, TransactionPoolRepositoryPort
from fxql.domain import TransactionRecord


class SQLAlchemyTransactionPoolService(TransactionPoolRepositoryPort):
    """SQLAlchemy implementation of transaction pool persistence."""

    def __init__(self, engine: Engine):
        """Initialize transaction pool service.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when engine is invalid.
        """

        if engine is None:
            raise ValueError("engine must not be None")

        self._engine = engine

    def db_transaction_pool_insert_many(self, records: Sequence[TransactionRecord]) -> TransactionPoolPersistResult:
        """Insert records with entry-id dedupe in one transaction.

        Args:
            records: Validated transaction records.

        Returns:
            TransactionPoolPersistResult: Inserted and deduplicated row counters.

        Raises:
            ValueError: Raised when records are invalid.
            RuntimeError: Raised when persistence operation fails.
        """

        if records is None:
            raise ValueError("records must not be None")
        if len(records) == 0:
            return TransactionPoolPersistResult(inserted_count=0, deduplicated_count=0)

        inserted_count = 0
        deduplicated_count = 0

        try:
            with self._engine.begin() as connection:
                for record in records:
                    if not isinstance(record, TransactionRecord):
                        raise ValueError("records must contain TransactionRecord values")
                    inserted_row = connection.execute(
                        text(
                            "INSERT INTO transaction_pool ("
                            "entry_id, source_currency, destination_currency, buy_price, sell_price, cap_amount"
                            ") VALUES ("
                            ":entry_id, :source_currency, :destination_currency, :buy_price, :sell_price, :cap_amount"
                            ") ON CONFLICT (entry_id) DO NOTHING "
                            "RETURNING entry_id"
                        ),
                        {
                            "entry_id": record.entry_id,
                            "source_currency": record.source_currency,
                            "destination_currency": record.destination_currency,
                            "buy_price": record.buy_price,
                            "sell_price": record.sell_price,
                            "cap_amount": record.cap_amount,
                        },
                    ).mappings().fetchone()

                    if inserted_row is None:
                        deduplicated_count += 1
                    else:
                        inserted_count += 1

                return TransactionPoolPersistResult(inserted_count=inserted_count, deduplicated_count=deduplicated_count)
        except SQLAlchemyError as error:
            raise RuntimeError("transaction pool persistence failed") from error
