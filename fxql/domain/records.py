"""Transaction record construction for validated FXQL statements."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from .identifiers import IdentifierSource, domain_fxql_build_entry_id
from .models import RawStatementMatch, TransactionRecord


def domain_fxql_build_record(
    statement: RawStatementMatch,
    identifier_source: IdentifierSource | None = None,
) -> TransactionRecord:
    """Build one transaction record from a validated statement.

    Args:
        statement: Statement whose four fields passed validation.
        identifier_source: Optional identifier generator override.

    Returns:
        TransactionRecord: Record with a freshly generated entry id.

    Raises:
        ValueError: Raised when statement values break record invariants.
    """

    currency_pair = statement.currency_pair.raw_value
    return TransactionRecord(
        entry_id=domain_fxql_build_entry_id(identifier_source),
        source_currency=currency_pair[:3],
        destination_currency=currency_pair[-3:],
        buy_price=float(statement.buy.raw_value),
        sell_price=float(statement.sell.raw_value),
        cap_amount=int(Decimal(statement.cap.raw_value)),
    )


def domain_fxql_build_records(
    statements: Iterable[RawStatementMatch],
    identifier_source: IdentifierSource | None = None,
) -> tuple[TransactionRecord, ...]:
    """Build records for validated statements, preserving text order.

    Args:
        statements: Validated statements in text order.
        identifier_source: Optional identifier generator override.

    Returns:
        tuple[TransactionRecord, ...]: One record per statement.

    Raises:
        ValueError: Raised when statement values break record invariants.
    """

    return tuple(
        domain_fxql_build_record(statement=statement, identifier_source=identifier_source)
        for statement in statements
    )
