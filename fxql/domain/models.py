"""Typed domain models shared across runtime layers.

This module provides the immutable data contracts produced by the FXQL parser
pipeline and consumed by the service, persistence, and API layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math

# Largest cap the transaction_pool BIGINT column can hold.
DOMAIN_FXQL_MAX_CAP_AMOUNT = 2**63 - 1


class FieldKind(str, Enum):
    """Statement field identifiers used by validators and diagnostics."""

    CURRENCY_PAIR = "currency_pair"
    BUY = "buy"
    SELL = "sell"
    CAP = "cap"


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class RawField:
    """One raw statement field located inside normalized source text.

    Attributes:
        kind: Field identifier.
        raw_value: Field text exactly as written.
        offset: Absolute character offset of the value in normalized text.
    """

    kind: FieldKind
    raw_value: str
    offset: int

    @property
    def end(self) -> int:
        """Return the exclusive absolute end offset of the raw value."""

        return self.offset + len(self.raw_value)


@dataclass(frozen=True)
class RawStatementMatch:
    """One structurally matched statement block with its four raw fields.

    Attributes:
        start: Absolute start offset of the matched block.
        end: Absolute exclusive end offset of the matched block.
        currency_pair: Raw currency pair field.
        buy: Raw buy price field.
        sell: Raw sell price field.
        cap: Raw cap amount field.
    """

    start: int
    end: int
    currency_pair: RawField
    buy: RawField
    sell: RawField
    cap: RawField

    def fields(self) -> tuple[RawField, RawField, RawField, RawField]:
        """Return fields in statement order."""

        return (self.currency_pair, self.buy, self.sell, self.cap)


@dataclass(frozen=True)
class Diagnostic:
    """Located, human-readable description of one invalid statement field.

    Attributes:
        kind: Field identifier that failed validation.
        raw_value: Field text exactly as written.
        line: 1-based line number containing the field.
        char_start: 0-based column where the field starts within its line.
        char_end: 0-based exclusive column where the field ends.
        message: Rendered client-facing message.
    """

    kind: FieldKind
    raw_value: str
    line: int
    char_start: int
    char_end: int
    message: str


@dataclass(frozen=True)
class TransactionRecord:
    """Validated transaction derived from one FXQL statement.

    Attributes:
        entry_id: Prefixed encoded unique identifier.
        source_currency: Three uppercase ASCII letters.
        destination_currency: Three uppercase ASCII letters.
        buy_price: Positive finite buy rate.
        sell_price: Positive finite sell rate.
        cap_amount: Positive integer transaction ceiling.
    """

    entry_id: str
    source_currency: str
    destination_currency: str
    buy_price: float
    sell_price: float
    cap_amount: int

    def __post_init__(self) -> None:
        if not self.entry_id:
            raise ValueError("entry_id must not be blank")
        for label, currency in (
            ("source_currency", self.source_currency),
            ("destination_currency", self.destination_currency),
        ):
            if len(currency) != 3 or not currency.isascii() or not currency.isalpha() or not currency.isupper():
                raise ValueError(f"{label} must be exactly 3 uppercase ASCII letters")
        for label, price in (("buy_price", self.buy_price), ("sell_price", self.sell_price)):
            if not math.isfinite(price) or price <= 0:
                raise ValueError(f"{label} must be a positive finite number")
        if isinstance(self.cap_amount, bool) or not isinstance(self.cap_amount, int) or self.cap_amount <= 0:
            raise ValueError("cap_amount must be a positive integer")
        if self.cap_amount > DOMAIN_FXQL_MAX_CAP_AMOUNT:
            raise ValueError(f"cap_amount must not exceed {DOMAIN_FXQL_MAX_CAP_AMOUNT}")


@dataclass(frozen=True)
class ParseSuccess:
    """Parse outcome for a submission with zero diagnostics.

    Attributes:
        records: Transaction records in source text order.
    """

    records: tuple[TransactionRecord, ...]


@dataclass(frozen=True)
class ParseFailure:
    """Parse outcome for a submission rejected as a whole.

    Attributes:
        diagnostics: Deduplicated diagnostics in first-occurrence order.
    """

    diagnostics: tuple[Diagnostic, ...]

    def messages(self) -> list[str]:
        """Return rendered diagnostic messages in order."""

        return [diagnostic.message for diagnostic in self.diagnostics]


ParseOutcome = ParseSuccess | ParseFailure
