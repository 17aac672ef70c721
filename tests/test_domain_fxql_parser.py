"""Regression tests for FXQL parsing, record building, and entry identifiers."""

from concurrent.futures import ThreadPoolExecutor
from itertools import count
import re
from uuid import UUID, uuid4

import pytest

from fxql.domain import (
    DOMAIN_FXQL_MAX_CAP_AMOUNT,
    ENTRY_ID_PREFIX,
    FieldKind,
    ParseFailure,
    ParseSuccess,
    TransactionRecord,
    domain_fxql_build_entry_id,
    domain_fxql_decode_identifier,
    domain_fxql_encode_identifier,
    domain_fxql_parse,
    domain_fxql_parse_entry_id,
)


def _sequential_identifier_source():
    """Build a deterministic identifier generator for tests.

    Returns:
        Callable[[], UUID]: Generator yielding UUID(int=1), UUID(int=2), ...

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    counter = count(1)
    return lambda: UUID(int=next(counter))


def test_domain_fxql_parse_builds_one_record_for_valid_statement() -> None:
    """Parse one valid statement into one record with literal values.

    Returns:
        None: Assertions validate record values.

    Raises:
        AssertionError: Raised when record values differ from the statement.
    """

    outcome = domain_fxql_parse("USD-GBP { BUY 100 SELL 200 CAP 93800 }")

    assert isinstance(outcome, ParseSuccess)
    assert len(outcome.records) == 1
    record = outcome.records[0]
    assert record.source_currency == "USD"
    assert record.destination_currency == "GBP"
    assert record.buy_price == pytest.approx(100)
    assert record.sell_price == pytest.approx(200)
    assert record.cap_amount == 93800
    assert record.entry_id.startswith(ENTRY_ID_PREFIX)


def test_domain_fxql_parse_rejects_lowercase_pair_with_located_diagnostic() -> None:
    outcome = domain_fxql_parse("usd-eur { BUY 100 SELL 90 CAP 5000 }")

    assert isinstance(outcome, ParseFailure)
    assert len(outcome.diagnostics) == 1
    assert outcome.diagnostics[0].kind is FieldKind.CURRENCY_PAIR
    assert "Currency Pair" in outcome.messages()[0]
    assert "Line 1" in outcome.messages()[0]


def test_domain_fxql_parse_rejects_whole_submission_when_any_statement_is_invalid() -> None:
    """Discard valid statements when another statement fails validation.

    Returns:
        None: Assertions validate all-or-nothing behavior.

    Raises:
        AssertionError: Raised when partial success is returned.
    """

    outcome = domain_fxql_parse("USD-GBP { BUY 100 SELL 200 CAP 93800 }\nEUR-USD { BUY 1 SELL 2 CAP -5 }")

    assert isinstance(outcome, ParseFailure)
    assert outcome.messages() == ["CAP Value- -5 is not valid at Line: 2 Character Position - 27-29"]


def test_domain_fxql_parse_reports_one_diagnostic_per_invalid_statement_in_order() -> None:
    outcome = domain_fxql_parse(
        "USD-GBP { BUY 0 SELL 1 CAP 1 }\\n\\nEUR-JPY { BUY 1 SELL x CAP 1 }\\n\\nNGN-USD { BUY 1 SELL 1 CAP 0.5 }"
    )

    assert isinstance(outcome, ParseFailure)
    assert [diagnostic.kind for diagnostic in outcome.diagnostics] == [FieldKind.BUY, FieldKind.SELL, FieldKind.CAP]
    assert [diagnostic.line for diagnostic in outcome.diagnostics] == [1, 3, 5]


def test_domain_fxql_parse_preserves_statement_order_and_count() -> None:
    """Return one record per matched block in source order.

    Returns:
        None: Assertions validate record ordering and identifiers.

    Raises:
        AssertionError: Raised when ordering or identifiers are incorrect.
    """

    raw_text = (
        "USD-GBP {\\n  BUY 0.85\\n  SELL 0.90\\n  CAP 10000\\n}\\n\\n"
        "EUR-JPY {\\n  BUY 145.20\\n  SELL 146.50\\n  CAP 50000\\n}\\n\\n"
        "NGN-USD {\\n  BUY 0.0022\\n  SELL 0.0023\\n  CAP 2000000.0\\n}"
    )

    outcome = domain_fxql_parse(raw_text, identifier_source=_sequential_identifier_source())

    assert isinstance(outcome, ParseSuccess)
    assert [(record.source_currency, record.destination_currency) for record in outcome.records] == [
        ("USD", "GBP"),
        ("EUR", "JPY"),
        ("NGN", "USD"),
    ]
    assert outcome.records[1].sell_price == pytest.approx(146.5)
    assert outcome.records[2].cap_amount == 2000000
    assert isinstance(outcome.records[2].cap_amount, int)
    assert [domain_fxql_parse_entry_id(record.entry_id) for record in outcome.records] == [
        UUID(int=1),
        UUID(int=2),
        UUID(int=3),
    ]


def test_domain_fxql_parse_returns_empty_success_when_no_statement_matches() -> None:
    assert domain_fxql_parse("") == ParseSuccess(records=())
    assert domain_fxql_parse("just some prose { without a pair }") == ParseSuccess(records=())


def test_domain_fxql_parse_rejects_non_string_input() -> None:
    with pytest.raises(ValueError):
        domain_fxql_parse(None)  # type: ignore[arg-type]


def test_domain_fxql_parse_is_safe_to_run_concurrently() -> None:
    """Parse different inputs from many threads without interference.

    Returns:
        None: Assertions validate per-call independence.

    Raises:
        AssertionError: Raised when concurrent calls interfere.
    """

    inputs = [f"USD-GBP {{ BUY {index} SELL {index} CAP {index} }}\nEUR-USD {{ BUY 1 SELL 1 CAP 1 }}" for index in range(1, 65)]

    with ThreadPoolExecutor(max_workers=8) as executor:
        outcomes = list(executor.map(domain_fxql_parse, inputs))

    for index, outcome in enumerate(outcomes, start=1):
        assert isinstance(outcome, ParseSuccess)
        assert len(outcome.records) == 2
        assert outcome.records[0].cap_amount == index
    entry_ids = [record.entry_id for outcome in outcomes for record in outcome.records]
    assert len(set(entry_ids)) == len(entry_ids)


def test_domain_fxql_identifier_codec_round_trips_boundary_and_random_values() -> None:
    """Decode(encode(x)) reconstructs every identifier exactly.

    Returns:
        None: Assertions validate the codec bijection on sample values.

    Raises:
        AssertionError: Raised when round trip loses information.
    """

    samples = [UUID(int=0), UUID(int=2**128 - 1), UUID(int=2**127), *(uuid4() for _ in range(32))]

    for value in samples:
        encoded_value = domain_fxql_encode_identifier(value)
        assert len(encoded_value) == 22
        assert re.fullmatch(r"[A-Za-z0-9_-]{22}", encoded_value)
        assert domain_fxql_decode_identifier(encoded_value) == value

    assert domain_fxql_encode_identifier(UUID(int=0)) == "A" * 22


def test_domain_fxql_build_entry_id_uses_prefix_and_pluggable_source() -> None:
    entry_id = domain_fxql_build_entry_id(lambda: UUID(int=0))

    assert entry_id == "FXQL-" + "A" * 22
    assert domain_fxql_parse_entry_id(entry_id) == UUID(int=0)
    assert domain_fxql_parse_entry_id("A" * 22) == UUID(int=0)


def test_domain_fxql_parse_entry_id_rejects_foreign_text() -> None:
    with pytest.raises(ValueError):
        domain_fxql_parse_entry_id("FXQL-short")


def test_transaction_record_enforces_invariants() -> None:
    """Reject record values that break currency or numeric invariants.

    Returns:
        None: Assertions validate constructor guards.

    Raises:
        AssertionError: Raised when invalid records are constructed.
    """

    valid_values = {
        "entry_id": "FXQL-" + "A" * 22,
        "source_currency": "USD",
        "destination_currency": "GBP",
        "buy_price": 1.0,
        "sell_price": 2.0,
        "cap_amount": 10,
    }
    assert TransactionRecord(**valid_values).cap_amount == 10

    for field_name, bad_value in (
        ("source_currency", "usd"),
        ("destination_currency", "GB1"),
        ("buy_price", 0.0),
        ("sell_price", float("inf")),
        ("cap_amount", 1.5),
        ("cap_amount", 0),
        ("cap_amount", DOMAIN_FXQL_MAX_CAP_AMOUNT + 1),
        ("entry_id", ""),
    ):
        with pytest.raises(ValueError):
            TransactionRecord(**{**valid_values, field_name: bad_value})


_UNDERFLOWING_PRICE = "0." + "0" * 400 + "1"


def test_domain_fxql_parse_reports_price_that_underflows_to_zero() -> None:
    """Reject a positive decimal that becomes 0.0 once stored as a float.

    Returns:
        None: Assertions validate the located BUY diagnostic.

    Raises:
        AssertionError: Raised when the price is accepted or parsing fails.
    """

    outcome = domain_fxql_parse(f"USD-GBP {{ BUY {_UNDERFLOWING_PRICE} SELL 2 CAP 3 }}")

    assert isinstance(outcome, ParseFailure)
    assert outcome.messages() == [
        f"BUY Value- {_UNDERFLOWING_PRICE} is not valid at Line: 1 Character Position - 14-417",
    ]


def test_domain_fxql_parse_reports_cap_above_storable_range() -> None:
    outcome = domain_fxql_parse("USD-GBP { BUY 1 SELL 2 CAP 99999999999999999999 }")

    assert isinstance(outcome, ParseFailure)
    assert outcome.messages() == [
        "CAP Value- 99999999999999999999 is not valid at Line: 1 Character Position - 27-47",
    ]


def test_domain_fxql_parse_accepts_largest_storable_cap() -> None:
    outcome = domain_fxql_parse(f"USD-GBP {{ BUY 1 SELL 2 CAP {DOMAIN_FXQL_MAX_CAP_AMOUNT} }}")

    assert isinstance(outcome, ParseSuccess)
    assert outcome.records[0].cap_amount == 2**63 - 1


@pytest.mark.parametrize(
    ("buy_value", "cap_value"),
    [
        (_UNDERFLOWING_PRICE, "3"),
        ("0." + "0" * 320 + "1", "3"),
        ("1" * 400, "3"),
        ("9" * 308, "3"),
        ("1", "9223372036854775807"),
        ("1", "9223372036854775808"),
        ("1", "9999999999999999999"),
        ("1", "99999999999999999999"),
        ("1", "9223372036854775807.0"),
    ],
)
def test_domain_fxql_parse_returns_outcome_for_boundary_values(buy_value: str, cap_value: str) -> None:
    """Boundary values either build records or produce diagnostics, never raise.

    Returns:
        None: Assertions validate the outcome type.

    Raises:
        AssertionError: Raised when parsing raises or returns another type.
    """

    outcome = domain_fxql_parse(f"USD-GBP {{ BUY {buy_value} SELL 2 CAP {cap_value} }}")

    assert isinstance(outcome, (ParseSuccess, ParseFailure))
    if isinstance(outcome, ParseSuccess):
        assert outcome.records[0].buy_price > 0
        assert 0 < outcome.records[0].cap_amount <= DOMAIN_FXQL_MAX_CAP_AMOUNT
    else:
        assert outcome.diagnostics
