"""Field validators for FXQL statement values."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
import math
import re

from .models import DOMAIN_FXQL_MAX_CAP_AMOUNT, FieldKind, RawField

_DOMAIN_FXQL_CURRENCY_PAIR_PATTERN = re.compile(r"[A-Z]{3}-[A-Z]{3}")
_DOMAIN_FXQL_DECIMAL_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def domain_fxql_validate_currency_pair(raw_value: str) -> bool:
    """Return whether value is exactly two uppercase 3-letter codes joined by a dash.

    Args:
        raw_value: Raw currency pair text.

    Returns:
        bool: True when the pair is valid.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return _DOMAIN_FXQL_CURRENCY_PAIR_PATTERN.fullmatch(raw_value) is not None


def domain_fxql_validate_price(raw_value: str) -> bool:
    """Return whether value is a plain decimal that stays positive and finite as a float.

    Args:
        raw_value: Raw buy or sell price text.

    Returns:
        bool: True when the value is a valid price.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    parsed_value = _domain_fxql_parse_decimal(raw_value)
    if parsed_value is None:
        return False
    # Stored as float, so the float value must stay positive and finite.
    stored_value = float(parsed_value)
    return stored_value > 0 and math.isfinite(stored_value)


def domain_fxql_validate_cap(raw_value: str) -> bool:
    """Return whether value is a positive decimal with no fractional remainder.

    `5000` and `5000.0` are accepted; `5000.5` is rejected. Values above
    `DOMAIN_FXQL_MAX_CAP_AMOUNT` do not fit the stored 64-bit column.

    Args:
        raw_value: Raw cap amount text.

    Returns:
        bool: True when the value is a valid cap amount.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    parsed_value = _domain_fxql_parse_decimal(raw_value)
    if parsed_value is None or parsed_value <= 0:
        return False
    if parsed_value > DOMAIN_FXQL_MAX_CAP_AMOUNT:
        return False
    return parsed_value == parsed_value.to_integral_value()


def domain_fxql_validate_field(field: RawField) -> bool:
    """Dispatch one raw field to its validator.

    Args:
        field: Raw statement field.

    Returns:
        bool: True when the field is valid for its kind.

    Raises:
        ValueError: Raised when the field kind is unsupported.
    """

    if field.kind is FieldKind.CURRENCY_PAIR:
        return domain_fxql_validate_currency_pair(field.raw_value)
    if field.kind in (FieldKind.BUY, FieldKind.SELL):
        return domain_fxql_validate_price(field.raw_value)
    if field.kind is FieldKind.CAP:
        return domain_fxql_validate_cap(field.raw_value)
    raise ValueError(f"unsupported field kind={field.kind}")


def _domain_fxql_parse_decimal(raw_value: str) -> Decimal | None:
    if _DOMAIN_FXQL_DECIMAL_PATTERN.fullmatch(raw_value) is None:
        return None
    try:
        return Decimal(raw_value)
    except InvalidOperation:
        return None
