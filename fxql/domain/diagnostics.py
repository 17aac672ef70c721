"""Located diagnostic construction for invalid FXQL statement fields."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Diagnostic, FieldKind, RawField, RawStatementMatch
from .normalizer import NormalizedSource
from .validators import domain_fxql_validate_field

_DOMAIN_FXQL_DIAGNOSTIC_TEMPLATES = {
    FieldKind.CURRENCY_PAIR: "Currency Pair -{value} is not Valid at Line {line} Character Position - {start}-{end}",
    FieldKind.BUY: "BUY Value- {value} is not valid at Line: {line} Character Position - {start}-{end}",
    FieldKind.SELL: "SELL Value- {value} is not valid at Line: {line} Character Position - {start}-{end}",
    FieldKind.CAP: "CAP Value- {value} is not valid at Line: {line} Character Position - {start}-{end}",
}


def domain_fxql_build_field_diagnostic(source: NormalizedSource, field: RawField) -> Diagnostic:
    """Build one located diagnostic for an invalid field.

    Args:
        source: Normalized source used for line/column lookup.
        field: Field that failed validation.

    Returns:
        Diagnostic: Diagnostic with rendered message.

    Raises:
        ValueError: Raised when the field offset is outside source text.
    """

    line, char_start = source.position(field.offset)
    char_end = char_start + len(field.raw_value)
    message = _DOMAIN_FXQL_DIAGNOSTIC_TEMPLATES[field.kind].format(
        value=field.raw_value,
        line=line,
        start=char_start,
        end=char_end,
    )
    return Diagnostic(
        kind=field.kind,
        raw_value=field.raw_value,
        line=line,
        char_start=char_start,
        char_end=char_end,
        message=message,
    )


def domain_fxql_build_statement_diagnostics(
    source: NormalizedSource,
    statement: RawStatementMatch,
) -> list[Diagnostic]:
    """Validate every field of one statement and return its diagnostics.

    All four fields are evaluated; one statement may yield up to four
    diagnostics.

    Args:
        source: Normalized source used for line/column lookup.
        statement: Matched statement block.

    Returns:
        list[Diagnostic]: Diagnostics in field order.

    Raises:
        ValueError: Raised when a field offset is outside source text.
    """

    return [
        domain_fxql_build_field_diagnostic(source=source, field=field)
        for field in statement.fields()
        if not domain_fxql_validate_field(field)
    ]


def domain_fxql_collect_diagnostics(
    source: NormalizedSource,
    statements: Iterable[RawStatementMatch],
) -> tuple[Diagnostic, ...]:
    """Collect diagnostics across statements, deduplicated by message text.

    Args:
        source: Normalized source used for line/column lookup.
        statements: Matched statement blocks in text order.

    Returns:
        tuple[Diagnostic, ...]: Diagnostics in first-occurrence order.

    Raises:
        ValueError: Raised when a field offset is outside source text.
    """

    collected: dict[str, Diagnostic] = {}
    for statement in statements:
        for diagnostic in domain_fxql_build_statement_diagnostics(source=source, statement=statement):
            collected.setdefault(diagnostic.message, diagnostic)
    return tuple(collected.values())
