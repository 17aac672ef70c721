"""FXQL statement block scanner.

The scanner only checks block structure. Currency pairs are matched leniently
(alphanumeric runs around a dash) and values are any non-whitespace run so
that malformed fields still reach validation and produce located
diagnostics. Text that does not fit the block shape is skipped.

A pair only starts at the beginning of an alphanumeric run. Any match that
could start inside a run also matches from the run start, so this keeps the
same matches while scanning long runs in linear time.
"""

from __future__ import annotations

from collections.abc import Iterator
import re

from .models import FieldKind, RawField, RawStatementMatch

_DOMAIN_FXQL_STATEMENT_PATTERN = re.compile(
    r"(?<![A-Z0-9])(?P<currency_pair>[A-Z0-9]*-[A-Z0-9]*)\s*"
    r"\{\s*"
    r"BUY\s+(?P<buy>\S+)\s*"
    r"SELL\s+(?P<sell>\S+)\s*"
    r"CAP\s+(?P<cap>\S+)\s*"
    r"\}",
    re.IGNORECASE | re.ASCII,
)


def domain_fxql_scan_statements(text: str) -> Iterator[RawStatementMatch]:
    """Yield every structurally plausible statement block in text order.

    Each call builds an independent iterator; matches never overlap and
    scanning resumes at the end of the previous match.

    Args:
        text: Normalized FXQL text.

    Returns:
        Iterator[RawStatementMatch]: Lazy sequence of matched blocks.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    for match in _DOMAIN_FXQL_STATEMENT_PATTERN.finditer(text):
        yield RawStatementMatch(
            start=match.start(),
            end=match.end(),
            currency_pair=_domain_fxql_build_raw_field(match, FieldKind.CURRENCY_PAIR),
            buy=_domain_fxql_build_raw_field(match, FieldKind.BUY),
            sell=_domain_fxql_build_raw_field(match, FieldKind.SELL),
            cap=_domain_fxql_build_raw_field(match, FieldKind.CAP),
        )


def _domain_fxql_build_raw_field(match: re.Match[str], kind: FieldKind) -> RawField:
    return RawField(kind=kind, raw_value=match.group(kind.value), offset=match.start(kind.value))
