"""FXQL submission parser entrypoint.

A submission is accepted or rejected as a whole: any invalid field in any
matched statement turns the outcome into a `ParseFailure` carrying every
diagnostic, and statements that did validate are discarded.
"""

from __future__ import annotations

from .diagnostics import domain_fxql_collect_diagnostics
from .identifiers import IdentifierSource
from .models import ParseFailure, ParseOutcome, ParseSuccess
from .normalizer import domain_fxql_normalize_source
from .records import domain_fxql_build_records
from .scanner import domain_fxql_scan_statements


def domain_fxql_parse(raw_text: str, identifier_source: IdentifierSource | None = None) -> ParseOutcome:
    """Parse and validate one FXQL submission.

    Args:
        raw_text: FXQL text as received from the client.
        identifier_source: Optional identifier generator override.

    Returns:
        ParseOutcome: `ParseSuccess` with records in text order, or
        `ParseFailure` with deduplicated diagnostics.

    Raises:
        ValueError: Raised when raw_text is not a string.
    """

    if not isinstance(raw_text, str):
        raise ValueError("raw_text must be a string")

    source = domain_fxql_normalize_source(raw_text)
    statements = list(domain_fxql_scan_statements(source.text))

    diagnostics = domain_fxql_collect_diagnostics(source=source, statements=statements)
    if diagnostics:
        return ParseFailure(diagnostics=diagnostics)

    return ParseSuccess(records=domain_fxql_build_records(statements, identifier_source=identifier_source))
