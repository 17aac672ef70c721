"""Domain models and the FXQL parser pipeline."""

from .identifiers import (
    ENTRY_ID_PREFIX,
    IdentifierSource,
    domain_fxql_build_entry_id,
    domain_fxql_decode_identifier,
    domain_fxql_encode_identifier,
    domain_fxql_parse_entry_id,
)
from .models import (
    DOMAIN_FXQL_MAX_CAP_AMOUNT,
    Diagnostic,
    FieldKind,
    HealthStatus,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    RawField,
    RawStatementMatch,
    TransactionRecord,
)
from .parser import domain_fxql_parse

__all__ = [
    "DOMAIN_FXQL_MAX_CAP_AMOUNT",
    "ENTRY_ID_PREFIX",
    "Diagnostic",
    "FieldKind",
    "HealthStatus",
    "IdentifierSource",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "RawField",
    "RawStatementMatch",
    "TransactionRecord",
    "domain_fxql_build_entry_id",
    "domain_fxql_decode_identifier",
    "domain_fxql_encode_identifier",
    "domain_fxql_parse",
    "domain_fxql_parse_entry_id",
]
