"""Statement processing package composing the parser with persistence."""

from .interfaces import (
    PersistenceCountMismatchError,
    StatementProcessingError,
    StatementProcessResult,
    StatementServicePort,
)
from .service import FxqlStatementService

__all__ = [
    "FxqlStatementService",
    "PersistenceCountMismatchError",
    "StatementProcessResult",
    "StatementProcessingError",
    "StatementServicePort",
]
