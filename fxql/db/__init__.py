"""Database layer package for all SQL and persistence boundaries."""

from .health import SQLAlchemyDatabaseHealthService
from .interfaces import DatabaseHealthPort, TransactionPoolPersistResult, TransactionPoolRepositoryPort
from .session import db_create_engine
from .transaction_pool import SQLAlchemyTransactionPoolService

__all__ = [
	"DatabaseHealthPort",
	"TransactionPoolPersistResult",
	"TransactionPoolRepositoryPort",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyTransactionPoolService",
	"db_create_engine",
]
