"""Database health service for connectivity and schema readiness checks."""

from sqlalchemy import Engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError

from fxql.domain import HealthStatus

from .interfaces import DatabaseHealthPort

_DB_REQUIRED_TABLE_NAME = "transaction_pool"


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Database health service backed by SQLAlchemy engine checks."""

    def __init__(self, engine: Engine):
        """Initialize database health service.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_connection_label(self) -> str:
        """Return the target database URL with the password hidden."""

        return self._engine.url.render_as_string(hide_password=True)

    def db_check_health(self) -> HealthStatus:
        """Verify connectivity and that the transaction pool schema is migrated.

        Returns:
            HealthStatus: `ok` when ready, `degraded` when migrations are missing.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                table_present = inspect(connection).has_table(_DB_REQUIRED_TABLE_NAME)
        except SQLAlchemyError as error:
            raise ConnectionError("database connectivity check failed") from error

        if not table_present:
            return HealthStatus(
                status="degraded",
                detail=f"{_DB_REQUIRED_TABLE_NAME} table missing; run `alembic upgrade head`",
            )
        return HealthStatus(status="ok", detail="database connectivity and schema verified")
