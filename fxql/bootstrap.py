"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from fxql.api import create_api_application
from fxql.config import AppSettings, config_load_settings
from fxql.db import SQLAlchemyDatabaseHealthService, SQLAlchemyTransactionPoolService, db_create_engine
from fxql.statements import FxqlStatementService


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    engine = db_create_engine(database_url=resolved_settings.database_url)
    statement_service = FxqlStatementService(repository=SQLAlchemyTransactionPoolService(engine=engine))
    return create_api_application(
        settings=resolved_settings,
        db_health_service=SQLAlchemyDatabaseHealthService(engine=engine),
        statement_service=statement_service,
    )
