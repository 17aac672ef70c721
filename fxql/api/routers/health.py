"""Health endpoint router composition for app and database checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fxql.db import DatabaseHealthPort


def api_create_health_router(db_health_service: DatabaseHealthPort) -> APIRouter:
    """Create health-check router with app and database readiness status.

    Args:
        db_health_service: DB-layer health service interface.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when db_health_service is invalid.
    """

    if db_health_service is None:
        raise ValueError("db_health_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application and database health state.

        Returns:
            JSONResponse: 200 when the database is ready, else 503.

        Raises:
            RuntimeError: This handler maps connectivity errors to responses.
        """

        target = db_health_service.db_connection_label()
        try:
            db_health = db_health_service.db_check_health()
        except ConnectionError as error:
            payload = {"status": "degraded", "app": "up", "database": "down", "detail": str(error), "target": target}
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

        ready = db_health.status == "ok"
        payload = {
            "status": "ok" if ready else "degraded",
            "app": "up",
            "database": db_health.status,
            "detail": db_health.detail,
            "target": target,
        }
        status_code = status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=payload, status_code=status_code)

    return router
