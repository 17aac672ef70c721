"""FastAPI application factory for the FXQL parser service."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from fxql.config import AppSettings
from fxql.db import DatabaseHealthPort
from fxql.statements import StatementServicePort

from .middleware import api_install_middleware
from .routers import api_create_health_router, api_create_statements_router
from .routers.statements import api_build_error_response

_API_DOCS_PATH = "/api"
_API_OPENAPI_PATH = "/v1/api.json"


def create_api_application(
    settings: AppSettings,
    db_health_service: DatabaseHealthPort,
    statement_service: StatementServicePort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        db_health_service: Database health service used by health endpoints.
        statement_service: Service that parses and persists FXQL submissions.

    Returns:
        FastAPI: Framework application instance with routers and middleware.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """

    application = FastAPI(
        title="FXQLParser",
        description="FXQL statement parser API",
        version="1.0",
        docs_url=_API_DOCS_PATH,
        redoc_url=None,
        openapi_url=_API_OPENAPI_PATH,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["Content-Type", "Accept", "Authorization"],
        allow_credentials="*" not in settings.cors_allowed_origins,
    )
    api_install_middleware(application)

    @application.exception_handler(RequestValidationError)
    async def api_request_validation_handler(_request: Request, error: RequestValidationError) -> JSONResponse:
        """Map request body validation errors to the FXQL-400 envelope."""

        messages = [
            f"{'.'.join(str(part) for part in detail.get('loc', ()) if part != 'body') or 'body'}: {detail.get('msg')}"
            for detail in error.errors()
        ]
        return api_build_error_response(messages=messages)

    @application.get("/", include_in_schema=False)
    def foundation_index() -> RedirectResponse:
        """Redirect to the interactive API documentation."""

        return RedirectResponse(url=_API_DOCS_PATH, status_code=status.HTTP_302_FOUND)

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(
        api_create_statements_router(settings=settings, statement_service=statement_service)
    )

    return application
