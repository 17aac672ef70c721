"""FXQL statement API router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fxql.config import AppSettings
from fxql.domain import TransactionRecord
from fxql.statements import PersistenceCountMismatchError, StatementProcessingError, StatementServicePort

FXQL_CODE_SUCCESS = "FXQL-200"
FXQL_CODE_INVALID_INPUT = "FXQL-400"
FXQL_CODE_EDGE_CASE = "FXQL-418"
FXQL_CODE_UNEXPECTED = "FXQL-500"

FXQL_SUCCESS_MESSAGE = "FXQL Statement Parsed Successfully."
_API_UNEXPECTED_MESSAGE = "Unexpected error while processing FXQL statements."


class FxqlStatementRequest(BaseModel):
    """Request body carrying one FXQL submission."""

    FXQL: str = Field(
        description="FXQL text matching `CURR1-CURR2 { BUY x SELL y CAP z }`, one or more statements.",
        examples=["USD-GBP {\\n BUY 100\\n SELL 200\\n CAP 93800\\n}"],
    )


def api_create_statements_router(settings: AppSettings, statement_service: StatementServicePort) -> APIRouter:
    """Create FXQL statement router.

    Args:
        settings: Runtime settings used for input limits.
        statement_service: Service that parses and persists submissions.

    Returns:
        APIRouter: Router exposing `/fxql-statements` and the legacy `/parse` path.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if statement_service is None:
        raise ValueError("statement_service must not be None")

    router = APIRouter(tags=["fxql"])

    @router.post(
        "/fxql-statements",
        responses={
            400: {"description": "Invalid FXQL data provided"},
            418: {"description": "Stored row count did not match parsed statements"},
            500: {"description": "Unexpected processing failure"},
        },
    )
    @router.post("/parse", include_in_schema=False)
    def api_statements_parse(body: FxqlStatementRequest) -> JSONResponse:
        """Parse FXQL text, persist accepted records, and return them.

        Args:
            body: Request body with the `FXQL` text field.

        Returns:
            JSONResponse: Success, validation, or internal-error envelope.

        Raises:
            RuntimeError: This handler maps processing errors to responses.
        """

        if len(body.FXQL) > settings.fxql_max_input_length:
            return api_build_error_response(
                messages=[f"FXQL input exceeds maximum length of {settings.fxql_max_input_length} characters"],
            )

        try:
            result = statement_service.statement_process(body.FXQL)
        except PersistenceCountMismatchError as error:
            payload = {"message": f"Edge case error: {error}", "code": FXQL_CODE_EDGE_CASE}
            return JSONResponse(content=payload, status_code=status.HTTP_418_IM_A_TEAPOT)
        except StatementProcessingError:
            payload = {"message": _API_UNEXPECTED_MESSAGE, "code": FXQL_CODE_UNEXPECTED}
            return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if not result.accepted:
            return api_build_error_response(messages=[diagnostic.message for diagnostic in result.diagnostics])

        payload = {
            "message": FXQL_SUCCESS_MESSAGE,
            "code": FXQL_CODE_SUCCESS,
            "data": [api_serialize_transaction_record(record) for record in result.records],
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router


def api_build_error_response(messages: list[str]) -> JSONResponse:
    """Build the FXQL-400 client error envelope.

    Args:
        messages: Client-facing error messages.

    Returns:
        JSONResponse: HTTP 400 response.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    payload = {"message": messages, "code": FXQL_CODE_INVALID_INPUT}
    return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)


def api_serialize_transaction_record(record: TransactionRecord) -> dict[str, object]:
    """Serialize one transaction record into the response entry shape.

    Args:
        record: Persisted transaction record.

    Returns:
        dict[str, object]: JSON-compatible entry payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "EntryId": record.entry_id,
        "SourceCurrency": record.source_currency,
        "DestinationCurrency": record.destination_currency,
        "SellPrice": record.sell_price,
        "BuyPrice": record.buy_price,
        "CapAmount": record.cap_amount,
    }
