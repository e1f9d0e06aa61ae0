"""Error handling middleware and exception handlers."""

from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    CardPolicyViolation,
    DomainException,
    GatewayException,
)
from src.presentation.schemas import ApiResponse
from src.service.cards import classify
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

VALIDATION_FAILED = "Validations Failed"
INTERNAL_SERVER_ERROR = "Internal Server Error"


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> Dict[str, str]:
    """
    Collapse pydantic error details into ``{field: message}``.

    The first error reported for a field wins.
    """
    formatted: Dict[str, str] = {}

    for error in errors:
        loc = [part for part in error.get("loc", ()) if part not in ("body", "query")]
        field = str(loc[-1]) if loc else "body"
        formatted.setdefault(field, error.get("msg", "Invalid value"))

    return formatted


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Expected failures map to HTTP 200 with ``success`` false; anything
    else is a 500.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request shape errors."""
        details = format_validation_errors(exc.errors())
        logger.info(
            "request_validation_failed",
            request_id=get_request_id(),
            path=request.url.path,
            fields=sorted(details),
        )
        return JSONResponse(
            status_code=200,
            content=ApiResponse.failure(VALIDATION_FAILED, error=details).to_content(),
        )

    @app.exception_handler(CardPolicyViolation)
    async def card_policy_handler(
        request: Request,
        exc: CardPolicyViolation,
    ) -> JSONResponse:
        """Handle card lifecycle rule violations."""
        return JSONResponse(
            status_code=200,
            content=ApiResponse.failure(exc.message).to_content(),
        )

    @app.exception_handler(GatewayException)
    async def gateway_error_handler(
        request: Request,
        exc: GatewayException,
    ) -> JSONResponse:
        """Handle payment gateway errors, translating card declines."""
        classification = classify(exc)
        logger.error(
            "gateway_error",
            request_id=get_request_id(),
            code=exc.code,
            gateway_code=exc.gateway_code,
            decline_code=exc.decline_code,
            gateway_status=exc.status_code,
            classified_status=classification.status_code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=200,
            content=ApiResponse.failure(classification.message).to_content(),
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=200,
            content=ApiResponse.failure(exc.message).to_content(),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content=ApiResponse.failure(INTERNAL_SERVER_ERROR).to_content(),
        )
