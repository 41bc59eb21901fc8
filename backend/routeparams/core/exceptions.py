"""Centralized exception handling with sanitized error responses."""

import logging
import traceback
from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routeparams.config import settings

logger = logging.getLogger("api.errors")


# =============================================================================
# Custom Exception Classes
# =============================================================================

class APIException(Exception):
    """Base exception for API errors with safe messages."""

    def __init__(
        self,
        status_code: int = 500,
        detail: str = "An error occurred",
        error_code: Optional[Union[str, int]] = None,
        internal_message: Optional[str] = None,
    ):
        self.status_code = status_code
        self.detail = detail  # Safe message for client
        self.error_code = error_code or "INTERNAL_ERROR"
        self.internal_message = internal_message  # Full message for logs
        super().__init__(self.detail)


class ParameterError(APIException):
    """
    A request parameter could not be translated.

    Carries the numeric code resolved from the error code registry and the
    (name, value) pairs identifying the offending parameter(s).
    """

    def __init__(self, code: int, detail: str, parameters: List[Tuple[str, Optional[str]]]):
        super().__init__(status_code=400, detail=detail, error_code=code)
        self.code = code
        self.parameters = parameters


class UnknownParameterValueException(ParameterError):
    """An enumerated value has no internal mapping."""

    def __init__(self, code: int, name: str, value: str):
        super().__init__(
            code,
            f"Unknown parameter value '{value}' for '{name}'.",
            [(name, value)],
        )


class IncompatibleParameterException(ParameterError):
    """A valid value cannot be combined with another parameter."""

    def __init__(self, code: int, name: str, value: str, other_name: str, other_value: str):
        super().__init__(
            code,
            f"Parameter '{name}={value}' is incompatible with parameter '{other_name}={other_value}'.",
            [(name, value), (other_name, other_value)],
        )


class ParameterValueException(ParameterError):
    """A parameter value failed validation."""

    def __init__(self, code: int, name: str, value: Optional[str] = None):
        if value is None:
            detail = f"Parameter '{name}' has incorrect value or format."
        else:
            detail = f"Parameter '{name}' has incorrect value of '{value}'."
        super().__init__(code, detail, [(name, value)])


class InvalidJSONFormatException(ParameterError):
    """A parameter payload could not be parsed at all."""

    def __init__(self, code: int, name: str):
        super().__init__(code, f"Unable to parse JSON for parameter '{name}'.", [(name, None)])


# =============================================================================
# Error Response Formatting
# =============================================================================

def create_error_response(
    status_code: int,
    error_code: Union[str, int],
    message: str,
    request_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Create a standardized error response."""
    response = {
        "error": {
            "code": error_code,
            "message": message,
        }
    }

    if request_id:
        response["error"]["request_id"] = request_id

    if details and not settings.is_production():
        # Only include details in non-production
        response["error"]["details"] = details

    return response


def sanitize_error_message(message: str) -> str:
    """
    Sanitize error message to remove sensitive information.

    Removes:
    - File paths
    - Stack traces
    """
    sensitive_patterns = [
        "/routeparams/",
        "site-packages",
        "/usr/",
        "/home/",
        "Traceback",
        "File \"",
    ]

    message_lower = message.lower()
    for pattern in sensitive_patterns:
        if pattern.lower() in message_lower:
            return "An internal error occurred. Please try again later."

    # Limit message length
    if len(message) > 200:
        return message[:200] + "..."

    return message


# =============================================================================
# Exception Handlers
# =============================================================================

def get_request_id(request: Request) -> str:
    """Get request ID from request state or generate new one."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return str(uuid4())[:8]


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handle custom API exceptions."""
    request_id = get_request_id(request)

    log_message = f"[{request_id}] {exc.error_code}: {exc.detail}"
    if exc.internal_message:
        log_message += f" | Internal: {exc.internal_message}"

    if exc.status_code >= 500:
        logger.error(log_message)
    else:
        logger.warning(log_message)

    details = None
    if isinstance(exc, ParameterError):
        details = {
            "parameters": [
                {"name": name, "value": value} for name, value in exc.parameters
            ]
        }

    response = create_error_response(
        status_code=exc.status_code,
        error_code=exc.error_code,
        message=exc.detail,
        request_id=request_id,
        details=details,
    )

    return JSONResponse(status_code=exc.status_code, content=response)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle standard HTTP exceptions with sanitization."""
    request_id = get_request_id(request)

    error_code_map = {
        400: "BAD_REQUEST",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        422: "VALIDATION_ERROR",
        500: "INTERNAL_ERROR",
        503: "SERVICE_UNAVAILABLE",
    }

    error_code = error_code_map.get(exc.status_code, "ERROR")

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code >= 500:
        detail = sanitize_error_message(detail)

    if exc.status_code >= 500:
        logger.error(f"[{request_id}] HTTP {exc.status_code}: {exc.detail}")
    else:
        logger.info(f"[{request_id}] HTTP {exc.status_code}: {detail}")

    response = create_error_response(
        status_code=exc.status_code,
        error_code=error_code,
        message=detail,
        request_id=request_id,
    )

    return JSONResponse(status_code=exc.status_code, content=response)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors with safe messages."""
    request_id = get_request_id(request)

    field_errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        msg = error["msg"]

        if "value_error" in str(error.get("type", "")):
            msg = "Invalid value provided"

        field_errors.append({
            "field": field,
            "message": msg,
        })

    logger.info(f"[{request_id}] Validation error: {len(field_errors)} field(s)")

    response = create_error_response(
        status_code=422,
        error_code="VALIDATION_ERROR",
        message="Invalid request data",
        request_id=request_id,
        details={"fields": field_errors},
    )

    return JSONResponse(status_code=422, content=response)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with full sanitization."""
    request_id = get_request_id(request)

    logger.error(
        f"[{request_id}] Unhandled exception: {type(exc).__name__}: {str(exc)}"
    )
    if settings.debug:
        logger.error(traceback.format_exc())

    response = create_error_response(
        status_code=500,
        error_code="INTERNAL_ERROR",
        message="An unexpected error occurred. Please try again later.",
        request_id=request_id,
    )

    return JSONResponse(status_code=500, content=response)


# =============================================================================
# Register Exception Handlers
# =============================================================================

def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
