"""Core error codes and exception handling."""

# Error codes
from routeparams.core.error_codes import (
    ErrorCodeRegistry,
    ROUTING_ERROR_CODES,
    UNREGISTERED_ERROR_CODE,
)

# Exception handling
from routeparams.core.exceptions import (
    APIException,
    ParameterError,
    UnknownParameterValueException,
    IncompatibleParameterException,
    ParameterValueException,
    InvalidJSONFormatException,
    register_exception_handlers,
    sanitize_error_message,
)

__all__ = [
    # Error codes
    "ErrorCodeRegistry",
    "ROUTING_ERROR_CODES",
    "UNREGISTERED_ERROR_CODE",
    # Exceptions
    "APIException",
    "ParameterError",
    "UnknownParameterValueException",
    "IncompatibleParameterException",
    "ParameterValueException",
    "InvalidJSONFormatException",
    "register_exception_handlers",
    "sanitize_error_message",
]
