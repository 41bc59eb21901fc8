"""Numeric error codes looked up by symbolic name."""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

UNREGISTERED_ERROR_CODE = -1


# Routing API error codes
ROUTING_ERROR_CODES = MappingProxyType({
    "INVALID_JSON_FORMAT": 2000,
    "MISSING_PARAMETER": 2001,
    "INVALID_PARAMETER_FORMAT": 2002,
    "INVALID_PARAMETER_VALUE": 2003,
    "PARAMETER_VALUE_EXCEEDS_MAXIMUM": 2004,
    "EXPORT_HANDLER_ERROR": 2006,
    "UNSUPPORTED_EXPORT_FORMAT": 2007,
    "EMPTY_ELEMENT": 2008,
    "ROUTE_NOT_FOUND": 2009,
    "POINT_NOT_FOUND": 2010,
    "INCOMPATIBLE_PARAMETERS": 2011,
    "UNKNOWN_PARAMETER": 2012,
    "PARAMETER_VALUE_EXCEEDS_MINIMUM": 2013,
    "UNKNOWN": 2099,
})


class ErrorCodeRegistry(Mapping):
    """
    Read-only mapping from symbolic error name to numeric code.

    The table is copied at construction and never mutated afterwards, so a
    single instance can be shared between concurrent requests.
    """

    def __init__(self, codes: Optional[Mapping[str, int]] = None):
        self._codes = MappingProxyType(dict(codes or {}))

    def __getitem__(self, name: str) -> int:
        return self._codes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def get_code(self, name: str) -> int:
        """Resolve a symbolic name, falling back to -1 when unregistered."""
        return self._codes.get(name, UNREGISTERED_ERROR_CODE)

    @classmethod
    def routing(cls) -> "ErrorCodeRegistry":
        """Registry populated with the routing API error codes."""
        return cls(ROUTING_ERROR_CODES)
