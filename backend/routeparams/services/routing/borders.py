"""Border crossing policies."""

from enum import Enum


class AvoidBordersMode(str, Enum):
    """Which country borders a route must not cross."""

    NONE = "none"
    CONTROLLED = "controlled"
    ALL = "all"
