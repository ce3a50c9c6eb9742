"""External data sources and their record mappers."""

from .base import BreachSource, ProfileSource, BreachRow, SearchRow, map_breach_rows
from .breach_directory import BreachDirectorySource
from .profile_search import SerperProfileSource, map_profile_rows, detect_platform
from .simulated import SimulatedBreachSource, string_hash

__all__ = [
    "BreachSource",
    "ProfileSource",
    "BreachRow",
    "SearchRow",
    "BreachDirectorySource",
    "SerperProfileSource",
    "SimulatedBreachSource",
    "map_breach_rows",
    "map_profile_rows",
    "detect_platform",
    "string_hash",
]
