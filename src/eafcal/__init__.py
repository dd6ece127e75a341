"""eafcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_date,
    to_rata_die,
    get_calendar,
    list_calendars,
    calendar_info,
    limits,
    make_engine,
    register_calendar,
)
from .core.types import Date, Limits
from .design.fast_eaf import EAF, FastEAF, get_fast_eaf

__all__ = [
    "to_date",
    "to_rata_die",
    "get_calendar",
    "list_calendars",
    "calendar_info",
    "limits",
    "make_engine",
    "register_calendar",
    "Date",
    "Limits",
    "EAF",
    "FastEAF",
    "get_fast_eaf",
]
