"""Shop closure domain entity."""

import datetime as dt
from enum import Enum

from pydantic import Field

from shopledger.core.entities.base import LedgerModel


class ClosureReason(str, Enum):
    """Why the shop did not open."""

    LEAVE = "Leave"
    HOLIDAY = "Holiday"
    SICK_LEAVE = "Sick Leave"
    EMERGENCY = "Emergency"
    MAINTENANCE = "Maintenance"
    OTHER = "Other"


class ShopClosure(LedgerModel):
    """A calendar day (or part of one) the shop was closed.

    At most one closure exists per calendar day. ``closed_hours`` is only
    informational; analytics weight any partial closure as half a day.
    """

    id: int | None = None
    date: dt.date
    reason: ClosureReason
    description: str = Field(default="", max_length=200)
    is_full_day: bool = True
    closed_hours: float = Field(default=0.0, ge=0, le=24)
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.now)
