# This file defines the monitor record model and the envelopes that carry it.
# Records are frozen so nothing can change a stored row after creation.

from __future__ import annotations

from typing import Final, Literal

from pydantic import BaseModel, ConfigDict

from monitor_service.api.schemas.common import EnvelopeFields

WEEKDAYS: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
FIX_FLAGS: Final[tuple[str, ...]] = ("Y", "N")

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
FixFlag = Literal["Y", "N"]


class MonitorRecord(BaseModel):
    """A single stored monitor row."""

    model_config = ConfigDict(frozen=True)

    transaction_id: int
    topic_id: int
    transaction_datetime: str
    number_param: int | None = None
    time_param: str | None = None
    weekday_param: Weekday | None = None
    day_param: int | None = None
    is_fix: FixFlag = "N"


class MonitorDraft(BaseModel):
    """Validated create payload that has not been assigned an id yet."""

    model_config = ConfigDict(frozen=True)

    topic_id: int
    transaction_datetime: str
    number_param: int | None = None
    time_param: str | None = None
    weekday_param: Weekday | None = None
    day_param: int | None = None
    is_fix: FixFlag = "N"

    def to_record(self, transaction_id: int) -> MonitorRecord:
        return MonitorRecord(transaction_id=transaction_id, **self.model_dump())


class MonitorListResponse(EnvelopeFields):
    count: int
    data: list[MonitorRecord]


class MonitorResponse(EnvelopeFields):
    data: MonitorRecord
