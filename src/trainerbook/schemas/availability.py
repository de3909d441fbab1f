import re
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from trainerbook.scheduling.timeutils import DayOfWeek

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class WindowCreate(BaseModel):
    kind: Literal["recurring", "specific"]
    day_of_week: DayOfWeek | None = None
    specific_date: str | None = Field(default=None, pattern=DATE_PATTERN)
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)

    @model_validator(mode="after")
    def check_payload(self) -> "WindowCreate":
        if self.kind == "recurring" and (self.day_of_week is None or self.specific_date):
            raise ValueError("recurring windows require day_of_week only")
        if self.kind == "specific" and (self.specific_date is None or self.day_of_week):
            raise ValueError("specific windows require specific_date only")
        return self


class WindowRead(BaseModel):
    id: int
    trainer_id: int
    kind: str
    day_of_week: str | None = None
    specific_date: str | None = None
    start_time: str
    end_time: str
    is_active: bool
    created_at: int

    model_config = {"from_attributes": True}


class SlotRead(BaseModel):
    start_time: str
    end_time: str


class WeeklyScheduleEntry(BaseModel):
    day_of_week: DayOfWeek
    start_time: str
    end_time: str
    is_active: bool = True

    @model_validator(mode="after")
    def check_times(self) -> "WeeklyScheduleEntry":
        # Day-off entries create no window, so their times are ignored
        if self.is_active:
            for value in (self.start_time, self.end_time):
                if not re.fullmatch(TIME_PATTERN, value):
                    raise ValueError(f"time {value!r} must be HH:MM")
        return self


class WeeklyScheduleUpdate(BaseModel):
    entries: list[WeeklyScheduleEntry]
    operation_token: str | None = Field(default=None, min_length=1, max_length=64)


class ReconciliationRead(BaseModel):
    trainer_id: int
    version: int
    windows_deactivated: int
    windows_created: int
    replayed: bool = False
