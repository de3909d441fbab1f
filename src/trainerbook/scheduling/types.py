from dataclasses import dataclass

from trainerbook.scheduling.timeutils import DayOfWeek, minutes_to_time

BLOCKING_STATUSES = frozenset({"pending", "confirmed"})


@dataclass(frozen=True)
class CandidateSlot:
    """A bookable interval ``[start_minutes, end_minutes)``. Computed, never stored."""

    start_minutes: int
    end_minutes: int

    @property
    def start_time(self) -> str:
        return minutes_to_time(self.start_minutes)

    @property
    def end_time(self) -> str:
        return minutes_to_time(self.end_minutes)


@dataclass(frozen=True)
class ScheduleEntry:
    """One row of a weekly schedule submitted for reconciliation."""

    day_of_week: DayOfWeek
    start_time: str
    end_time: str
    is_active: bool = True
