from trainerbook.scheduling.conflicts import filter_conflicts, intervals_overlap
from trainerbook.scheduling.reconciler import ReconcileResult, ScheduleReconciler, TrainerLocks
from trainerbook.scheduling.slots import applicable_windows, candidate_slots, get_available_slots
from trainerbook.scheduling.store import AvailabilityStore, validate_window
from trainerbook.scheduling.timeutils import day_of_week_of, minutes_to_time, time_to_minutes
from trainerbook.scheduling.types import CandidateSlot, ScheduleEntry

__all__ = [
    "AvailabilityStore",
    "CandidateSlot",
    "ReconcileResult",
    "ScheduleEntry",
    "ScheduleReconciler",
    "TrainerLocks",
    "applicable_windows",
    "candidate_slots",
    "day_of_week_of",
    "filter_conflicts",
    "get_available_slots",
    "intervals_overlap",
    "minutes_to_time",
    "time_to_minutes",
    "validate_window",
]
