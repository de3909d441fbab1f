"""Bookable intervals of a requested duration for one date.

A date's applicable windows are the union of active recurring windows for its
weekday and active specific windows for that exact date. Each window yields
candidates every ``granularity`` minutes from its start; candidates that
overlap a pending or confirmed booking are then dropped.
"""

from collections.abc import Iterable, Sequence

from trainerbook.config import Settings, get_settings
from trainerbook.models.availability import AvailabilityWindow
from trainerbook.scheduling.conflicts import filter_conflicts
from trainerbook.scheduling.errors import InvalidDuration
from trainerbook.scheduling.store import AvailabilityStore
from trainerbook.scheduling.timeutils import day_of_week_of, parse_date, time_to_minutes
from trainerbook.scheduling.types import CandidateSlot

DEFAULT_GRANULARITY_MINUTES = 30


def applicable_windows(
    windows: Iterable[AvailabilityWindow], session_date: str
) -> list[AvailabilityWindow]:
    """Windows that apply on ``session_date`` (recurring for its weekday + specific for it)."""
    weekday = day_of_week_of(session_date)
    return [
        w
        for w in windows
        if w.is_active
        and (
            (w.is_recurring and w.day_of_week == weekday)
            or (not w.is_recurring and w.specific_date == session_date)
        )
    ]


def candidate_slots(
    windows: Sequence[AvailabilityWindow],
    duration_minutes: int,
    granularity: int = DEFAULT_GRANULARITY_MINUTES,
    dedupe: bool = False,
) -> list[CandidateSlot]:
    """Enumerate raw candidates for the given windows, ordered by start time.

    Overlapping windows can produce the same slot twice; those duplicates are
    kept unless ``dedupe`` is set.
    """
    if duration_minutes <= 0:
        raise InvalidDuration(f"Duration must be positive, got {duration_minutes}")

    slots: list[CandidateSlot] = []
    for window in windows:
        start = time_to_minutes(window.start_time)
        end = time_to_minutes(window.end_time)
        for minutes in range(start, end - duration_minutes + 1, granularity):
            slots.append(CandidateSlot(minutes, minutes + duration_minutes))

    if dedupe:
        slots = list(dict.fromkeys(slots))
    # Stable: slots with equal starts keep window order
    slots.sort(key=lambda s: s.start_minutes)
    return slots


async def get_available_slots(
    store: AvailabilityStore,
    trainer_id: int,
    session_date: str,
    duration_minutes: int,
    settings: Settings | None = None,
) -> list[CandidateSlot]:
    """Bookable, conflict-free slots for a trainer on a date.

    Returns an empty list when no active window applies to the date.
    Stateless: every call recomputes from the stored windows and bookings.
    """
    settings = settings or get_settings()
    if duration_minutes <= 0:
        raise InvalidDuration(f"Duration must be positive, got {duration_minutes}")
    parse_date(session_date)

    windows = applicable_windows(await store.list_active_windows(trainer_id), session_date)
    if not windows:
        return []

    raw = candidate_slots(
        windows,
        duration_minutes,
        granularity=settings.slot_granularity_minutes,
        dedupe=settings.dedupe_slots,
    )
    reservations = await store.blocking_reservations(trainer_id, session_date)
    return filter_conflicts(raw, reservations)
