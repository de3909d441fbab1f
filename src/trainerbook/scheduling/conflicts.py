"""Remove candidate slots that overlap blocking reservations."""

from collections.abc import Iterable, Sequence
from typing import Protocol

from trainerbook.scheduling.timeutils import time_to_minutes
from trainerbook.scheduling.types import BLOCKING_STATUSES, CandidateSlot


class ReservationLike(Protocol):
    start_time: str
    end_time: str
    status: str


def intervals_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Half-open overlap: ``[a_start, a_end)`` and ``[b_start, b_end)``.

    Intervals that only touch at an endpoint do not overlap.
    """
    return a_start < b_end and a_end > b_start


def blocking_intervals(reservations: Iterable[ReservationLike]) -> list[tuple[int, int]]:
    return [
        (time_to_minutes(r.start_time), time_to_minutes(r.end_time))
        for r in reservations
        if r.status in BLOCKING_STATUSES
    ]


def filter_conflicts(
    candidates: Sequence[CandidateSlot], reservations: Iterable[ReservationLike]
) -> list[CandidateSlot]:
    """Keep only candidates that overlap no pending/confirmed reservation.

    Reservations in any other status are ignored. O(candidates x reservations),
    which is fine for a single trainer's day.
    """
    blocked = blocking_intervals(reservations)
    if not blocked:
        return list(candidates)
    return [
        slot
        for slot in candidates
        if not any(
            intervals_overlap(slot.start_minutes, slot.end_minutes, start, end)
            for start, end in blocked
        )
    ]
