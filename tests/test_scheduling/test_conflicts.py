"""Tests for half-open overlap and reservation filtering."""

from dataclasses import dataclass

from trainerbook.scheduling.conflicts import filter_conflicts, intervals_overlap
from trainerbook.scheduling.types import CandidateSlot


@dataclass
class FakeReservation:
    start_time: str
    end_time: str
    status: str = "confirmed"


def _slot(start: str, end: str) -> CandidateSlot:
    h1, m1 = map(int, start.split(":"))
    h2, m2 = map(int, end.split(":"))
    return CandidateSlot(h1 * 60 + m1, h2 * 60 + m2)


class TestIntervalsOverlap:
    def test_touching_endpoints_do_not_overlap(self) -> None:
        assert not intervals_overlap(540, 570, 570, 600)
        assert not intervals_overlap(570, 600, 540, 570)

    def test_partial_overlap(self) -> None:
        assert intervals_overlap(540, 570, 555, 585)

    def test_containment(self) -> None:
        assert intervals_overlap(540, 660, 570, 600)
        assert intervals_overlap(570, 600, 540, 660)

    def test_identical(self) -> None:
        assert intervals_overlap(540, 600, 540, 600)

    def test_disjoint(self) -> None:
        assert not intervals_overlap(540, 570, 600, 630)


class TestFilterConflicts:
    def test_adjacent_reservation_keeps_slot(self) -> None:
        slots = [_slot("09:00", "09:30")]
        result = filter_conflicts(slots, [FakeReservation("09:30", "10:00")])
        assert result == slots

    def test_overlapping_reservation_drops_slot(self) -> None:
        slots = [_slot("09:00", "09:30")]
        assert filter_conflicts(slots, [FakeReservation("09:15", "09:45")]) == []

    def test_non_blocking_statuses_ignored(self) -> None:
        slots = [_slot("09:00", "10:00")]
        reservations = [
            FakeReservation("09:00", "10:00", status="cancelled"),
            FakeReservation("09:00", "10:00", status="completed"),
        ]
        assert filter_conflicts(slots, reservations) == slots

    def test_pending_blocks(self) -> None:
        slots = [_slot("09:00", "10:00"), _slot("10:00", "11:00")]
        result = filter_conflicts(slots, [FakeReservation("09:30", "10:00", status="pending")])
        assert result == [_slot("10:00", "11:00")]

    def test_multiple_reservations(self) -> None:
        slots = [_slot(f"{h:02d}:00", f"{h + 1:02d}:00") for h in range(8, 13)]
        reservations = [FakeReservation("08:30", "09:00"), FakeReservation("11:00", "11:30")]
        result = filter_conflicts(slots, reservations)
        assert [s.start_time for s in result] == ["09:00", "10:00", "12:00"]

    def test_no_reservations(self) -> None:
        slots = [_slot("09:00", "10:00")]
        assert filter_conflicts(slots, []) == slots
