from trainerbook.models.availability import AvailabilityWindow
from trainerbook.models.booking import Booking
from trainerbook.models.reconciliation import ScheduleReconciliation
from trainerbook.models.trainer import TrainerProfile

__all__ = [
    "AvailabilityWindow",
    "Booking",
    "ScheduleReconciliation",
    "TrainerProfile",
]
