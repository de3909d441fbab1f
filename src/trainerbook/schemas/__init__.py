from trainerbook.schemas.availability import (
    ReconciliationRead,
    SlotRead,
    WeeklyScheduleEntry,
    WeeklyScheduleUpdate,
    WindowCreate,
    WindowRead,
)
from trainerbook.schemas.system import StatusResponse, SuccessResponse
from trainerbook.schemas.trainer import TrainerCreate, TrainerRead

__all__ = [
    "ReconciliationRead",
    "SlotRead",
    "StatusResponse",
    "SuccessResponse",
    "TrainerCreate",
    "TrainerRead",
    "WeeklyScheduleEntry",
    "WeeklyScheduleUpdate",
    "WindowCreate",
    "WindowRead",
]
