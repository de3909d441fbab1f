from datetime import datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from trainerbook.database import Base


class ScheduleReconciliation(Base):
    """One applied replacement of a trainer's recurring weekly schedule."""

    __tablename__ = "schedule_reconciliations"

    id: Mapped[int] = mapped_column(primary_key=True)
    trainer_id: Mapped[int] = mapped_column(ForeignKey("trainer_profiles.id"), index=True)
    version: Mapped[int]
    operation_token: Mapped[str | None] = mapped_column(String(64), unique=True, default=None)
    windows_deactivated: Mapped[int] = mapped_column(default=0)
    windows_created: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
