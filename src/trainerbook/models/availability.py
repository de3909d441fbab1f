from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from trainerbook.database import Base


class AvailabilityWindow(Base):
    __tablename__ = "availability_windows"

    id: Mapped[int] = mapped_column(primary_key=True)
    trainer_id: Mapped[int] = mapped_column(ForeignKey("trainer_profiles.id"), index=True)
    kind: Mapped[str] = mapped_column(String(10))  # recurring, specific
    day_of_week: Mapped[str | None] = mapped_column(String(10), default=None)  # recurring only
    specific_date: Mapped[str | None] = mapped_column(String(10), default=None)  # specific only
    start_time: Mapped[str] = mapped_column(String(5))  # "HH:MM"
    end_time: Mapped[str] = mapped_column(String(5))
    is_active: Mapped[bool] = mapped_column(default=True)
    created_at: Mapped[int] = mapped_column(BigInteger)  # epoch milliseconds

    @property
    def is_recurring(self) -> bool:
        return self.kind == "recurring"
