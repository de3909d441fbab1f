from datetime import datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from trainerbook.database import Base


class Booking(Base):
    """Client reservation. Written by the booking/payment flow, read-only here."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True)
    trainer_id: Mapped[int] = mapped_column(ForeignKey("trainer_profiles.id"), index=True)
    client_subject: Mapped[str] = mapped_column(String(255))
    session_type: Mapped[str] = mapped_column(
        String(30), default="personal_training"
    )  # personal_training, group_class
    session_date: Mapped[str] = mapped_column(String(10), index=True)  # "YYYY-MM-DD"
    start_time: Mapped[str] = mapped_column(String(5))
    end_time: Mapped[str] = mapped_column(String(5))
    duration_minutes: Mapped[int] = mapped_column(default=60)
    status: Mapped[str] = mapped_column(
        String(20), default="pending"
    )  # pending, confirmed, completed, cancelled
    notes: Mapped[str | None] = mapped_column(Text, default=None)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
