from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


BOOKING_EVENT_EMAIL_UNIQUE = 'uq_booking_event_id_user_email'


class BookingModel(Base):
    __tablename__ = 'booking'
    # Authoritative duplicate guard; the use case lookup is only the fast path
    __table_args__ = (
        UniqueConstraint('event_id', 'user_email', name=BOOKING_EVENT_EMAIL_UNIQUE),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7
    event_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('event.id'), nullable=False, index=True
    )
    user_email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
