from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import InfrastructureError
from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.eventbook.domain.entity.booking_entity import Booking
from src.service.eventbook.driven_adapter.model.booking_model import BookingModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def find_by_event_and_email(
        self, *, event_id: str, user_email: str
    ) -> Optional[Booking]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(BookingModel).where(
                        BookingModel.event_id == event_id,
                        BookingModel.user_email == user_email,
                    )
                )
                booking_model = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise InfrastructureError(str(e)) from e

        if not booking_model:
            return None

        return Booking(
            id=booking_model.id,
            event_id=booking_model.event_id,
            user_email=booking_model.user_email,
            created_at=booking_model.created_at,
            updated_at=booking_model.updated_at,
        )
