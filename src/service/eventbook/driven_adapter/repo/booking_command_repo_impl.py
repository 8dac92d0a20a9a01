"""
Booking Command Repository Implementation

Inserts go through the shared engine owned by ConnectionManager. The
(event_id, user_email) unique constraint turns a lost duplicate-check race into
DuplicateBookingError instead of a second row.
"""

import asyncio
from typing import AsyncContextManager, Callable, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import (
    DuplicateBookingError,
    EventReferenceError,
    InfrastructureError,
)
from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.eventbook.domain.entity.booking_entity import Booking
from src.service.eventbook.driven_adapter.model.booking_model import (
    BOOKING_EVENT_EMAIL_UNIQUE,
    BookingModel,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        write_timeout: Optional[float] = None,
    ) -> None:
        self.session_factory = session_factory
        self.write_timeout = write_timeout

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self.session_factory() as session:
            booking_model = BookingModel(
                id=booking.id,
                event_id=booking.event_id,
                user_email=booking.user_email,
                created_at=booking.created_at,
                updated_at=booking.updated_at,
            )
            session.add(booking_model)

            try:
                await asyncio.wait_for(session.commit(), timeout=self.write_timeout)
            except IntegrityError as e:
                await session.rollback()
                raise self._map_integrity_error(e) from e
            except asyncio.TimeoutError as e:
                raise InfrastructureError('Timed out writing booking') from e
            except (SQLAlchemyError, OSError) as e:
                raise InfrastructureError(str(e)) from e

            Logger.base.info(
                f'📝 [BOOKING] Persisted booking {booking_model.id} '
                f'for event {booking_model.event_id}'
            )
            return self._model_to_entity(booking_model)

    @staticmethod
    def _map_integrity_error(e: IntegrityError) -> Exception:
        detail = str(e.orig).lower()
        if BOOKING_EVENT_EMAIL_UNIQUE in detail:
            return DuplicateBookingError()
        if 'foreign key' in detail:
            return EventReferenceError()
        return InfrastructureError(str(e.orig))

    @staticmethod
    def _model_to_entity(booking_model: BookingModel) -> Booking:
        return Booking(
            id=booking_model.id,
            event_id=booking_model.event_id,
            user_email=booking_model.user_email,
            created_at=booking_model.created_at,
            updated_at=booking_model.updated_at,
        )
