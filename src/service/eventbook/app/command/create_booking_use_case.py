import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.connection_manager import ConnectionManager
from src.platform.exception.exceptions import (
    CustomBaseError,
    DuplicateBookingError,
    EventReferenceError,
    InfrastructureError,
    TemporalError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.eventbook.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.eventbook.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.eventbook.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.eventbook.domain.entity.booking_entity import Booking


BOOKING_RESULT_LABELS: dict[type[CustomBaseError], str] = {
    ValidationError: 'validation',
    DuplicateBookingError: 'duplicate',
    EventReferenceError: 'reference',
    TemporalError: 'temporal',
    InfrastructureError: 'infrastructure',
}


class CreateBookingUseCase:
    """
    Booking admission workflow

    Flow (strictly sequential per request):
    1. Validate eventId / userEmail presence (no store access on failure)
    2. Acquire the shared backing store connection
    3. Normalize email, reject an existing (event, email) booking
    4. Admission checks: event exists, event has not already happened
    5. Persist (unique constraint catches a concurrent duplicate)

    Dependencies:
    - connection_manager: lazily established shared engine
    - booking_query_repo / event_query_repo: admission lookups
    - booking_command_repo: insert
    """

    def __init__(
        self,
        *,
        connection_manager: ConnectionManager,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        event_query_repo: IEventQueryRepo,
    ) -> None:
        self.connection_manager = connection_manager
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.event_query_repo = event_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        connection_manager: ConnectionManager = Depends(Provide[Container.connection_manager]),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(
            connection_manager=connection_manager,
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            event_query_repo=event_query_repo,
        )

    @Logger.io
    async def create_booking(
        self, *, event_id: Optional[str], user_email: Optional[str]
    ) -> Booking:
        """
        Admit and persist a booking.

        Raises:
            ValidationError: eventId or userEmail missing/blank
            InfrastructureError: backing store unreachable or write failed
            DuplicateBookingError: the email already holds a booking for the event
            EventReferenceError: the event does not exist
            TemporalError: the event date is in the past
        """
        start_time = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'event.id': str(event_id)},
        ) as span:
            try:
                booking = await self._admit(event_id=event_id, user_email=user_email)
            except CustomBaseError as e:
                result = BOOKING_RESULT_LABELS.get(type(e), 'error')
                span.set_attribute('booking.result', result)
                metrics.record_booking(result=result, duration=time.perf_counter() - start_time)
                raise
            except Exception:
                span.set_attribute('booking.result', 'error')
                metrics.record_booking(result='error', duration=time.perf_counter() - start_time)
                raise

            span.set_attribute('booking.id', booking.id)
            metrics.record_booking(result='created', duration=time.perf_counter() - start_time)
            return booking

    async def _admit(self, *, event_id: Optional[str], user_email: Optional[str]) -> Booking:
        # Step 1: Structural validation (also normalizes the email)
        booking = Booking.create(event_id=event_id, user_email=user_email)  # type: ignore[arg-type]

        # Step 2: Shared connection (coalesced with any in-flight establishment)
        try:
            await self.connection_manager.acquire_connection()
        except Exception as e:
            raise InfrastructureError(str(e)) from e

        # Step 3: Duplicate check on the normalized email
        existing = await self.booking_query_repo.find_by_event_and_email(
            event_id=booking.event_id, user_email=booking.user_email
        )
        if existing:
            raise DuplicateBookingError()

        # Step 4: Admission checks against the referenced event
        event = await self.event_query_repo.get_by_id(event_id=booking.event_id)
        if not event:
            raise EventReferenceError()
        if event.has_occurred():
            raise TemporalError()

        # Step 5: Persist
        created_booking = await self.booking_command_repo.create(booking=booking)

        Logger.base.info(
            f'✅ [CREATE-BOOKING] Booking {created_booking.id} created '
            f'for event {created_booking.event_id}'
        )
        return created_booking
