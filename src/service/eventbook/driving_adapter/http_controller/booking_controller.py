from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.command.book_event_action_use_case import BookEventActionUseCase
from src.service.eventbook.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.eventbook.driving_adapter.http_controller.schema.booking_schema import (
    BookingActionResponse,
    BookingCreateRequest,
    BookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking'):
        booking = await use_case.create_booking(
            event_id=request.event_id, user_email=request.user_email
        )

    return BookingResponse(
        id=booking.id,
        event_id=booking.event_id,
        user_email=booking.user_email,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
    )


@router.post('/action', status_code=status.HTTP_200_OK)
@Logger.io
async def book_event_action(
    request: BookingCreateRequest,
    use_case: BookEventActionUseCase = Depends(BookEventActionUseCase.depends),
) -> BookingActionResponse:
    """Always 200; failures are reported through the success flag."""
    success = await use_case.book(event_id=request.event_id, user_email=request.user_email)
    return BookingActionResponse(success=success)
