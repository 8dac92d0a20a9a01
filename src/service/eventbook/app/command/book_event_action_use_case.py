from typing import Optional, Self

from fastapi import Depends

from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.command.create_booking_use_case import CreateBookingUseCase


class BookEventActionUseCase:
    """Form-action flavour of booking admission: reports success instead of raising."""

    def __init__(self, *, create_booking_use_case: CreateBookingUseCase) -> None:
        self.create_booking_use_case = create_booking_use_case

    @classmethod
    def depends(
        cls,
        create_booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
    ) -> Self:
        return cls(create_booking_use_case=create_booking_use_case)

    @Logger.io
    async def book(self, *, event_id: Optional[str], user_email: Optional[str]) -> bool:
        try:
            await self.create_booking_use_case.create_booking(
                event_id=event_id, user_email=user_email
            )
        except Exception as e:
            Logger.base.warning(
                f'⚠️ [BOOK-ACTION] Booking failed for event {event_id}: {type(e).__name__}: {e}'
            )
            return False

        return True
