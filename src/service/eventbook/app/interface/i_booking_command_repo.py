"""
Booking Command Repository Interface

Write side of the booking admission workflow.
"""

from abc import ABC, abstractmethod

from src.service.eventbook.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Insert a new booking

        Returns:
            Persisted booking with store-assigned timestamps

        Raises:
            DuplicateBookingError: (event_id, user_email) already booked (unique constraint)
            InfrastructureError: Store failure or write timeout
        """
        pass
