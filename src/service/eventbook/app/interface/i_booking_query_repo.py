from abc import ABC, abstractmethod
from typing import Optional

from src.service.eventbook.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def find_by_event_and_email(
        self, *, event_id: str, user_email: str
    ) -> Optional[Booking]:
        """Existing booking for the pair, or None. Email must already be normalized."""
        pass
