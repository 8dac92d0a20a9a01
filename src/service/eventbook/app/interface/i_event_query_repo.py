"""
Event Query Repository Interface - read side of the event catalog
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.eventbook.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def get_by_slug(self, *, slug: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_events(self) -> List[EventEntity]:
        """All events ordered by date ascending."""
        pass

    @abstractmethod
    async def list_by_category(
        self, *, category: str, exclude_event_id: str
    ) -> List[EventEntity]:
        pass
