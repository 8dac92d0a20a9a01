from abc import ABC, abstractmethod

from src.service.eventbook.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        """
        Raises:
            ConflictError: Slug already taken
        """
        pass
