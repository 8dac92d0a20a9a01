from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.eventbook.domain.entity.event_entity import EventEntity


class ListSimilarEventsUseCase:
    """Events sharing a category with the given one. Best effort: never raises."""

    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def list_similar(self, *, slug: str) -> List[EventEntity]:
        try:
            event = await self.event_query_repo.get_by_slug(slug=slug)
            if not event:
                return []

            return await self.event_query_repo.list_by_category(
                category=event.category, exclude_event_id=event.id or ''
            )
        except Exception as e:
            Logger.base.warning(
                f'⚠️ [SIMILAR_EVENTS] Lookup failed for {slug}: {type(e).__name__}: {e}'
            )
            return []
