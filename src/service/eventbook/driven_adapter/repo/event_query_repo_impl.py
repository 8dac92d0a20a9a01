"""
Event Query Repository Implementation - read side of the event catalog

Store failures surface as InfrastructureError.
"""

from contextlib import contextmanager
from typing import AsyncContextManager, Callable, Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import InfrastructureError
from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.eventbook.domain.entity.event_entity import EventEntity
from src.service.eventbook.driven_adapter.model.event_model import EventModel


def model_to_event(event_model: EventModel) -> EventEntity:
    return EventEntity(
        id=event_model.id,
        title=event_model.title,
        slug=event_model.slug,
        description=event_model.description,
        date=event_model.date,
        time=event_model.time,
        location=event_model.location,
        venue=event_model.venue,
        category=event_model.category,
        image=event_model.image,
        price=event_model.price,
        capacity=event_model.capacity,
        attendees=event_model.attendees,
        organizer=event_model.organizer,
        created_at=event_model.created_at,
        updated_at=event_model.updated_at,
    )


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        raise InfrastructureError(str(e)) from e


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        with _store_errors():
            async with self.session_factory() as session:
                event_model = await session.get(EventModel, event_id)
                return model_to_event(event_model) if event_model else None

    @Logger.io
    async def get_by_slug(self, *, slug: str) -> Optional[EventEntity]:
        with _store_errors():
            async with self.session_factory() as session:
                result = await session.execute(select(EventModel).where(EventModel.slug == slug))
                event_model = result.scalar_one_or_none()
                return model_to_event(event_model) if event_model else None

    @Logger.io
    async def list_events(self) -> List[EventEntity]:
        with _store_errors():
            async with self.session_factory() as session:
                result = await session.execute(select(EventModel).order_by(EventModel.date.asc()))
                return [model_to_event(model) for model in result.scalars().all()]

    @Logger.io
    async def list_by_category(
        self, *, category: str, exclude_event_id: str
    ) -> List[EventEntity]:
        with _store_errors():
            async with self.session_factory() as session:
                result = await session.execute(
                    select(EventModel)
                    .where(EventModel.category == category, EventModel.id != exclude_event_id)
                    .order_by(EventModel.date.asc())
                )
                return [model_to_event(model) for model in result.scalars().all()]
