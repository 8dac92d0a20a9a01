from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.eventbook.domain.entity.event_entity import EventEntity
from src.service.eventbook.driven_adapter.model.event_model import EventModel
from src.service.eventbook.driven_adapter.repo.event_query_repo_impl import model_to_event


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with self.session_factory() as session:
            event_model = EventModel(
                id=event.id,
                title=event.title,
                slug=event.slug,
                description=event.description,
                date=event.date,
                time=event.time,
                location=event.location,
                venue=event.venue,
                category=event.category,
                image=event.image,
                price=event.price,
                capacity=event.capacity,
                attendees=event.attendees,
                organizer=event.organizer,
                created_at=event.created_at,
                updated_at=event.updated_at,
            )
            session.add(event_model)

            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(f'An event with slug "{event.slug}" already exists') from e

            return model_to_event(event_model)
