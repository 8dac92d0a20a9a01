from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.eventbook.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.eventbook.app.interface.i_image_uploader import IImageUploader
from src.service.eventbook.domain.entity.booking_entity import is_blank
from src.service.eventbook.domain.entity.event_entity import EventEntity


MISSING_EVENT_FIELDS = 'Missing required event fields'


class CreateEventUseCase:
    def __init__(
        self, *, event_command_repo: IEventCommandRepo, image_uploader: IImageUploader
    ) -> None:
        self.event_command_repo = event_command_repo
        self.image_uploader = image_uploader
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
        image_uploader: IImageUploader = Depends(Provide[Container.image_uploader]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo, image_uploader=image_uploader)

    @Logger.io(truncate_content=True)
    async def create_event(
        self,
        *,
        title: Optional[str],
        description: Optional[str],
        date: Optional[datetime | str],
        time: Optional[str],
        location: Optional[str],
        venue: Optional[str],
        category: Optional[str],
        capacity: Optional[int],
        organizer: Optional[str],
        price: float = 0,
        image_filename: Optional[str] = None,
        image_content: Optional[bytes] = None,
    ) -> EventEntity:
        """
        Create an event, uploading its image first when one was sent.

        The slug is derived from the title; a slug collision surfaces as ConflictError.
        """
        required = (title, description, date, time, location, venue, category, capacity, organizer)
        if any(is_blank(value) for value in required):
            raise DomainError(MISSING_EVENT_FIELDS, 400)

        with self.tracer.start_as_current_span(
            'use_case.create_event', attributes={'event.title': str(title)}
        ):
            event = EventEntity.create(
                title=title,  # type: ignore[arg-type]
                description=description,  # type: ignore[arg-type]
                date=date,  # type: ignore[arg-type]
                time=time,  # type: ignore[arg-type]
                location=location,  # type: ignore[arg-type]
                venue=venue,  # type: ignore[arg-type]
                category=category,  # type: ignore[arg-type]
                capacity=capacity,  # type: ignore[arg-type]
                organizer=organizer,  # type: ignore[arg-type]
                price=price,
            )

            if image_content:
                event.image = await self.image_uploader.upload(
                    filename=image_filename or '', content=image_content
                )

            created_event = await self.event_command_repo.create(event=event)

        metrics.record_event_created()
        Logger.base.info(f'🎫 [CREATE-EVENT] Created event {created_event.id} ({created_event.slug})')
        return created_event
