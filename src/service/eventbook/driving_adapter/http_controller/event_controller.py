from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.command.create_event_use_case import CreateEventUseCase
from src.service.eventbook.app.query.get_event_use_case import GetEventUseCase
from src.service.eventbook.app.query.list_events_use_case import ListEventsUseCase
from src.service.eventbook.app.query.list_similar_events_use_case import ListSimilarEventsUseCase
from src.service.eventbook.domain.entity.event_entity import EventEntity
from src.service.eventbook.driving_adapter.http_controller.schema.event_schema import (
    EventCreateResponse,
    EventResponse,
)


router = APIRouter()


def to_event_response(event: EventEntity) -> EventResponse:
    return EventResponse(
        id=event.id or '',
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


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_events()
    return [to_event_response(event) for event in events]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io(truncate_content=True)
async def create_event(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    time: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    venue: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    capacity: Optional[int] = Form(None),
    organizer: Optional[str] = Form(None),
    price: float = Form(0),
    image: Optional[UploadFile] = File(None),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventCreateResponse:
    image_content = await image.read() if image else None

    event = await use_case.create_event(
        title=title,
        description=description,
        date=date,
        time=time,
        location=location,
        venue=venue,
        category=category,
        capacity=capacity,
        organizer=organizer,
        price=price,
        image_filename=image.filename if image else None,
        image_content=image_content,
    )

    return EventCreateResponse(event=to_event_response(event))


@router.get('/{slug}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    slug: str,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.get_by_slug(slug=slug)
    return to_event_response(event)


@router.get('/{slug}/similar', status_code=status.HTTP_200_OK)
@Logger.io
async def list_similar_events(
    slug: str,
    use_case: ListSimilarEventsUseCase = Depends(ListSimilarEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_similar(slug=slug)
    return [to_event_response(event) for event in events]
