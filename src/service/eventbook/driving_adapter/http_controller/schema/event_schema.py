from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EventResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'title': 'React Summit',
                'slug': 'react-summit',
                'description': 'The biggest React conference',
                'date': '2026-11-20T00:00:00Z',
                'time': '09:00 AM',
                'location': 'Amsterdam, NL',
                'venue': 'Kromhouthal',
                'category': 'conference',
                'image': '/static/events/01936d8f-7777-7c4e-a9c5-123456789abc.png',
                'price': 0,
                'capacity': 500,
                'attendees': 0,
                'organizer': 'GitNation',
            }
        },
    )

    id: str
    title: str
    slug: str
    description: str
    date: datetime
    time: str
    location: str
    venue: str
    category: str
    image: str = ''
    price: float = 0
    capacity: int
    attendees: int = 0
    organizer: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventCreateResponse(BaseModel):
    event: EventResponse
    message: str = 'Event created successfully'
