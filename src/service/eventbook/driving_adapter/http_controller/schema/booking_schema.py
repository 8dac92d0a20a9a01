from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BookingCreateRequest(BaseModel):
    # Presence is checked by the admission workflow so blank values map to the same error
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'examples': [
                {'eventId': '01936d8f-5e73-7c4e-a9c5-123456789abc', 'userEmail': 'ann@example.com'}
            ]
        },
    )

    event_id: Optional[str] = None
    user_email: Optional[str] = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': '01936d8f-6a10-7c4e-a9c5-abcdef012345',  # UUID7
                'eventId': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'userEmail': 'ann@example.com',
                'createdAt': '2025-01-10T10:30:00Z',
                'updatedAt': '2025-01-10T10:30:00Z',
            }
        },
    )

    id: str
    event_id: str
    user_email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingActionResponse(BaseModel):
    success: bool
