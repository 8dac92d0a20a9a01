from datetime import datetime, timezone
from typing import Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import ValidationError


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_blank(value: object) -> bool:
    return value is None or not str(value).strip()


@attrs.define
class Booking:
    id: str
    event_id: str
    user_email: str = attrs.field(converter=normalize_email)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, event_id: str, user_email: str) -> 'Booking':
        if is_blank(event_id) or is_blank(user_email):
            raise ValidationError()

        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid_utils.uuid7()),
            event_id=event_id.strip(),
            user_email=user_email,
            created_at=now,
            updated_at=now,
        )
