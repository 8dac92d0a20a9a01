from datetime import datetime, timezone
import re
from typing import Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import DomainError


TITLE_MAX_LENGTH = 100

_NON_WORD = re.compile(r'[^\w\s-]')
_WHITESPACE = re.compile(r'\s+')
_REPEATED_HYPHENS = re.compile(r'-+')


def slugify(title: str) -> str:
    """'  Tech Conference: 2025!! ' -> 'tech-conference-2025'"""
    slug = title.lower().strip()
    slug = _NON_WORD.sub('', slug)
    slug = _WHITESPACE.sub('-', slug)
    return _REPEATED_HYPHENS.sub('-', slug)


def parse_event_date(value: datetime | str) -> datetime:
    """ISO date or datetime; naive values are taken as UTC."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            raise DomainError(f'Invalid event date: {value}', 400)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Event {attribute.name} cannot be empty', 400)


def _validate_title(instance: object, attribute: attrs.Attribute, value: str) -> None:
    _validate_non_empty_string(instance, attribute, value)
    if len(value.strip()) > TITLE_MAX_LENGTH:
        raise DomainError(f'Event title cannot exceed {TITLE_MAX_LENGTH} characters', 400)


def _validate_price(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if value < 0:
        raise DomainError('Event price cannot be negative', 400)


def _validate_capacity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise DomainError('Event capacity must be a positive integer', 400)


@attrs.define
class EventEntity:
    title: str = attrs.field(validator=_validate_title)
    slug: str
    description: str = attrs.field(validator=_validate_non_empty_string)
    date: datetime
    time: str = attrs.field(validator=_validate_non_empty_string)
    location: str = attrs.field(validator=_validate_non_empty_string)
    venue: str = attrs.field(validator=_validate_non_empty_string)
    category: str = attrs.field(validator=_validate_non_empty_string)
    capacity: int = attrs.field(validator=_validate_capacity)
    organizer: str = attrs.field(validator=_validate_non_empty_string)
    image: str = ''
    price: float = attrs.field(default=0, validator=_validate_price)
    attendees: int = 0
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        date: datetime | str,
        time: str,
        location: str,
        venue: str,
        category: str,
        capacity: int,
        organizer: str,
        price: float = 0,
        image: str = '',
    ) -> 'EventEntity':
        now = datetime.now(timezone.utc)
        title = title.strip() if title else title
        return cls(
            id=str(uuid_utils.uuid7()),
            title=title,
            slug=slugify(title or ''),
            description=description.strip() if description else description,
            date=parse_event_date(date),
            time=time,
            location=location,
            venue=venue,
            category=category,
            capacity=capacity,
            organizer=organizer,
            price=price,
            image=image,
            created_at=now,
            updated_at=now,
        )

    def rename(self, title: str) -> 'EventEntity':
        """Slug follows the title."""
        title = title.strip() if title else title
        return attrs.evolve(
            self, title=title, slug=slugify(title or ''), updated_at=datetime.now(timezone.utc)
        )

    def has_occurred(self, *, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return parse_event_date(self.date) < now
