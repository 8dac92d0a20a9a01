from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.eventbook.domain.entity.booking_entity import Booking
from src.service.eventbook.domain.entity.event_entity import (
    EventEntity,
    parse_event_date,
    slugify,
)


@pytest.mark.unit
class TestSlugify:
    @pytest.mark.parametrize(
        'title,expected',
        [
            ('Tech Conference', 'tech-conference'),
            ('  React Summit 2026  ', 'react-summit-2026'),
            ('AI & ML: The Future!', 'ai-ml-the-future'),
            ('multi   space\ttitle', 'multi-space-title'),
            ('already-slugged--title', 'already-slugged-title'),
        ],
    )
    def test_slugify(self, title: str, expected: str) -> None:
        assert slugify(title) == expected


@pytest.mark.unit
class TestEventEntity:
    def test_create_derives_slug_and_defaults(
        self, event_factory: Callable[..., EventEntity]
    ) -> None:
        event = event_factory(title='  Python Meetup Taipei ')

        assert event.id
        assert event.title == 'Python Meetup Taipei'
        assert event.slug == 'python-meetup-taipei'
        assert event.image == ''
        assert event.price == 0
        assert event.attendees == 0
        assert event.created_at is not None

    def test_rename_regenerates_slug(self, event_factory: Callable[..., EventEntity]) -> None:
        event = event_factory(title='Old Name')

        renamed = event.rename('Brand New Name')

        assert renamed.slug == 'brand-new-name'
        assert renamed.id == event.id

    @pytest.mark.parametrize(
        'overrides,message',
        [
            ({'title': '   '}, 'Event title cannot be empty'),
            ({'title': 'x' * 101}, 'Event title cannot exceed 100 characters'),
            ({'price': -1}, 'Event price cannot be negative'),
            ({'capacity': 0}, 'Event capacity must be a positive integer'),
            ({'venue': ''}, 'Event venue cannot be empty'),
        ],
    )
    def test_invalid_fields_rejected(
        self, event_factory: Callable[..., EventEntity], overrides: dict, message: str
    ) -> None:
        with pytest.raises(DomainError) as exc_info:
            event_factory(**overrides)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400

    def test_has_occurred(self, event_factory: Callable[..., EventEntity]) -> None:
        now = datetime.now(timezone.utc)

        assert event_factory(days_from_now=-1).has_occurred(now=now)
        assert not event_factory(days_from_now=1).has_occurred(now=now)

    def test_event_dated_exactly_now_has_not_occurred(
        self, event_factory: Callable[..., EventEntity]
    ) -> None:
        event = event_factory(days_from_now=0)

        assert not event.has_occurred(now=event.date)


@pytest.mark.unit
class TestParseEventDate:
    def test_naive_iso_string_is_utc(self) -> None:
        parsed = parse_event_date('2026-12-01T18:30:00')

        assert parsed == datetime(2026, 12, 1, 18, 30, tzinfo=timezone.utc)

    def test_offset_is_preserved(self) -> None:
        parsed = parse_event_date('2026-12-01T18:30:00+08:00')

        assert parsed.utcoffset() == timedelta(hours=8)

    def test_invalid_date_rejected(self) -> None:
        with pytest.raises(DomainError):
            parse_event_date('next friday')


@pytest.mark.unit
class TestBookingEntity:
    def test_create_normalizes_email(self) -> None:
        booking = Booking.create(event_id=' evt-1 ', user_email='  Ann@Example.COM ')

        assert booking.event_id == 'evt-1'
        assert booking.user_email == 'ann@example.com'
        assert booking.id
        assert booking.created_at == booking.updated_at
