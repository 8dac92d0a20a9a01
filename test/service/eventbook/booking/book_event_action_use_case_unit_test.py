from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DuplicateBookingError, InfrastructureError
from src.service.eventbook.app.command.book_event_action_use_case import BookEventActionUseCase


@pytest.fixture
def mock_create_booking_use_case() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def action_use_case(mock_create_booking_use_case: AsyncMock) -> BookEventActionUseCase:
    return BookEventActionUseCase(create_booking_use_case=mock_create_booking_use_case)


@pytest.mark.unit
class TestBookEventActionUseCase:
    @pytest.mark.asyncio
    async def test_returns_true_when_booking_created(
        self, action_use_case: BookEventActionUseCase, mock_create_booking_use_case: AsyncMock
    ) -> None:
        result = await action_use_case.book(event_id='evt-1', user_email='ann@example.com')

        assert result is True
        mock_create_booking_use_case.create_booking.assert_awaited_once_with(
            event_id='evt-1', user_email='ann@example.com'
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'error', [DuplicateBookingError(), InfrastructureError('connection refused'), KeyError()]
    )
    async def test_returns_false_instead_of_raising(
        self,
        action_use_case: BookEventActionUseCase,
        mock_create_booking_use_case: AsyncMock,
        error: Exception,
    ) -> None:
        mock_create_booking_use_case.create_booking.side_effect = error

        result = await action_use_case.book(event_id='evt-1', user_email='ann@example.com')

        assert result is False
