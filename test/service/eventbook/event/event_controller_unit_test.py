from typing import Callable, Iterator
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.constant.route_constant import EVENT_CREATE, EVENT_GET, EVENT_LIST, EVENT_SIMILAR
from src.service.eventbook.app.command.create_event_use_case import CreateEventUseCase
from src.service.eventbook.app.query.get_event_use_case import GetEventUseCase
from src.service.eventbook.app.query.list_events_use_case import ListEventsUseCase
from src.service.eventbook.app.query.list_similar_events_use_case import (
    ListSimilarEventsUseCase,
)
from src.service.eventbook.domain.entity.event_entity import EventEntity
from test.shared.in_memory_repo import InMemoryEventRepo


@pytest.fixture
def mock_image_uploader() -> AsyncMock:
    uploader = AsyncMock()
    uploader.upload.return_value = '/static/events/poster.jpg'
    return uploader


@pytest.fixture
def client(event_repo: InMemoryEventRepo, mock_image_uploader: AsyncMock) -> Iterator[TestClient]:
    app = create_app(title_suffix=' (Test)')
    app.dependency_overrides[ListEventsUseCase.depends] = lambda: ListEventsUseCase(
        event_query_repo=event_repo
    )
    app.dependency_overrides[GetEventUseCase.depends] = lambda: GetEventUseCase(
        event_query_repo=event_repo
    )
    app.dependency_overrides[ListSimilarEventsUseCase.depends] = (
        lambda: ListSimilarEventsUseCase(event_query_repo=event_repo)
    )
    app.dependency_overrides[CreateEventUseCase.depends] = lambda: CreateEventUseCase(
        event_command_repo=event_repo, image_uploader=mock_image_uploader
    )

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def event_form() -> dict[str, str]:
    return {
        'title': 'Indie Game Expo',
        'description': 'Play upcoming indie titles',
        'date': '2031-03-15T10:00:00Z',
        'time': '10:00 AM',
        'location': 'Tokyo',
        'venue': 'Makuhari Messe',
        'category': 'gaming',
        'capacity': '1000',
        'organizer': 'Indie Collective',
        'price': '25',
    }


@pytest.mark.unit
class TestEventQueryEndpoints:
    def test_list_events_sorted_by_date(
        self,
        client: TestClient,
        event_factory: Callable[..., EventEntity],
        event_repo: InMemoryEventRepo,
    ) -> None:
        event_repo.add(event_factory(title='Later', days_from_now=90))
        event_repo.add(event_factory(title='Sooner', days_from_now=3))

        response = client.get(EVENT_LIST)

        assert response.status_code == 200
        assert [e['slug'] for e in response.json()] == ['sooner', 'later']

    def test_get_event_by_slug(
        self,
        client: TestClient,
        event_factory: Callable[..., EventEntity],
        event_repo: InMemoryEventRepo,
    ) -> None:
        event = event_repo.add(event_factory(title='Night Market'))

        response = client.get(EVENT_GET.format(slug='night-market'))

        assert response.status_code == 200
        body = response.json()
        assert body['id'] == event.id
        assert body['createdAt']

    def test_get_unknown_event_returns_404(self, client: TestClient) -> None:
        response = client.get(EVENT_GET.format(slug='missing-event'))

        assert response.status_code == 404
        assert response.json() == {'error': 'Event not found'}

    def test_similar_events(
        self,
        client: TestClient,
        event_factory: Callable[..., EventEntity],
        event_repo: InMemoryEventRepo,
    ) -> None:
        event_repo.add(event_factory(title='Chess Open', category='games'))
        event_repo.add(event_factory(title='Go Tournament', category='games'))
        event_repo.add(event_factory(title='Poetry Slam', category='arts'))

        response = client.get(EVENT_SIMILAR.format(slug='chess-open'))

        assert response.status_code == 200
        assert [e['slug'] for e in response.json()] == ['go-tournament']


@pytest.mark.unit
class TestCreateEventEndpoint:
    def test_create_event_with_image(
        self,
        client: TestClient,
        mock_image_uploader: AsyncMock,
        event_form: dict[str, str],
    ) -> None:
        response = client.post(
            EVENT_CREATE,
            data=event_form,
            files={'image': ('poster.jpg', b'\xff\xd8\xff', 'image/jpeg')},
        )

        assert response.status_code == 201
        body = response.json()
        assert body['message'] == 'Event created successfully'
        assert body['event']['slug'] == 'indie-game-expo'
        assert body['event']['image'] == '/static/events/poster.jpg'
        assert body['event']['capacity'] == 1000
        mock_image_uploader.upload.assert_awaited_once()

    def test_create_event_missing_fields_returns_400(
        self, client: TestClient, event_form: dict[str, str]
    ) -> None:
        del event_form['venue']

        response = client.post(EVENT_CREATE, data=event_form)

        assert response.status_code == 400
        assert response.json() == {'error': 'Missing required event fields'}

    def test_create_event_duplicate_title_returns_409(
        self, client: TestClient, event_form: dict[str, str]
    ) -> None:
        assert client.post(EVENT_CREATE, data=event_form).status_code == 201

        response = client.post(EVENT_CREATE, data=event_form)

        assert response.status_code == 409
