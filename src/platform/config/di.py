"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.connection_manager import ConnectionManager, build_engine_connector
from src.service.eventbook.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.eventbook.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.eventbook.driven_adapter.repo.event_command_repo_impl import EventCommandRepoImpl
from src.service.eventbook.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.eventbook.driven_adapter.storage.static_image_uploader_impl import (
    StaticImageUploaderImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Backing store (one lazily established engine per process)
    # Built on first use; a missing DATABASE_URL raises ConfigurationError here
    connection_manager = providers.Singleton(
        ConnectionManager,
        database_url=config_service.provided.DATABASE_URL,
        connector=providers.Callable(
            build_engine_connector,
            pool_size=config_service.provided.DB_POOL_SIZE,
            max_overflow=config_service.provided.DB_POOL_MAX_OVERFLOW,
            pool_timeout=config_service.provided.DB_POOL_TIMEOUT,
            pool_recycle=config_service.provided.DB_POOL_RECYCLE,
        ),
        connect_timeout=config_service.provided.DB_CONNECT_TIMEOUT,
    )

    # Repositories (stateless - use session_factory per-request)
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl,
        session_factory=connection_manager.provided.session,
        write_timeout=config_service.provided.DB_WRITE_TIMEOUT,
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=connection_manager.provided.session
    )
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=connection_manager.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=connection_manager.provided.session
    )

    # Storage
    image_uploader = providers.Singleton(
        StaticImageUploaderImpl,
        static_dir=config_service.provided.STATIC_DIR,
        image_folder=config_service.provided.EVENT_IMAGE_FOLDER,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
