"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.hotel.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl
from src.service.hotel.driven_adapter.sink.elasticsearch_event_sink_impl import (
    ElasticsearchEventSinkImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Read side (stateless - opens a session per call)
    room_query_repo = providers.Singleton(
        RoomQueryRepoImpl, session_factory=database.provided.session
    )

    # Write side: a fresh unit of work per operation.
    # Use cases receive the provider itself (Container.unit_of_work.provider) as a factory.
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, database=database)

    # Event sink (fire-and-forget log shipping to Elasticsearch)
    event_sink = providers.Singleton(
        ElasticsearchEventSinkImpl,
        base_url=config_service.provided.ELASTIC_URL,
        index=config_service.provided.ELASTIC_INDEX,
        username=config_service.provided.ELASTIC_USERNAME,
        password=config_service.provided.ELASTIC_PASSWORD.get_secret_value.call(),
        timeout=config_service.provided.ELASTIC_TIMEOUT,
    )


container = Container()
