"""
https://python-dependency-injector.ets-labs.org/index.html

Provider names double as service ids: a step naming the persister
"in_memory_persister" gets container.in_memory_persister().
"""

from dependency_injector import containers, providers

from fixture_context.platform.config.core_setting import Settings
from fixture_context.platform.database.orm_db_setting import Database, init_session
from fixture_context.service.fixture.driven_adapter.finder.fixtures_finder_impl import (
    FixturesFinderImpl,
)
from fixture_context.service.fixture.driven_adapter.kernel.application_kernel import (
    ApplicationKernel,
)
from fixture_context.service.fixture.driven_adapter.loader.fixtures_loader_impl import (
    FixturesLoaderImpl,
)
from fixture_context.service.fixture.driven_adapter.persister.in_memory_persister import (
    InMemoryPersister,
)
from fixture_context.service.fixture.driven_adapter.persister.sqlalchemy_persister import (
    SqlAlchemyPersister,
)
from fixture_context.service.fixture.driven_adapter.registry.container_service_registry import (
    ContainerServiceRegistry,
)


class Container(containers.DeclarativeContainer):
    __self__ = providers.Self()

    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (one engine per URL, one session per scenario)
    database = providers.Singleton(Database, url=config_service.provided.DATABASE_URL)
    db_session = providers.Resource(init_session, database=database)

    # Persisters
    sqlalchemy_persister = providers.Singleton(SqlAlchemyPersister, db_session)
    in_memory_persister = providers.Singleton(InMemoryPersister)

    # Fixture collaborators
    fixtures_finder = providers.Singleton(
        FixturesFinderImpl, extensions=config_service.provided.FIXTURE_FILE_EXTENSIONS
    )
    fixtures_loader = providers.Singleton(FixturesLoaderImpl)

    # Kernel
    service_registry = providers.Singleton(ContainerServiceRegistry, container=__self__)
    kernel = providers.Singleton(
        ApplicationKernel,
        container=service_registry,
        environment=config_service.provided.APP_ENV,
        bundles=config_service.provided.FIXTURE_BUNDLES,
    )


container = Container()


def cleanup() -> None:
    """End of scenario: close the session and forget per-scenario singletons"""
    container.shutdown_resources()
    container.reset_singletons()
