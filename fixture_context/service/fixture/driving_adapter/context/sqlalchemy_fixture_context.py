from typing import Any, Optional, Self

from sqlalchemy.orm import Session, scoped_session

from fixture_context.service.fixture.app.context.fixture_context import FixtureContext
from fixture_context.service.fixture.app.interface.i_application_kernel import (
    IApplicationKernel,
)
from fixture_context.service.fixture.app.interface.i_persister import IPersister
from fixture_context.service.fixture.driven_adapter.persister.sqlalchemy_persister import (
    SqlAlchemyPersister,
)


FIXTURES_FINDER_SERVICE = 'fixtures_finder'
FIXTURES_LOADER_SERVICE = 'fixtures_loader'
DB_SESSION_SERVICE = 'db_session'


class SqlAlchemyFixtureContext(FixtureContext):
    """Context whose default persister writes through the container's SQLAlchemy session"""

    def set_kernel(self, kernel: IApplicationKernel) -> Self:
        container = kernel.get_container()
        self.init(
            kernel,
            container.get(FIXTURES_FINDER_SERVICE),
            container.get(FIXTURES_LOADER_SERVICE),
            SqlAlchemyPersister(container.get(DB_SESSION_SERVICE)),
        )
        return self

    def wrap_native_persister(self, persister: Any) -> Optional[IPersister]:
        match persister:
            case Session() | scoped_session():
                return SqlAlchemyPersister(persister)
            case _:
                return None
