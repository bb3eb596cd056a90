from typing import Any, Sequence

from sqlalchemy.orm import Session, scoped_session

from fixture_context.platform.logging.loguru_io import Logger
from fixture_context.service.fixture.app.interface.i_persister import IPersister


class SqlAlchemyPersister(IPersister):
    """Persists fixture objects through a SQLAlchemy session"""

    def __init__(self, session: Session | scoped_session, *, flush_only: bool = False) -> None:
        self.session = session
        self.flush_only = flush_only

    @Logger.io(truncate_content=True)
    def persist(self, objects: Sequence[Any]) -> None:
        self.session.add_all(objects)
        try:
            if self.flush_only:
                self.session.flush()
            else:
                self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def find(self, model: type, identifier: Any) -> Any:
        return self.session.get(model, identifier)
