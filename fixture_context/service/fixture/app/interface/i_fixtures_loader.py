from abc import ABC, abstractmethod
from typing import Any, Sequence

from fixture_context.service.fixture.app.interface.i_persister import IPersister


class IFixturesLoader(ABC):
    """Parses fixture files into objects and hands them to a persister"""

    @abstractmethod
    def load(self, persister: IPersister, fixtures: Sequence[str]) -> dict[str, Any]:
        """Return the loaded objects keyed by their fixture reference"""
        pass
