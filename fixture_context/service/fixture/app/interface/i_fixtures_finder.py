from abc import ABC, abstractmethod
from typing import Sequence

from fixture_context.service.fixture.app.interface.i_application_kernel import (
    IApplicationKernel,
)
from fixture_context.service.fixture.domain.bundle import Bundle


class IFixturesFinder(ABC):
    """Expands bundle and directory references into fixture file paths"""

    @abstractmethod
    def get_fixtures(
        self, kernel: IApplicationKernel, bundles: Sequence[Bundle], environment: str
    ) -> list[str]:
        pass

    @abstractmethod
    def get_fixtures_from_directory(self, directories: Sequence[str]) -> list[str]:
        pass

    @abstractmethod
    def resolve_fixtures(self, kernel: IApplicationKernel, fixtures: Sequence[str]) -> list[str]:
        """Final pass over the accumulated paths, order is preserved"""
        pass
