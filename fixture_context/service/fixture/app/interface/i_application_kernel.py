from abc import ABC, abstractmethod

from fixture_context.service.fixture.app.interface.i_service_registry import IServiceRegistry
from fixture_context.service.fixture.domain.bundle import Bundle


class IApplicationKernel(ABC):
    """Running application: knows its bundles, environment and services"""

    @abstractmethod
    def get_bundle(self, name: str) -> Bundle:
        """Raise BundleNotFoundError when no bundle is named name"""
        pass

    @abstractmethod
    def get_environment(self) -> str:
        pass

    @abstractmethod
    def get_container(self) -> IServiceRegistry:
        pass

    @abstractmethod
    def locate_resource(self, name: str) -> str:
        """Turn "@Bundle/path/to/file" into an absolute path"""
        pass
