from typing import Any

from dependency_injector import containers

from fixture_context.platform.exception.exceptions import ServiceNotFoundError
from fixture_context.service.fixture.app.interface.i_service_registry import IServiceRegistry


class ContainerServiceRegistry(IServiceRegistry):
    """Looks services up by provider name on a dependency_injector container"""

    def __init__(self, *, container: containers.Container) -> None:
        self._container = container

    def has(self, service_id: str) -> bool:
        return service_id in self._container.providers

    def get(self, service_id: str) -> Any:
        provider = self._container.providers.get(service_id)
        if provider is None:
            raise ServiceNotFoundError(service_id)
        return provider()
