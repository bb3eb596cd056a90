from abc import ABC, abstractmethod
from typing import Any


class IServiceRegistry(ABC):
    """Service locator consulted when a step names a service by its id"""

    @abstractmethod
    def get(self, service_id: str) -> Any:
        """Raise ServiceNotFoundError when nothing is registered under service_id"""
        pass

    @abstractmethod
    def has(self, service_id: str) -> bool:
        pass
