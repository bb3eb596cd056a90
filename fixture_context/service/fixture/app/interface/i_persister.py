from abc import ABC, abstractmethod
from typing import Any, Sequence


class IPersister(ABC):
    """Writes fixture-built objects into a persistence layer"""

    @abstractmethod
    def persist(self, objects: Sequence[Any]) -> None:
        pass

    @abstractmethod
    def find(self, model: type, identifier: Any) -> Any:
        """Return the persisted instance of model with identifier, or None"""
        pass
