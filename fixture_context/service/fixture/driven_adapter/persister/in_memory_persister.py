from typing import Any, Sequence

from fixture_context.service.fixture.app.interface.i_persister import IPersister


class InMemoryPersister(IPersister):
    def __init__(self) -> None:
        self.objects: list[Any] = []

    def persist(self, objects: Sequence[Any]) -> None:
        self.objects.extend(objects)

    def find(self, model: type, identifier: Any) -> Any:
        return next(
            (
                obj
                for obj in self.objects
                if isinstance(obj, model) and getattr(obj, 'id', None) == identifier
            ),
            None,
        )
