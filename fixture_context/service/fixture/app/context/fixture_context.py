"""
Fixture context for BDD scenarios

One context is created per scenario. It is built in two steps because the
test runner instantiates it before services are available:

    context = SqlAlchemyFixtureContext(base_path='/app/tests')
    context.init(kernel, fixtures_finder, loader, persister)   # or set_kernel(kernel)

Fixture references are resolved by fixture_reference.classify_references;
bundle and directory references are expanded by the finder and appended after
the direct references, bundles first.
"""

from abc import ABC, abstractmethod
import os
from typing import Any, Iterable, Optional, Self, Sequence, final

from sqlalchemy.orm import Session, scoped_session

from fixture_context.platform.exception.exceptions import (
    ContextNotInitializedError,
    InvalidPersisterError,
)
from fixture_context.platform.logging.loguru_io import Logger
from fixture_context.service.fixture.app.interface.i_application_kernel import (
    IApplicationKernel,
)
from fixture_context.service.fixture.app.interface.i_fixtures_finder import IFixturesFinder
from fixture_context.service.fixture.app.interface.i_fixtures_loader import IFixturesLoader
from fixture_context.service.fixture.app.interface.i_persister import IPersister
from fixture_context.service.fixture.domain.fixture_reference import IsDir, classify_references


PersisterArgument = IPersister | Session | scoped_session | str | None


class FixtureContext(ABC):
    def __init__(self, base_path: Optional[str] = None, *, is_dir: IsDir = os.path.isdir) -> None:
        self.base_path = base_path
        self.is_dir = is_dir
        self.kernel: Optional[IApplicationKernel] = None
        self.fixtures_finder: Optional[IFixturesFinder] = None
        self.loader: Optional[IFixturesLoader] = None
        self.persister: Optional[IPersister] = None

    @final
    def init(
        self,
        kernel: IApplicationKernel,
        fixtures_finder: IFixturesFinder,
        loader: IFixturesLoader,
        persister: IPersister,
        base_path: Optional[str] = None,
    ) -> None:
        self.kernel = kernel
        self.fixtures_finder = fixtures_finder
        self.loader = loader
        self.persister = persister

        if base_path is not None:
            self.base_path = base_path

    @abstractmethod
    def set_kernel(self, kernel: IApplicationKernel) -> Self:
        """Wire the collaborators from the kernel's services and return self"""
        pass

    @final
    def set_base_path(self, base_path: str) -> Self:
        self.base_path = base_path
        return self

    @final
    def get_base_path(self) -> Optional[str]:
        return self.base_path

    @property
    def is_initialized(self) -> bool:
        return None not in (self.kernel, self.fixtures_finder, self.loader, self.persister)

    def cast_service_id_to_service(self, service_id: str) -> Any:
        kernel = self._require_initialized().kernel
        return kernel.get_container().get(service_id)  # type: ignore[union-attr]

    def cast_service_id_to_persister(self, service_id: str) -> IPersister:
        return self.resolve_persister(self.cast_service_id_to_service(service_id))

    @Logger.io
    def there_are_fixtures(self, fixtures_file: str, persister: PersisterArgument = None) -> None:
        self.load_fixtures([fixtures_file], persister)

    @Logger.io
    def there_are_several_fixtures(
        self, fixtures_file_rows: Iterable[Sequence[str]], persister: PersisterArgument = None
    ) -> None:
        self.load_fixtures([row[0] for row in fixtures_file_rows], persister)

    def load_fixtures(
        self, fixtures_files: Sequence[str], persister: PersisterArgument = None
    ) -> None:
        self._require_initialized()
        kernel, finder = self.kernel, self.fixtures_finder
        assert kernel is not None and finder is not None and self.loader is not None

        match persister:
            case str():
                resolved_persister = self.cast_service_id_to_persister(persister)
            case _:
                resolved_persister = self.resolve_persister(persister)

        classified = classify_references(
            fixtures_files, base_path=self.base_path, is_dir=self.is_dir
        )
        files = list(classified.files)

        if classified.bundle_names:
            bundles = [kernel.get_bundle(name) for name in classified.bundle_names]
            files.extend(finder.get_fixtures(kernel, bundles, kernel.get_environment()))

        if classified.directories:
            files.extend(finder.get_fixtures_from_directory(classified.directories))

        resolved = finder.resolve_fixtures(kernel, files)
        Logger.base.info(
            f'📦 [FIXTURE] Loading {len(resolved)} fixtures files '
            f'with {type(resolved_persister).__name__}'
        )
        self.loader.load(resolved_persister, resolved)

    @final
    def resolve_persister(
        self, persister: IPersister | Session | scoped_session | None
    ) -> IPersister:
        match persister:
            case None:
                default = self._require_initialized().persister
                assert default is not None
                return default
            case IPersister():
                return persister
            case _:
                wrapped = self.wrap_native_persister(persister)
                if wrapped is None:
                    raise InvalidPersisterError(
                        'Invalid persister type, expected '
                        f'{IPersister.__module__}.{IPersister.__qualname__} or '
                        f'sqlalchemy.orm.Session. Got {type(persister).__qualname__} instead.'
                    )
                return wrapped

    def wrap_native_persister(self, persister: Any) -> Optional[IPersister]:
        """Adapt a native ORM handle (e.g. a SQLAlchemy session), None when unsupported"""
        return None

    def _require_initialized(self) -> Self:
        if not self.is_initialized:
            raise ContextNotInitializedError(type(self).__name__)
        return self
