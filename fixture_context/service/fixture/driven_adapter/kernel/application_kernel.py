from importlib.util import find_spec
from pathlib import Path
from typing import Mapping, Optional

from fixture_context.platform.exception.exceptions import (
    BundleNotFoundError,
    FixtureFileNotFoundError,
)
from fixture_context.platform.logging.loguru_io import Logger
from fixture_context.service.fixture.app.interface.i_application_kernel import (
    IApplicationKernel,
)
from fixture_context.service.fixture.app.interface.i_service_registry import IServiceRegistry
from fixture_context.service.fixture.domain.bundle import Bundle
from fixture_context.service.fixture.domain.fixture_reference import BUNDLE_PREFIX


class ApplicationKernel(IApplicationKernel):
    """
    Application seen by the fixture context

    Bundles are either registered explicitly (name -> directory) or resolved
    as importable Python packages, in that order.
    """

    def __init__(
        self,
        *,
        container: IServiceRegistry,
        environment: str,
        bundles: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._container = container
        self._environment = environment
        self._bundles = dict(bundles or {})

    def register_bundle(self, name: str, path: str) -> None:
        self._bundles[name] = path

    def get_environment(self) -> str:
        return self._environment

    def get_container(self) -> IServiceRegistry:
        return self._container

    @Logger.io
    def get_bundle(self, name: str) -> Bundle:
        if name in self._bundles:
            return Bundle(name=name, path=self._bundles[name])

        package_dir = self._find_package_dir(name)
        if package_dir is None:
            raise BundleNotFoundError(name)
        return Bundle(name=name, path=package_dir)

    def locate_resource(self, name: str) -> str:
        bundle_name, _, relative_path = name.removeprefix(BUNDLE_PREFIX).partition('/')
        if not name.startswith(BUNDLE_PREFIX) or not relative_path:
            raise FixtureFileNotFoundError(name)

        resource = Path(self.get_bundle(bundle_name).path) / relative_path
        if not resource.is_file():
            raise FixtureFileNotFoundError(name)
        return str(resource)

    @staticmethod
    def _find_package_dir(name: str) -> Optional[str]:
        try:
            spec = find_spec(name)
        except (ImportError, ValueError):
            return None
        if spec is None or not spec.submodule_search_locations:
            return None
        return next(iter(spec.submodule_search_locations))
