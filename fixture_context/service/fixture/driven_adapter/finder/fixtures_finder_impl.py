import os
from pathlib import Path
from typing import Iterable, Sequence

from fixture_context.platform.exception.exceptions import FixtureFileNotFoundError
from fixture_context.platform.logging.loguru_io import Logger
from fixture_context.service.fixture.app.interface.i_application_kernel import (
    IApplicationKernel,
)
from fixture_context.service.fixture.app.interface.i_fixtures_finder import IFixturesFinder
from fixture_context.service.fixture.domain.bundle import Bundle
from fixture_context.service.fixture.domain.fixture_reference import BUNDLE_PREFIX


class FixturesFinderImpl(IFixturesFinder):
    """
    Filesystem fixtures finder

    Bundle layout:
        {bundle}/fixtures/*.yml              loaded in every environment
        {bundle}/fixtures/{environment}/*    loaded in that environment only

    Files of one directory are returned sorted by path so that load order
    is stable across platforms.
    """

    def __init__(self, *, extensions: Iterable[str]) -> None:
        self._extensions = tuple(ext.lower() for ext in extensions)

    @Logger.io
    def get_fixtures(
        self, kernel: IApplicationKernel, bundles: Sequence[Bundle], environment: str
    ) -> list[str]:
        fixtures: list[str] = []
        for bundle in bundles:
            fixtures.extend(self._files_in(bundle.fixtures_dir, recursive=False))
            fixtures.extend(self._files_in(bundle.fixtures_dir / environment, recursive=False))
        return fixtures

    @Logger.io
    def get_fixtures_from_directory(self, directories: Sequence[str]) -> list[str]:
        fixtures: list[str] = []
        for directory in directories:
            fixtures.extend(self._files_in(Path(directory), recursive=True))
        return fixtures

    @Logger.io
    def resolve_fixtures(self, kernel: IApplicationKernel, fixtures: Sequence[str]) -> list[str]:
        resolved: list[str] = []
        for fixture in fixtures:
            if fixture.startswith(BUNDLE_PREFIX):
                fixture = kernel.locate_resource(fixture)
            path = os.path.realpath(fixture)
            if not os.path.isfile(path):
                raise FixtureFileNotFoundError(fixture)
            resolved.append(path)
        return resolved

    def _files_in(self, directory: Path, *, recursive: bool) -> list[str]:
        if not directory.is_dir():
            return []
        candidates = directory.rglob('*') if recursive else directory.iterdir()
        return sorted(
            str(path)
            for path in candidates
            if path.is_file() and path.suffix.lower() in self._extensions
        )
