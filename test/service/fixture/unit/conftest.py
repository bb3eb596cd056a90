"""
Unit test configuration for the fixture context.

Collaborators are MagicMocks specced on their interfaces; the finder mock
returns its input unchanged from resolve_fixtures so assertions can look at
the list handed to the loader.
"""

from typing import Self
from unittest.mock import MagicMock

import pytest

from fixture_context.service.fixture.app.context.fixture_context import FixtureContext
from fixture_context.service.fixture.app.interface.i_application_kernel import (
    IApplicationKernel,
)
from fixture_context.service.fixture.app.interface.i_fixtures_finder import IFixturesFinder
from fixture_context.service.fixture.app.interface.i_fixtures_loader import IFixturesLoader
from fixture_context.service.fixture.app.interface.i_persister import IPersister
from fixture_context.service.fixture.app.interface.i_service_registry import IServiceRegistry
from fixture_context.service.fixture.domain.bundle import Bundle


BASE_PATH = '/app/tests'
EXISTING_DIRECTORIES = {'/abs/dir', '/srv/fixtures'}


class StubFixtureContext(FixtureContext):
    def set_kernel(self, kernel: IApplicationKernel) -> Self:
        return self


def fake_is_dir(path: str) -> bool:
    return path in EXISTING_DIRECTORIES


@pytest.fixture
def service_registry() -> MagicMock:
    return MagicMock(spec=IServiceRegistry)


@pytest.fixture
def kernel(service_registry: MagicMock) -> MagicMock:
    kernel = MagicMock(spec=IApplicationKernel)
    kernel.get_container.return_value = service_registry
    kernel.get_environment.return_value = 'test'
    kernel.get_bundle.side_effect = lambda name: Bundle(name=name, path=f'/bundles/{name}')
    return kernel


@pytest.fixture
def fixtures_finder() -> MagicMock:
    finder = MagicMock(spec=IFixturesFinder)
    finder.get_fixtures.side_effect = lambda kernel, bundles, environment: [
        f'{bundle.path}/fixtures/{bundle.name.lower()}.yml' for bundle in bundles
    ]
    finder.get_fixtures_from_directory.side_effect = lambda directories: [
        f'{directory}/all.yml' for directory in directories
    ]
    finder.resolve_fixtures.side_effect = lambda kernel, fixtures: list(fixtures)
    return finder


@pytest.fixture
def loader() -> MagicMock:
    return MagicMock(spec=IFixturesLoader)


@pytest.fixture
def default_persister() -> MagicMock:
    return MagicMock(spec=IPersister)


@pytest.fixture
def context(
    kernel: MagicMock,
    fixtures_finder: MagicMock,
    loader: MagicMock,
    default_persister: MagicMock,
) -> StubFixtureContext:
    context = StubFixtureContext(BASE_PATH, is_dir=fake_is_dir)
    context.init(kernel, fixtures_finder, loader, default_persister)
    return context


def loaded_fixtures(loader: MagicMock) -> list[str]:
    loader.load.assert_called_once()
    return loader.load.call_args.args[1]


def loaded_persister(loader: MagicMock) -> IPersister:
    loader.load.assert_called_once()
    return loader.load.call_args.args[0]
