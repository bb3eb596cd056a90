"""
pytest plugin (registered through the "pytest11" entry point)

Provides one fixture context per scenario and the "fixtures_base_path" ini
option. Step definitions are not registered here: pytest-bdd only collects
steps from conftest and test modules, so a conftest.py star-imports them:

    from fixture_context.service.fixture.driving_adapter.bdd.fixture_steps import *  # noqa: F403

Override the "fixture_context" fixture in a conftest.py to use another
context class or to wire collaborators by hand.

Settings are read when the container is first used, so environment variables
set by a conftest.py are honoured.
"""

from collections.abc import Generator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from fixture_context.service.fixture.app.context.fixture_context import FixtureContext
    from fixture_context.service.fixture.app.interface.i_application_kernel import (
        IApplicationKernel,
    )


FIXTURES_BASE_PATH_INI = 'fixtures_base_path'


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        FIXTURES_BASE_PATH_INI,
        help='Directory relative fixture references are resolved against (relative to rootdir)',
        default=None,
    )


def configured_base_path(config: pytest.Config) -> str:
    ini_value = config.getini(FIXTURES_BASE_PATH_INI)
    if ini_value:
        return str(Path(config.rootpath, ini_value))

    from fixture_context.platform.config.di import container

    return container.config_service().FIXTURES_BASE_PATH


@pytest.fixture
def fixture_kernel() -> Generator['IApplicationKernel', None, None]:
    from fixture_context.platform.config.di import cleanup, container

    yield container.kernel()
    cleanup()


@pytest.fixture
def fixture_context(
    request: pytest.FixtureRequest, fixture_kernel: 'IApplicationKernel'
) -> Generator['FixtureContext', None, None]:
    from fixture_context.platform.logging.loguru_io_config import scenario_scope
    from fixture_context.service.fixture.driving_adapter.context.sqlalchemy_fixture_context import (
        SqlAlchemyFixtureContext,
    )

    context = SqlAlchemyFixtureContext(base_path=configured_base_path(request.config))
    with scenario_scope(request.node.name):
        yield context.set_kernel(fixture_kernel)
