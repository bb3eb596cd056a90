"""
Integration test configuration

Tables are created on the shared in-memory SQLite engine before each test
and dropped afterwards. The fixture_context fixture comes from the plugin.
"""

from collections.abc import Generator

import pytest

from fixture_context.platform.database.orm_db_setting import (
    create_db_and_tables,
    drop_db_and_tables,
)
import test.service.fixture.integration.models  # noqa: F401  registers the tables on Base


@pytest.fixture(autouse=True)
def database() -> Generator[None, None, None]:
    create_db_and_tables()
    yield
    drop_db_and_tables()


# =============================================================================
# Load BDD steps
# =============================================================================
from test.service.fixture.integration.steps.then import *  # noqa: E402, F401, F403
