"""
Test Configuration

This module provides:
- Environment setup before fixture_context settings are imported
- Shared paths to the fixture files and bundles used by the tests

Architecture:
- Unit tests (test/**/unit/): collaborators are mocks, no database
- Integration tests (test/**/integration/): SQLite in memory, real finder and loader
- The fixture_context fixture comes from the fixture_context pytest plugin
- Gherkin steps are star-imported at the bottom of this module
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any fixture_context import
# Settings are instantiated at import time
# =============================================================================
import json
import os
from pathlib import Path


TEST_DIR = Path(__file__).resolve().parent
FIXTURES_DIR = TEST_DIR / 'fixtures'
BUNDLES_DIR = TEST_DIR / 'bundles'


def _early_setup_test_environment() -> None:
    os.environ['APP_ENV'] = 'test'
    os.environ['DATABASE_URL'] = 'sqlite://'
    os.environ['FIXTURES_BASE_PATH'] = str(FIXTURES_DIR)
    os.environ['FIXTURE_BUNDLES'] = json.dumps({'Library': str(BUNDLES_DIR / 'library')})

    test_log_dir = TEST_DIR / 'test_log'
    os.environ.setdefault('TEST_LOG_DIR', str(test_log_dir))


_early_setup_test_environment()

import pytest  # noqa: E402


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def library_bundle_dir() -> Path:
    return BUNDLES_DIR / 'library'


# =============================================================================
# Load BDD steps (pytest-bdd registers steps found in conftest modules)
# =============================================================================
from fixture_context.service.fixture.driving_adapter.bdd.fixture_steps import *  # noqa: E402, F403
