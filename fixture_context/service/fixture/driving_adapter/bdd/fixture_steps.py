"""
Gherkin steps that seed the persistence layer before a scenario

    Given the fixtures file "fixtures/users.yml" is loaded
    Given the fixtures file "@Blog" is loaded with the persister "in_memory_persister"
    Given the following fixtures files are loaded:
      | fixtures/users.yml |
      | /srv/shared/fixtures |

Every step needs a "fixture_context" fixture, provided by the pytest plugin.
pytest-bdd registers steps found in conftest and test modules only, so
star-import this module from a conftest.py; __all__ limits the import to the
step definitions.
"""

from typing import TYPE_CHECKING

from pytest_bdd import given, parsers
from pytest_bdd.model import Step


# Imported lazily: the plugin loads before conftest.py sets up the environment
if TYPE_CHECKING:
    from fixture_context.service.fixture.app.context.fixture_context import FixtureContext


__all__ = [
    'load_fixtures',
    'load_fixtures_file',
    'load_fixtures_file_with_persister',
    'load_several_fixtures_files',
    'load_several_fixtures_files_with_persister',
]


def extract_table_rows(step: Step) -> list[list[str]]:
    return [[cell.value for cell in row.cells] for row in step.data_table.rows]


@given(parsers.parse('the fixtures "{fixtures_file}" are loaded'))
def load_fixtures(fixture_context: 'FixtureContext', fixtures_file: str) -> None:
    fixture_context.there_are_fixtures(fixtures_file)


@given(parsers.parse('the fixtures file "{fixtures_file}" is loaded'))
def load_fixtures_file(fixture_context: 'FixtureContext', fixtures_file: str) -> None:
    fixture_context.there_are_fixtures(fixtures_file)


@given(
    parsers.parse('the fixtures file "{fixtures_file}" is loaded with the persister "{persister}"')
)
def load_fixtures_file_with_persister(
    fixture_context: 'FixtureContext', fixtures_file: str, persister: str
) -> None:
    fixture_context.there_are_fixtures(fixtures_file, persister)


@given('the following fixtures files are loaded:')
def load_several_fixtures_files(fixture_context: 'FixtureContext', step: Step) -> None:
    fixture_context.there_are_several_fixtures(extract_table_rows(step))


@given(
    parsers.parse('the following fixtures files are loaded with the persister "{persister}":')
)
def load_several_fixtures_files_with_persister(
    fixture_context: 'FixtureContext', step: Step, persister: str
) -> None:
    fixture_context.there_are_several_fixtures(extract_table_rows(step), persister)
