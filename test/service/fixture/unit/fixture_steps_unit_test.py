import pytest

from fixture_context.service.fixture.driving_adapter.bdd import fixture_steps, pytest_plugin
import test.conftest as root_conftest


pytestmark = pytest.mark.unit


class TestFixtureStepsRegistration:
    @pytest.mark.parametrize('name', fixture_steps.__all__)
    def test_every_exported_name_is_a_step_definition(self, name: str):
        assert hasattr(getattr(fixture_steps, name), '__pytest_bdd_step_definitions__')

    @pytest.mark.parametrize('name', fixture_steps.__all__)
    def test_steps_are_loaded_by_the_conftest(self, name: str):
        assert getattr(root_conftest, name) is getattr(fixture_steps, name)

    def test_plugin_only_provides_fixtures(self):
        assert not any(
            hasattr(value, '__pytest_bdd_step_definitions__')
            for value in vars(pytest_plugin).values()
        )
