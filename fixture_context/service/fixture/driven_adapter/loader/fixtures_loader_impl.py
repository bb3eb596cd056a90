"""
Fixture file loader

Fixture files map a model class to named instances:

    myapp.models:User:
      user_admin:
        name: admin
      user_bob:
        name: bob
        manager: '@user_admin'

A string value "@name" is replaced by the object built for that reference,
in the same file or an earlier one. Use "\\@" for a literal leading "@".
YAML files are read with PyYAML, JSON files with orjson.
"""

from importlib import import_module
from pathlib import Path
from typing import Any, Sequence

import orjson
import yaml

from fixture_context.platform.exception.exceptions import FixtureFileError
from fixture_context.platform.logging.loguru_io import Logger
from fixture_context.service.fixture.app.interface.i_fixtures_loader import IFixturesLoader
from fixture_context.service.fixture.app.interface.i_persister import IPersister


REFERENCE_PREFIX = '@'
ESCAPED_REFERENCE_PREFIX = '\\@'


class FixturesLoaderImpl(IFixturesLoader):
    @Logger.io(truncate_content=True)
    def load(self, persister: IPersister, fixtures: Sequence[str]) -> dict[str, Any]:
        references: dict[str, Any] = {}
        objects: list[Any] = []

        for fixture in fixtures:
            objects.extend(obj for _, obj in self._build_file(fixture, references))

        persister.persist(objects)
        return references

    def _build_file(self, path: str, references: dict[str, Any]) -> list[tuple[str, Any]]:
        data = self._parse(path)
        if not data:
            return []
        if not isinstance(data, dict):
            raise FixtureFileError(path, 'expected a mapping of class names to instances')

        built: list[tuple[str, Any]] = []
        for class_path, instances in data.items():
            model = self._import_model(path, class_path)
            if not isinstance(instances, dict):
                raise FixtureFileError(path, f'instances of "{class_path}" must be a mapping')

            for reference, attributes in instances.items():
                values = {
                    key: self._resolve_value(path, value, references)
                    for key, value in (attributes or {}).items()
                }
                try:
                    obj = model(**values)
                except TypeError as e:
                    raise FixtureFileError(path, f'cannot build "{reference}": {e}') from e
                # Later entries may point at this one
                references[reference] = obj
                built.append((reference, obj))
        return built

    def _resolve_value(self, path: str, value: Any, references: dict[str, Any]) -> Any:
        if isinstance(value, list):
            return [self._resolve_value(path, item, references) for item in value]
        if not isinstance(value, str):
            return value
        if value.startswith(ESCAPED_REFERENCE_PREFIX):
            return value[1:]
        if value.startswith(REFERENCE_PREFIX):
            name = value[len(REFERENCE_PREFIX) :]
            if name not in references:
                raise FixtureFileError(path, f'unknown reference "{value}"')
            return references[name]
        return value

    @staticmethod
    def _parse(path: str) -> Any:
        try:
            content = Path(path).read_bytes()
        except OSError as e:
            raise FixtureFileError(path, str(e)) from e

        try:
            if path.endswith('.json'):
                return orjson.loads(content)
            return yaml.safe_load(content)
        except (orjson.JSONDecodeError, yaml.YAMLError) as e:
            raise FixtureFileError(path, str(e)) from e

    @staticmethod
    def _import_model(path: str, class_path: str) -> type:
        module_name, sep, class_name = class_path.partition(':')
        if not sep:
            module_name, _, class_name = class_path.rpartition('.')
        try:
            return getattr(import_module(module_name), class_name)
        except (ImportError, AttributeError, ValueError) as e:
            raise FixtureFileError(path, f'cannot import "{class_path}": {e}') from e
