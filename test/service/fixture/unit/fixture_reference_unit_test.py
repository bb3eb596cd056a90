import pytest

from fixture_context.service.fixture.domain.enum.fixture_reference_kind import (
    FixtureReferenceKind,
)
from fixture_context.service.fixture.domain.fixture_reference import (
    ClassifiedReferences,
    classify_reference,
    classify_references,
    join_base_path,
)
from test.service.fixture.unit.conftest import BASE_PATH, fake_is_dir


pytestmark = pytest.mark.unit


class TestClassifyReference:
    @pytest.mark.parametrize(
        ('reference', 'expected'),
        [
            ('/abs/dir', FixtureReferenceKind.DIRECTORY),
            ('/abs/dir/user.yml', FixtureReferenceKind.ABSOLUTE_FILE),
            ('/not/there', FixtureReferenceKind.ABSOLUTE_FILE),
            ('@MyBundle', FixtureReferenceKind.BUNDLE),
            ('@x.yml', FixtureReferenceKind.BUNDLE_RESOURCE),
            ('@MyBundle/user.yml', FixtureReferenceKind.BUNDLE_RESOURCE),
            ('fixtures/a.yml', FixtureReferenceKind.RELATIVE_FILE),
            ('a', FixtureReferenceKind.RELATIVE_FILE),
        ],
    )
    def test_lexical_form_decides_the_kind(self, reference: str, expected: FixtureReferenceKind):
        assert classify_reference(reference, is_dir=fake_is_dir) == expected

    def test_directory_check_only_runs_for_absolute_references(self):
        checked: list[str] = []

        def recording_is_dir(path: str) -> bool:
            checked.append(path)
            return True

        classify_reference('fixtures', is_dir=recording_is_dir)
        classify_reference('@Bundle', is_dir=recording_is_dir)
        classify_reference('/abs', is_dir=recording_is_dir)

        assert checked == ['/abs']


class TestClassifyReferences:
    def test_worked_example(self):
        classified = classify_references(
            ['fixtures/a.yml', '@MyBundle', '/abs/dir', '@x.yml'],
            base_path=BASE_PATH,
            is_dir=fake_is_dir,
        )

        assert classified == ClassifiedReferences(
            files=['/app/tests/fixtures/a.yml', '@x.yml'],
            bundle_names=['MyBundle'],
            directories=['/abs/dir'],
        )

    def test_absolute_file_is_never_prefixed(self):
        classified = classify_references(
            ['/srv/user.yml'], base_path=BASE_PATH, is_dir=fake_is_dir
        )

        assert classified.files == ['/srv/user.yml']

    def test_bundle_resource_is_never_prefixed(self):
        classified = classify_references(
            ['a.yml', '@Blog/fixtures/user.yml', 'b.yml'], base_path=BASE_PATH, is_dir=fake_is_dir
        )

        assert classified.files == [
            '/app/tests/a.yml',
            '@Blog/fixtures/user.yml',
            '/app/tests/b.yml',
        ]
        assert classified.bundle_names == []

    def test_direct_references_keep_input_order_and_duplicates(self):
        classified = classify_references(
            ['b.yml', '/srv/a.yml', 'b.yml', '@Bundle', 'c.yml'],
            base_path=BASE_PATH,
            is_dir=fake_is_dir,
        )

        assert classified.files == [
            '/app/tests/b.yml',
            '/srv/a.yml',
            '/app/tests/b.yml',
            '/app/tests/c.yml',
        ]
        assert classified.bundle_names == ['Bundle']

    def test_buckets_keep_input_order(self):
        classified = classify_references(
            ['/srv/fixtures', '@Second', '/abs/dir', '@First'],
            base_path=BASE_PATH,
            is_dir=fake_is_dir,
        )

        assert classified.bundle_names == ['Second', 'First']
        assert classified.directories == ['/srv/fixtures', '/abs/dir']
        assert classified.files == []

    def test_empty_input(self):
        assert classify_references([], base_path=BASE_PATH) == ClassifiedReferences()

    def test_missing_base_path_renders_as_empty_prefix(self):
        assert join_base_path(None, 'a.yml') == '/a.yml'
        assert join_base_path('/base', 'a.yml') == '/base/a.yml'
