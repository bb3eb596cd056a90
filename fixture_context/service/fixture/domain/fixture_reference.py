"""
Fixture reference classification

A step receives fixture references as free text. Their lexical form decides
how they are resolved:

    /abs/dir        existing directory  -> expanded by the finder
    /abs/file.yml   anything else "/"   -> used unchanged
    @Bundle         "@" and no "."      -> bundle, expanded by the finder
    @Bundle/a.yml   "@" with a "."      -> used unchanged, located by the finder
    fixtures/a.yml                      -> "{base_path}/fixtures/a.yml"
"""

import os
from typing import Callable, Iterable, Optional

import attrs

from fixture_context.service.fixture.domain.enum.fixture_reference_kind import (
    FixtureReferenceKind,
)


IsDir = Callable[[str], bool]

BUNDLE_PREFIX = '@'
ABSOLUTE_PREFIX = '/'


def classify_reference(reference: str, *, is_dir: IsDir = os.path.isdir) -> FixtureReferenceKind:
    if reference.startswith(ABSOLUTE_PREFIX):
        if is_dir(reference):
            return FixtureReferenceKind.DIRECTORY
        return FixtureReferenceKind.ABSOLUTE_FILE

    if reference.startswith(BUNDLE_PREFIX):
        if '.' in reference:
            return FixtureReferenceKind.BUNDLE_RESOURCE
        return FixtureReferenceKind.BUNDLE

    return FixtureReferenceKind.RELATIVE_FILE


def join_base_path(base_path: Optional[str], reference: str) -> str:
    # A missing base path renders as an empty prefix, giving "/reference"
    return f'{base_path or ""}/{reference}'


@attrs.define(frozen=True)
class ClassifiedReferences:
    files: list[str] = attrs.field(factory=list)
    bundle_names: list[str] = attrs.field(factory=list)
    directories: list[str] = attrs.field(factory=list)


def classify_references(
    references: Iterable[str], *, base_path: Optional[str], is_dir: IsDir = os.path.isdir
) -> ClassifiedReferences:
    """Split references into direct files, bundle names and directories in one pass.

    Direct files keep their input order. Relative references are rewritten
    against base_path; absolute and @-prefixed ones are kept verbatim.
    No deduplication.
    """
    classified = ClassifiedReferences()

    for reference in references:
        match classify_reference(reference, is_dir=is_dir):
            case FixtureReferenceKind.DIRECTORY:
                classified.directories.append(reference)
            case FixtureReferenceKind.ABSOLUTE_FILE | FixtureReferenceKind.BUNDLE_RESOURCE:
                classified.files.append(reference)
            case FixtureReferenceKind.BUNDLE:
                classified.bundle_names.append(reference[len(BUNDLE_PREFIX) :])
            case FixtureReferenceKind.RELATIVE_FILE:
                classified.files.append(join_base_path(base_path, reference))

    return classified
