from enum import StrEnum


class FixtureReferenceKind(StrEnum):
    """How a raw fixture reference is interpreted, checked in declaration order"""

    DIRECTORY = 'directory'  # "/abs/dir" naming an existing directory
    ABSOLUTE_FILE = 'absolute_file'  # any other "/..." reference, kept as is
    BUNDLE = 'bundle'  # "@Name" without a dot
    BUNDLE_RESOURCE = 'bundle_resource'  # "@Name/file.yml", kept as is for the finder
    RELATIVE_FILE = 'relative_file'  # everything else, joined with the base path
