from pathlib import Path

import attrs


@attrs.define(frozen=True)
class Bundle:
    """A pluggable application module that ships its own fixtures"""

    name: str
    path: str

    @property
    def fixtures_dir(self) -> Path:
        return Path(self.path) / 'fixtures'
