import json
from typing import Annotated, Dict, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from fixture_context.platform.constant.path import BASE_DIR, FIXTURES_DIR


_ENV_PATH = BASE_DIR / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (BASE_DIR / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Fixture Context'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # Kernel environment, used to pick environment specific bundle fixtures
    APP_ENV: str = 'test'

    # Root for relative fixture references (e.g. "fixtures/user.yml")
    FIXTURES_BASE_PATH: str = str(FIXTURES_DIR)

    # Files picked up when a bundle or a directory is expanded
    FIXTURE_FILE_EXTENSIONS: Annotated[List[str], NoDecode] = ['.yml', '.yaml', '.json']

    # Explicitly registered bundles: name -> directory
    FIXTURE_BUNDLES: Annotated[Dict[str, str], NoDecode] = {}

    # Default persister database
    DATABASE_URL: str = 'sqlite://'
    DATABASE_ECHO: bool = False

    @field_validator('FIXTURE_FILE_EXTENSIONS', mode='before')
    @classmethod
    def assemble_extensions(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            v = [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, str):
            v = json.loads(v)
        return [ext if ext.startswith('.') else f'.{ext}' for ext in v]

    @field_validator('FIXTURE_BUNDLES', mode='before')
    @classmethod
    def assemble_bundles(cls, v: str | Dict[str, str]) -> Dict[str, str]:
        if isinstance(v, str) and not v.startswith('{'):
            # "Blog=/srv/blog,Shop=/srv/shop"
            pairs = (item.split('=', 1) for item in v.split(',') if '=' in item)
            return {name.strip(): path.strip() for name, path in pairs}
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, dict):
            return v
        return {}


settings = Settings()  # type: ignore
