import json
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from swagger2ts.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['swagger2ts.yaml', 'swagger2ts.yml']


class DocumentConfig(BaseModel):
    """Represents a single document to be processed."""

    source: str = Field(..., description='Path or URL to the Swagger 2.0 document.')

    output: str = Field(..., description='Output directory for the generated code.')

    client_file: str = Field(
        'client.ts', description='File name of the generated client class.'
    )

    templates_dir: str | None = Field(
        None,
        description='Optional directory with <template_id>.mustache overrides.',
    )

    include_proxy_headers: bool = Field(
        False,
        description='Keep header parameters marked with x-proxy-header.',
    )


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='SWAGGER2TS_')

    documents: list[DocumentConfig] = Field(
        ..., description='List of Swagger documents to process.'
    )


def load_file(path: str | Path) -> dict:
    """Read a YAML or JSON configuration file."""
    path = Path(path)
    text = path.read_text(encoding='utf-8')
    if path.suffix.lower() == '.json':
        return json.loads(text)
    return yaml.safe_load(text) or {}


def _validate(data: dict, config_path: str) -> CodegenConfig:
    try:
        return CodegenConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigurationError(
            first['msg'],
            config_path=config_path,
            field='.'.join(str(part) for part in first['loc']) or None,
        )


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file.

    Looks at the explicit ``path`` first, then ``swagger2ts.yaml`` /
    ``swagger2ts.yml`` in the working directory, then the
    ``[tool.swagger2ts]`` table of ``pyproject.toml``.

    Raises:
        ConfigurationError: If no configuration is found or it is invalid.
    """
    if path:
        try:
            data = load_file(path)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f'Cannot read configuration: {e}', config_path=path)
        return _validate(data, path)

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            try:
                data = load_file(candidate)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(
                    f'Cannot read configuration: {e}', config_path=str(candidate)
                )
            return _validate(data, str(candidate))

    pyproject_path = cwd / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(pyproject_path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f'Cannot read configuration: {e}', config_path=str(pyproject_path)
            )
        tools = pyproject.get('tool', {})

        if 'swagger2ts' in tools:
            return _validate(tools['swagger2ts'], str(pyproject_path))

    raise ConfigurationError(
        'No configuration found; pass --config, add swagger2ts.yaml or '
        '[tool.swagger2ts] to pyproject.toml'
    )
