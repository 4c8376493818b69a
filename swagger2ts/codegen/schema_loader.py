"""Loading of Swagger API descriptions.

This module provides the SchemaLoader, which reads a Swagger 2.0 document
from a URL or a local path (JSON or YAML) and validates it into an
:class:`~swagger2ts.description.ApiDescription` once, before any IR is built.
"""

import json
import logging
from pathlib import Path

import httpx
import yaml
from pydantic import ValidationError

from swagger2ts.codegen.utils import is_url
from swagger2ts.description import ApiDescription
from swagger2ts.exceptions import (
    SchemaLoadError,
    SchemaValidationError,
    UnsupportedFeatureError,
)

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Loads Swagger API descriptions from URLs or file paths.

    Example:
        >>> loader = SchemaLoader()
        >>> description = loader.load('https://petstore.swagger.io/v2/swagger.json')
        >>> # or
        >>> description = loader.load('./swagger.json')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the schema loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used.
            base_path: Base directory for relative file paths.
                      Defaults to the current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> ApiDescription:
        """Load and validate an API description.

        Args:
            source: URL or file path of the description.

        Returns:
            The validated ApiDescription.

        Raises:
            SchemaLoadError: If the document cannot be read or parsed.
            SchemaValidationError: If required root fields are missing or
                have the wrong shape.
            UnsupportedFeatureError: If the document is OpenAPI 3.x.
        """
        try:
            if is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
        except (SchemaLoadError, SchemaValidationError):
            raise
        except Exception as e:
            raise SchemaLoadError(source, cause=e)

        return self.validate(content, source)

    def validate(self, content: object, source: str = '<memory>') -> ApiDescription:
        """Validate already parsed content into an ApiDescription."""
        if not isinstance(content, dict):
            raise SchemaValidationError(
                source, errors=['Document root must be an object']
            )

        if 'openapi' in content and 'swagger' not in content:
            raise UnsupportedFeatureError(
                f"OpenAPI {content['openapi']} documents",
                'Convert the description to Swagger 2.0',
            )

        try:
            description = ApiDescription.model_validate(content)
        except ValidationError as e:
            raise SchemaValidationError(source, errors=self._format_errors(e))

        logger.debug(
            f'Loaded {source}: {len(description.paths)} paths, '
            f'{len(description.definitions or {})} definitions'
        )
        return description

    def _load_from_url(self, url: str) -> dict:
        """Load description content from a URL."""
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            content = response.text

            if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
                return yaml.safe_load(content)
            else:
                return json.loads(content)

        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> dict:
        """Load description content from a file."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise SchemaLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            else:
                return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(str(file_path), cause=e)
        except OSError as e:
            raise SchemaLoadError(str(file_path), cause=e)

    @staticmethod
    def _format_errors(error: ValidationError) -> list[str]:
        messages = []
        for item in error.errors():
            location = '.'.join(str(part) for part in item['loc']) or '<root>'
            messages.append(f'{location}: {item["msg"]}')
        return messages
