"""swagger2ts - Generate TypeScript clients from Swagger 2.0 descriptions.

swagger2ts reads a Swagger 2.0 document (JSON or YAML, from a file or a URL)
and writes a TypeScript client class, one interface per definition, one
enum per inline enum property and a barrel file re-exporting the models.

Quick Start:
    >>> from swagger2ts import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(
    ...     source="https://petstore.swagger.io/v2/swagger.json",
    ...     output="./src/api"
    ... )
    >>> codegen = Codegen(config)
    >>> codegen.generate()

CLI Usage:
    $ swagger2ts generate ./swagger.json ./src/api
    $ swagger2ts generate --config swagger2ts.yaml
"""

from importlib.metadata import PackageNotFoundError, version

from swagger2ts.codegen.codegen import Codegen
from swagger2ts.codegen.schema_loader import SchemaLoader
from swagger2ts.codegen.schema_resolver import ReferenceResolver
from swagger2ts.config import CodegenConfig, DocumentConfig, get_config
from swagger2ts.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    DuplicateNameError,
    OutputError,
    SchemaError,
    SchemaLoadError,
    SchemaReferenceError,
    SchemaValidationError,
    Swagger2TSError,
    TemplateRenderError,
    UnsupportedFeatureError,
)

__all__ = [
    # Main classes
    'Codegen',
    'SchemaLoader',
    'ReferenceResolver',
    # Configuration
    'CodegenConfig',
    'DocumentConfig',
    'get_config',
    # Exceptions
    'Swagger2TSError',
    'SchemaError',
    'SchemaLoadError',
    'SchemaValidationError',
    'SchemaReferenceError',
    'CodeGenerationError',
    'DuplicateNameError',
    'TemplateRenderError',
    'ConfigurationError',
    'OutputError',
    'UnsupportedFeatureError',
]

try:
    __version__ = version('swagger2ts')
except PackageNotFoundError:
    __version__ = 'unknown'
