"""Code generation module for swagger2ts.

This module provides the core code generation functionality for creating
TypeScript client code from Swagger 2.0 descriptions.

Main Components:
    - Codegen: The main orchestrator for code generation
    - SchemaLoader: Loads descriptions from URLs or files
    - ReferenceResolver: Resolves $ref references against definitions
    - DefinitionTransformer: Builds model and enum IR nodes
    - OperationClassifier: Builds client method IR nodes
    - ViewModelAssembler: Combines everything into the root view model
    - TemplateRenderer / CodeEmitter: Render and write the artifacts

Example:
    >>> from swagger2ts.codegen import Codegen
    >>> from swagger2ts.config import DocumentConfig
    >>>
    >>> config = DocumentConfig(
    ...     source="./swagger.json",
    ...     output="./client"
    ... )
    >>> codegen = Codegen(config)
    >>> codegen.generate()
"""

from swagger2ts.codegen.codegen import Artifact, Codegen
from swagger2ts.codegen.definitions import DefinitionTransformer
from swagger2ts.codegen.emitter import (
    CodeEmitter,
    FileEmitter,
    StringEmitter,
    TemplateRenderer,
)
from swagger2ts.codegen.ir import (
    EnumDefinition,
    EnumMember,
    Method,
    MethodParameter,
    ModelDefinition,
    PropertyInfo,
    ViewModel,
)
from swagger2ts.codegen.operations import OperationClassifier
from swagger2ts.codegen.schema_loader import SchemaLoader
from swagger2ts.codegen.schema_resolver import ReferenceResolver, resolve_ref
from swagger2ts.codegen.type_registry import NameRegistry
from swagger2ts.codegen.types import map_type
from swagger2ts.codegen.utils import normalize
from swagger2ts.codegen.view_model import ViewModelAssembler

__all__ = [
    # Main codegen class
    'Codegen',
    'Artifact',
    # Loading and resolution
    'SchemaLoader',
    'ReferenceResolver',
    'resolve_ref',
    'NameRegistry',
    # Transformation
    'DefinitionTransformer',
    'OperationClassifier',
    'ViewModelAssembler',
    'map_type',
    'normalize',
    # Intermediate representation
    'PropertyInfo',
    'ModelDefinition',
    'EnumMember',
    'EnumDefinition',
    'MethodParameter',
    'Method',
    'ViewModel',
    # Rendering and emission
    'TemplateRenderer',
    'CodeEmitter',
    'FileEmitter',
    'StringEmitter',
]
