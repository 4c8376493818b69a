"""Swagger 2.0 API description models."""

from swagger2ts.description.models import (
    PATH_ITEM_VERBS,
    ApiDescription,
    Info,
    Operation,
    Parameter,
    PathItem,
    PrimitivesItems,
    Property,
    Schema,
    SchemaDefinition,
)

__all__ = [
    # Main model
    'ApiDescription',
    'Info',
    # Schema models
    'Schema',
    'SchemaDefinition',
    'Property',
    # Operation models
    'Operation',
    'Parameter',
    'PathItem',
    'PrimitivesItems',
    # Constants
    'PATH_ITEM_VERBS',
]
