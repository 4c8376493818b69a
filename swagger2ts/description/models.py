"""
Pydantic V2 models for the Swagger 2.0 API descriptions swagger2ts consumes.

Only the parts of the Swagger 2.0 document that feed client generation are
modelled. Every model accepts vendor extensions (``x-*``) and unknown keys,
so a document that is valid Swagger never fails here; documents missing the
required root fields (``info``, ``paths``) or using the wrong shapes do.

Usage Example:
-------------

    from swagger2ts.description import ApiDescription
    import json

    with open('swagger.json') as f:
        description = ApiDescription.model_validate(json.load(f))

    for path, path_item in description.paths.items():
        for verb, operation in path_item.operations.items():
            print(verb.upper(), path, operation.operation_id)
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Verbs recognized as operations inside a path item (Swagger 2.0 set).
PATH_ITEM_VERBS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch')


# ============================================================================
# Base Models
# ============================================================================


class BaseModelWithVendorExtensions(BaseModel):
    """Base model that allows vendor extensions (x- fields)."""

    model_config = ConfigDict(extra='allow', populate_by_name=True)

    def vendor_extension(self, key: str, default: Any = None) -> Any:
        """Return the value of a vendor extension such as ``x-name-pattern``."""
        extra = self.model_extra or {}
        return extra.get(key, default)


# ============================================================================
# Info Model
# ============================================================================


class Info(BaseModelWithVendorExtensions):
    """General information about the API."""

    title: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None


# ============================================================================
# Schema Model
# ============================================================================


class Schema(BaseModelWithVendorExtensions):
    """
    JSON Schema object for Swagger 2.0.

    Used both for named definitions and for the properties inside them.
    ``properties`` keeps the document's key order.
    """

    ref: Optional[str] = Field(None, alias='$ref')
    type: Optional[Union[str, List[str]]] = None
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    default: Optional[Any] = None
    enum: Optional[List[Any]] = None
    items: Optional[Union['Schema', List['Schema']]] = None
    properties: Optional[Dict[str, 'Schema']] = None
    # Some generators emit a boolean on properties; only a list is meaningful.
    required: Optional[Union[List[str], bool]] = None
    all_of: Optional[List['Schema']] = Field(None, alias='allOf')
    additional_properties: Optional[Union['Schema', bool]] = Field(
        None, alias='additionalProperties'
    )
    read_only: bool = Field(False, alias='readOnly')

    @property
    def primary_type(self) -> Optional[str]:
        """The declared type, taking the first entry of a type list."""
        if isinstance(self.type, list):
            return self.type[0] if self.type else None
        return self.type

    @property
    def item_schema(self) -> Optional['Schema']:
        """The array item schema, taking the first entry of a tuple form."""
        if isinstance(self.items, list):
            return self.items[0] if self.items else None
        return self.items


# Named schema definitions and their properties share one shape.
SchemaDefinition = Schema
Property = Schema


# ============================================================================
# Parameter Model
# ============================================================================


class PrimitivesItems(BaseModelWithVendorExtensions):
    """Items object for primitive array parameters."""

    type: Optional[str] = None
    format: Optional[str] = None
    enum: Optional[List[Any]] = None


class Parameter(BaseModelWithVendorExtensions):
    """
    Operation parameter.

    Body and non-body parameters are folded into one record: ``schema`` is
    only set for body parameters, ``type`` only for the others. ``in`` is kept
    as a plain string so unrecognized locations pass validation. A parameter
    that is only a ``$ref`` to ``#/parameters/<name>`` has ``ref`` set and
    nothing else.
    """

    ref: Optional[str] = Field(None, alias='$ref')
    name: Optional[str] = None
    in_: Optional[str] = Field(None, alias='in')
    description: Optional[str] = None
    required: bool = False
    type: Optional[str] = None
    format: Optional[str] = None
    schema_: Optional[Schema] = Field(None, alias='schema')
    items: Optional[PrimitivesItems] = None
    enum: Optional[List[Any]] = None
    default: Optional[Any] = None


# ============================================================================
# Operation Models
# ============================================================================


class Operation(BaseModelWithVendorExtensions):
    """Operation (HTTP method) on a path."""

    tags: Optional[List[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = Field(None, alias='operationId')
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    parameters: Optional[List[Parameter]] = None
    responses: Optional[Dict[str, Any]] = None
    deprecated: bool = False
    security: Optional[List[Dict[str, List[str]]]] = None


class PathItem(BaseModelWithVendorExtensions):
    """
    Path item with operations.

    ``operations`` maps the lower-cased verb to its operation in the order the
    verbs appear in the document, which drives the order of generated methods.
    """

    parameters: Optional[List[Parameter]] = None
    operations: Dict[str, Operation] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def collect_operations(cls, data: Any) -> Any:
        """Move verb keys into ``operations`` keeping their document order."""
        if not isinstance(data, dict) or 'operations' in data:
            return data

        result: Dict[str, Any] = {}
        operations: Dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in PATH_ITEM_VERBS:
                operations[key.lower()] = value
            else:
                result[key] = value

        result['operations'] = operations
        return result


# ============================================================================
# Root Model
# ============================================================================


class ApiDescription(BaseModelWithVendorExtensions):
    """
    Root Swagger 2.0 document.

    ``info`` and ``paths`` are required; everything else is optional.
    """

    swagger: Optional[str] = None
    info: Info
    host: Optional[str] = None
    base_path: Optional[str] = Field(None, alias='basePath')
    schemes: Optional[List[str]] = None
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    paths: Dict[str, PathItem]
    definitions: Optional[Dict[str, Schema]] = None
    parameters: Optional[Dict[str, Parameter]] = None
    security_definitions: Optional[Dict[str, Any]] = Field(
        None, alias='securityDefinitions'
    )
    security: Optional[List[Dict[str, List[str]]]] = None

    @field_validator('paths', mode='before')
    @classmethod
    def drop_path_extensions(cls, value: Any) -> Any:
        """Vendor extensions may sit next to paths; they are not paths."""
        if not isinstance(value, dict):
            return value
        return {key: item for key, item in value.items() if not key.startswith('x-')}
