"""Intermediate representation handed to the templates.

Every record is a plain dataclass. Lists are in final emission order and the
``last`` flag marks the final element for templates that need separators.
"""

import dataclasses

from swagger2ts.codegen.types import TypeKind

__all__ = [
    'EnumDefinition',
    'EnumMember',
    'Method',
    'MethodParameter',
    'ModelDefinition',
    'PropertyInfo',
    'ViewModel',
]


@dataclasses.dataclass
class PropertyInfo:
    name: str
    type: str | None  # resolved model/enum name, or the raw Swagger type
    target_type: str
    kind: TypeKind
    is_array: bool = False
    is_ref: bool = False
    is_enum: bool = False
    required: bool = False
    item_type: str | None = None
    description: str | None = None
    last: bool = False


@dataclasses.dataclass
class ModelDefinition:
    """One generated model file.

    ``ref_imports`` holds the reference properties de-duplicated on their
    resolved type, in first-seen order. A model never imports itself.
    """

    name: str
    properties: list[PropertyInfo] = dataclasses.field(default_factory=list)
    refs: list[PropertyInfo] = dataclasses.field(default_factory=list)
    ref_imports: list[PropertyInfo] = dataclasses.field(default_factory=list)
    enums: list[PropertyInfo] = dataclasses.field(default_factory=list)
    has_imports: bool = False
    last: bool = False


@dataclasses.dataclass
class EnumMember:
    name: str
    value: object
    last: bool = False


@dataclasses.dataclass
class EnumDefinition:
    name: str
    members: list[EnumMember] = dataclasses.field(default_factory=list)
    last: bool = False


@dataclasses.dataclass
class MethodParameter:
    name: str
    camel_case_name: str
    location: str | None
    type: str | None
    target_type: str
    kind: TypeKind
    required: bool = False
    is_ref: bool = False
    is_array: bool = False
    item_type: str | None = None
    description: str | None = None
    is_body_parameter: bool = False
    is_path_parameter: bool = False
    is_query_parameter: bool = False
    is_header_parameter: bool = False
    is_pattern_type: bool = False
    is_singleton: bool = False
    singleton: object = None
    convert_to_string: bool = False
    last: bool = False


@dataclasses.dataclass
class Method:
    """One generated client method."""

    method_name: str
    path: str
    template_path: str
    method: str  # upper-case verb
    http_method: str  # lower-case verb
    is_get: bool = False
    has_payload: bool = False
    has_empty_payload: bool = False
    summary_lines: list[str] = dataclasses.field(default_factory=list)
    is_secure: bool = False
    has_json_response: bool = False
    parameters: list[MethodParameter] = dataclasses.field(default_factory=list)
    has_parameters: bool = False
    last: bool = False


@dataclasses.dataclass
class ViewModel:
    """Root of the IR, consumed by the client and barrel templates."""

    description: str
    is_secure: bool
    domain: str
    methods: list[Method] = dataclasses.field(default_factory=list)
    definitions: list[ModelDefinition] = dataclasses.field(default_factory=list)
    enums: list[EnumDefinition] = dataclasses.field(default_factory=list)
    has_methods: bool = False
    has_definitions: bool = False
    has_enums: bool = False
