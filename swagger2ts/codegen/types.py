"""Type vocabulary mapping from Swagger types to TypeScript labels.

A single mapping is used for schema properties and operation parameters
alike, so a given Swagger type always lands on the same TypeScript label.
"""

from typing import Literal

__all__ = [
    'ANY',
    'ARRAY',
    'NUMBER',
    'OBJECT',
    'TypeKind',
    'map_type',
    'needs_string_conversion',
    'type_kind',
]

NUMBER = 'number'
OBJECT = 'Object'
ARRAY = 'Array'
ANY = 'any'

TypeKind = Literal['primitive', 'object', 'array', 'any', 'reference', 'enum']

_TYPE_MAP = {
    'integer': NUMBER,
    'double': NUMBER,
    'object': OBJECT,
    'array': ARRAY,
}

# Types a template has to stringify before putting them in a URL or header.
_STRINGIFIED_TYPES = {'integer', 'double', 'boolean'}


def map_type(raw_type: str | None) -> str:
    """Map a Swagger type (or a resolved model/enum name) to a TypeScript label.

    ``integer`` and ``double`` become ``number``, ``object`` becomes
    ``Object``, ``array`` becomes ``Array`` and a missing type becomes
    ``any``. Everything else, including already resolved reference and enum
    names, is returned unchanged.
    """
    if not raw_type:
        return ANY
    return _TYPE_MAP.get(raw_type, raw_type)


def type_kind(
    raw_type: str | None, is_ref: bool = False, is_enum: bool = False
) -> TypeKind:
    """Classify a property or parameter into exactly one resolved-type tag."""
    if is_ref:
        return 'reference'
    if is_enum:
        return 'enum'
    if not raw_type:
        return 'any'
    if raw_type == 'object':
        return 'object'
    if raw_type == 'array':
        return 'array'
    return 'primitive'


def needs_string_conversion(raw_type: str | None) -> bool:
    return raw_type in _STRINGIFIED_TYPES
