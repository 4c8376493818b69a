"""Transformation of schema definitions into model and enum IR nodes.

Each definition becomes one :class:`ModelDefinition`. Every property lands in
exactly one bucket, checked in this order:

1. reference: it has a ``$ref`` or is an array whose items have one;
2. enum: it declares an inline ``enum``;
3. plain: everything else, arrays of primitives included.

Each enum property also produces an :class:`EnumDefinition` named after the
owning model and the property, e.g. ``Order.status`` -> ``OrderStatus``.
"""

import logging

from swagger2ts.codegen.ir import EnumDefinition, EnumMember, ModelDefinition, PropertyInfo
from swagger2ts.codegen.schema_resolver import ReferenceResolver, definition_name
from swagger2ts.codegen.type_registry import NameRegistry
from swagger2ts.codegen.types import ANY, map_type, type_kind
from swagger2ts.codegen.utils import capitalize, mark_last, normalize
from swagger2ts.description import ApiDescription, Schema
from swagger2ts.exceptions import DuplicateNameError

__all__ = ['DefinitionTransformer', 'enum_member_name', 'enum_type_name']


def enum_type_name(model_name: str, property_name: str) -> str:
    return model_name + capitalize(normalize(property_name))


def enum_member_name(literal) -> str:
    return normalize(capitalize(str(literal)))


class DefinitionTransformer:
    """Builds model and enum IR nodes from a description's definitions.

    Example:
        >>> transformer = DefinitionTransformer(description, resolver)
        >>> models, enums = transformer.transform()
    """

    def __init__(
        self,
        description: ApiDescription,
        resolver: ReferenceResolver,
        logger: logging.Logger | None = None,
    ):
        self.description = description
        self.resolver = resolver
        self.logger = logger or logging.getLogger(__name__)

    def transform(self) -> tuple[list[ModelDefinition], list[EnumDefinition]]:
        """Transform every definition, in document order.

        Returns:
            The models and the synthesized enums, each with ``last`` set on
            the final element.

        Raises:
            SchemaReferenceError: If a property references an unknown
                definition.
            DuplicateNameError: If two synthesized enums share a name, or an
                enum takes the name of a definition.
        """
        models: list[ModelDefinition] = []
        enums: list[EnumDefinition] = []
        enum_names = NameRegistry('enum')

        for raw_name, schema in (self.description.definitions or {}).items():
            model, model_enums = self.transform_definition(raw_name, schema)
            for enum in model_enums:
                source = f'{raw_name}.{enum.name}'
                if self.resolver.has_model(enum.name):
                    raise DuplicateNameError(
                        enum.name,
                        'enum',
                        first=self.resolver.model_source(enum.name),
                        second=source,
                    )
                enum_names.register(enum.name, source=source)
            models.append(model)
            enums.extend(model_enums)

        return mark_last(models), mark_last(enums)

    def transform_definition(
        self, raw_name: str, schema: Schema
    ) -> tuple[ModelDefinition, list[EnumDefinition]]:
        """Transform a single definition.

        Args:
            raw_name: The definition key as written in the document.
            schema: The definition's schema.

        Returns:
            The model and the enums synthesized from its enum properties.
        """
        name = definition_name(raw_name)
        self.logger.debug(f'Transforming definition {raw_name!r} as {name}')

        required = schema.required if isinstance(schema.required, list) else []

        properties: list[PropertyInfo] = []
        refs: list[PropertyInfo] = []
        enum_properties: list[PropertyInfo] = []
        enums: list[EnumDefinition] = []

        for property_name, property_schema in (schema.properties or {}).items():
            prop = self._transform_property(
                name, property_name, property_schema, property_name in required
            )
            if prop.is_ref:
                refs.append(prop)
            elif prop.is_enum:
                enum_properties.append(prop)
                enums.append(self._synthesize_enum(prop.type, property_schema.enum))
            else:
                properties.append(prop)

        ref_imports = [
            prop for prop in self._unique_by_type(refs) if prop.type != name
        ]

        model = ModelDefinition(
            name=name,
            properties=mark_last(properties),
            refs=mark_last(refs),
            ref_imports=mark_last(ref_imports),
            enums=mark_last(enum_properties),
            has_imports=bool(ref_imports or enum_properties),
        )
        return model, enums

    def _transform_property(
        self, model_name: str, name: str, schema: Schema, required: bool
    ) -> PropertyInfo:
        raw_type = schema.primary_type
        is_array = raw_type == 'array'
        item = schema.item_schema if is_array else None
        item_ref = item.ref if item is not None else None

        is_ref = schema.ref is not None or item_ref is not None
        is_enum = not is_ref and schema.enum is not None

        item_type = None
        if is_ref:
            resolved = self.resolver.resolve(item_ref or schema.ref)
            if is_array:
                item_type = resolved
        elif is_enum:
            resolved = enum_type_name(model_name, name)
        else:
            resolved = raw_type
            if is_array:
                item_type = map_type(item.primary_type) if item is not None else ANY

        return PropertyInfo(
            name=name,
            type=resolved,
            target_type=map_type(resolved),
            kind=type_kind(raw_type, is_ref=is_ref, is_enum=is_enum),
            is_array=is_array,
            is_ref=is_ref,
            is_enum=is_enum,
            required=required,
            item_type=item_type,
            description=schema.description,
        )

    def _synthesize_enum(self, name: str, literals: list | None) -> EnumDefinition:
        members = [
            EnumMember(name=enum_member_name(literal), value=literal)
            for literal in literals or []
        ]
        self.logger.debug(f'Synthesized enum {name} with {len(members)} members')
        return EnumDefinition(name=name, members=mark_last(members))

    @staticmethod
    def _unique_by_type(refs: list[PropertyInfo]) -> list[PropertyInfo]:
        seen: set[str] = set()
        unique = []
        for prop in refs:
            if prop.type in seen:
                continue
            seen.add(prop.type)
            unique.append(prop)
        return unique
