"""Reference resolution for Swagger API descriptions.

This module provides :func:`resolve_ref`, the one function every ``$ref``
in a description goes through (model properties, array items and parameter
schemas), and the :class:`ReferenceResolver` that checks each resolved
identifier against the document's definitions.
"""

from swagger2ts.codegen.type_registry import NameRegistry
from swagger2ts.codegen.utils import normalize, sanitize
from swagger2ts.description import ApiDescription, Parameter
from swagger2ts.exceptions import SchemaReferenceError

__all__ = ['ReferenceResolver', 'definition_name', 'resolve_ref']


def definition_name(raw_name: str) -> str:
    """Canonical identifier for a definition key such as ``Page«Pet»``."""
    return normalize(sanitize(raw_name))


def resolve_ref(ref: str) -> str:
    """Turn a ``$ref`` into the canonical identifier of its target.

    ``#/definitions/<Name>`` splits into three segments and yields ``<Name>``;
    any other shape yields its first segment, so a bare token resolves to
    itself. The segment is canonicalized the same way definition keys are.

    Examples:
        >>> resolve_ref('#/definitions/pet-store')
        'PetStore'
        >>> resolve_ref('Pet')
        'Pet'
    """
    segments = ref.split('/')
    target = segments[2] if len(segments) == 3 else segments[0]
    return definition_name(target)


class ReferenceResolver:
    """Resolves references against the definitions of one description.

    Building the resolver registers the canonical name of every definition,
    so two definitions that canonicalize to the same identifier fail here,
    before any reference is followed.

    Example:
        >>> resolver = ReferenceResolver(description)
        >>> resolver.resolve('#/definitions/Pet')
        'Pet'
    """

    def __init__(self, description: ApiDescription):
        """Initialize the resolver.

        Args:
            description: The validated API description.

        Raises:
            DuplicateNameError: If two definitions share a canonical name.
        """
        self.description = description
        self._models = NameRegistry('model')
        for raw_name in (description.definitions or {}).keys():
            self._models.register(definition_name(raw_name), source=raw_name)

    @property
    def model_names(self) -> list[str]:
        """Canonical model names in document order."""
        return self._models.get_names()

    def has_model(self, name: str) -> bool:
        return name in self._models

    def model_source(self, name: str) -> str | None:
        """The definition key a canonical model name was built from."""
        return self._models.get_source(name)

    def resolve(self, ref: str) -> str:
        """Resolve a ``$ref`` to the identifier of a known definition.

        Args:
            ref: The reference, e.g. ``#/definitions/Pet``.

        Returns:
            The canonical identifier of the referenced definition.

        Raises:
            SchemaReferenceError: If no definition has that identifier.
        """
        name = resolve_ref(ref)
        if name not in self._models:
            available = ', '.join(self.model_names[:10])
            if len(self._models) > 10:
                available += f', ... ({len(self._models)} total)'
            raise SchemaReferenceError(
                ref,
                f"Definition '{name}' not found. Available definitions: "
                f'{available or "none"}',
            )
        return name

    def resolve_parameter(self, parameter: Parameter) -> Parameter:
        """Replace a ``#/parameters/<name>`` reference with its target.

        Parameters that are not references are returned unchanged.

        Raises:
            SchemaReferenceError: If the document declares no such parameter.
        """
        if parameter.ref is None:
            return parameter

        ref = parameter.ref
        prefix = '#/parameters/'
        if not ref.startswith(prefix):
            raise SchemaReferenceError(
                ref, 'Only #/parameters/... references are supported for parameters'
            )

        name = ref[len(prefix):]
        parameters = self.description.parameters or {}
        if name not in parameters:
            raise SchemaReferenceError(ref, f"Parameter '{name}' not found")
        return parameters[name]
