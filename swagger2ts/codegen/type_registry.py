"""Name registry for generated identifiers.

This module provides the NameRegistry class, which records every canonical
identifier generated within one namespace (models, enums or methods) and
refuses a second source that canonicalizes to the same identifier.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from swagger2ts.exceptions import DuplicateNameError


@dataclass
class NameInfo:
    """Information about a registered identifier.

    Attributes:
        name: The canonical identifier used in generated code.
        source: The raw name (or location) it was generated from.
    """

    name: str
    source: str | None


class NameRegistry:
    """Registry of canonical identifiers within a single namespace.

    Iteration yields entries in registration order.

    Example:
        >>> registry = NameRegistry('model')
        >>> registry.register('PetStore', source='pet-store')
        >>> registry.register('PetStore', source='pet_store')
        Traceback (most recent call last):
        ...
        DuplicateNameError: Duplicate model name 'PetStore' ...
    """

    def __init__(self, namespace: str):
        """Initialize an empty registry.

        Args:
            namespace: Label used in error messages (``model``, ``enum``,
                ``method``).
        """
        self.namespace = namespace
        self._names: dict[str, NameInfo] = {}

    def register(self, name: str, source: str | None = None) -> NameInfo:
        """Register a canonical identifier.

        Args:
            name: The canonical identifier.
            source: Where the identifier came from, for error messages.

        Returns:
            The NameInfo for the registered identifier.

        Raises:
            DuplicateNameError: If the identifier is already registered.
        """
        if name in self._names:
            raise DuplicateNameError(
                name, self.namespace, first=self._names[name].source, second=source
            )

        info = NameInfo(name=name, source=source)
        self._names[name] = info
        return info

    def get_source(self, name: str) -> str | None:
        info = self._names.get(name)
        return info.source if info else None

    def get_names(self) -> list[str]:
        """Registered identifiers in registration order."""
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[NameInfo]:
        return iter(self._names.values())

    def __contains__(self, name: str) -> bool:
        return name in self._names
