"""Assembly of the document-level view model."""

from swagger2ts.codegen.ir import EnumDefinition, Method, ModelDefinition, ViewModel
from swagger2ts.codegen.utils import mark_last
from swagger2ts.description import ApiDescription

__all__ = ['ViewModelAssembler', 'base_url']


def base_url(description: ApiDescription) -> str:
    """Compute the base URL the client talks to.

    ``<scheme>://<host><basePath>`` when the first scheme, the host and the
    base path are all present; the bare host when only the host is; otherwise
    an empty string.
    """
    host = description.host
    if description.schemes and host and description.base_path:
        return f'{description.schemes[0]}://{host}{description.base_path}'
    return host or ''


class ViewModelAssembler:
    """Combines the transformer outputs into the root :class:`ViewModel`."""

    def __init__(self, description: ApiDescription):
        self.description = description

    def assemble(
        self,
        methods: list[Method],
        definitions: list[ModelDefinition],
        enums: list[EnumDefinition],
    ) -> ViewModel:
        return ViewModel(
            description=self.description.info.description or '',
            is_secure=self.description.security_definitions is not None,
            domain=base_url(self.description),
            methods=mark_last(methods),
            definitions=mark_last(definitions),
            enums=mark_last(enums),
            has_methods=bool(methods),
            has_definitions=bool(definitions),
            has_enums=bool(enums),
        )
