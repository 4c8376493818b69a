"""Classification of path operations into client method IR nodes.

For every path and every recognized verb the classifier works out the method
name, whether a payload is sent, and which bucket (body, path, query, header)
each parameter belongs to. Operations that take ``formData`` parameters are
left out of the client entirely.
"""

import logging
import re

from swagger2ts.codegen.ir import Method, MethodParameter
from swagger2ts.codegen.schema_resolver import ReferenceResolver
from swagger2ts.codegen.type_registry import NameRegistry
from swagger2ts.codegen.types import map_type, needs_string_conversion, type_kind
from swagger2ts.codegen.utils import capitalize, mark_last, normalize
from swagger2ts.description import ApiDescription, Operation, Parameter
from swagger2ts.exceptions import UnsupportedFeatureError

__all__ = [
    'NO_PAYLOAD_VERBS',
    'RECOGNIZED_VERBS',
    'OperationClassifier',
    'path_to_method_name',
]

RECOGNIZED_VERBS = ('GET', 'POST', 'PUT', 'DELETE', 'PATCH')
NO_PAYLOAD_VERBS = ('GET', 'DELETE', 'HEAD')

METHOD_NAME_EXTENSION = 'x-swagger-js-method-name'
NAME_PATTERN_EXTENSION = 'x-name-pattern'
PROXY_HEADER_EXTENSION = 'x-proxy-header'

_LOCATION_FLAGS = {
    'body': 'is_body_parameter',
    'path': 'is_path_parameter',
    'query': 'is_query_parameter',
    'header': 'is_header_parameter',
}

_PATH_TEMPLATE = re.compile(r'(\{.*?\})')


def path_to_method_name(verb: str, path: str) -> str:
    """Synthesize a method name from a verb and a path.

    Templated segments become ``by<Name>`` and the remaining segments are
    joined and normalized, e.g. ``GET /pets/{petId}`` -> ``getPetsByPetId``.
    """
    if path in ('/', ''):
        return verb.lower()

    clean_path = path[:-1] if path.endswith('/') else path

    segments = []
    for segment in clean_path.split('/')[1:]:
        if len(segment) >= 2 and segment[0] == '{' and segment[-1] == '}':
            segment = 'by' + capitalize(segment[1:-1])
        segments.append(segment)

    result = normalize('-'.join(segments))
    if not result:
        return verb.lower()
    return verb.lower() + capitalize(result)


def _template_path(path: str, parameters: list[MethodParameter]) -> str:
    """Rewrite ``{name}`` segments as template-literal placeholders.

    Each placeholder uses the argument name the method declares for that path
    parameter, e.g. ``/pets/{pet_id}`` -> ``/pets/${PetId}``. Single-value path
    parameters are not method arguments, so their value is inlined instead.
    """
    path_parameters = {
        parameter.name: parameter
        for parameter in parameters
        if parameter.is_path_parameter
    }

    def substitute(match: re.Match) -> str:
        name = match.group(1)[1:-1]
        parameter = path_parameters.get(name)
        if parameter is None:
            return f'${{{normalize(name)}}}'
        if parameter.is_singleton:
            return str(parameter.singleton)
        return f'${{{parameter.camel_case_name}}}'

    return _PATH_TEMPLATE.sub(substitute, path)


class OperationClassifier:
    """Builds the ordered method list of the generated client.

    Example:
        >>> classifier = OperationClassifier(description, resolver)
        >>> methods = classifier.classify()
        >>> [m.method_name for m in methods]
        ['listPets', 'createPet', 'getPetsByPetId']
    """

    def __init__(
        self,
        description: ApiDescription,
        resolver: ReferenceResolver,
        include_proxy_headers: bool = False,
        logger: logging.Logger | None = None,
    ):
        """Initialize the classifier.

        Args:
            description: The validated API description.
            resolver: Resolver for parameter schema and parameter references.
            include_proxy_headers: Keep parameters marked ``x-proxy-header``;
                they are injected by proxies and app servers and are left out
                of browser clients by default.
            logger: Logger for dropped operations and progress messages.
        """
        self.description = description
        self.resolver = resolver
        self.include_proxy_headers = include_proxy_headers
        self.logger = logger or logging.getLogger(__name__)

    def classify(self) -> list[Method]:
        """Classify every operation in path and verb order.

        Operations rejected with :class:`UnsupportedFeatureError` are logged
        and skipped; every other error propagates.

        Returns:
            The methods, with ``last`` set on the final one.

        Raises:
            SchemaReferenceError: If a parameter references an unknown
                definition or parameter.
            DuplicateNameError: If two methods end up with the same name.
        """
        methods: list[Method] = []
        names = NameRegistry('method')

        for path, path_item in self.description.paths.items():
            shared_parameters = path_item.parameters or []

            for verb, operation in path_item.operations.items():
                if verb.upper() not in RECOGNIZED_VERBS:
                    continue

                try:
                    method = self.classify_operation(
                        path, verb, operation, shared_parameters
                    )
                except UnsupportedFeatureError as e:
                    self.logger.warning(f'Skipping {verb.upper()} {path}: {e.message}')
                    continue

                names.register(method.method_name, source=f'{verb.upper()} {path}')
                methods.append(method)

        return mark_last(methods)

    def classify_operation(
        self,
        path: str,
        verb: str,
        operation: Operation,
        shared_parameters: list[Parameter] | None = None,
    ) -> Method:
        """Classify a single operation.

        Args:
            path: The path template, e.g. ``/pets/{petId}``.
            verb: The HTTP verb in any case.
            operation: The operation object.
            shared_parameters: Parameters declared on the path item, appended
                after the operation's own parameters.

        Returns:
            The method IR node.

        Raises:
            UnsupportedFeatureError: If any parameter is sent as ``formData``.
        """
        verb = verb.upper()
        parameters = [
            self.resolver.resolve_parameter(parameter)
            for parameter in [*(operation.parameters or []), *(shared_parameters or [])]
        ]

        if any(parameter.in_ == 'formData' for parameter in parameters):
            raise UnsupportedFeatureError(
                'formData parameters',
                'The operation is left out of the generated client',
            )

        has_payload = verb not in NO_PAYLOAD_VERBS
        has_empty_payload = False
        if not parameters:
            has_payload = False
            has_empty_payload = True

        method_parameters = [
            self._classify_parameter(parameter)
            for parameter in parameters
            if self.include_proxy_headers
            or not parameter.vendor_extension(PROXY_HEADER_EXTENSION)
        ]

        return Method(
            method_name=self._method_name(verb, path, operation),
            path=path,
            template_path=_template_path(path, method_parameters),
            method=verb,
            http_method=verb.lower(),
            is_get=verb == 'GET',
            has_payload=has_payload,
            has_empty_payload=has_empty_payload,
            summary_lines=(
                operation.description.splitlines() if operation.description else []
            ),
            is_secure=(
                self.description.security is not None
                or operation.security is not None
            ),
            has_json_response=self._has_json_response(operation),
            parameters=mark_last(method_parameters),
            has_parameters=bool(method_parameters),
        )

    def _method_name(self, verb: str, path: str, operation: Operation) -> str:
        override = operation.vendor_extension(METHOD_NAME_EXTENSION)
        if override:
            return override
        if operation.operation_id:
            return normalize(operation.operation_id)
        return path_to_method_name(verb, path)

    def _classify_parameter(self, parameter: Parameter) -> MethodParameter:
        schema = parameter.schema_
        if schema is not None:
            declared_type = schema.primary_type
            ref = schema.ref
        else:
            declared_type = parameter.type
            ref = None

        is_array = ref is None and declared_type == 'array'
        item_type = None
        if is_array:
            if schema is not None:
                item = schema.item_schema
                item_ref = item.ref if item is not None else None
                item_raw_type = item.primary_type if item is not None else None
            else:
                item_ref = None
                item_raw_type = parameter.items.type if parameter.items else None

            if item_ref is not None:
                ref = item_ref
            else:
                item_type = map_type(item_raw_type)

        is_ref = ref is not None
        if is_ref:
            raw_type = self.resolver.resolve(ref)
            if is_array:
                item_type = raw_type
        else:
            raw_type = declared_type

        location = parameter.in_
        flags = {}
        if location in _LOCATION_FLAGS:
            flags[_LOCATION_FLAGS[location]] = True

        is_singleton = parameter.enum is not None and len(parameter.enum) == 1

        name = parameter.name or ''
        return MethodParameter(
            name=name,
            camel_case_name=normalize(name),
            location=location,
            type=raw_type,
            target_type=map_type(raw_type),
            kind=type_kind(raw_type, is_ref=is_ref),
            required=parameter.required,
            is_ref=is_ref,
            is_array=is_array,
            item_type=item_type,
            description=parameter.description,
            is_pattern_type=(
                location == 'query'
                and bool(parameter.vendor_extension(NAME_PATTERN_EXTENSION))
            ),
            is_singleton=is_singleton,
            singleton=parameter.enum[0] if is_singleton else None,
            convert_to_string=not is_ref and needs_string_conversion(raw_type),
            **flags,
        )

    def _has_json_response(self, operation: Operation) -> bool:
        media_types = [*(self.description.produces or []), *(operation.produces or [])]
        return any('/json' in media_type for media_type in media_types)
