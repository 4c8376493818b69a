"""Custom exceptions for swagger2ts.

Every error raised while loading a Swagger document, building the
intermediate representation or writing TypeScript artifacts derives from
:class:`Swagger2TSError`, so callers can catch the whole family at once.
"""


class Swagger2TSError(Exception):
    """Base exception for all swagger2ts errors.

    Example:
        try:
            codegen.generate()
        except Swagger2TSError as e:
            print(f'swagger2ts error: {e}')
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(Swagger2TSError):
    """Base exception for problems with the API description itself."""

    pass


class SchemaLoadError(SchemaError):
    """The API description could not be read or parsed.

    Raised for missing files, HTTP failures and documents that are not
    valid JSON or YAML.

    Attributes:
        source: The path or URL that failed to load.
        cause: The underlying exception, if any.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load API description from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """The API description is missing required root fields or is malformed.

    Attributes:
        source: The path or URL of the rejected document.
        errors: Individual validation messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"API description '{source}' is malformed"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class SchemaReferenceError(SchemaError):
    """A ``$ref`` does not point at a known definition or parameter.

    Attributes:
        reference: The ``$ref`` string that could not be resolved.
        reason: Why the reference could not be resolved.
    """

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f"Failed to resolve reference '{reference}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class CodeGenerationError(Swagger2TSError):
    """Error while building the IR or emitting artifacts.

    Attributes:
        context: What was being generated when the error occurred.
        cause: The underlying exception, if any.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while generating {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class DuplicateNameError(CodeGenerationError):
    """Two source names canonicalize to the same generated identifier.

    Attributes:
        name: The colliding canonical identifier.
        namespace: Where the collision happened (``model``, ``enum`` or
            ``method``).
        first: The source that registered the name first.
        second: The source that collided with it.
    """

    def __init__(
        self,
        name: str,
        namespace: str,
        first: str | None = None,
        second: str | None = None,
    ):
        self.name = name
        self.namespace = namespace
        self.first = first
        self.second = second
        message = f"Duplicate {namespace} name '{name}'"
        if first and second:
            message += f" ('{second}' collides with '{first}')"
        super().__init__(message)


class TemplateRenderError(CodeGenerationError):
    """A template failed to render for one artifact.

    Attributes:
        template_id: The template that was being rendered.
        artifact: The relative output path of the artifact.
    """

    def __init__(
        self,
        template_id: str,
        artifact: str | None = None,
        cause: Exception | None = None,
    ):
        self.template_id = template_id
        self.artifact = artifact
        message = f"Failed to render template '{template_id}'"
        super().__init__(message, context=artifact, cause=cause)


class ConfigurationError(Swagger2TSError):
    """The configuration is invalid or cannot be found.

    Attributes:
        config_path: The configuration file, if applicable.
        field: The offending configuration field, if known.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(Swagger2TSError):
    """A generated artifact could not be written.

    Attributes:
        output_path: The directory or file being written.
        cause: The underlying exception, if any.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class UnsupportedFeatureError(Swagger2TSError):
    """The description uses something swagger2ts does not generate.

    Attributes:
        feature: Description of the unsupported feature.
        suggestion: Optional workaround.
    """

    def __init__(self, feature: str, suggestion: str | None = None):
        self.feature = feature
        self.suggestion = suggestion
        message = f'Unsupported feature: {feature}'
        if suggestion:
            message += f'. {suggestion}'
        super().__init__(message)
