"""Code generation module for swagger2ts.

This module provides the main Codegen class that orchestrates the generation
of a TypeScript client from a Swagger 2.0 description.
"""

import dataclasses
import logging

from swagger2ts.codegen.definitions import DefinitionTransformer
from swagger2ts.codegen.emitter import CodeEmitter, FileEmitter, TemplateRenderer
from swagger2ts.codegen.ir import ViewModel
from swagger2ts.codegen.operations import OperationClassifier
from swagger2ts.codegen.schema_loader import SchemaLoader
from swagger2ts.codegen.schema_resolver import ReferenceResolver
from swagger2ts.codegen.view_model import ViewModelAssembler
from swagger2ts.config import DocumentConfig
from swagger2ts.description import ApiDescription
from swagger2ts.exceptions import CodeGenerationError, TemplateRenderError

__all__ = ['MODELS_DIR', 'ENUMS_DIR', 'MODELS_EXPORT_FILE', 'Artifact', 'Codegen']

MODELS_DIR = 'models'
ENUMS_DIR = 'enums'
MODELS_EXPORT_FILE = 'models.ts'


@dataclasses.dataclass
class Artifact:
    """One file to render: where it goes, which template, which IR value."""

    path: str
    template_id: str
    value: object


class Codegen:
    """Main code generator for creating TypeScript clients from Swagger 2.0.

    The run is split in two phases. ``build`` loads the description and turns
    it into a complete :class:`ViewModel`; any transformation error aborts the
    run before a single file is touched. ``emit`` then renders every artifact
    from the finished IR and writes it out.

    Attributes:
        config: The DocumentConfig containing source and output settings.
        logger: Logger receiving progress, dropped operations and failures.

    Example:
        >>> from swagger2ts.config import DocumentConfig
        >>> from swagger2ts.codegen.codegen import Codegen
        >>>
        >>> config = DocumentConfig(
        ...     source="https://petstore.swagger.io/v2/swagger.json",
        ...     output="./client"
        ... )
        >>> codegen = Codegen(config)
        >>> codegen.generate()
        # Creates client.ts, models.ts, models/ and enums/ in ./client/
    """

    def __init__(
        self,
        config: DocumentConfig,
        schema_loader: SchemaLoader | None = None,
        renderer: TemplateRenderer | None = None,
        emitter: CodeEmitter | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the code generator.

        Args:
            config: Configuration specifying source and output location.
            schema_loader: Optional custom schema loader.
            renderer: Optional template renderer. Defaults to one honoring
                ``config.templates_dir``.
            emitter: Optional emitter. Defaults to a FileEmitter writing to
                ``config.output``.
            logger: Optional logger. Defaults to this module's logger.
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self._schema_loader = schema_loader or SchemaLoader()
        self._renderer = renderer or TemplateRenderer(config.templates_dir)
        self._emitter = emitter or FileEmitter(config.output)

    def load(self) -> ApiDescription:
        """Load and validate the configured description."""
        self.logger.info(f'Loading {self.config.source}')
        return self._schema_loader.load(self.config.source)

    def build(self, description: ApiDescription | None = None) -> ViewModel:
        """Build the complete view model.

        Args:
            description: An already loaded description. Loaded from
                ``config.source`` when omitted.

        Raises:
            SchemaReferenceError: If a reference cannot be resolved.
            DuplicateNameError: If two generated names collide.
        """
        if description is None:
            description = self.load()

        resolver = ReferenceResolver(description)
        definitions, enums = DefinitionTransformer(
            description, resolver, logger=self.logger
        ).transform()
        methods = OperationClassifier(
            description,
            resolver,
            include_proxy_headers=self.config.include_proxy_headers,
            logger=self.logger,
        ).classify()

        view_model = ViewModelAssembler(description).assemble(
            methods, definitions, enums
        )
        self.logger.debug(
            f'Built view model: {len(view_model.methods)} methods, '
            f'{len(view_model.definitions)} models, {len(view_model.enums)} enums'
        )
        return view_model

    def plan(self, view_model: ViewModel) -> list[Artifact]:
        """List the artifacts for ``view_model`` in emission order."""
        artifacts = [Artifact(self.config.client_file, 'client', view_model)]
        artifacts.extend(
            Artifact(f'{MODELS_DIR}/{definition.name}.ts', 'model', definition)
            for definition in view_model.definitions
        )
        artifacts.extend(
            Artifact(f'{ENUMS_DIR}/{enum.name}.ts', 'enum', enum)
            for enum in view_model.enums
        )
        artifacts.append(Artifact(MODELS_EXPORT_FILE, 'models_export', view_model))
        return artifacts

    def emit(self, artifacts: list[Artifact]) -> list[str]:
        """Render and write each artifact.

        A render failure does not stop the remaining artifacts from being
        written; all failures are reported together afterwards.

        Returns:
            Where each artifact was written, in order.

        Raises:
            CodeGenerationError: If one or more artifacts failed to render.
            OutputError: If a file cannot be written.
        """
        written: list[str] = []
        failures: list[TemplateRenderError] = []

        for artifact in artifacts:
            try:
                content = self._renderer.render(
                    artifact.template_id, artifact.value, artifact=artifact.path
                )
            except TemplateRenderError as e:
                self.logger.error(e.message)
                failures.append(e)
                continue

            written.append(self._emitter.emit(artifact.path, content))
            self.logger.debug(f'Wrote {artifact.path}')

        if failures:
            raise CodeGenerationError(
                f'{len(failures)} of {len(artifacts)} artifacts failed to render',
                context=', '.join(
                    failure.artifact or failure.template_id for failure in failures
                ),
                cause=failures[0],
            )

        return written

    def generate(self) -> list[str]:
        """Load, transform, render and write the whole client.

        Returns:
            The written file locations.
        """
        view_model = self.build()
        written = self.emit(self.plan(view_model))
        self.logger.info(
            f'Generated {len(written)} files for {self.config.source} '
            f'in {self.config.output}'
        )
        return written
