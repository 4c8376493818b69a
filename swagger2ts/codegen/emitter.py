"""Rendering and emission of generated TypeScript artifacts.

This module provides the TemplateRenderer, which turns an IR value and a
template id into source text through Mustache templates, and the
CodeEmitter interface with its file and in-memory implementations.
"""

import dataclasses
import os
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path

import pystache
from upath import UPath

from swagger2ts.exceptions import OutputError, TemplateRenderError

__all__ = [
    'TEMPLATE_IDS',
    'CodeEmitter',
    'FileEmitter',
    'StringEmitter',
    'TemplateRenderer',
]

TEMPLATE_IDS = ('client', 'model', 'enum', 'models_export')

TEMPLATE_EXTENSION = '.mustache'


def _no_escape(text: str) -> str:
    return text


class TemplateRenderer:
    """Renders IR values through Mustache templates.

    The packaged templates live in ``swagger2ts/templates``. A templates
    directory can override any of them with a file named
    ``<template_id>.mustache``; templates it does not provide fall back to
    the packaged ones. Values are rendered verbatim, without HTML escaping.

    Example:
        >>> renderer = TemplateRenderer()
        >>> source = renderer.render('enum', enum_definition)
    """

    def __init__(self, templates_dir: str | Path | None = None):
        """Initialize the renderer.

        Args:
            templates_dir: Optional directory with template overrides.
        """
        self.templates_dir = Path(templates_dir) if templates_dir else None
        self._renderer = pystache.Renderer(escape=_no_escape, missing_tags='ignore')
        self._templates: dict[str, str] = {}

    def get_template(self, template_id: str) -> str:
        """Return the template text for ``template_id``.

        Raises:
            TemplateRenderError: If the template does not exist.
        """
        if template_id in self._templates:
            return self._templates[template_id]

        file_name = f'{template_id}{TEMPLATE_EXTENSION}'
        try:
            if self.templates_dir and (self.templates_dir / file_name).is_file():
                text = (self.templates_dir / file_name).read_text(encoding='utf-8')
            else:
                text = (
                    resources.files('swagger2ts')
                    .joinpath('templates', file_name)
                    .read_text(encoding='utf-8')
                )
        except OSError as e:
            raise TemplateRenderError(template_id, cause=e)

        self._templates[template_id] = text
        return text

    def render(self, template_id: str, value, artifact: str | None = None) -> str:
        """Render ``value`` through the template ``template_id``.

        Args:
            template_id: One of :data:`TEMPLATE_IDS` (or an override name).
            value: An IR dataclass or a plain mapping.
            artifact: Output path, used in error messages.

        Returns:
            The rendered text, unchanged.

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        try:
            template = self.get_template(template_id)
        except TemplateRenderError as e:
            raise TemplateRenderError(template_id, artifact=artifact, cause=e.cause)

        context = dataclasses.asdict(value) if dataclasses.is_dataclass(value) else value

        try:
            return self._renderer.render(template, context)
        except Exception as e:
            raise TemplateRenderError(template_id, artifact=artifact, cause=e)


class CodeEmitter(ABC):
    """Abstract base class for code emitters.

    A CodeEmitter takes rendered source text and stores it under a path
    relative to the output root.
    """

    @abstractmethod
    def emit(self, relative_path: str, content: str) -> str:
        """Emit one artifact.

        Args:
            relative_path: POSIX-style path relative to the output root,
                e.g. ``models/Pet.ts``.
            content: The rendered source text.

        Returns:
            Where the artifact was emitted.
        """
        pass


class FileEmitter(CodeEmitter):
    """Writes artifacts below an output directory.

    Local files are written to a hidden staging file next to the target and
    then moved over it, so a failed write never leaves a truncated artifact
    behind.
    """

    def __init__(self, output_dir: str | Path | UPath):
        """Initialize the file emitter.

        Args:
            output_dir: Directory where files will be written.
        """
        self.output_dir = UPath(output_dir)
        self._written_files: list[str] = []

    def emit(self, relative_path: str, content: str) -> str:
        """Write one artifact.

        Raises:
            OutputError: If the directory cannot be created or the file
                cannot be written.
        """
        file_path = self.output_dir / relative_path

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write(file_path, content)
        except OSError as e:
            raise OutputError(str(file_path), cause=e)

        self._written_files.append(str(file_path))
        return str(file_path)

    def _write(self, file_path: UPath, content: str) -> None:
        if getattr(file_path, 'protocol', '') not in ('', 'file', 'local'):
            file_path.write_text(content, encoding='utf-8')
            return

        staging_path = file_path.with_name(f'.{file_path.name}.tmp')
        try:
            staging_path.write_text(content, encoding='utf-8')
            os.replace(staging_path, file_path)
        except OSError:
            staging_path.unlink(missing_ok=True)
            raise

    def get_written_files(self) -> list[str]:
        """Get list of all files written by this emitter.

        Returns:
            List of file paths that have been written.
        """
        return self._written_files.copy()


class StringEmitter(CodeEmitter):
    """Keeps artifacts in memory.

    Useful for tests and for callers that post-process the output.
    """

    def __init__(self):
        self._files: dict[str, str] = {}

    def emit(self, relative_path: str, content: str) -> str:
        self._files[relative_path] = content
        return relative_path

    def get_file(self, relative_path: str) -> str | None:
        return self._files.get(relative_path)

    def get_all_files(self) -> dict[str, str]:
        return self._files.copy()
