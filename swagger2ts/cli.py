import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from swagger2ts.codegen.codegen import Codegen
from swagger2ts.config import CodegenConfig, DocumentConfig, get_config
from swagger2ts.exceptions import ConfigurationError, Swagger2TSError

console = Console()
app = typer.Typer(
    name='swagger2ts',
    help='Generate TypeScript client code from Swagger 2.0 descriptions',
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> logging.Logger:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    return logging.getLogger('swagger2ts')


def _resolve_config(
    source: str | None, output: str | None, config_path: str | None
) -> CodegenConfig:
    if source and output:
        return CodegenConfig(documents=[DocumentConfig(source=source, output=output)])
    if source or output:
        raise ConfigurationError('SOURCE and OUTPUT must be given together')
    return get_config(config_path)


@app.command()
def generate(
    source: Annotated[
        str | None,
        typer.Argument(help='Path or URL of the Swagger 2.0 document'),
    ] = None,
    output: Annotated[
        str | None,
        typer.Argument(help='Output directory for the generated client'),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    client_file: Annotated[
        str | None,
        typer.Option('--client-file', help='File name of the generated client'),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Generate a TypeScript client.

    SOURCE and OUTPUT take precedence over any configuration file. Without
    them, documents are read from the config file, swagger2ts.yaml in the
    current directory or [tool.swagger2ts] in pyproject.toml.

    Examples:
        swagger2ts generate ./swagger.json ./src/api
        swagger2ts generate ./swagger.json ./src/api --client-file index.ts
        swagger2ts generate --config my-config.yaml
    """
    logger = _configure_logging(verbose)

    try:
        codegen_config = _resolve_config(source, output, config)

        for document_config in codegen_config.documents:
            if client_file:
                document_config = document_config.model_copy(
                    update={'client_file': client_file}
                )

            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task(
                    f'Generating code for {document_config.source} in {document_config.output}...',
                    total=None,
                )

                written = Codegen(document_config, logger=logger).generate()

                progress.update(
                    task,
                    description=f'Code generation completed for {document_config.source}!',
                )

            console.print(
                f'[green]Generated {len(written)} files[/green] in {document_config.output}'
            )
            console.print('[dim]Generated files:[/dim]')
            for path in written:
                console.print(f'  - {path}')

    except Swagger2TSError as e:
        console.print(f'[red]Error:[/red] {e.message}')
        raise typer.Exit(1)
    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of swagger2ts."""
    from swagger2ts import __version__

    console.print(f'swagger2ts version: {__version__}')


if __name__ == '__main__':
    app()
