"""resolve-dependency-path - command-line wrapper around the path resolver."""

import logging

import click

from .alias_resolution import ConfigAliasResolver
from .console import error_console
from .errors import ResolutionError
from .logging_setup import init_json_logging
from .probe import DEFAULT_EXTENSIONS
from .probe import ExtensionProbe
from .resolver import PathResolver
from .utils.error_format import escape_markup
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)


def build_resolver(config: str | None, probe: bool, extensions: tuple[str, ...]) -> PathResolver:
    """Assemble a PathResolver from CLI options.

    Args:
        config: Alias config path, or None to disable alias resolution
        probe: Whether to probe the filesystem after pure resolution
        extensions: Extensions the probe should try (empty uses the defaults)

    Returns:
        Configured PathResolver
    """
    alias_resolver = ConfigAliasResolver(config) if config else None
    file_probe = ExtensionProbe(extensions or None) if probe else None
    return PathResolver(alias_resolver=alias_resolver, probe=file_probe)


@click.command()
@click.version_option(package_name="resolve-dependency-path")
@click.argument("dependency")
@click.argument("filename")
@click.argument("directory")
@click.option(
    "--config",
    "-c",
    envvar="RESOLVE_DEPENDENCY_PATH_CONFIG",
    default=None,
    help="YAML alias config (paths, base_dir, plugins); relative to DIRECTORY",
)
@click.option("--probe/--no-probe", default=False, help="Check the filesystem to disambiguate extensions")
@click.option(
    "--extension",
    "-e",
    "extensions",
    multiple=True,
    help=f"Extension to try when probing (repeatable, default: {' '.join(DEFAULT_EXTENSIONS)})",
)
@click.option("--log-file", envvar="RESOLVE_DEPENDENCY_PATH_LOG_PATH", default=None, help="Write JSONL logs to this file")
@click.option(
    "--log-level",
    envvar="RESOLVE_DEPENDENCY_PATH_LOG_LEVEL",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for --log-file",
)
@click.pass_context
def cli(ctx, dependency, filename, directory, config, probe, extensions, log_file, log_level):
    """Resolve DEPENDENCY, referenced from FILENAME, to an absolute path.

    DIRECTORY is the project root used for non-relative dependencies.

    Examples:

        \b
        resolve-dependency-path ./bar /proj/foo.js /proj
        resolve-dependency-path 'templates/file.css!' /proj/foo.js /proj
        resolve-dependency-path 'hgn!templates/a' /proj/foo.js /proj -c aliases.yaml
    """
    if log_file:
        init_json_logging(log_file, log_level)

    resolver = build_resolver(config, probe, extensions)

    try:
        resolved = resolver.resolve(dependency, filename, directory)
    except ResolutionError as e:
        logger.error(f"[cli] {format_error_message(e)}")
        error_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}")
        ctx.exit(1)

    click.echo(resolved)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
