"""translit CLI - Main entry point."""

import json
import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from translit.normalize.transliteration import transliterate
from translit.qc.samples import check_repository_samples
from translit.repository import SchemaRepository
from translit.utils.io import read_lines, write_lines
from translit.utils.log import setup_logging


# Package directory
ROOT_DIR = Path(__file__).parent

DEFAULT_SETTINGS_PATH = ROOT_DIR / "etc" / "settings.yaml"


def load_settings(settings_path: Path | None = None) -> dict[str, Any]:
    """Load settings.yaml."""
    settings_path = settings_path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        click.echo(f"Error: settings.yaml not found at {settings_path}", err=True)
        sys.exit(1)

    with settings_path.open(encoding="utf-8") as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}

    # Empty sections load as None
    result["logging"] = result.get("logging") or {}
    result["schemas"] = result.get("schemas") or {}
    result["settings_dir"] = settings_path.parent
    return result


def build_repository(settings: dict[str, Any], logger: Any) -> SchemaRepository:
    """Create the schema repository described by the settings."""
    settings_dir: Path = settings["settings_dir"]
    search_paths = [settings_dir / p for p in settings["schemas"].get("paths") or []]
    return SchemaRepository(search_paths=search_paths, logger=logger)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to settings.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Schema-driven transliteration CLI."""
    settings = load_settings(config_path)

    # Setup logging
    log_level = "DEBUG" if verbose else settings["logging"].get("level", "INFO")
    log_format = settings["logging"].get("format", "pretty")
    log_file = settings["logging"].get("file")
    if log_file:
        log_file = settings["settings_dir"] / log_file

    logger = setup_logging(level=log_level, format_type=log_format, log_file=log_file)

    # Store in context
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger
    ctx.obj["repository"] = build_repository(settings, logger)


@cli.command()
@click.argument("text", required=False)
@click.option("--schema", "schema_name", help="Schema name (default: from settings)")
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Transliterate a UTF-8 text file line by line",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to a file instead of stdout",
)
@click.pass_context
def text(
    ctx: click.Context,
    text: str | None,
    schema_name: str | None,
    input_path: Path | None,
    output_path: Path | None,
) -> None:
    """Transliterate TEXT or the contents of --input."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]
    repository: SchemaRepository = ctx.obj["repository"]

    if (text is None) == (input_path is None):
        raise click.UsageError("Provide either TEXT or --input, but not both")

    schema_name = schema_name or settings["schemas"].get("default", "wikipedia")

    try:
        schema = repository.load(schema_name)

        if input_path is not None:
            lines = list(read_lines(input_path))
            logger.debug(f"Transliterating {len(lines)} lines from {input_path} with {schema.name}")
            result_lines = [
                transliterate(line, schema)
                for line in tqdm(lines, desc="Transliterating", unit="line", disable=output_path is None)
            ]
        else:
            result_lines = [transliterate(text or "", schema) + "\n"]

        if output_path is not None:
            count = write_lines(output_path, result_lines)
            click.echo(f"Wrote {count} lines to {output_path}")
        else:
            click.echo("".join(result_lines), nl=False)

    except Exception as e:
        logger.error(f"Transliteration failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.group()
def schemas() -> None:
    """Schema inspection and conformance commands."""
    pass


@schemas.command(name="list")
@click.pass_context
def list_schemas(ctx: click.Context) -> None:
    """List available schemas."""
    logger = ctx.obj["logger"]
    repository: SchemaRepository = ctx.obj["repository"]

    try:
        for name in repository.names():
            schema = repository.load(name)
            click.echo(f"{name:20s}  {schema.description}")

    except Exception as e:
        logger.error(f"Listing schemas failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@schemas.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Print the definition of schema NAME as JSON."""
    logger = ctx.obj["logger"]
    repository: SchemaRepository = ctx.obj["repository"]

    try:
        schema = repository.load(name)
        click.echo(json.dumps(schema.to_dict(), ensure_ascii=False, indent=2))

    except Exception as e:
        logger.error(f"Loading schema failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@schemas.command()
@click.option("--schema", "schema_name", help="Specific schema (default: all)")
@click.pass_context
def check(ctx: click.Context, schema_name: str | None) -> None:
    """Check schemas against their samples."""
    logger = ctx.obj["logger"]
    repository: SchemaRepository = ctx.obj["repository"]

    try:
        names = [schema_name] if schema_name else None
        results = check_repository_samples(repository, logger, names=names)

        all_passed = True
        for result in results:
            if result.passed:
                click.echo(f"{result.schema_name}: {result.total} samples OK")
                continue

            all_passed = False
            click.echo(
                f"{result.schema_name}: {len(result.failures)}/{result.total} samples failed",
                err=True,
            )
            for failure in result.failures:
                click.echo(f"  {failure.source!r}", err=True)
                click.echo(f"    expected: {failure.expected!r}", err=True)
                click.echo(f"    actual:   {failure.actual!r}", err=True)

        if not all_passed:
            sys.exit(1)

    except Exception as e:
        logger.error(f"Sample check failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
