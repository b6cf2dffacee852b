"""CLI entry point for swagger-markup."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from swagger_markup.config import GroupBy, MarkupConfig
from swagger_markup.converter import MarkupConverter
from swagger_markup.markup.builder import MarkupLanguage
from swagger_markup.parser.detect import SwaggerParseError


def _load_config(
    config_path: Path | None,
    markup: str | None,
    group_by: str | None,
    examples: Path | None,
    descriptions: Path | None,
) -> MarkupConfig:
    """Merge an optional YAML config file with command-line options."""
    overrides = dict(
        markup_language=MarkupLanguage(markup) if markup else None,
        paths_grouped_by=GroupBy(group_by) if group_by else None,
        examples_folder=examples,
        descriptions_folder=descriptions,
    )
    if config_path is not None:
        return MarkupConfig.from_yaml(config_path, **overrides)
    return MarkupConfig(**{k: v for k, v in overrides.items() if v is not None})


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Swagger Markup: turn Swagger/OpenAPI documents into AsciiDoc or Markdown."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output directory for the generated documents.")
@click.option("--markup", default=None, type=click.Choice([m.value for m in MarkupLanguage]), help="Markup dialect (default: asciidoc).")
@click.option("--group-by", default=None, type=click.Choice([g.value for g in GroupBy]), help="Group paths as-is or by tag (default: as-is).")
@click.option("--examples", default=None, type=click.Path(exists=True, file_okay=False, path_type=Path), help="Folder with example request/response files.")
@click.option("--descriptions", default=None, type=click.Path(exists=True, file_okay=False, path_type=Path), help="Folder with hand-written descriptions.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML config file.")
def convert(
    doc_path: Path,
    output: Path,
    markup: str | None,
    group_by: str | None,
    examples: Path | None,
    descriptions: Path | None,
    config_path: Path | None,
):
    """Convert an API description into overview, paths and definitions documents."""
    try:
        config = _load_config(config_path, markup, group_by, examples, descriptions)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    click.echo(f"Parsing {doc_path}...")
    try:
        converter = MarkupConverter.from_file(doc_path, config)
    except (SwaggerParseError, yaml.YAMLError) as e:
        raise click.ClickException(f"Cannot parse {doc_path}: {e}") from e
    click.echo(f"Found {len(converter.document.paths)} paths and {len(converter.document.definitions)} definitions.")

    for file_path in converter.to_folder(output):
        click.echo(f"  Created {file_path}")

    click.echo(f"Done! Generated documents in {output}")
