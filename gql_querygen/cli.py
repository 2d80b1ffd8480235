"""Command-line interface for gql-querygen."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from . import __version__
from .core.config import GeneratorConfig
from .core.customised import load_customised_operations
from .core.errors import QueryGenError
from .core.generator import QueryGenerator
from .core.introspection import fetch_introspection, parse_header
from .core.parser import SchemaParser
from .core.writer import DocumentWriter


def _parse_headers(ctx, param, values) -> dict[str, str]:
    try:
        return dict(parse_header(value) for value in values)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


@click.group()
@click.version_option(version=__version__)
def main():
    """Generate GraphQL operation documents from a schema.

    Writes one query, mutation or subscription per root field, selecting
    every field reachable beneath it.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory of schema files.",
)
@click.option(
    "--url",
    "-u",
    help="GraphQL endpoint to introspect instead of reading a schema file.",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    callback=_parse_headers,
    help='Extra request header for --url, e.g. "Authorization: Bearer TOKEN".',
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated documents (cleared first).",
)
@click.option("--depth-limit", type=int, default=100, show_default=True, help="Maximum query depth.")
@click.option("--ext", default="gql", show_default=True, help="Extension of generated files.")
@click.option("--assume-valid", is_flag=True, help="Skip SDL validation.")
@click.option("--admin", "is_admin", is_flag=True, help='Generate only fields annotated "admin".')
@click.option("--mobile", "is_mobile", is_flag=True, help='Generate only fields annotated "mobile".')
@click.option("--website", "is_website", is_flag=True, help='Generate only fields annotated "website".')
@click.option("--shared", "is_shared", is_flag=True, help='Generate only fields annotated "shared".')
@click.option(
    "--customised-queries",
    type=click.Path(file_okay=False),
    help="Directory of hand-written operations to leave out of generation.",
)
@click.option(
    "--include-deprecated-fields",
    "-C",
    is_flag=True,
    help="Include deprecated fields (excluded by default).",
)
@click.option(
    "--include-cross-references",
    "-R",
    is_flag=True,
    help="Re-expand fields already selected on the same path (excluded by default).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str | None,
    url: str | None,
    headers: dict[str, str],
    output: str,
    depth_limit: int,
    ext: str,
    assume_valid: bool,
    is_admin: bool,
    is_mobile: bool,
    is_website: bool,
    is_shared: bool,
    customised_queries: str | None,
    include_deprecated_fields: bool,
    include_cross_references: bool,
    verbose: bool,
):
    """Generate operation documents from a GraphQL schema.

    Examples:

        gql-querygen generate --schema ./schema.graphql --output ./gql

        gql-querygen generate -s ./schema -o ./gql --depth-limit 4 --ext graphql

        gql-querygen generate -u https://api.example.com/graphql -o ./gql
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if bool(schema) == bool(url):
        raise click.UsageError("Provide exactly one of --schema or --url.")

    try:
        config = GeneratorConfig(
            depth_limit=depth_limit,
            include_deprecated_fields=include_deprecated_fields,
            include_cross_references=include_cross_references,
            is_admin=is_admin,
            is_mobile=is_mobile,
            is_website=is_website,
            is_shared=is_shared,
            file_extension=ext,
            assume_valid=assume_valid,
        )
    except ValidationError as e:
        raise click.UsageError(str(e))

    output_path = Path(output).resolve()
    if verbose:
        click.echo(f"Schema: {schema or url}")
        click.echo(f"Output: {output_path}")

    try:
        customised = load_customised_operations(customised_queries)
        if verbose and customised:
            click.echo(f"  Customised operations excluded: {len(customised)}")

        click.echo("Parsing schema...")
        if url:
            ir = SchemaParser.from_introspection(fetch_introspection(url, headers))
        else:
            ir = SchemaParser(schema, assume_valid=config.assume_valid).parse_all()

        if verbose:
            click.echo(f"  Types: {len(ir.types)}")
            for root_type in ir.root_types:
                click.echo(f"  {root_type.name} fields: {len(root_type.fields)}")

        click.echo("Generating documents...")
        generator = QueryGenerator(ir, config, customised)
        documents = list(generator.generate())
    except QueryGenError as e:
        raise click.ClickException(str(e))

    writer = DocumentWriter(output_path, config.file_extension)
    try:
        writer.prepare()
        paths = writer.write_all(documents)
    except OSError as e:
        raise click.ClickException(f"Cannot write to {output_path}: {e}")
    if verbose:
        for path in paths:
            click.echo(f"  {path.relative_to(output_path)}")

    click.echo(f"Done! Generated {len(paths)} documents in {output_path}")


if __name__ == "__main__":
    main()
