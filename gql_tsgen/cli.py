"""Command-line interface for gql-tsgen."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.logging import RichHandler

from . import __version__
from .core.config import GenerateConfig
from .core.errors import TsGenError
from .core.generator import generate_types
from .core.scalars import parse_scalar_mapping


def configure_logging(debug: bool):
    """Send gql_tsgen log records to a Rich console handler."""
    log = logging.getLogger("gql_tsgen")
    log.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)


def _parse_scalars(ctx, param, values) -> dict[str, str]:
    scalars = {}
    for value in values:
        try:
            name, ts_type = parse_scalar_mapping(value)
        except ValueError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param)
        scalars[name] = ts_type
    return scalars


@click.command()
@click.version_option(__version__)
@click.option(
    "--input",
    "input_path",
    default="./schemas",
    show_default=True,
    type=click.Path(exists=True, path_type=Path),
    help="Directory with GraphQL schemas (scanned recursively) or a single schema file.",
)
@click.option(
    "--output",
    "output_path",
    default="./generated-types.ts",
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path for the output TypeScript file.",
)
@click.option(
    "--skipChecks",
    "skip_checks",
    is_flag=True,
    help="Skip type mismatch checks; the first definition of a name wins.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Print debug log.",
)
@click.option(
    "--extension",
    "extensions",
    multiple=True,
    default=[".graphql"],
    show_default=True,
    help="Schema file extension to look for. Can be specified multiple times.",
)
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    callback=_parse_scalars,
    help="Custom scalar mapping as Name=tsType, e.g. Date=string. Can be specified multiple times.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory with templates overriding the built-in types.ts.j2.",
)
@click.option(
    "--header",
    help="Comment block placed above the generated banner, e.g. a license notice.",
)
@click.option(
    "--exclude-prefix",
    "exclude_prefixes",
    multiple=True,
    help="Leave out types and enums whose name starts with this prefix. Can be specified multiple times.",
)
@click.option(
    "--exclude-suffix",
    "exclude_suffixes",
    multiple=True,
    help="Leave out types and enums whose name ends with this suffix. Can be specified multiple times.",
)
def main(
    input_path: Path,
    output_path: Path,
    skip_checks: bool,
    debug: bool,
    extensions: tuple[str, ...],
    scalars: dict[str, str],
    template_dir: Path | None,
    header: str | None,
    exclude_prefixes: tuple[str, ...],
    exclude_suffixes: tuple[str, ...],
):
    """Generate TypeScript types from GraphQL schemas.

    Examples:

        gql-tsgen --input ./schemas --output ./generated-types.ts

        gql-tsgen --input ./schemas --output ./types.ts --skipChecks --debug

        gql-tsgen --input ./schemas --exclude-prefix _ --header "// Copyright Acme"
    """
    try:
        config = GenerateConfig(
            input_path=input_path,
            output_path=output_path,
            skip_checks=skip_checks,
            debug=debug,
            extensions=extensions,
            scalars=scalars,
            template_dir=template_dir,
            header=header,
            exclude_prefixes=exclude_prefixes,
            exclude_suffixes=exclude_suffixes,
        )
    except ValidationError as e:
        raise click.UsageError(str(e))

    configure_logging(config.debug)

    try:
        result = generate_types(
            config,
            on_file=lambda path: click.echo(f"Processing file: {path}"),
        )
    except TsGenError as e:
        raise click.ClickException(e.message)

    if config.debug:
        click.echo(f"  Enums: {len(result.registry.enums)}")
        click.echo(f"  Types: {len(result.registry.types)}")
        click.echo(f"  Queries: {len(result.registry.queries)}")
        click.echo(f"  Mutations: {len(result.registry.mutations)}")
        click.echo(f"  Requests: {len(result.projections)}")

    click.echo(f"TypeScript file generation completed. File saved at: {result.output_path}")


if __name__ == "__main__":
    main()
