"""Command-line interface for flowgraph."""

import logging
import sys

import click

from .graph.engine import DEFAULT_SLOT_PITCH
from .output.formatter import format_diagnostics, format_graph
from .schema.errors import SchemaLoadError, SchemaValidationError
from .validators.runner import check_graph_file

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(package_name="flowgraph")
@click.option(
    "--log-level",
    envvar="FLOWGRAPH_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Level for diagnostics written to stderr (defaults to FLOWGRAPH_LOG_LEVEL env var)",
)
def main(log_level: str):
    """flowgraph: sensors, modules and the dataflow between them."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _slot_pitch_option(func):
    return click.option(
        "--slot-pitch",
        envvar="FLOWGRAPH_SLOT_PITCH",
        type=float,
        default=DEFAULT_SLOT_PITCH,
        show_default=True,
        help="Pixels between neighbouring slot anchors (defaults to FLOWGRAPH_SLOT_PITCH env var)",
    )(func)


def _load(graph_file: str, slot_pitch: float):
    try:
        return check_graph_file(graph_file, slot_pitch=slot_pitch)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@_slot_pitch_option
def check(graph_file: str, output_format: str, slot_pitch: float):
    """Build a graph file and report every rejected request.

    GRAPH_FILE is the path to a YAML graph file.

    Exit codes:
      0 - Every request was accepted
      1 - Requests were rejected or connectors are inconsistent
      2 - File or schema error
    """
    _, result = _load(graph_file, slot_pitch)

    output = format_diagnostics(result, output_format)  # type: ignore
    click.echo(output)

    sys.exit(0 if result.is_clean else 1)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: 'text' lists entities and edges, 'json' emits node-link data",
)
@_slot_pitch_option
def show(graph_file: str, output_format: str, slot_pitch: float):
    """List the sensors, modules and edges a graph file builds.

    Rejected requests are left out of the listing.

    GRAPH_FILE is the path to a YAML graph file.
    """
    graph, _ = _load(graph_file, slot_pitch)

    click.echo(format_graph(graph, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
