import json
import logging
from pathlib import Path

import click

from . import __version__
from .cli_utils import generation_comment
from .pipeline import GenerationError, PipelineGenerator, TypeScriptPluginConfig, UnresolvedReferenceError
from .pipeline.schema_ast import parse_introspection, parse_sdl

logger = logging.getLogger(__name__)


def load_graph(path: str):
    """Load a schema graph from SDL or from an introspection JSON result."""
    with open(path) as f:
        content = f.read()
    if Path(path).suffix == ".json":
        return parse_introspection(json.loads(content))
    return parse_sdl(content)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--add-generation-comment/--no-generation-comment",
    default=True,
    help="Add a comment with the generating command at the top of the output",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log generation details")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def graphql_schema_to_ts(config, add_generation_comment, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = TypeScriptPluginConfig.from_dict(json.load(f))
    else:
        config = TypeScriptPluginConfig()

    graph = load_graph(path)
    codegen = PipelineGenerator(graph, config)

    try:
        out = codegen.generate()
    except (GenerationError, UnresolvedReferenceError) as e:
        raise click.ClickException(str(e)) from e

    if add_generation_comment:
        out = generation_comment(graphql_schema_to_ts, __version__) + "\n\n" + out

    with open(output, "w") as f:
        f.write(out)
    logger.debug("Wrote %s", output)
