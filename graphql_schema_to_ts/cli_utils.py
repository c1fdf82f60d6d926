"""
Header comment for generated TypeScript files.
"""

from pathlib import Path

import click

COMMAND_NAME = "graphql_schema_to_ts"


def _display(param: click.Parameter, value) -> str:
    # Path parameters show the file name only, so headers match across machines
    if isinstance(param.type, click.Path):
        return Path(value).name
    return str(value)


def command_line(command: click.Command) -> str:
    """
    The invocation of `command` that produced the current output.

    Positional arguments come first, then options that differ from their
    default. Falls back to the bare command name outside a click context.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return COMMAND_NAME

    positional = []
    flags = []
    for param in command.params:
        value = ctx.params.get(param.name)
        if not value:
            continue
        if isinstance(param, click.Argument):
            positional.append(_display(param, value))
        elif value != param.default:
            flags.append(param.opts[0])
            if not (isinstance(param, click.Option) and param.is_flag):
                flags.append(_display(param, value))

    return " ".join([COMMAND_NAME, *positional, *flags])


def generation_comment(command: click.Command, version: str) -> str:
    """The `// Generated by` line placed at the top of generated files."""
    return f"// Generated by {COMMAND_NAME} {version}: {command_line(command)}"
