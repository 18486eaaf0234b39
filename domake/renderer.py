"""Makefile rendering.

The renderer is a pure function of its inputs: the generation date is
passed in by the caller, so the same Dofile always renders to the same
text for a given day.
"""

from datetime import date
from typing import Iterable, List

from .command import Command


TOOL_NAME = 'domake'
DATE_FORMAT = '%d/%m/%Y'


def format_generated_at(moment: date) -> str:
    """Format the generation stamp as DD/MM/YYYY."""
    return moment.strftime(DATE_FORMAT)


def render_header(generated_at: date) -> str:
    return (
        f"# This Makefile was done using '{TOOL_NAME}'\n"
        f"# Generated at {format_generated_at(generated_at)}\n"
        "\n"
    )


def render_includes(includes: Iterable[str]) -> str:
    """One ``include`` line per target, then a blank line.

    The blank line is emitted even without includes.
    """
    return "".join(f"include {target}\n" for target in includes) + "\n"


def render_makefile(
    includes: Iterable[str],
    helpers: str,
    commands: Iterable[Command],
    generated_at: date,
) -> str:
    """Render a complete Makefile.

    Layout:
        header comment (tool name, generation date), blank line
        include lines, blank line
        helpers blob verbatim, blank line
        one target block per command, each followed by a blank line

    Args:
        includes: Include targets, in order
        helpers: Boilerplate Makefile fragment, copied verbatim
        commands: Commands, in order
        generated_at: Date stamped in the header

    Returns:
        Makefile text
    """
    parts: List[str] = [
        render_header(generated_at),
        render_includes(includes),
        f"{helpers}\n",
        "\n",
    ]
    for command in commands:
        parts.append(f"{command.to_makefile()}\n")
    return "".join(parts)
