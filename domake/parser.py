"""Dofile parsing.

A Dofile is a sequence of include directives and task blocks:

    include config.mk

    [build]
    clean
    #Compiles the project
    gcc -o app main.c

Each task block is made of:
    1. a header, the task name between square brackets
    2. an optional dependencies line (any line not starting with ``#``)
    3. a description line starting with ``#``
    4. one or more instruction lines, ended by a blank line, a new header
       or the end of the text

Blocks missing the description or the instructions are not commands and
are skipped without error. Use find_skipped_headers() to list them.
"""

import re
from dataclasses import dataclass, field
from typing import List

from .command import Command
from .directives import PRINTABLE, extract_includes


NEWLINE = r'(?:\r\n|\n)'
HEADER = rf'\[{PRINTABLE}+\]'
# a line starting a new block: a bracketed name without whitespace inside,
# optionally followed by dependencies (tells "[build] clean" from "[ -d x ]")
TASK_HEADER = r'\[[^\s\[\]\x00-\x1f\x7f]+\]'

BLOCK_RE = re.compile(
    rf'(?P<name>{HEADER}){NEWLINE}?'
    rf'(?P<dependencies>(?!#){PRINTABLE}+)?{NEWLINE}'
    rf'(?P<description>#{PRINTABLE}+){NEWLINE}'
    rf'(?P<instructions>(?:(?!{TASK_HEADER}){PRINTABLE}+{NEWLINE}?)+)'
)

HEADER_LINE_RE = re.compile(rf'^(?P<name>{TASK_HEADER})', re.MULTILINE)


@dataclass
class Dofile:
    """Parsed Dofile content, in first-appearance order."""
    includes: List[str] = field(default_factory=list)
    commands: List[Command] = field(default_factory=list)


def _strip_brackets(header: str) -> str:
    return header[1:-1]


def _split_instructions(raw: str) -> List[str]:
    """Split the instructions capture into verbatim lines.

    The separator that ends the last line does not produce an empty
    instruction.
    """
    instructions = raw.split('\n')
    if instructions and instructions[-1] == '':
        instructions.pop()
    return instructions


def _to_command(match: 're.Match') -> Command:
    return Command(
        name=_strip_brackets(match.group('name')),
        description=match.group('description'),
        dependencies=(match.group('dependencies') or '').strip(),
        instructions=_split_instructions(match.group('instructions')),
    )


def parse_commands(text: str) -> List[Command]:
    """Collect all well-formed task blocks.

    Args:
        text: Dofile content

    Returns:
        Commands in the order their blocks appear (may be empty)
    """
    return [_to_command(match) for match in BLOCK_RE.finditer(text)]


def parse_dofile(text: str) -> Dofile:
    """Extract includes and commands from Dofile content.

    Both scans are independent and never fail on malformed content.

    Args:
        text: Dofile content

    Returns:
        Dofile with includes and commands
    """
    return Dofile(
        includes=extract_includes(text),
        commands=parse_commands(text),
    )


def find_skipped_headers(text: str) -> List[str]:
    """List task headers that did not produce a command.

    Only lines starting with a task header are considered. A header consumed
    as part of another block (e.g. as its dependencies line) is not reported.

    Args:
        text: Dofile content

    Returns:
        Names (brackets stripped) of the skipped blocks, in order
    """
    spans = [match.span() for match in BLOCK_RE.finditer(text)]
    skipped = []
    for match in HEADER_LINE_RE.finditer(text):
        pos = match.start()
        if any(start <= pos < end for start, end in spans):
            continue
        skipped.append(_strip_brackets(match.group('name')))
    return skipped
