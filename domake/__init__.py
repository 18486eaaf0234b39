"""Generate a Makefile from a Dofile.

A Dofile is a terser way to write phony Makefile targets:

    include config.mk

    [build]
    clean
    #Compiles the project
    gcc -o app main.c

becomes:

    ## build: Compiles the project
    .PHONY: build
    build: clean
    	gcc -o app main.c

Usage:
    from domake import translate
    makefile = translate(text, load_helpers(), date.today())

CLI:
    domake
    python -m domake --dry-run
"""

__version__ = '0.1.0'

from .command import Command
from .directives import extract_includes
from .parser import Dofile, parse_commands, parse_dofile, find_skipped_headers
from .renderer import render_makefile, format_generated_at
from .helpers import load_helpers
from .config import DomakeConfig, load_config, parse_config_string
from .exceptions import (
    DomakeError,
    InputNotFoundError,
    InputReadError,
    ConfigError,
    OutputWriteError,
)
from .runner import translate, run_dofile, main

__all__ = [
    # Model
    'Command', 'Dofile',
    # Parsing
    'extract_includes', 'parse_commands', 'parse_dofile', 'find_skipped_headers',
    # Rendering
    'render_makefile', 'format_generated_at', 'load_helpers',
    # Configuration
    'DomakeConfig', 'load_config', 'parse_config_string',
    # Errors
    'DomakeError', 'InputNotFoundError', 'InputReadError', 'ConfigError',
    'OutputWriteError',
    # Runner
    'translate', 'run_dofile', 'main',
]
