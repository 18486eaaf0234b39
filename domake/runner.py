"""Dofile to Makefile runner.

This module provides the main entry point: read a Dofile, translate it and
write the Makefile, asking before an existing Makefile is overwritten.

Exit codes:
    0: success, or overwrite declined
    1: argument, configuration or input error
    2: output write error
"""

import argparse
import os
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from . import __version__
from .config import load_config, DEFAULT_CONFIG_FILE
from .exceptions import (
    DomakeError,
    InputNotFoundError,
    InputReadError,
    OutputWriteError,
)
from .helpers import load_helpers
from .parser import parse_dofile, find_skipped_headers
from .renderer import render_makefile


DESCRIPTION = (
    "domake is a simple CLI tool that generates a Makefile\n"
    "from a custom and simpler file named `Dofile`."
)

CONDITIONS = (
    "conditions:\n"
    "  - you need to have a valid `Dofile` in the current directory.\n"
    "  - any `Makefile` existent in the current directory will be erased "
    "after confirmation."
)


def translate(text: str, helpers: str, generated_at: date) -> str:
    """Translate Dofile content to Makefile content, without any I/O.

    Args:
        text: Dofile content
        helpers: Boilerplate fragment embedded in the output
        generated_at: Date stamped in the header

    Returns:
        Makefile text
    """
    dofile = parse_dofile(text)
    return render_makefile(dofile.includes, helpers, dofile.commands,
                           generated_at)


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError:
        return "NAN"


def read_dofile(path: Union[str, Path]) -> str:
    """Read the Dofile.

    Raises:
        InputNotFoundError: If the file does not exist
        InputReadError: On any other read failure
    """
    path = Path(path)
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError:
        raise InputNotFoundError(path, _current_dir())
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Cannot read {path}: {e}")


def write_makefile(path: Union[str, Path], content: str) -> None:
    """Write the Makefile, replacing any previous content.

    Raises:
        OutputWriteError: If the file cannot be created or written
    """
    path = Path(path)
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(f"Error writing to file {path}: {e}")


def confirm_overwrite(
    path: Union[str, Path],
    ask: Optional[Callable[[str], str]] = None,
) -> bool:
    """Ask whether an existing output file may be overwritten.

    Only ``y`` and ``yes`` (any case) accept. End of input and Ctrl-C
    decline.

    Raises:
        InputReadError: If stdin cannot be read
    """
    if ask is None:
        ask = input
    print(
        f"A {Path(path).name} has been found in the current directory.\n"
        f"Do you want to overwrite it? "
        f"(you will lose all data previously present in the {Path(path).name})"
    )
    try:
        choice = ask("> [y/N] ")
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    except OSError:
        raise InputReadError("Failed to read input from stdin")
    return choice.strip().lower() in ('y', 'yes')


def run_dofile(
    input_path: Union[str, Path] = 'Dofile',
    output_path: Union[str, Path] = 'Makefile',
    helpers_path: Optional[Union[str, Path]] = None,
    clock: Callable[[], datetime] = datetime.now,
    dry_run: bool = False,
    verbose: bool = False,
) -> str:
    """Translate a Dofile and write the Makefile.

    Progress goes to stdout, or to stderr on a dry run so that stdout only
    holds the generated Makefile.

    Args:
        input_path: Dofile to read
        output_path: Makefile to write
        helpers_path: Replacement helpers fragment (None for the packaged one)
        clock: Source of the generation date
        dry_run: Print the Makefile instead of writing it
        verbose: Print parse statistics and skipped blocks

    Returns:
        Generated Makefile text

    Raises:
        DomakeError: On input, helpers or output failures
    """
    out = sys.stderr if dry_run else sys.stdout
    input_path = Path(input_path)

    text = read_dofile(input_path)
    print(f"-> {input_path.name} found", file=out)

    helpers = load_helpers(helpers_path)
    dofile = parse_dofile(text)
    print("-> Content parsed", file=out)

    if verbose:
        print(f"  Includes ({len(dofile.includes)}):", file=out)
        for include in dofile.includes:
            print(f"    - {include}", file=out)
        print(f"  Commands ({len(dofile.commands)}):", file=out)
        for command in dofile.commands:
            print(f"    - {command.name}", file=out)
        for name in find_skipped_headers(text):
            print(
                f"Warning: block [{name}] skipped "
                f"(missing description or instructions)",
                file=sys.stderr,
            )

    content = render_makefile(dofile.includes, helpers, dofile.commands,
                              clock())

    if dry_run:
        sys.stdout.write(content)
        return content

    write_makefile(output_path, content)
    print(f"-> {Path(output_path).name} successfully created!", file=out)
    return content


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser exiting with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='domake',
        description=DESCRIPTION,
        epilog=CONDITIONS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'domake {__version__}',
        help='Prints version information',
    )
    parser.add_argument(
        '-f', '--file',
        default=None,
        help='Dofile to read (default: Dofile)',
    )
    parser.add_argument(
        '-o', '--output',
        default=None,
        help='Makefile to write (default: Makefile)',
    )
    parser.add_argument(
        '-c', '--config',
        default=None,
        help=f'Configuration file (default: {DEFAULT_CONFIG_FILE} if present)',
    )
    parser.add_argument(
        '--helpers',
        default=None,
        help='Replace the embedded helpers fragment with this file',
    )
    parser.add_argument(
        '-y', '--yes',
        action='store_true',
        help='Overwrite an existing Makefile without asking',
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the Makefile instead of writing it',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print parse details and skipped blocks',
    )
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Usage:
        domake [options]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        config = load_config(parsed.config)
        input_path = parsed.file or config.input
        output_path = parsed.output or config.output
        helpers_path = parsed.helpers or config.helpers

        if (not parsed.dry_run and not parsed.yes
                and Path(output_path).exists()):
            if not confirm_overwrite(output_path):
                print(f"Aborted, {output_path} left untouched")
                return 0

        run_dofile(
            input_path,
            output_path,
            helpers_path=helpers_path,
            dry_run=parsed.dry_run,
            verbose=parsed.verbose,
        )
    except DomakeError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return e.exit_code

    return 0


if __name__ == '__main__':
    sys.exit(main())
