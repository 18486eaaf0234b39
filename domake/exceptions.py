"""Errors raised at the domake I/O boundary.

Parsing and rendering never raise; every error here comes from reading
configuration, reading the Dofile or writing the Makefile.
"""


class DomakeError(Exception):
    """Base class for domake failures.

    :ivar exit_code: (int) process exit status the CLI should return
    """
    exit_code = 1


class InputNotFoundError(DomakeError):
    """Input file does not exist."""

    def __init__(self, path, cwd):
        self.path = path
        self.cwd = cwd
        super().__init__(f"No '{path}' found in directory {cwd}")


class InputReadError(DomakeError):
    """Input file exists but could not be read."""
    pass


class ConfigError(DomakeError):
    """Error parsing or validating a domake configuration file."""
    pass


class OutputWriteError(DomakeError):
    """Error creating or writing the output file."""
    exit_code = 2
