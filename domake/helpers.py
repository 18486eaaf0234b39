"""Boilerplate Makefile fragment embedded in every generated Makefile.

The fragment is opaque: it is never parsed, only copied. It can be
replaced as a whole by a user-provided file.
"""

from importlib import resources
from pathlib import Path
from typing import Optional, Union

from .exceptions import InputReadError


HELPERS_RESOURCE = 'make_helpers.mk'


def load_helpers(path: Optional[Union[str, Path]] = None) -> str:
    """Load the helpers fragment.

    Args:
        path: Replacement fragment; the packaged one is used when None

    Returns:
        Fragment text

    Raises:
        InputReadError: If the replacement file cannot be read
    """
    if path is None:
        return resources.files('domake').joinpath(HELPERS_RESOURCE).read_text(
            encoding='utf-8')

    path = Path(path)
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Cannot read helpers file {path}: {e}")
