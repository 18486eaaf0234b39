"""Include directive extraction.

An include directive is the literal ``include`` followed by one space and
the rest of the line. Directives are not anchored to the start of a line
and their targets are not validated.
"""

import re
from typing import List


# one character of printable text: anything but a control character
PRINTABLE = r'[^\x00-\x1f\x7f]'

INCLUDE_RE = re.compile(rf'include (?P<include>{PRINTABLE}+)')


def extract_includes(text: str) -> List[str]:
    """Collect include targets in the order they appear.

    Args:
        text: Dofile content

    Returns:
        Include targets (may be empty)
    """
    return [match.group('include') for match in INCLUDE_RE.finditer(text)]
