"""Task model produced by the Dofile parser."""

from dataclasses import dataclass, field
from typing import List


DESCRIPTION_MARKER = '#'


@dataclass
class Command:
    """One task block of a Dofile.

    Example:
        [build]
        clean
        #Compiles the project
        gcc -o app main.c

    gives name='build', dependencies='clean',
    description='#Compiles the project', instructions=['gcc -o app main.c'].

    The description keeps its leading marker; it is only normalized when
    rendered. Dependencies are kept as a single unsplit token and
    instructions are copied verbatim from the source.
    """

    name: str
    description: str
    dependencies: str = ''
    instructions: List[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        """Description without its marker, surrounding whitespace trimmed."""
        text = self.description
        if text.startswith(DESCRIPTION_MARKER):
            text = text[len(DESCRIPTION_MARKER):]
        return text.strip()

    def to_makefile(self) -> str:
        """Render the command as a documented phony Makefile target.

        Returns:
            Target block; every line, including the last, ends with a newline
        """
        lines = [
            f"## {self.name}: {self.summary}",
            f".PHONY: {self.name}",
            f"{self.name}: {self.dependencies}",
        ]
        lines.extend(f"\t{instruction}" for instruction in self.instructions)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Command({self.name!r})"
