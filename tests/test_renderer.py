"""Tests for Makefile rendering."""

from datetime import date, datetime

from domake.command import Command
from domake.parser import parse_dofile
from domake.renderer import (
    format_generated_at,
    render_header,
    render_includes,
    render_makefile,
)


HELPERS = ".DEFAULT_GOAL := help"
GENERATED_AT = date(2024, 3, 5)


class TestFormatGeneratedAt:
    """Tests for format_generated_at function."""

    def test_date(self):
        """Test day, month and year are zero padded."""
        assert format_generated_at(date(2024, 3, 5)) == "05/03/2024"

    def test_datetime(self):
        """Test the time of day is ignored."""
        assert format_generated_at(datetime(2023, 12, 31, 23, 59)) == "31/12/2023"


class TestRenderParts:
    """Tests for header and include rendering."""

    def test_header(self):
        """Test tool name and date lines followed by a blank line."""
        assert render_header(GENERATED_AT) == (
            "# This Makefile was done using 'domake'\n"
            "# Generated at 05/03/2024\n"
            "\n"
        )

    def test_includes(self):
        """Test one line per include, then a blank line."""
        assert render_includes(["a.mk", "b.mk"]) == "include a.mk\ninclude b.mk\n\n"

    def test_no_includes(self):
        """Test the blank line is kept without includes."""
        assert render_includes([]) == "\n"


class TestRenderMakefile:
    """Tests for render_makefile function."""

    def test_empty(self):
        """Test layout without includes nor commands."""
        output = render_makefile([], HELPERS, [], GENERATED_AT)
        assert output == (
            "# This Makefile was done using 'domake'\n"
            "# Generated at 05/03/2024\n"
            "\n"
            "\n"
            ".DEFAULT_GOAL := help\n"
            "\n"
        )

    def test_minimal_document(self):
        """Test the complete output for a one-task Dofile."""
        dofile = parse_dofile(
            "include config.mk\n"
            "[build]\n"
            "#Compiles the project\n"
            "gcc -o app main.c\n"
        )
        output = render_makefile(dofile.includes, HELPERS, dofile.commands,
                                 GENERATED_AT)
        assert output == (
            "# This Makefile was done using 'domake'\n"
            "# Generated at 05/03/2024\n"
            "\n"
            "include config.mk\n"
            "\n"
            ".DEFAULT_GOAL := help\n"
            "\n"
            "## build: Compiles the project\n"
            ".PHONY: build\n"
            "build: \n"
            "\tgcc -o app main.c\n"
            "\n"
        )

    def test_helpers_verbatim(self):
        """Test the helpers fragment is copied without changes."""
        helpers = "help:\n\t@echo  $$(x)  \n"
        output = render_makefile([], helpers, [], GENERATED_AT)
        assert "\n" + helpers + "\n\n" in output

    def test_order_preserved(self):
        """Test includes and commands keep their order."""
        commands = [
            Command(name="z", description="#Z", instructions=["echo z"]),
            Command(name="a", description="#A", dependencies="z",
                    instructions=["echo a1", "echo a2"]),
        ]
        output = render_makefile(["2.mk", "1.mk"], HELPERS, commands,
                                 GENERATED_AT)
        assert output.index("include 2.mk") < output.index("include 1.mk")
        assert output.index("include 1.mk") < output.index(HELPERS)
        assert output.index(HELPERS) < output.index("## z: Z")
        assert output.index("## z: Z") < output.index("## a: A")
        assert output.endswith(
            "## a: A\n"
            ".PHONY: a\n"
            "a: z\n"
            "\techo a1\n"
            "\techo a2\n"
            "\n"
        )

    def test_idempotent(self):
        """Test rendering twice gives identical output."""
        dofile = parse_dofile("include x.mk\n[a]\nb\n#A\necho a\n")
        first = render_makefile(dofile.includes, HELPERS, dofile.commands,
                                GENERATED_AT)
        second = render_makefile(dofile.includes, HELPERS, dofile.commands,
                                 GENERATED_AT)
        assert first == second

    def test_accepts_iterables(self):
        """Test generators are accepted for includes and commands."""
        commands = [Command(name="a", description="#A", instructions=["x"])]
        output = render_makefile(
            (i for i in ["a.mk"]), HELPERS, iter(commands), GENERATED_AT)
        assert "include a.mk\n" in output
        assert "\tx\n" in output
