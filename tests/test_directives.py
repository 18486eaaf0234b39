"""Tests for include directive extraction."""

from domake.directives import extract_includes


class TestExtractIncludes:
    """Tests for extract_includes function."""

    def test_no_include(self):
        """Test text without directives."""
        assert extract_includes("[build]\n#Build\nmake\n") == []

    def test_empty_text(self):
        """Test empty text."""
        assert extract_includes("") == []

    def test_single_include(self):
        """Test a single directive."""
        assert extract_includes("include config.mk\n") == ["config.mk"]

    def test_order_preserved(self):
        """Test directives are returned in textual order."""
        text = "include b.mk\ninclude a.mk\n\ninclude c.mk"
        assert extract_includes(text) == ["b.mk", "a.mk", "c.mk"]

    def test_not_anchored_to_line_start(self):
        """Test a directive in the middle of a line is matched."""
        assert extract_includes("  -include local.mk\n") == ["local.mk"]

    def test_target_taken_verbatim(self):
        """Test the rest of the line is not validated nor trimmed."""
        text = "include $(HOME)/my file.mk  \n"
        assert extract_includes(text) == ["$(HOME)/my file.mk  "]

    def test_crlf_line_ending(self):
        """Test carriage return is not part of the target."""
        assert extract_includes("include a.mk\r\ninclude b.mk\r\n") == ["a.mk", "b.mk"]

    def test_requires_single_space(self):
        """Test the keyword must be followed by a space and a target."""
        assert extract_includes("include\nincludes.mk\ninclude \n") == []

    def test_unicode_target(self):
        """Test non-ASCII printable characters are kept."""
        assert extract_includes("include réglages.mk\n") == ["réglages.mk"]
