"""
Unit-тесты для работы с RTF разметкой строки.
"""

from src.cleaning.classifier.rtf_format import (
    strip_formatting,
    extract_formatting_prefix,
    trim_trailing_controls,
)


class TestStripFormatting:
    """Видимый текст строки."""

    def test_control_words_and_line_break_removed(self):
        assert strip_formatting("\\fs20 \\cf3 Mass General Hospital\\") == "Mass General Hospital"

    def test_group_delimiters_removed(self):
        assert strip_formatting("{\\b Clinical Notes}") == "Clinical Notes"

    def test_hex_escape_removed(self):
        assert strip_formatting("\\fs20 caf\\'e9 menu") == "caf menu"

    def test_negative_argument(self):
        """Управляющее слово с отрицательным параметром (\\li-360)."""
        assert strip_formatting("\\li-360 Indented text") == "Indented text"

    def test_formatting_only_line_is_empty(self):
        assert strip_formatting("\\pard\\plain \\f0 \\") == ""


class TestFormattingPrefix:
    """Ведущий префикс форматирования."""

    def test_prefix_with_two_words(self):
        assert extract_formatting_prefix("\\fs20 \\cf2 Text") == "\\fs20 \\cf2 "

    def test_braces_removed_from_prefix(self):
        assert extract_formatting_prefix("{\\b Heading}") == "\\b "

    def test_default_body_prefix(self):
        assert extract_formatting_prefix("Plain text") == "\\fs20 "

    def test_custom_default(self):
        assert extract_formatting_prefix("Plain text", default="") == ""


def test_trim_trailing_controls():
    assert trim_trailing_controls("\\fs20 Text\\\\") == "\\fs20 Text"
    assert trim_trailing_controls("\\fs20 Text") == "\\fs20 Text"
    assert trim_trailing_controls("}") == "}"
