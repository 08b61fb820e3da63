"""
Unit-тесты для LineClassifier.

ЦКП: Проверка эвристик на встроенном heuristics.yaml.
"""

import pytest

from src.cleaning.classifier import (
    LineClassifier,
    is_marker,
    is_legacy_marker,
    is_page_separator,
)
from src.cleaning.heuristics import HeuristicsConfig


@pytest.fixture
def classifier():
    HeuristicsConfig._cache.clear()
    return LineClassifier()


class TestMarkers:
    def test_pipeline_markers(self):
        assert is_marker("<<Obs>>")
        assert is_marker("<<Date>>")
        assert is_marker("<<< >>>")
        assert not is_marker("<<>>")

    def test_legacy_markers(self):
        assert is_legacy_marker("<<>>")
        assert is_legacy_marker("  <<Obs>> ")
        assert not is_legacy_marker("<<< >>>")

    def test_page_separator(self):
        assert is_page_separator("<<< >>>")
        assert not is_page_separator("<<Date>>")


class TestDateLines:
    def test_date_line(self, classifier):
        assert classifier.is_date_line("\\fs20 Jan 5, 2020\\")

    def test_metadata_with_date_is_not_date_line(self, classifier):
        """Поле 'Created: <дата>' - метаданные, а не строка даты."""
        assert not classifier.is_date_line("\\fs20 Created: Jan 5, 2020\\")

    def test_text_without_date(self, classifier):
        assert not classifier.is_date_line("\\fs20 Office Visit\\")


class TestProviders:
    def test_whole_line_provider(self, classifier):
        assert classifier.is_whole_line_provider("\\cf3 Mass General Hospital\\")

    def test_wrong_color(self, classifier):
        assert not classifier.is_whole_line_provider("\\cf2 Mass General Hospital\\")

    def test_non_provider_head(self, classifier):
        """Окрашенный заголовок раздела не является провайдером."""
        assert not classifier.is_whole_line_provider("\\cf3 Clinical Notes Center\\")

    def test_colon_rejects(self, classifier):
        assert not classifier.is_whole_line_provider("\\cf3 Location: Mass General Hospital\\")

    def test_no_location_keyword(self, classifier):
        assert not classifier.is_whole_line_provider("\\cf3 Office Visit\\")

    def test_prefixed_line_is_not_whole_line(self, classifier):
        assert not classifier.is_whole_line_provider("\\fs20 \\cf3 Mass General Hospital\\")

    def test_find_inline_provider(self, classifier):
        line = "\\fs20 Jan 1, 2020 \\cf3 Mass General Hospital\\"
        assert classifier.find_inline_provider(line) == line.index("\\cf3")
        assert classifier.is_inline_provider_chunk(line)

    def test_inline_chunk_not_provider(self, classifier):
        assert classifier.find_inline_provider("\\fs20 Jan 1, 2020 \\cf3 Office Visit\\") is None
        assert classifier.find_inline_provider("\\fs20 Jan 1, 2020") is None


class TestHeadings:
    def test_large_font_heading(self, classifier):
        assert classifier.is_section_heading("\\fs32 Medications\\")

    def test_bold_heading(self, classifier):
        assert classifier.is_section_heading("\\fs28 \\b Clinical Notes\\b0\\")

    def test_body_text_is_not_heading(self, classifier):
        assert not classifier.is_section_heading("\\fs20 Medications\\")

    def test_heading_excludes_metadata_and_dates(self, classifier):
        assert not classifier.is_section_heading("\\fs32 Created: yesterday\\")
        assert not classifier.is_section_heading("\\b Jan 1, 2020\\")

    def test_known_heading(self, classifier):
        assert classifier.is_known_heading("Allergies and Reactions")
        assert not classifier.is_known_heading("Office Visit")


class TestBoilerplate:
    @pytest.mark.parametrize("line", [
        "\\fs16 Page 3 of 125\\",
        "\\fs16 Continued from Page 2\\",
        "\\fs16 Continued on Page 4\\",
        "\\fs16 This summary displays certain health information about you\\",
    ])
    def test_boilerplate_lines(self, classifier, line):
        assert classifier.is_boilerplate(line)

    def test_regular_line(self, classifier):
        assert not classifier.is_boilerplate("\\fs20 Page one of the notes\\")


class TestPageTail:
    def test_blank_and_formatting_only(self, classifier):
        assert classifier.is_page_tail("")
        assert classifier.is_page_tail("   ")
        assert classifier.is_page_tail("\\pard\\plain \\")

    def test_tail_token(self, classifier):
        assert classifier.is_page_tail("\\fs20 Health\\")

    def test_content_line(self, classifier):
        assert not classifier.is_page_tail("\\fs20 Patient seen for follow-up.\\")


class TestMetadata:
    def test_count_labels(self, classifier):
        assert classifier.count_metadata_labels("Author: Smith Status: Signed") == 2
        assert classifier.count_metadata_labels("Office Visit") == 0

    def test_split_fields(self, classifier):
        fields = classifier.split_metadata_fields(
            "Author: Smith, John Category: Office Visit Created: Jan 5, 2020 Status: Signed"
        )
        assert fields == [
            "Author: Smith, John",
            "Category: Office Visit",
            "Created: Jan 5, 2020",
            "Status: Signed",
        ]

    def test_leading_text_kept_separately(self, classifier):
        fields = classifier.split_metadata_fields("Note Author: A Status: B")
        assert fields == ["Note", "Author: A", "Status: B"]
