"""
Unit-тесты для Stage 1: Repair, Header Detection, Pagination.

ЦКП: Проверка поиска шапки пациента и замены её повторов на разделители.
"""

import pytest

from src.cleaning.classifier import LineClassifier
from src.cleaning.context import FormatMode, PipelineState
from src.cleaning.domain.exceptions import HeaderNotFoundError
from src.cleaning.s1_pagination import PaginationStage, trim_page_tail


COMBINED_DOC = [
    "{\\rtf1\\ansi",
    "\\fs20 A 73 year old male\\",
    "\\fs20 Clinical Notes\\",
    "\\fs20 Note one\\",
    "",
    "\\fs20 Health\\",
    "\\fs20 A 73 year old male\\",
    "\\fs20 Note two\\",
    "}",
]

TRADITIONAL_DOC = [
    "\\fs24 John Smith\\",
    "\\fs20 Date of Birth: Jan 1, 1950\\",
    "\\fs20 Body\\",
    "\\fs24 John Smith\\",
    "",
    "\\fs20 Date of Birth: Jan 1, 1950\\",
    "\\fs20 More\\",
]


@pytest.fixture
def stage():
    return PaginationStage()


class TestHeaderDetection:
    """Поиск постоянной шапки."""

    def test_combined_header(self, stage):
        """Фраза 'A N year old male' - имя и DOB одновременно."""
        context = stage.detect_header(COMBINED_DOC)

        assert context.format_mode is FormatMode.COMBINED
        assert context.patient_name == "A 73 year old male"
        assert context.dob_signature == context.patient_name

    def test_traditional_header(self, stage):
        """Имя - ближайшая непустая строка над 'Date of Birth:'."""
        context = stage.detect_header(["", "\\fs24 Jane Doe\\", "", "\\fs20 Date of Birth: Feb 2, 1960\\"])

        assert context.format_mode is FormatMode.TRADITIONAL
        assert context.patient_name == "Jane Doe"
        assert context.dob_signature == "Date of Birth: Feb 2, 1960"

    def test_header_not_found(self, stage):
        with pytest.raises(HeaderNotFoundError):
            stage.detect_header(["\\fs20 Just text\\", "}"])

    def test_dob_without_name_above(self, stage):
        with pytest.raises(HeaderNotFoundError):
            stage.detect_header(["\\fs20 Date of Birth: Jan 1, 1950\\", "\\fs20 Text\\"])


class TestPagination:
    """Замена повторов шапки на <<< >>>."""

    def test_combined_pages(self, stage):
        state = PipelineState()
        result = stage.process(COMBINED_DOC, state)

        assert result.lines == [
            "{\\rtf1\\ansi",
            "\\fs20 A 73 year old male\\",
            "\\fs20 Clinical Notes\\",
            "\\fs20 Note one\\",
            "<<< >>>",
            "\\fs20 Note two\\",
            "}",
        ]
        assert result.page_heads == 2
        assert result.separators_inserted == 1
        # Пустая строка и "Health" над повтором шапки
        assert result.tail_lines_trimmed == 2
        assert state.context is result.context

    def test_traditional_pages_skip_dob_line(self, stage):
        result = stage.process(TRADITIONAL_DOC, PipelineState())

        assert result.lines == [
            "\\fs24 John Smith\\",
            "\\fs20 Date of Birth: Jan 1, 1950\\",
            "\\fs20 Body\\",
            "<<< >>>",
            "\\fs20 More\\",
        ]
        assert result.separators_inserted == 1

    def test_single_page(self, stage):
        lines = ["\\fs20 A 45 year old female\\", "\\fs20 Note\\", "}"]
        result = stage.process(lines, PipelineState())

        assert result.lines == lines
        assert result.page_heads == 1
        assert result.separators_inserted == 0

    def test_first_header_kept_once(self, stage):
        result = stage.process(COMBINED_DOC, PipelineState())
        assert result.lines.count("\\fs20 A 73 year old male\\") == 1


class TestCharacterRepair:
    """Исправление битой буквы 'E'."""

    def test_repair_with_uc0(self, stage):
        lines, count = stage.repair_characters(["\\fs20 \\uc0\\u63333 mergency Room\\"])
        assert lines == ["\\fs20 Emergency Room\\"]
        assert count == 1

    def test_repair_plain(self, stage):
        lines, count = stage.repair_characters(["\\fs20 \\u63333 xam\\", "\\fs20 ok\\"])
        assert lines == ["\\fs20 Exam\\", "\\fs20 ok\\"]
        assert count == 1

    def test_repair_counted_in_result(self, stage):
        lines = ["\\fs20 A 45 year old female\\", "\\fs20 \\u63333 xam\\"]
        result = stage.process(lines, PipelineState())
        assert result.char_repairs == 1
        assert result.lines[1] == "\\fs20 Exam\\"


def test_trim_page_tail():
    lines = ["\\fs20 Text\\", "", "\\pard\\plain \\", "\\fs20 Health\\"]
    removed = trim_page_tail(lines, LineClassifier())

    assert removed == 3
    assert lines == ["\\fs20 Text\\"]
