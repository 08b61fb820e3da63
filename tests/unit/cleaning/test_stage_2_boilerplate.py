"""
Unit-тесты для Stage 2: Header/Footer Removal.
"""

from src.cleaning.context import PipelineState
from src.cleaning.s2_boilerplate import BoilerplateStage


def test_boilerplate_removed_and_tail_retrimmed():
    """После удаления колонтитула пустая строка над разделителем тоже уходит."""
    lines = [
        "\\fs20 Body\\",
        "\\fs16 Continued on Page 2\\",
        "",
        "<<< >>>",
        "\\fs16 Page 2 of 125\\",
        "\\fs20 Next\\",
    ]
    result = BoilerplateStage().process(lines, PipelineState())

    assert result.lines == ["\\fs20 Body\\", "<<< >>>", "\\fs20 Next\\"]
    assert result.removed_count == 2
    assert result.tail_lines_trimmed == 1


def test_disclaimer_removed_anywhere():
    lines = [
        "\\fs20 Body\\",
        "\\fs16 This summary displays certain health information about you.\\",
        "\\fs16 Please consult with your healthcare provider.\\",
        "\\fs20 More\\",
    ]
    result = BoilerplateStage().process(lines, PipelineState())

    assert result.lines == ["\\fs20 Body\\", "\\fs20 More\\"]
    assert result.removed_count == 2


def test_clean_document_unchanged():
    lines = ["\\fs20 Body\\", "", "\\fs20 More\\"]
    result = BoilerplateStage().process(lines, PipelineState())

    assert result.lines == lines
    assert result.removed_count == 0
