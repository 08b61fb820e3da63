"""
Unit-тесты для Stage 8: Separator & Whitespace Cleanup.
"""

from src.cleaning.context import PipelineState
from src.cleaning.s8_whitespace import WhitespaceStage


def test_separators_and_blank_runs():
    lines = ["a", "", "", "<<< >>>", "", "b"]
    result = WhitespaceStage().process(lines, PipelineState())

    assert result.lines == ["a", "", "b"]
    assert result.separators_removed == 1
    assert result.blank_lines_collapsed == 2


def test_whitespace_only_lines_are_blank():
    result = WhitespaceStage().process(["a", "  ", "\t", "b"], PipelineState())
    assert result.lines == ["a", "  ", "b"]


def test_no_separator_left():
    lines = ["<<< >>>", "a", "<<< >>>", "<<< >>>", "b"]
    result = WhitespaceStage().process(lines, PipelineState())

    assert "<<< >>>" not in result.lines
    assert result.separators_removed == 3
