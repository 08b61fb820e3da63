"""
Unit-тесты для Stage 6: Merge Date + Provider.
"""

import pytest

from src.cleaning.context import PipelineState
from src.cleaning.s6_merge import MergeStage


PROVIDER = "\\cf3 Mass General Hospital\\"


@pytest.fixture
def stage():
    return MergeStage()


def test_merge_keeps_date_prefix():
    merged = MergeStage.merge("\\fs20 Jan 1, 2020\\", "  " + PROVIDER)
    assert merged == "\\fs20 Jan 1, 2020 \\cf3 Mass General Hospital\\"


def test_merge_without_prefix_uses_body_prefix():
    assert MergeStage.merge("Jan 1, 2020", PROVIDER) == "\\fs20 Jan 1, 2020 " + PROVIDER


def test_observation_type_passes_through(stage):
    lines = [
        "\\fs20 Jan 1, 2020\\",
        PROVIDER,
        "\\fs20 Office Visit\\",
        "\\fs18 Author: Smith\\",
    ]
    result = stage.process(lines, PipelineState())

    assert result.lines == [
        "\\fs20 Jan 1, 2020 \\cf3 Mass General Hospital\\",
        "\\fs20 Office Visit\\",
        "\\fs18 Author: Smith\\",
    ]
    assert result.lines_merged == 1
    assert result.observation_types == 1


def test_known_heading_is_not_observation_type(stage):
    lines = ["\\fs20 Jan 1, 2020\\", PROVIDER, "\\fs28 Allergies\\"]
    result = stage.process(lines, PipelineState())

    assert result.lines[-1] == "\\fs28 Allergies\\"
    assert result.observation_types == 0


def test_date_without_provider_unchanged(stage):
    lines = ["\\fs20 Jan 1, 2020\\", "\\fs20 Office Visit\\", PROVIDER]
    result = stage.process(lines, PipelineState())

    assert result.lines == lines
    assert result.lines_merged == 0


@pytest.mark.parametrize("line", [
    "<<< >>>",
    "",
    "\\fs18 Status: Signed\\",
    "\\fs20 Jan 5, 2020\\",
])
def test_is_not_observation_type(stage, line):
    assert not stage.is_observation_type(line)
