"""
Unit-тесты для Stage 3: Observation / Date Marker Annotation.
"""

import pytest

from src.cleaning.context import PipelineState
from src.cleaning.s3_markers import MarkerStage, strip_legacy_markers


PROVIDER = "\\cf3 Mass General Hospital\\"


@pytest.fixture
def stage():
    return MarkerStage()


class TestWholeLineProvider:
    def test_markers_before_provider(self, stage):
        lines = ["\\fs20 Jan 1, 2020\\", PROVIDER, "\\fs20 Office Visit\\"]
        result = stage.process(lines, PipelineState())

        assert result.lines == [
            "\\fs20 Jan 1, 2020\\",
            "<<Obs>>",
            "<<Date>>",
            PROVIDER,
            "\\fs20 Office Visit\\",
        ]
        assert result.obs_markers == 1
        assert result.date_markers == 1

    def test_non_provider_lines_untouched(self, stage):
        lines = ["\\cf2 Mass General Hospital\\", "\\cf3 Clinical Notes\\", "\\fs20 Text\\"]
        result = stage.process(lines, PipelineState())

        assert result.lines == lines
        assert result.obs_markers == 0


class TestInlineSplit:
    def test_dates_then_provider_split(self, stage):
        """Строка 'даты + провайдер' режется по началу фрагмента провайдера."""
        line = "\\fs20 Jan 1, 2020 Jan 5, 2020 \\cf3 Mass General Hospital\\"
        result = stage.process([line], PipelineState())

        assert result.lines == [
            "\\fs20 Jan 1, 2020 Jan 5, 2020",
            "<<Date>>",
            "<<Obs>>",
            PROVIDER,
        ]
        assert result.inline_splits == 1

    def test_provider_before_date_not_split(self, stage):
        line = "\\cf3 Mass General Hospital\\ Jan 1, 2020"
        result = stage.process([line], PipelineState())

        assert result.lines == [line]
        assert result.inline_splits == 0


class TestIdempotence:
    def test_legacy_markers_stripped(self):
        lines = ["<<Obs>>", "<<>>", "\\fs20 Text\\", "<<Date>>", "<<< >>>"]
        assert strip_legacy_markers(lines) == ["\\fs20 Text\\", "<<< >>>"]

    def test_rerun_does_not_duplicate_markers(self, stage):
        lines = ["\\fs20 Jan 1, 2020\\", PROVIDER]
        first = stage.process(lines, PipelineState())
        second = stage.process(first.lines, PipelineState())

        assert second.lines == first.lines
        assert second.legacy_markers_removed == 2
