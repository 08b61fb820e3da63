"""
Stage 3: Observation / Date Marker Annotation

ЦКП: Каждая запись (наблюдение) размечена маркерами <<Obs>> и <<Date>>
непосредственно перед строкой провайдера.

Алгоритм:
1. Удаляем маркеры, оставшиеся от предыдущего прогона (идемпотентность)
2. Строка целиком - провайдер: [<<Obs>>], <<Date>>, провайдер
3. Строка "даты ... провайдер" (начало раздела): режем по началу
   фрагмента провайдера -> даты, <<Date>>, <<Obs>>, провайдер
4. Остальные строки без изменений
"""

from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from config.settings import OBS_MARKER, DATE_MARKER

from ..classifier import LineClassifier, strip_formatting, has_date_token, is_legacy_marker
from ..context import PipelineState
from ..domain.interfaces import ILineStage


def strip_legacy_markers(lines: List[str]) -> List[str]:
    """Убирает строки-маркеры <<Obs>>, <<Date>>, <<>>."""
    return [line for line in lines if not is_legacy_marker(line)]


@dataclass
class MarkerResult:
    """
    Результат Stage 3: Marker Annotation.
    """
    lines: List[str] = field(default_factory=list)
    obs_markers: int = 0
    date_markers: int = 0
    inline_splits: int = 0
    legacy_markers_removed: int = 0

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "obs_markers": self.obs_markers,
            "date_markers": self.date_markers,
            "inline_splits": self.inline_splits,
            "legacy_markers_removed": self.legacy_markers_removed,
        }


class MarkerStage(ILineStage):
    """
    Stage 3: Observation / Date Marker Annotation.
    """

    name = "Markers"

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()

    def process(self, lines: List[str], state: PipelineState) -> MarkerResult:
        source = strip_legacy_markers(lines)
        result = MarkerResult(legacy_markers_removed=len(lines) - len(source))
        out = result.lines

        for line in source:
            if self.classifier.is_whole_line_provider(line):
                if not out or out[-1] != OBS_MARKER:
                    out.append(OBS_MARKER)
                    result.obs_markers += 1
                out.append(DATE_MARKER)
                result.date_markers += 1
                out.append(line)
                continue

            split_at = self._find_split(line)
            if split_at is not None:
                out.append(line[:split_at].rstrip())
                out.append(DATE_MARKER)
                out.append(OBS_MARKER)
                out.append(line[split_at:])
                result.date_markers += 1
                result.obs_markers += 1
                result.inline_splits += 1
                continue

            out.append(line)

        logger.debug(
            f"[Stage 3: Markers] <<Obs>>: {result.obs_markers}, <<Date>>: {result.date_markers}, "
            f"разрезано строк: {result.inline_splits}"
        )
        return result

    def _find_split(self, line: str) -> Optional[int]:
        """
        Позиция разреза строки "даты, затем провайдер".

        Даты должны стоять до фрагмента провайдера, иначе строка не трогается.
        """
        if not has_date_token(strip_formatting(line)):
            return None
        split_at = self.classifier.find_inline_provider(line)
        if not split_at:
            return None
        if not has_date_token(strip_formatting(line[:split_at])):
            return None
        return split_at
