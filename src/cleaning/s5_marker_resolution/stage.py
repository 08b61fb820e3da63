"""
Stage 5: Marker Resolution

ЦКП: Маркеров <<Obs>>/<<Date>> в документе нет, каждая дата стоит
непосредственно перед своим провайдером.

Паттерны (окно из 4 строк, в порядке приоритета):
A) дата, <<Date>>, [<<Obs>>], провайдер
C) дата, <<Obs>>, <<Date>>, провайдер
B) <<Obs>>, дата, <<Date>>, провайдер

Непарные маркеры удаляются молча. В конце документ закрывается '}'.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from loguru import logger

from config.settings import CLOSING_DELIMITER

from ..classifier import LineClassifier, is_obs_marker, is_date_marker
from ..context import PipelineState
from ..domain.interfaces import ILineStage


def ensure_closing_delimiter(lines: List[str], delimiter: str = CLOSING_DELIMITER) -> Tuple[List[str], bool]:
    """
    Гарантирует, что документ заканчивается закрывающим символом.

    Returns:
        (строки, был ли добавлен символ)
    """
    if "\n".join(lines).rstrip().endswith(delimiter):
        return list(lines), False

    out = list(lines)
    while out and out[-1].strip() == "":
        out.pop()
    if out:
        out[-1] = out[-1].rstrip()
    out.append(delimiter)
    return out, True


@dataclass
class MarkerResolutionResult:
    """
    Результат Stage 5: Marker Resolution.
    """
    lines: List[str] = field(default_factory=list)
    pairs_resolved: int = 0             # Пар дата/провайдер
    stray_markers_dropped: int = 0      # Удалено непарных маркеров
    closing_delimiter_added: bool = False

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "pairs_resolved": self.pairs_resolved,
            "stray_markers_dropped": self.stray_markers_dropped,
            "closing_delimiter_added": self.closing_delimiter_added,
        }


class MarkerResolutionStage(ILineStage):
    """
    Stage 5: Marker Resolution.
    """

    name = "Marker Resolution"

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()

    def process(self, lines: List[str], state: PipelineState) -> MarkerResolutionResult:
        result = MarkerResolutionResult()
        out: List[str] = []

        i = 0
        while i < len(lines):
            consumed = self._match_pair(lines, i, out)
            if consumed:
                result.pairs_resolved += 1
                i += consumed
                continue

            line = lines[i]
            if is_date_marker(line) or is_obs_marker(line):
                result.stray_markers_dropped += 1
                i += 1
                continue

            out.append(line)
            i += 1

        result.lines, result.closing_delimiter_added = ensure_closing_delimiter(out)

        logger.debug(
            f"[Stage 5: Marker Resolution] Пар: {result.pairs_resolved}, "
            f"непарных маркеров: {result.stray_markers_dropped}"
        )
        return result

    def _match_pair(self, lines: List[str], i: int, out: List[str]) -> int:
        """
        Пробует паттерны A, C, B начиная с позиции i.

        Returns:
            Сколько строк поглощено (0 - ни один паттерн не подошёл)
        """
        a, b, c, d = (lines[i + k] if i + k < len(lines) else "" for k in range(4))
        is_date_line = self.classifier.is_date_line
        is_provider = self.classifier.is_whole_line_provider

        # A: дата, <<Date>>, [<<Obs>>], провайдер
        if is_date_line(a) and is_date_marker(b):
            if is_obs_marker(c) and is_provider(d):
                out.extend((a, d))
                return 4
            if is_provider(c):
                out.extend((a, c))
                return 3

        # C: дата, <<Obs>>, <<Date>>, провайдер
        if is_date_line(a) and is_obs_marker(b) and is_date_marker(c) and is_provider(d):
            out.extend((a, d))
            return 4

        # B: <<Obs>>, дата, <<Date>>, провайдер
        if is_obs_marker(a) and is_date_line(b) and is_date_marker(c) and is_provider(d):
            out.extend((b, d))
            return 4

        return 0
