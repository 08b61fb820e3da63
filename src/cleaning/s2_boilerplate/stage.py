"""
Stage 2: Header/Footer Removal

ЦКП: Документ без колонтитулов ("Continued on Page 3", "Page 3 of 125",
дисклеймеры внизу страницы).

После удаления над разделителями могут открыться новые пустые строки,
поэтому хвосты страниц чистятся повторно (как на Stage 1).
"""

from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from config.settings import PAGE_SEPARATOR

from ..classifier import LineClassifier, is_page_separator
from ..context import PipelineState
from ..domain.interfaces import ILineStage
from ..s1_pagination.stage import trim_page_tail


@dataclass
class BoilerplateResult:
    """
    Результат Stage 2: Header/Footer Removal.
    """
    lines: List[str] = field(default_factory=list)
    removed_count: int = 0              # Удалено строк колонтитулов
    tail_lines_trimmed: int = 0         # Удалено хвостов над разделителями

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "removed_count": self.removed_count,
            "tail_lines_trimmed": self.tail_lines_trimmed,
        }


class BoilerplateStage(ILineStage):
    """
    Stage 2: Header/Footer Removal.
    """

    name = "Boilerplate"

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()

    def process(self, lines: List[str], state: PipelineState) -> BoilerplateResult:
        kept = []
        removed = 0
        for line in lines:
            if self.classifier.is_boilerplate(line):
                removed += 1
                continue
            kept.append(line)

        out: List[str] = []
        trimmed = 0
        for line in kept:
            if is_page_separator(line):
                trimmed += trim_page_tail(out, self.classifier)
                out.append(PAGE_SEPARATOR)
                continue
            out.append(line)

        logger.debug(f"[Stage 2: Boilerplate] Удалено колонтитулов: {removed}, хвостов: {trimmed}")

        return BoilerplateResult(lines=out, removed_count=removed, tail_lines_trimmed=trimmed)
