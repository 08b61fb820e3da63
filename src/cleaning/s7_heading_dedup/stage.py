"""
Stage 7: Heading Deduplication

ЦКП: Заголовок раздела, повторённый на каждой странице выгрузки,
остаётся только один раз, пока раздел не сменится.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from ..classifier import LineClassifier, strip_formatting, is_page_separator
from ..context import PipelineState
from ..domain.interfaces import ILineStage


@dataclass
class HeadingDedupResult:
    """
    Результат Stage 7: Heading Deduplication.
    """
    lines: List[str] = field(default_factory=list)
    headings_kept: int = 0
    headings_removed: int = 0

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "headings_kept": self.headings_kept,
            "headings_removed": self.headings_removed,
        }


class HeadingDedupStage(ILineStage):
    """
    Stage 7: Heading Deduplication.

    Сравнение без учёта регистра с последним выведенным заголовком
    (PipelineState.last_heading).
    """

    name = "Heading Dedup"

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()

    def process(self, lines: List[str], state: PipelineState) -> HeadingDedupResult:
        state.last_heading = ""
        result = HeadingDedupResult()

        for line in lines:
            if is_page_separator(line):
                result.lines.append(line)
                continue

            if self.classifier.is_section_heading(line):
                heading = strip_formatting(line)
                if heading.lower() == state.last_heading.lower():
                    result.headings_removed += 1
                    continue
                state.last_heading = heading
                result.headings_kept += 1

            result.lines.append(line)

        logger.debug(
            f"[Stage 7: Heading Dedup] Заголовков: {result.headings_kept}, "
            f"удалено повторов: {result.headings_removed}"
        )
        return result
