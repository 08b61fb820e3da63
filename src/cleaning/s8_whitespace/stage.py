"""
Stage 8: Separator & Whitespace Cleanup

ЦКП: Документ без разделителей страниц и без серий пустых строк.
"""

from dataclasses import dataclass, field
from typing import List
from loguru import logger

from ..classifier import is_page_separator
from ..context import PipelineState
from ..domain.interfaces import ILineStage


@dataclass
class WhitespaceResult:
    """
    Результат Stage 8: Whitespace.
    """
    lines: List[str] = field(default_factory=list)
    separators_removed: int = 0
    blank_lines_collapsed: int = 0

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "separators_removed": self.separators_removed,
            "blank_lines_collapsed": self.blank_lines_collapsed,
        }


class WhitespaceStage(ILineStage):
    """
    Stage 8: Separator & Whitespace Cleanup.
    """

    name = "Whitespace"

    def process(self, lines: List[str], state: PipelineState) -> WhitespaceResult:
        result = WhitespaceResult()
        out = result.lines

        for line in lines:
            if is_page_separator(line):
                result.separators_removed += 1
                continue
            if line.strip() == "" and out and out[-1].strip() == "":
                result.blank_lines_collapsed += 1
                continue
            out.append(line)

        logger.debug(
            f"[Stage 8: Whitespace] Разделителей удалено: {result.separators_removed}, "
            f"пустых строк: {result.blank_lines_collapsed}"
        )
        return result
