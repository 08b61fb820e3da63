"""
Stage 6: Merge Date + Provider

ЦКП: Пара (строка даты, строка провайдера) склеена в одну строку
"<префикс даты><дата> <провайдер>".

Строка сразу после склейки - "тип наблюдения" записи (например,
"Office Visit"), если это не дата, не провайдер, не метаданные, не
разделитель и не известный заголовок. Она проходит без изменений:
маркер списка расставит конвертер в Markdown.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from ..classifier import (
    LineClassifier,
    strip_formatting,
    extract_formatting_prefix,
    first_date_token,
    has_metadata_field,
    is_page_separator,
)
from ..context import PipelineState
from ..domain.interfaces import ILineStage


@dataclass
class MergeResult:
    """
    Результат Stage 6: Merge.
    """
    lines: List[str] = field(default_factory=list)
    lines_merged: int = 0               # Склеено пар
    observation_types: int = 0          # Найдено строк "тип наблюдения"

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "lines_merged": self.lines_merged,
            "observation_types": self.observation_types,
        }


class MergeStage(ILineStage):
    """
    Stage 6: Merge Date + Provider.
    """

    name = "Merge"

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()

    def process(self, lines: List[str], state: PipelineState) -> MergeResult:
        result = MergeResult()
        out = result.lines

        i = 0
        while i < len(lines):
            date_line = lines[i]
            provider_line = lines[i + 1] if i + 1 < len(lines) else ""

            if self.classifier.is_date_line(date_line) and self.classifier.is_whole_line_provider(provider_line):
                out.append(self.merge(date_line, provider_line))
                result.lines_merged += 1
                i += 2

                if i < len(lines) and self.is_observation_type(lines[i]):
                    out.append(lines[i])
                    result.observation_types += 1
                    i += 1
                continue

            out.append(date_line)
            i += 1

        logger.debug(
            f"[Stage 6: Merge] Склеено: {result.lines_merged}, "
            f"типов наблюдений: {result.observation_types}"
        )
        return result

    @staticmethod
    def merge(date_line: str, provider_line: str) -> str:
        """Склеивает дату и провайдера, сохраняя RTF префикс строки даты."""
        visible = strip_formatting(date_line)
        date_text = first_date_token(visible) or visible
        prefix = extract_formatting_prefix(date_line)
        return f"{prefix}{date_text} {provider_line.lstrip()}"

    def is_observation_type(self, line: str) -> bool:
        visible = strip_formatting(line)
        if not visible:
            return False
        if is_page_separator(line):
            return False
        if self.classifier.is_whole_line_provider(line) or self.classifier.is_date_line(line):
            return False
        if has_metadata_field(visible):
            return False
        return not self.classifier.is_known_heading(visible)
