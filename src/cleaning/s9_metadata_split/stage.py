"""
Stage 9: Trim and Metadata Split

ЦКП: Строки без хвостовых '\\' и поля метаданных записи
(Author / Category / Created / Status) каждое на своей строке.

Строка с одним полем проходит без изменений. Разбитые строки получают
RTF префикс исходной строки.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from ..classifier import (
    LineClassifier,
    strip_formatting,
    extract_formatting_prefix,
    trim_trailing_controls,
)
from ..context import PipelineState
from ..domain.interfaces import ILineStage


@dataclass
class MetadataSplitResult:
    """
    Результат Stage 9: Metadata Split.
    """
    lines: List[str] = field(default_factory=list)
    trailing_controls_trimmed: int = 0
    metadata_lines_split: int = 0

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "trailing_controls_trimmed": self.trailing_controls_trimmed,
            "metadata_lines_split": self.metadata_lines_split,
        }


class MetadataSplitStage(ILineStage):
    """
    Stage 9: Trim and Metadata Split.
    """

    name = "Metadata Split"

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()

    def process(self, lines: List[str], state: PipelineState) -> MetadataSplitResult:
        result = MetadataSplitResult()

        for line in lines:
            trimmed = trim_trailing_controls(line)
            if trimmed != line:
                result.trailing_controls_trimmed += 1

            visible = strip_formatting(trimmed)
            if self.classifier.count_metadata_labels(visible) >= 2:
                prefix = extract_formatting_prefix(trimmed, default="")
                fields = self.classifier.split_metadata_fields(visible)
                result.lines.extend(f"{prefix}{value}" for value in fields)
                result.metadata_lines_split += 1
                continue

            result.lines.append(trimmed)

        logger.debug(
            f"[Stage 9: Metadata Split] Хвостов обрезано: {result.trailing_controls_trimmed}, "
            f"строк метаданных разбито: {result.metadata_lines_split}"
        )
        return result
