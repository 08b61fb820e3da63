"""
Cleaning Pipeline - Оркестратор 9 этапов очистки RTF.

Координирует выполнение всех этапов в строгом порядке:
1. Pagination → 2. Boilerplate → 3. Markers → 4. Date Reflow →
5. Marker Resolution → 6. Merge → 7. Heading Dedup → 8. Whitespace →
9. Metadata Split

Полный выход каждого этапа - полный вход следующего.
Возвращает PipelineResult с CleaningReport (контракт для оператора).
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union
from loguru import logger

from contracts.cleaning_dto import CleaningReport, DocumentHeader

from .classifier import LineClassifier
from .context import PipelineState
from .heuristics.config_loader import HeuristicsConfig
from .s1_pagination import PaginationStage, PaginationResult
from .s2_boilerplate import BoilerplateStage, BoilerplateResult
from .s3_markers import MarkerStage, MarkerResult
from .s4_date_reflow import DateReflowStage, DateReflowResult
from .s5_marker_resolution import (
    MarkerResolutionStage,
    MarkerResolutionResult,
    ensure_closing_delimiter,
)
from .s6_merge import MergeStage, MergeResult
from .s7_heading_dedup import HeadingDedupStage, HeadingDedupResult
from .s8_whitespace import WhitespaceStage, WhitespaceResult
from .s9_metadata_split import MetadataSplitStage, MetadataSplitResult


def split_lines(text: str) -> List[str]:
    """Делит документ на строки, приводя CRLF и CR к LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


@dataclass
class PipelineResult:
    """
    Полный результат пайплайна со всеми промежуточными данными.

    Используется для отладки и анализа.
    """
    # Финальный документ и отчёт
    lines: List[str]
    report: CleaningReport

    # Промежуточные результаты этапов
    pagination: Optional[PaginationResult] = None
    boilerplate: Optional[BoilerplateResult] = None
    markers: Optional[MarkerResult] = None
    date_reflow: Optional[DateReflowResult] = None
    resolution: Optional[MarkerResolutionResult] = None
    merge: Optional[MergeResult] = None
    headings: Optional[HeadingDedupResult] = None
    whitespace: Optional[WhitespaceResult] = None
    metadata: Optional[MetadataSplitResult] = None

    stages_completed: int = 0

    @property
    def text(self) -> str:
        """Итоговый документ одной строкой."""
        return "\n".join(self.lines)

    @property
    def checkpoint_text(self) -> str:
        """Документ после Stage 5 (диагностическая контрольная точка)."""
        return "\n".join(self.resolution.lines) if self.resolution else ""

    def to_dict(self) -> dict:
        return {
            "report": self.report.model_dump(),
            "pagination": self.pagination.to_dict() if self.pagination else None,
            "boilerplate": self.boilerplate.to_dict() if self.boilerplate else None,
            "markers": self.markers.to_dict() if self.markers else None,
            "date_reflow": self.date_reflow.to_dict() if self.date_reflow else None,
            "resolution": self.resolution.to_dict() if self.resolution else None,
            "merge": self.merge.to_dict() if self.merge else None,
            "headings": self.headings.to_dict() if self.headings else None,
            "whitespace": self.whitespace.to_dict() if self.whitespace else None,
            "metadata": self.metadata.to_dict() if self.metadata else None,
            "stages_completed": self.stages_completed,
        }


class CleaningPipeline:
    """
    Пайплайн очистки RTF-выгрузки.

    Все этапы используют один LineClassifier (одни и те же эвристики).
    Состояние (контекст пациента, очередь дат, последний заголовок)
    создаётся заново на каждый вызов process().
    """

    def __init__(
        self,
        classifier: Optional[LineClassifier] = None,
        heuristics_path: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            classifier: Готовый классификатор (приоритетнее heuristics_path)
            heuristics_path: YAML с эвристиками (по умолчанию встроенный)
        """
        if classifier is None:
            config = HeuristicsConfig.load(Path(heuristics_path) if heuristics_path else None)
            classifier = LineClassifier(config)
        self.classifier = classifier

        self.pagination_stage = PaginationStage(classifier)
        self.boilerplate_stage = BoilerplateStage(classifier)
        self.marker_stage = MarkerStage(classifier)
        self.date_reflow_stage = DateReflowStage()
        self.resolution_stage = MarkerResolutionStage(classifier)
        self.merge_stage = MergeStage(classifier)
        self.heading_stage = HeadingDedupStage(classifier)
        self.whitespace_stage = WhitespaceStage()
        self.metadata_stage = MetadataSplitStage(classifier)

        logger.info("[CleaningPipeline] Инициализирован (9 этапов)")

    @property
    def stages(self) -> list:
        return [
            ("pagination", self.pagination_stage),
            ("boilerplate", self.boilerplate_stage),
            ("markers", self.marker_stage),
            ("date_reflow", self.date_reflow_stage),
            ("resolution", self.resolution_stage),
            ("merge", self.merge_stage),
            ("headings", self.heading_stage),
            ("whitespace", self.whitespace_stage),
            ("metadata", self.metadata_stage),
        ]

    def process(self, text: str, source_file: Optional[str] = None) -> PipelineResult:
        """
        Прогоняет документ через все 9 этапов.

        Args:
            text: Полный текст RTF документа
            source_file: Имя исходного файла (для отчёта)

        Raises:
            HeaderNotFoundError: Stage 1 не нашёл шапку пациента
        """
        start_time = time.time()
        logger.info(f"[CleaningPipeline] Старт обработки: {source_file or 'in-memory'}")

        lines = split_lines(text)
        state = PipelineState()
        results = {}

        total = len(self.stages)
        for number, (key, stage) in enumerate(self.stages, start=1):
            logger.debug(f"[CleaningPipeline] Stage {number}/{total}: {stage.name}")
            stage_result = stage.process(lines, state)
            results[key] = stage_result
            lines = stage_result.lines

        lines, closed = ensure_closing_delimiter(lines)
        if closed:
            logger.debug("[CleaningPipeline] Добавлен закрывающий символ документа")

        processing_time_ms = (time.time() - start_time) * 1000
        report = self._build_report(text, lines, state, results, source_file, processing_time_ms)

        logger.info(
            f"[CleaningPipeline] Завершено за {processing_time_ms:.1f}ms: "
            f"{report.input_lines} -> {report.output_lines} строк, "
            f"склеено записей: {report.lines_merged}"
        )

        return PipelineResult(lines=lines, report=report, stages_completed=len(results), **results)

    def _build_report(
        self,
        text: str,
        lines: List[str],
        state: PipelineState,
        results: dict,
        source_file: Optional[str],
        processing_time_ms: float,
    ) -> CleaningReport:
        """Собирает CleaningReport из результатов этапов."""
        pagination = results["pagination"]
        boilerplate = results["boilerplate"]
        markers = results["markers"]
        date_reflow = results["date_reflow"]
        resolution = results["resolution"]
        merge = results["merge"]
        headings = results["headings"]
        whitespace = results["whitespace"]
        metadata = results["metadata"]
        output_text = "\n".join(lines)

        return CleaningReport(
            header=DocumentHeader(**state.context.to_dict()),
            source_file=source_file,
            input_lines=len(split_lines(text)),
            input_chars=len(text),
            output_lines=len(lines),
            output_chars=len(output_text),
            char_repairs=pagination.char_repairs,
            page_heads=pagination.page_heads,
            separators_inserted=pagination.separators_inserted,
            boilerplate_removed=boilerplate.removed_count,
            obs_markers=markers.obs_markers,
            date_markers=markers.date_markers,
            inline_splits=markers.inline_splits,
            date_lists_removed=date_reflow.date_lists_removed,
            dates_relocated=date_reflow.dates_relocated,
            pairs_resolved=resolution.pairs_resolved,
            lines_merged=merge.lines_merged,
            headings_deduplicated=headings.headings_removed,
            separators_removed=whitespace.separators_removed,
            blank_lines_collapsed=whitespace.blank_lines_collapsed,
            trailing_controls_trimmed=metadata.trailing_controls_trimmed,
            metadata_lines_split=metadata.metadata_lines_split,
            processing_time_ms=processing_time_ms,
        )
