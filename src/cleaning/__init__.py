"""
Домен Cleaning: очистка клинической RTF-выгрузки перед конвертацией в Markdown.

Архитектура: 9-этапный пайплайн
- Stage 1: Pagination (исправление символов, шапка пациента, разделители страниц)
- Stage 2: Boilerplate (колонтитулы)
- Stage 3: Markers (<<Obs>> / <<Date>> вокруг провайдеров)
- Stage 4: Date Reflow (даты из списков к своим маркерам)
- Stage 5: Marker Resolution (пары дата/провайдер, снятие маркеров)
- Stage 6: Merge (дата + провайдер в одну строку)
- Stage 7: Heading Dedup (повторы заголовков разделов)
- Stage 8: Whitespace (разделители страниц, пустые строки)
- Stage 9: Metadata Split (хвостовые '\\', поля Author/Category/Created/Status)

Вход: текст RTF
Выход: очищенный текст RTF + contracts.CleaningReport
"""

from src.cleaning.pipeline import CleaningPipeline, PipelineResult
from src.cleaning.application import DocumentCleaner
from src.cleaning.classifier import LineClassifier
from src.cleaning.context import DocumentContext, FormatMode, PipelineState, PendingDate
from src.cleaning.heuristics import HeuristicsConfig

# Stage exports
from src.cleaning.s1_pagination import PaginationStage, PaginationResult
from src.cleaning.s2_boilerplate import BoilerplateStage, BoilerplateResult
from src.cleaning.s3_markers import MarkerStage, MarkerResult
from src.cleaning.s4_date_reflow import DateReflowStage, DateReflowResult
from src.cleaning.s5_marker_resolution import MarkerResolutionStage, MarkerResolutionResult
from src.cleaning.s6_merge import MergeStage, MergeResult
from src.cleaning.s7_heading_dedup import HeadingDedupStage, HeadingDedupResult
from src.cleaning.s8_whitespace import WhitespaceStage, WhitespaceResult
from src.cleaning.s9_metadata_split import MetadataSplitStage, MetadataSplitResult

__all__ = [
    # Pipeline
    "CleaningPipeline",
    "PipelineResult",
    "DocumentCleaner",
    "LineClassifier",
    "HeuristicsConfig",
    # Context
    "DocumentContext",
    "FormatMode",
    "PipelineState",
    "PendingDate",
    # Stages
    "PaginationStage",
    "PaginationResult",
    "BoilerplateStage",
    "BoilerplateResult",
    "MarkerStage",
    "MarkerResult",
    "DateReflowStage",
    "DateReflowResult",
    "MarkerResolutionStage",
    "MarkerResolutionResult",
    "MergeStage",
    "MergeResult",
    "HeadingDedupStage",
    "HeadingDedupResult",
    "WhitespaceStage",
    "WhitespaceResult",
    "MetadataSplitStage",
    "MetadataSplitResult",
]
