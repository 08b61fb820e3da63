"""
DTO контракт: Cleaning -> Markdown converter / оператор

Итог очистки RTF-выгрузки: идентичность пациента и счётчики по этапам.
Счётчики не являются частью контракта документа, но служат оракулами в тестах.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentHeader(BaseModel):
    """
    Постоянная шапка документа (повторяется на каждой странице выгрузки).
    """

    patient_name: str = Field(..., description="Видимый текст строки с именем пациента")
    dob_signature: str = Field(..., description="Строка 'Date of Birth:' или фраза 'A N year old male'")
    format_mode: Literal["combined", "traditional"] = Field(
        ..., description="combined - имя и DOB в одной строке, traditional - две строки"
    )

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @field_validator("patient_name", "dob_signature")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Header text must not be blank")
        return v


class CleaningReport(BaseModel):
    """
    Отчёт о прогоне пайплайна очистки.

    Выводится оператору в консоль и сохраняется в PipelineResult.
    """

    header: DocumentHeader
    source_file: str | None = Field(None, description="Путь к исходному RTF")
    output_file: str | None = Field(None, description="Путь к очищенному RTF")

    input_lines: int = Field(0, ge=0, description="Строк во входном документе")
    input_chars: int = Field(0, ge=0, description="Символов во входном документе")
    output_lines: int = Field(0, ge=0, description="Строк в итоговом документе")
    output_chars: int = Field(0, ge=0, description="Символов в итоговом документе")

    # Stage 1
    char_repairs: int = Field(0, ge=0, description="Исправлено битых символов")
    page_heads: int = Field(0, ge=0, description="Найдено повторов шапки")
    separators_inserted: int = Field(0, ge=0, description="Вставлено разделителей страниц")
    # Stage 2
    boilerplate_removed: int = Field(0, ge=0, description="Удалено строк колонтитулов")
    # Stage 3
    obs_markers: int = Field(0, ge=0, description="Вставлено <<Obs>>")
    date_markers: int = Field(0, ge=0, description="Вставлено <<Date>>")
    inline_splits: int = Field(0, ge=0, description="Разрезано строк 'даты + провайдер'")
    # Stage 4
    date_lists_removed: int = Field(0, ge=0, description="Удалено строк-списков дат")
    dates_relocated: int = Field(0, ge=0, description="Перенесено дат к маркерам")
    # Stage 5
    pairs_resolved: int = Field(0, ge=0, description="Пар дата/провайдер после снятия маркеров")
    # Stage 6
    lines_merged: int = Field(0, ge=0, description="Склеено строк дата+провайдер")
    # Stage 7
    headings_deduplicated: int = Field(0, ge=0, description="Удалено повторных заголовков")
    # Stage 8
    separators_removed: int = Field(0, ge=0, description="Удалено разделителей страниц")
    blank_lines_collapsed: int = Field(0, ge=0, description="Удалено пустых строк")
    # Stage 9
    trailing_controls_trimmed: int = Field(0, ge=0, description="Строк с обрезанным хвостом")
    metadata_lines_split: int = Field(0, ge=0, description="Разбито строк метаданных")

    processing_time_ms: float = Field(0.0, ge=0.0, description="Время обработки")

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @property
    def markers_inserted(self) -> int:
        """Всего вставлено маркеров на Stage 3."""
        return self.obs_markers + self.date_markers
