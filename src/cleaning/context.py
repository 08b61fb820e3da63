"""
Контекст документа и состояние одного прогона пайплайна.

DocumentContext фиксируется на Stage 1 и дальше только читается.
PipelineState создаётся заново на каждый прогон, поэтому очередь дат
и последний заголовок не протекают между документами.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional


class FormatMode(str, Enum):
    """Формат постоянной шапки документа."""
    COMBINED = "combined"           # "A 73 year old male" - имя и DOB в одной строке
    TRADITIONAL = "traditional"     # строка имени, затем "Date of Birth: ..."


@dataclass(frozen=True)
class DocumentContext:
    """
    Идентичность пациента, найденная в начале документа.
    """
    patient_name: str               # Видимый текст строки имени
    dob_signature: str              # Видимый текст строки DOB (или та же фраза)
    format_mode: FormatMode

    @property
    def is_combined(self) -> bool:
        return self.format_mode is FormatMode.COMBINED

    def to_dict(self) -> dict:
        return {
            "patient_name": self.patient_name,
            "dob_signature": self.dob_signature,
            "format_mode": self.format_mode.value,
        }


@dataclass(frozen=True)
class PendingDate:
    """Дата из строки-списка, ожидающая своего <<Date>> маркера."""
    text: str                       # "Jan 5, 2020"
    prefix: str                     # RTF префикс исходной строки ("\\fs20 ")


@dataclass
class PipelineState:
    """
    Изменяемое состояние одного прогона.

    - context: заполняется Stage 1
    - pending_dates: FIFO очередь Stage 4, очищается на каждом разделителе страниц
    - last_heading: последний выведенный заголовок раздела (Stage 7)
    """
    context: Optional[DocumentContext] = None
    pending_dates: Deque[PendingDate] = field(default_factory=deque)
    last_heading: str = ""

