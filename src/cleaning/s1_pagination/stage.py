"""
Stage 1: Repair, Header Detection, Pagination

ЦКП: Документ с исправленными символами, найденной шапкой пациента
и разделителями <<< >>> вместо повторов шапки на каждой странице.

Входные данные: строки исходного RTF
Выходные данные: PaginationResult (строки + DocumentContext)

Алгоритм:
1. Замена битой последовательности буквы 'E' на литерал
2. Поиск шапки сверху вниз: "A 73 year old male" (Combined) или
   строка имени + "Date of Birth:" (Traditional)
3. Поиск всех повторов шапки (page heads)
4. Для каждого повтора кроме первого: удаляем хвост предыдущей страницы
   и заменяем шапку на один разделитель
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from loguru import logger

from config.settings import PAGE_SEPARATOR

from ..classifier import LineClassifier, strip_formatting
from ..context import DocumentContext, FormatMode, PipelineState
from ..domain.exceptions import HeaderNotFoundError
from ..domain.interfaces import ILineStage


COMBINED_HEADER_RE = re.compile(r"^A \d+ year old (?:male|female)")
DOB_PREFIX = "Date of Birth:"


def trim_page_tail(lines: List[str], classifier: LineClassifier) -> int:
    """
    Удаляет с конца списка мусор перед разделителем страницы.

    Список изменяется на месте (это локальный буфер этапа).

    Returns:
        Количество удалённых строк
    """
    removed = 0
    while lines and classifier.is_page_tail(lines[-1]):
        lines.pop()
        removed += 1
    return removed


@dataclass
class PaginationResult:
    """
    Результат Stage 1: Pagination.

    ЦКП: Строки с разделителями страниц и контекст документа.
    """
    lines: List[str] = field(default_factory=list)
    context: Optional[DocumentContext] = None
    char_repairs: int = 0               # Исправлено битых символов
    page_heads: int = 0                 # Найдено повторов шапки (включая первую)
    separators_inserted: int = 0        # Вставлено <<< >>>
    tail_lines_trimmed: int = 0         # Удалено строк-хвостов над шапкой

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "context": self.context.to_dict() if self.context else None,
            "char_repairs": self.char_repairs,
            "page_heads": self.page_heads,
            "separators_inserted": self.separators_inserted,
            "tail_lines_trimmed": self.tail_lines_trimmed,
        }


class PaginationStage(ILineStage):
    """
    Stage 1: Repair, Header Detection, Pagination.

    Единственный этап, который может завершиться фатальной ошибкой:
    без шапки пациента невозможно найти границы страниц.
    """

    name = "Pagination"

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()
        self._repairs = [
            (re.compile(pattern), replacement)
            for pattern, replacement in self.classifier.config.char_repairs
        ]

    def process(self, lines: List[str], state: PipelineState) -> PaginationResult:
        """
        Args:
            lines: Строки исходного документа
            state: Состояние прогона (сюда записывается DocumentContext)

        Raises:
            HeaderNotFoundError: Шапка пациента не найдена
        """
        logger.debug(f"[Stage 1: Pagination] Обработка {len(lines)} строк")

        repaired, repairs = self.repair_characters(lines)
        logger.debug(f"[Stage 1: Pagination] Исправлено символов: {repairs}")

        context = self.detect_header(repaired)
        state.context = context
        logger.info(
            f"[Stage 1: Pagination] Пациент: '{context.patient_name}', "
            f"DOB: '{context.dob_signature}', формат: {context.format_mode.value}"
        )

        heads = self.find_page_heads(repaired, context)
        if not heads:
            logger.warning("[Stage 1: Pagination] Повторы шапки не найдены - документ без разбиения на страницы")
            return PaginationResult(lines=repaired, context=context, char_repairs=repairs)

        out, separators, trimmed = self._insert_separators(repaired, heads, context)
        logger.debug(
            f"[Stage 1: Pagination] Шапок: {len(heads)}, разделителей: {separators}, "
            f"удалено хвостов: {trimmed}"
        )

        return PaginationResult(
            lines=out,
            context=context,
            char_repairs=repairs,
            page_heads=len(heads),
            separators_inserted=separators,
            tail_lines_trimmed=trimmed,
        )

    def repair_characters(self, lines: List[str]) -> Tuple[List[str], int]:
        """Заменяет битые последовательности символов (по конфигу эвристик)."""
        total = 0
        out = []
        for line in lines:
            for pattern, replacement in self._repairs:
                line, count = pattern.subn(replacement, line)
                total += count
            out.append(line)
        return out, total

    def detect_header(self, lines: List[str]) -> DocumentContext:
        """
        Ищет постоянную шапку пациента сверху вниз.

        Combined: "A 73 year old male" - имя и DOB совпадают.
        Traditional: "Date of Birth: ..." + ближайшая непустая строка выше (имя).
        """
        for i, line in enumerate(lines):
            visible = strip_formatting(line)

            if COMBINED_HEADER_RE.match(visible):
                return DocumentContext(
                    patient_name=visible,
                    dob_signature=visible,
                    format_mode=FormatMode.COMBINED,
                )

            if visible.startswith(DOB_PREFIX):
                p = i - 1
                while p >= 0 and strip_formatting(lines[p]) == "":
                    p -= 1
                if p < 0:
                    break
                return DocumentContext(
                    patient_name=strip_formatting(lines[p]),
                    dob_signature=visible,
                    format_mode=FormatMode.TRADITIONAL,
                )

        raise HeaderNotFoundError(
            message="Не найдена постоянная шапка (имя пациента и дата рождения)",
            component="PaginationStage",
        )

    def _is_dob_line(self, line: str, context: DocumentContext) -> bool:
        visible = strip_formatting(line)
        if context.is_combined:
            return bool(COMBINED_HEADER_RE.match(visible))
        return visible.startswith(DOB_PREFIX)

    @staticmethod
    def _next_non_blank(lines: List[str], start: int) -> int:
        j = start
        while j < len(lines) and strip_formatting(lines[j]) == "":
            j += 1
        return j

    def find_page_heads(self, lines: List[str], context: DocumentContext) -> List[int]:
        """Индексы строк имени пациента, с которых начинаются страницы."""
        heads = []
        for i, line in enumerate(lines):
            if strip_formatting(line) != context.patient_name:
                continue
            if context.is_combined:
                heads.append(i)
                continue
            j = self._next_non_blank(lines, i + 1)
            if j < len(lines) and self._is_dob_line(lines[j], context):
                heads.append(i)
        return heads

    def _insert_separators(
        self,
        lines: List[str],
        heads: List[int],
        context: DocumentContext,
    ) -> Tuple[List[str], int, int]:
        """Заменяет все шапки кроме первой на <<< >>>."""
        head_set = set(heads)
        out: List[str] = []
        separators = 0
        trimmed = 0
        seen_first = False

        i = 0
        while i < len(lines):
            line = lines[i]

            if i in head_set:
                if not seen_first:
                    seen_first = True
                    out.append(line)
                    i += 1
                    continue

                trimmed += trim_page_tail(out, self.classifier)
                out.append(PAGE_SEPARATOR)
                separators += 1

                # Traditional: пропускаем и строку DOB под именем
                if not context.is_combined:
                    j = self._next_non_blank(lines, i + 1)
                    if j < len(lines) and self._is_dob_line(lines[j], context):
                        i = j + 1
                        continue
                i += 1
                continue

            out.append(line)
            i += 1

        return out, separators, trimmed
