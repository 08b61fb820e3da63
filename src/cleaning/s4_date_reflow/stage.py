"""
Stage 4: Date Reflow

ЦКП: Даты из строк-списков ("Jan 1, 2020 Jan 5, 2020 ...") стоят каждая
перед своим маркером <<Date>>.

Алгоритм:
1. Строка-список (>= 2 дат, без поля метаданных, не маркер) удаляется,
   её даты вместе с RTF префиксом строки встают в очередь
2. На каждом <<Date>> при непустой очереди выводим следующую дату
3. Разделитель страницы очищает очередь: даты не переходят через страницу
"""

from dataclasses import dataclass, field
from typing import List
from loguru import logger

from ..classifier import (
    strip_formatting,
    extract_formatting_prefix,
    extract_all_date_tokens,
    has_metadata_field,
    is_marker,
    is_date_marker,
    is_page_separator,
)
from ..context import PendingDate, PipelineState
from ..domain.interfaces import ILineStage


@dataclass
class DateReflowResult:
    """
    Результат Stage 4: Date Reflow.
    """
    lines: List[str] = field(default_factory=list)
    date_lists_removed: int = 0         # Удалено строк-списков
    dates_queued: int = 0               # Дат поставлено в очередь
    dates_relocated: int = 0            # Дат выведено перед <<Date>>
    dates_discarded: int = 0            # Дат сброшено на границе страницы / в конце

    def to_dict(self) -> dict:
        return {
            "lines_count": len(self.lines),
            "date_lists_removed": self.date_lists_removed,
            "dates_queued": self.dates_queued,
            "dates_relocated": self.dates_relocated,
            "dates_discarded": self.dates_discarded,
        }


class DateReflowStage(ILineStage):
    """
    Stage 4: Date Reflow.

    Очередь хранится в PipelineState.pending_dates и живёт только в пределах
    одной страницы.
    """

    name = "Date Reflow"

    def process(self, lines: List[str], state: PipelineState) -> DateReflowResult:
        queue = state.pending_dates
        queue.clear()
        result = DateReflowResult()
        out = result.lines

        for line in lines:
            visible = strip_formatting(line)

            if not is_marker(line) and not has_metadata_field(visible):
                tokens = extract_all_date_tokens(visible)
                if len(tokens) >= 2:
                    prefix = extract_formatting_prefix(line)
                    queue.extend(PendingDate(text=token, prefix=prefix) for token in tokens)
                    result.date_lists_removed += 1
                    result.dates_queued += len(tokens)
                    continue

            if is_date_marker(line) and queue:
                pending = queue.popleft()
                out.append(f"{pending.prefix}{pending.text}")
                out.append(line)
                result.dates_relocated += 1
                continue

            if is_page_separator(line):
                if queue:
                    logger.trace(f"[Stage 4: Date Reflow] Сброс {len(queue)} дат на границе страницы")
                result.dates_discarded += len(queue)
                queue.clear()

            out.append(line)

        result.dates_discarded += len(queue)
        queue.clear()

        logger.debug(
            f"[Stage 4: Date Reflow] Списков удалено: {result.date_lists_removed}, "
            f"дат перенесено: {result.dates_relocated}, сброшено: {result.dates_discarded}"
        )
        return result
