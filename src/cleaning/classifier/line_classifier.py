"""
Line Classifier - Классификация строк RTF-выгрузки.

ЦКП: Ответы да/нет на вопросы о строке (дата? провайдер? заголовок?
метаданные? колонтитул?) для всех этапов пайплайна.

SRP: Только классификация, без изменения строк. Все решения принимаются
по видимому тексту (strip_formatting) и цвету/шрифту исходной строки.
"""

import re
from typing import List, Optional

from config.settings import OBS_MARKER, DATE_MARKER, PAGE_SEPARATOR, LEGACY_MARKER

from ..heuristics.config_loader import HeuristicsConfig
from .rtf_format import strip_formatting
from .date_tokens import has_date_token, has_metadata_field


# Первый окрашенный фрагмент строки: "\cf3 Mass General Hospital\"
PROVIDER_CHUNK_RE = re.compile(r"\\cf(?P<color>\d+)\s+(?P<text>[^\\]+)\\")
# Вся строка - один окрашенный фрагмент
PROVIDER_LINE_RE = re.compile(r"^\\cf(?P<color>\d+)\s+(?P<text>[^\\]+)\\$")

# Увеличенный шрифт (\fs30 и больше) или жирный (\b)
LARGE_FONT_RE = re.compile(r"\\fs3\d|\\fs[4-9]\d")
BOLD_RE = re.compile(r"\\b(?:\b|\s)")


def is_obs_marker(line: str) -> bool:
    return line.strip() == OBS_MARKER


def is_date_marker(line: str) -> bool:
    return line.strip() == DATE_MARKER


def is_page_separator(line: str) -> bool:
    return line.strip() == PAGE_SEPARATOR


def is_marker(line: str) -> bool:
    """Любой синтетический маркер пайплайна (включая разделитель страниц)."""
    return line.strip() in (OBS_MARKER, DATE_MARKER, PAGE_SEPARATOR)


def is_legacy_marker(line: str) -> bool:
    """Маркеры <<Obs>>/<<Date>>/<<>>, оставшиеся от предыдущего прогона."""
    return line.strip() in (OBS_MARKER, DATE_MARKER, LEGACY_MARKER)


class LineClassifier:
    """
    Классификатор строк RTF-выгрузки.

    ЦКП: Определение типа строки по настраиваемым эвристикам.
    """

    def __init__(self, config: Optional[HeuristicsConfig] = None):
        """
        Args:
            config: Эвристики (по умолчанию встроенный heuristics.yaml)
        """
        self.config = config or HeuristicsConfig.load()

        self._location_re = self._join(self.config.location_keywords, re.IGNORECASE)
        self._non_provider_re = self._join(self.config.non_provider_heads, re.IGNORECASE)
        self._known_heading_re = (
            re.compile(r"^(?:" + "|".join(self.config.known_headings) + r")\b")
            if self.config.known_headings else None
        )
        self._boilerplate_res = [re.compile(p) for p in self.config.boilerplate_patterns]
        self._tail_tokens = set(self.config.page_tail_tokens)

        labels = "|".join(re.escape(label) + ":" for label in self.config.metadata_labels)
        self._metadata_label_re = re.compile(f"({labels})") if labels else None

    @staticmethod
    def _join(patterns: List[str], flags: int = 0) -> Optional[re.Pattern]:
        if not patterns:
            return None
        return re.compile("(?:" + "|".join(patterns) + ")", flags)

    # ------------------------------------------------------------------
    # Даты
    # ------------------------------------------------------------------

    def is_date_line(self, line: str) -> bool:
        """
        Строка с датой: видимый текст содержит "Mon D, YYYY" и не содержит
        поля метаданных ("Created: Jan 5, 2020" - не дата-строка).
        """
        text = strip_formatting(line)
        return has_date_token(text) and not has_metadata_field(text)

    # ------------------------------------------------------------------
    # Провайдеры / локации
    # ------------------------------------------------------------------

    def _is_provider_text(self, color: str, raw_text: str) -> bool:
        text = strip_formatting(raw_text)
        if not text:
            return False
        if self._non_provider_re and self._non_provider_re.search(text):
            return False
        if color != self.config.provider_color:
            return False
        if ":" in text:
            return False
        return bool(self._location_re and self._location_re.search(text))

    def is_whole_line_provider(self, line: str) -> bool:
        """Вся строка - один фрагмент цвета провайдера с названием учреждения."""
        m = PROVIDER_LINE_RE.match(line)
        if not m:
            return False
        return self._is_provider_text(m.group("color"), m.group("text"))

    def find_inline_provider(self, line: str) -> Optional[int]:
        """
        Позиция начала первого окрашенного фрагмента, если он - провайдер.

        Returns:
            Индекс в строке или None
        """
        m = PROVIDER_CHUNK_RE.search(line)
        if not m:
            return None
        if not self._is_provider_text(m.group("color"), m.group("text")):
            return None
        return m.start()

    def is_inline_provider_chunk(self, line: str) -> bool:
        """Первый окрашенный фрагмент строки - провайдер."""
        return self.find_inline_provider(line) is not None

    # ------------------------------------------------------------------
    # Заголовки
    # ------------------------------------------------------------------

    def is_section_heading(self, line: str) -> bool:
        """
        Заголовок раздела: крупный шрифт или жирный, без поля метаданных,
        без даты и не провайдер.
        """
        visible = strip_formatting(line)
        if not visible:
            return False
        if has_metadata_field(visible):
            return False
        if has_date_token(visible):
            return False
        if self.is_whole_line_provider(line):
            return False
        return bool(LARGE_FONT_RE.search(line) or BOLD_RE.search(line))

    def is_known_heading(self, visible_text: str) -> bool:
        """Видимый текст начинается с известного заголовка раздела."""
        return bool(self._known_heading_re and self._known_heading_re.match(visible_text))

    # ------------------------------------------------------------------
    # Колонтитулы и хвосты страниц
    # ------------------------------------------------------------------

    def is_boilerplate(self, line: str) -> bool:
        """Строка колонтитула (проверяется исходная строка и видимый текст)."""
        visible = strip_formatting(line)
        for pattern in self._boilerplate_res:
            if pattern.search(line) or pattern.search(visible):
                return True
        return False

    def is_page_tail(self, line: str) -> bool:
        """
        Мусор над повтором шапки: пустые строки, строки только из
        форматирования и одиночные токены вроде "Health".
        """
        if line.strip() == "":
            return True
        visible = strip_formatting(line)
        return visible == "" or visible in self._tail_tokens

    # ------------------------------------------------------------------
    # Метаданные
    # ------------------------------------------------------------------

    def count_metadata_labels(self, visible_text: str) -> int:
        if not self._metadata_label_re:
            return 0
        return len(self._metadata_label_re.findall(visible_text))

    def split_metadata_fields(self, visible_text: str) -> List[str]:
        """
        Делит склеенные поля метаданных по меткам.

        "Author: Smith Status: Signed" -> ["Author: Smith", "Status: Signed"]
        Текст до первой метки остаётся отдельным элементом.
        """
        if not self._metadata_label_re:
            return [visible_text]

        fields: List[str] = []
        current = ""
        for part in self._metadata_label_re.split(visible_text):
            if not part:
                continue
            if self._metadata_label_re.fullmatch(part):
                if current.strip():
                    fields.append(current.strip())
                current = part
            else:
                current += part
        if current.strip():
            fields.append(current.strip())
        return fields
