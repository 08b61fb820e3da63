"""
RTF Format - работа с управляющими последовательностями RTF в строке.

ЦКП: Видимый текст строки и её ведущий префикс форматирования.

Видимый текст используется только для эвристик. В выходной документ
всегда пишется исходная строка с форматированием.
"""

import re

from config.settings import DEFAULT_BODY_PREFIX


# \'e9 - байт в hex
HEX_ESCAPE_RE = re.compile(r"\\'[0-9a-fA-F]{2}")
# \fs24, \cf2, \f1, \li-360
CONTROL_WORD_RE = re.compile(r"\\[a-z]+-?\d*", re.IGNORECASE)
GROUP_DELIMITER_RE = re.compile(r"[{}]")
# "\" в конце строки - RTF перевод строки
LINE_BREAK_RE = re.compile(r"\\+\s*$")

# Ведущая серия управляющих последовательностей: "\fs20 \cf2 " или "{\b "
FORMATTING_PREFIX_RE = re.compile(
    r"^\s*(?:(?:\\'[0-9a-fA-F]{2}|\\[a-zA-Z]+-?\d*|\{\}|[{}])\s*)+"
)
TRAILING_BACKSLASH_RE = re.compile(r"\\+$")


def strip_formatting(line: str) -> str:
    """
    Удаляет управляющие последовательности RTF и возвращает видимый текст.

    Пример: "\\fs20 \\cf3 Mass General Hospital\\" -> "Mass General Hospital"
    """
    text = HEX_ESCAPE_RE.sub("", line)
    text = CONTROL_WORD_RE.sub("", text)
    text = GROUP_DELIMITER_RE.sub("", text)
    text = LINE_BREAK_RE.sub("", text)
    return text.strip()


def extract_formatting_prefix(line: str, default: str = DEFAULT_BODY_PREFIX) -> str:
    """
    Возвращает ведущую серию управляющих последовательностей строки.

    Фигурные скобки из префикса удаляются: префикс приклеивается к новой
    синтетической строке и не должен открывать/закрывать группы.
    Если префикса нет - возвращается префикс основного текста.
    """
    m = FORMATTING_PREFIX_RE.match(line)
    if m and m.group(0):
        return GROUP_DELIMITER_RE.sub("", m.group(0))
    return default


def trim_trailing_controls(line: str) -> str:
    """Убирает хвостовые обратные слэши (RTF переводы строк)."""
    return TRAILING_BACKSLASH_RE.sub("", line)
