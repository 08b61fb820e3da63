"""
Date Tokens - поиск дат формата "Jan 5, 2020" в видимом тексте.
"""

import re
from typing import List

MONTHS = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"

# Месяц, день, год: "Jan 5, 2020", "Dec 31,  1999"
DATE_TOKEN_RE = re.compile(rf"{MONTHS}\s+\d{{1,2}},\s+\d{{4}}")

# Поле метаданных "Label: value"
METADATA_FIELD_RE = re.compile(r":\s")


def extract_all_date_tokens(visible_text: str) -> List[str]:
    """Все даты в строке слева направо."""
    return [m.group(0) for m in DATE_TOKEN_RE.finditer(visible_text)]


def first_date_token(visible_text: str) -> str:
    """Первая дата в строке или пустая строка."""
    m = DATE_TOKEN_RE.search(visible_text)
    return m.group(0) if m else ""


def has_date_token(visible_text: str) -> bool:
    return DATE_TOKEN_RE.search(visible_text) is not None


def has_metadata_field(visible_text: str) -> bool:
    """Строка содержит поле вида 'Label: value'."""
    return METADATA_FIELD_RE.search(visible_text) is not None
