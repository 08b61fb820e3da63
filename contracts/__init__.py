"""
Контракты DTO проекта RTF Cleaner.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Cleaning -> Оператор / Markdown converter: CleaningReport (cleaning_dto.py)
"""

from .cleaning_dto import CleaningReport, DocumentHeader

__all__ = [
    "CleaningReport",
    "DocumentHeader",
]
