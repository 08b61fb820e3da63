"""
Интерфейсы (абстрактные классы) для домена Cleaning.
"""

from abc import ABC, abstractmethod
from typing import List

from ..context import PipelineState


class ILineStage(ABC):
    """
    Интерфейс этапа пайплайна очистки.

    Этап получает полную последовательность строк и возвращает новый результат
    с полем lines. Входной список не изменяется.
    """

    name: str = ""

    @abstractmethod
    def process(self, lines: List[str], state: PipelineState):
        """
        Обрабатывает строки документа.

        Args:
            lines: Строки документа (выход предыдущего этапа)
            state: Состояние текущего прогона

        Returns:
            Результат этапа (dataclass с полем lines и счётчиками)
        """
        pass
