"""
Config Loader для эвристик очистки.

ЦКП: Загрузка единой модели HeuristicsConfig из YAML.

Архитектурный принцип:
- Все "магические" константы выгрузки (цвет провайдера, ключевые слова,
  колонтитулы, метки метаданных) живут в heuristics.yaml
- Классификатор и этапы получают готовый HeuristicsConfig и не знают про YAML
"""

import re
import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional, ClassVar, Tuple
from dataclasses import dataclass, field
from loguru import logger

from ..domain.exceptions import CleaningConfigurationError


DEFAULT_CONFIG_FILE = Path(__file__).parent / "heuristics.yaml"

REQUIRED_KEYS = (
    "provider_color",
    "location_keywords",
    "non_provider_heads",
    "boilerplate_patterns",
    "metadata_labels",
)


@dataclass
class HeuristicsConfig:
    """
    Конфигурация эвристик классификатора строк.

    Содержит:
    - provider_color: номер цвета \\cfN для провайдеров/локаций
    - location_keywords: regex-фрагменты названий учреждений
    - non_provider_heads: фразы-заголовки, которые не являются провайдерами
    - known_headings: заголовки разделов (Stage 6)
    - boilerplate_patterns: колонтитулы (Stage 2)
    - page_tail_tokens: одиночные хвосты страниц над шапкой (Stage 1-2)
    - metadata_labels: метки полей метаданных (Stage 9)
    - char_repairs: пары (regex, замена) для битых символов (Stage 1)
    """
    provider_color: str
    location_keywords: List[str]
    non_provider_heads: List[str]
    known_headings: List[str] = field(default_factory=list)
    boilerplate_patterns: List[str] = field(default_factory=list)
    page_tail_tokens: List[str] = field(default_factory=list)
    metadata_labels: List[str] = field(default_factory=list)
    char_repairs: List[Tuple[str, str]] = field(default_factory=list)

    # Внутренние поля
    _source_file: Optional[str] = None
    _cache: ClassVar[Dict[str, "HeuristicsConfig"]] = {}

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "HeuristicsConfig":
        """
        Загружает конфигурацию эвристик из YAML файла.

        Args:
            config_path: Путь к YAML (по умолчанию встроенный heuristics.yaml)
        """
        path = Path(config_path) if config_path else DEFAULT_CONFIG_FILE
        cache_key = str(path.resolve())

        # Проверяем кеш
        if cache_key in cls._cache:
            return cls._cache[cache_key]

        raw = cls._load_yaml(path)
        config = cls._from_dict(raw, source_file=path.name)

        cls._cache[cache_key] = config

        logger.debug(
            f"[ConfigLoader] Загружен HeuristicsConfig из {path.name}: "
            f"color={config.provider_color}, "
            f"{len(config.location_keywords)} location_keywords, "
            f"{len(config.boilerplate_patterns)} boilerplate_patterns"
        )

        return config

    @classmethod
    def _load_yaml(cls, path: Path) -> dict:
        """Читает YAML и проверяет, что это словарь."""
        if not path.exists():
            raise CleaningConfigurationError(
                message=f"Файл эвристик не найден: {path}",
                component="HeuristicsConfig",
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CleaningConfigurationError(
                message=f"Некорректный YAML: {path}",
                component="HeuristicsConfig",
                original_error=e,
            )

        if not isinstance(data, dict):
            raise CleaningConfigurationError(
                message=f"Ожидался словарь на верхнем уровне: {path}",
                component="HeuristicsConfig",
            )

        return data

    @classmethod
    def _from_dict(cls, data: Dict[str, Any], source_file: Optional[str] = None) -> "HeuristicsConfig":
        """Собирает HeuristicsConfig из словаря и валидирует regex."""
        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise CleaningConfigurationError(
                message=f"В конфиге эвристик нет ключей: {', '.join(missing)}",
                component="HeuristicsConfig",
            )

        repairs = []
        for item in data.get("char_repairs") or []:
            if not isinstance(item, dict) or "pattern" not in item:
                logger.warning(f"[ConfigLoader] Пропущено исправление без 'pattern': {item}")
                continue
            repairs.append((item["pattern"], str(item.get("replacement", ""))))

        config = cls(
            provider_color=str(data["provider_color"]),
            location_keywords=list(data["location_keywords"] or []),
            non_provider_heads=list(data["non_provider_heads"] or []),
            known_headings=list(data.get("known_headings") or []),
            boilerplate_patterns=list(data["boilerplate_patterns"] or []),
            page_tail_tokens=list(data.get("page_tail_tokens") or []),
            metadata_labels=list(data["metadata_labels"] or []),
            char_repairs=repairs,
            _source_file=source_file,
        )
        config._validate_patterns()
        return config

    def _validate_patterns(self) -> None:
        """Проверяет, что все regex компилируются."""
        patterns = (
            self.location_keywords
            + self.non_provider_heads
            + self.known_headings
            + self.boilerplate_patterns
            + [pattern for pattern, _ in self.char_repairs]
        )
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise CleaningConfigurationError(
                    message=f"Некорректный regex в конфиге эвристик: {pattern!r}",
                    component="HeuristicsConfig",
                    original_error=e,
                )
