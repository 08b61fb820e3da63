"""
Настройки проекта RTF Cleaner.

Значения можно переопределить через переменные окружения RTF_CLEANER_*.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
INPUT_DIR = DATA_DIR / "input"
OUTPUT_DIR = DATA_DIR / "output"

# Документ по умолчанию (для локальной отладки, если путь не передан в CLI)
DEFAULT_INPUT_PATH = Path(
    os.getenv("RTF_CLEANER_DEFAULT_INPUT", str(INPUT_DIR / "export.rtf"))
)

# Суффикс очищенного файла: export.rtf -> export-CLEANED.rtf
OUTPUT_SUFFIX = "-CLEANED"
DEFAULT_OUTPUT_EXTENSION = ".rtf"

# =============================================================================
# ЭВРИСТИКИ
# =============================================================================
# YAML с цветом провайдеров, ключевыми словами, паттернами колонтитулов.
# По умолчанию - встроенный src/cleaning/heuristics/heuristics.yaml
HEURISTICS_CONFIG_PATH = os.getenv("RTF_CLEANER_HEURISTICS", "")

# =============================================================================
# RTF РАЗМЕТКА
# =============================================================================
# Обязательный закрывающий символ документа
CLOSING_DELIMITER = "}"

# Префикс форматирования основного текста (если у строки своего нет)
DEFAULT_BODY_PREFIX = "\\fs20 "

# Служебные маркеры пайплайна (никогда не попадают в итоговый файл)
OBS_MARKER = "<<Obs>>"
DATE_MARKER = "<<Date>>"
PAGE_SEPARATOR = "<<< >>>"
LEGACY_MARKER = "<<>>"

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("RTF_CLEANER_LOG_LEVEL", "INFO")
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if HEURISTICS_CONFIG_PATH and not Path(HEURISTICS_CONFIG_PATH).exists():
        errors.append(
            f"Файл эвристик не найден: {HEURISTICS_CONFIG_PATH}\n"
            "Исправьте RTF_CLEANER_HEURISTICS или удалите переменную для встроенного конфига."
        )

    if LOG_LEVEL.upper() not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
        errors.append(f"Неизвестный уровень логирования: {LOG_LEVEL}")

    if errors:
        raise ValueError("\n".join(errors))

    return True
