"""
Domain слой домена Cleaning.

Содержит интерфейсы (абстрактные классы) и исключения для Cleaning домена.
"""

from .interfaces import ILineStage

from .exceptions import (
    CleaningError,
    HeaderNotFoundError,
    CleaningConfigurationError,
    CleaningFileSystemError,
    CleaningFileNotFoundError,
    CleaningFileReadError,
    CleaningFileWriteError,
)

__all__ = [
    # Интерфейсы
    "ILineStage",

    # Исключения
    "CleaningError",
    "HeaderNotFoundError",
    "CleaningConfigurationError",
    "CleaningFileSystemError",
    "CleaningFileNotFoundError",
    "CleaningFileReadError",
    "CleaningFileWriteError",
]
