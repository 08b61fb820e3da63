"""
Менеджер файлов для домена Cleaning.

Одно блокирующее чтение исходного RTF и одна запись результата.
"""

from pathlib import Path
from typing import Union
from loguru import logger

from config.settings import OUTPUT_SUFFIX, DEFAULT_OUTPUT_EXTENSION

from ..domain.exceptions import (
    CleaningFileNotFoundError,
    CleaningFileReadError,
    CleaningFileWriteError,
)


class CleaningFileManager:
    """Менеджер файлов для домена Cleaning."""

    def read_document(self, file_path: Union[str, Path]) -> str:
        """
        Читает RTF документ целиком (UTF-8).

        Raises:
            CleaningFileNotFoundError: Если файл не существует
            CleaningFileReadError: Если не удалось прочитать файл
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise CleaningFileNotFoundError(
                message=f"Файл не найден: {file_path}",
                component="CleaningFileManager"
            )

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (IOError, OSError, UnicodeDecodeError) as e:
            raise CleaningFileReadError(
                message=f"Не удалось прочитать файл: {file_path}",
                component="CleaningFileManager",
                original_error=e
            )

        logger.debug(f"[Cleaning] Файл загружен: {file_path} ({len(content)} символов)")
        return content

    def write_document(self, content: str, file_path: Union[str, Path]) -> Path:
        """
        Сохраняет документ (UTF-8), создавая директорию при необходимости.

        Raises:
            CleaningFileWriteError: Если не удалось сохранить файл
        """
        file_path = Path(file_path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except (IOError, OSError) as e:
            raise CleaningFileWriteError(
                message=f"Не удалось сохранить файл: {file_path}",
                component="CleaningFileManager",
                original_error=e
            )

        logger.debug(f"[Cleaning] Файл сохранен: {file_path}")
        return file_path

    @staticmethod
    def default_output_path(input_path: Union[str, Path]) -> Path:
        """
        Путь результата по умолчанию: export.rtf -> export-CLEANED.rtf
        """
        input_path = Path(input_path)
        extension = input_path.suffix or DEFAULT_OUTPUT_EXTENSION
        return input_path.with_name(f"{input_path.stem}{OUTPUT_SUFFIX}{extension}")
