"""
Сервис очистки RTF файла для домена Cleaning.

Связывает файловый ввод/вывод с пайплайном:
чтение -> 9 этапов -> (контрольная точка после Stage 5) -> запись.
Весь прогон атомарен: при ошибке на любом этапе результат не пишется.
"""

from pathlib import Path
from typing import Optional, Union
from loguru import logger

from ..infrastructure.file_manager import CleaningFileManager
from ..pipeline import CleaningPipeline, PipelineResult


class DocumentCleaner:
    """
    Очистка одного RTF документа от файла до файла.
    """

    def __init__(
        self,
        pipeline: Optional[CleaningPipeline] = None,
        file_manager: Optional[CleaningFileManager] = None,
    ):
        """
        Args:
            pipeline: Пайплайн очистки (опционально)
            file_manager: Менеджер файлов (опционально)
        """
        self.pipeline = pipeline or CleaningPipeline()
        self.file_manager = file_manager or CleaningFileManager()

    def clean_file(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
        checkpoint_path: Optional[Union[str, Path]] = None,
    ) -> PipelineResult:
        """
        Очищает RTF файл.

        Args:
            input_path: Исходный RTF
            output_path: Куда писать (по умолчанию <имя>-CLEANED.<ext>)
            checkpoint_path: Куда писать документ после Stage 5 (опционально)

        Returns:
            PipelineResult с отчётом (output_file заполнен)

        Raises:
            CleaningFileSystemError: Ошибка чтения/записи
            HeaderNotFoundError: Не найдена шапка пациента
        """
        input_path = Path(input_path)
        output_path = Path(output_path) if output_path else self.file_manager.default_output_path(input_path)

        content = self.file_manager.read_document(input_path)
        result = self.pipeline.process(content, source_file=str(input_path))

        if checkpoint_path:
            self.file_manager.write_document(result.checkpoint_text, Path(checkpoint_path))
            logger.info(f"[DocumentCleaner] Контрольная точка Stage 5: {checkpoint_path}")

        self.file_manager.write_document(result.text, output_path)
        result.report = result.report.model_copy(update={"output_file": str(output_path)})

        logger.info(f"[DocumentCleaner] Сохранено: {output_path}")
        return result
