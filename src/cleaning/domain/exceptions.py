"""
Исключения для домена Cleaning.

Фатальными считаются только ошибки поиска шапки и файловой системы.
Все остальные этапы пропускают нераспознанные строки без изменений.
"""


class CleaningError(Exception):
    """Базовое исключение для ошибок домена Cleaning."""

    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Cleaning Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class HeaderNotFoundError(CleaningError):
    """Не найдена постоянная шапка (имя пациента + DOB)."""
    pass


class CleaningConfigurationError(CleaningError):
    """Ошибка конфигурации эвристик."""
    pass


class CleaningFileSystemError(CleaningError):
    """Ошибка файловой системы в домене Cleaning."""
    pass


class CleaningFileNotFoundError(CleaningFileSystemError):
    """Файл не найден в домене Cleaning."""
    pass


class CleaningFileReadError(CleaningFileSystemError):
    """Ошибка чтения файла в домене Cleaning."""
    pass


class CleaningFileWriteError(CleaningFileSystemError):
    """Ошибка записи файла в домене Cleaning."""
    pass
