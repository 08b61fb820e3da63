"""
Infrastructure слой домена Cleaning.

Содержит файловые операции (чтение/запись RTF).
"""

from .file_manager import CleaningFileManager

__all__ = ["CleaningFileManager"]
