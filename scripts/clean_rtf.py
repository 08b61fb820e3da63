#!/usr/bin/env python3
"""
Точка входа для очистки RTF-выгрузки без установки пакета.

Использование:
    python scripts/clean_rtf.py path/to/export.rtf [path/to/output.rtf]
"""

import sys
from pathlib import Path

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.cleaning.cli import main


if __name__ == "__main__":
    sys.exit(main())
