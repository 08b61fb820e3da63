"""RTF Cleaner - очистка клинических RTF-выгрузок перед конвертацией в Markdown."""

import sys
from pathlib import Path

# Добавляем корень проекта в sys.path для чистых импортов (config, contracts)
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
