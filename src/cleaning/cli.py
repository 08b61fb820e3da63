"""
CLI очистки клинической RTF-выгрузки.

Использование:
    # Очистить документ по умолчанию (config.settings.DEFAULT_INPUT_PATH)
    rtf-clean

    # Очистить конкретный документ -> path/to/export-CLEANED.rtf
    rtf-clean path/to/export.rtf

    # Явный путь результата и контрольная точка после Stage 5
    rtf-clean path/to/export.rtf out.rtf --checkpoint out-STEP5.rtf
"""

import sys
import argparse
from typing import List, Optional
from loguru import logger

from config.settings import (
    DEFAULT_INPUT_PATH,
    HEURISTICS_CONFIG_PATH,
    LOG_LEVEL,
    LOG_FORMAT,
    validate_config,
)
from contracts.cleaning_dto import CleaningReport

from .application import DocumentCleaner
from .domain.exceptions import CleaningError
from .pipeline import CleaningPipeline


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Перенастраивает loguru на stdout с заданным уровнем."""
    logger.remove()
    logger.add(sys.stdout, format=LOG_FORMAT, level=level.upper())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Clinical RTF export cleaner")
    parser.add_argument("input", nargs="?", default=str(DEFAULT_INPUT_PATH),
                        help="Путь к исходному RTF (опционально)")
    parser.add_argument("output", nargs="?", default=None,
                        help="Путь результата (по умолчанию <имя>-CLEANED.rtf)")
    parser.add_argument("--checkpoint", default=None,
                        help="Сохранить документ после Stage 5 (диагностика)")
    parser.add_argument("--heuristics", default=HEURISTICS_CONFIG_PATH or None,
                        help="YAML с эвристиками классификатора")
    parser.add_argument("--log-level", default=LOG_LEVEL.upper(), type=str.upper,
                        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
                        help="Уровень логирования loguru (DEBUG, INFO, ...)")
    return parser


def print_summary(report: CleaningReport) -> None:
    """Итоговый блок для оператора."""
    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print(f"  Patient:                  {report.header.patient_name}")
    print(f"  DOB:                      {report.header.dob_signature}")
    print(f"  Format:                   {report.header.format_mode}")
    print(f"  Input:                    {report.input_lines} lines, {report.input_chars} chars")
    print(f"  Unicode 'E' fixed:        {report.char_repairs}")
    print(f"  Page heads detected:      {report.page_heads}")
    print(f"  Separators inserted:      {report.separators_inserted}")
    print(f"  Header/footer removed:    {report.boilerplate_removed}")
    print(f"  Markers inserted:         <<Obs>> {report.obs_markers}, <<Date>> {report.date_markers}, "
          f"inline splits {report.inline_splits}")
    print(f"  Date lists removed:       {report.date_lists_removed}")
    print(f"  Dates relocated:          {report.dates_relocated}")
    print(f"  Date+provider merged:     {report.lines_merged}")
    print(f"  Duplicate headings:       {report.headings_deduplicated}")
    print(f"  Separators removed:       {report.separators_removed}")
    print(f"  Trailing '\\' removed:     {report.trailing_controls_trimmed}")
    print(f"  Metadata lines split:     {report.metadata_lines_split}")
    print(f"  Output:                   {report.output_lines} lines, {report.output_chars} chars")
    print(f"  Output file:              {report.output_file}")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция запуска очистки."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    print("\n" + "=" * 60)
    print("  RTF CLEANER - очистка клинической выгрузки")
    print("=" * 60)
    print(f"[OK] Input:  {args.input}")
    print(f"[OK] Output: {args.output or 'по умолчанию (-CLEANED)'}")

    try:
        validate_config()
    except ValueError as e:
        print(f"\n[ERROR] {e}")
        return 1

    try:
        cleaner = DocumentCleaner(pipeline=CleaningPipeline(heuristics_path=args.heuristics))
        result = cleaner.clean_file(args.input, args.output, checkpoint_path=args.checkpoint)
    except CleaningError as e:
        print(f"\n[ERROR] {e}")
        return 1

    print_summary(result.report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
