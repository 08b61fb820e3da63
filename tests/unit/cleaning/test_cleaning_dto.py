"""
Unit-тесты для DTO контракта очистки.
"""

import pytest
from pydantic import ValidationError

from contracts.cleaning_dto import CleaningReport, DocumentHeader


def make_header() -> DocumentHeader:
    return DocumentHeader(
        patient_name="John Smith",
        dob_signature="Date of Birth: Jan 1, 1950",
        format_mode="traditional",
    )


def test_blank_patient_name_rejected():
    with pytest.raises(ValidationError):
        DocumentHeader(patient_name="  ", dob_signature="x", format_mode="combined")


def test_unknown_format_mode_rejected():
    with pytest.raises(ValidationError):
        DocumentHeader(patient_name="a", dob_signature="b", format_mode="mixed")


def test_report_is_frozen():
    report = CleaningReport(header=make_header(), lines_merged=2)
    with pytest.raises(ValidationError):
        report.lines_merged = 3


def test_negative_counter_rejected():
    with pytest.raises(ValidationError):
        CleaningReport(header=make_header(), page_heads=-1)


def test_markers_inserted():
    report = CleaningReport(header=make_header(), obs_markers=2, date_markers=3)
    assert report.markers_inserted == 5
