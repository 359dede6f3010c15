"""Exporters package"""
from datetime import date
from typing import Callable, Dict, NamedTuple, Optional, Sequence

from .options import ExportOptions
from .json_exporter import export_json
from .csv_exporter import export_csv, CSV_HEADERS
from .gherkin_exporter import export_gherkin
from ..models import TestCaseRecord


class ExportFormat(NamedTuple):
    render: Callable[[Sequence[TestCaseRecord], ExportOptions], str]
    media_type: str
    file_prefix: str
    extension: str


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    "json": ExportFormat(
        lambda cases, options: export_json(cases, options),
        "application/json; charset=utf-8", "xray-test-cases", "json",
    ),
    "csv": ExportFormat(
        lambda cases, options: export_csv(cases, options),
        "text/csv; charset=utf-8", "xray-test-cases", "csv",
    ),
    "gherkin": ExportFormat(
        lambda cases, options: export_gherkin(cases),
        "text/plain; charset=utf-8", "test-scenarios", "feature",
    ),
}


def export_test_cases(
    fmt: str,
    test_cases: Sequence[TestCaseRecord],
    options: Optional[ExportOptions] = None
) -> str:
    """Render test cases in the named format; raises KeyError for unknown formats."""
    return EXPORT_FORMATS[fmt].render(test_cases, options or ExportOptions())


def export_filename(fmt: str, day: Optional[date] = None) -> str:
    spec = EXPORT_FORMATS[fmt]
    return f"{spec.file_prefix}-{(day or date.today()).isoformat()}.{spec.extension}"


__all__ = [
    "CSV_HEADERS",
    "EXPORT_FORMATS",
    "ExportOptions",
    "export_csv",
    "export_filename",
    "export_gherkin",
    "export_json",
    "export_test_cases",
]
