"""
CSV exporter - spreadsheet import layout
"""
import csv
import io
import json
from typing import Optional, Sequence

from .options import ExportOptions
from ..models import TestCaseRecord


CSV_HEADERS = [
    "Test Case ID",
    "Summary",
    "Priority",
    "Test Type",
    "Component",
    "Labels",
    "Preconditions",
    "Test Steps",
    "Expected Results",
    "Test Data",
    "Estimated Time",
]

LABEL_SEPARATOR = ", "
LIST_SEPARATOR = "; "


def export_csv(test_cases: Sequence[TestCaseRecord], options: Optional[ExportOptions] = None) -> str:
    """
    Render test cases as CSV.

    Quoting follows RFC 4180: fields holding separators or quotes are
    wrapped in quotes and embedded quotes are doubled.
    """
    options = options or ExportOptions()
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    for tc in test_cases:
        writer.writerow([
            tc.id,
            tc.summary,
            tc.priority.value,
            tc.test_type.value,
            tc.component,
            LABEL_SEPARATOR.join(tc.labels),
            LIST_SEPARATOR.join(tc.preconditions) if options.include_preconditions else "",
            LIST_SEPARATOR.join(tc.steps) if options.include_steps else "",
            LIST_SEPARATOR.join(tc.expected_results) if options.include_expected_results else "",
            json.dumps(tc.test_data, ensure_ascii=False) if options.include_test_data else "",
            tc.estimated_time,
        ])

    return buffer.getvalue()
