"""
JSON exporter - X-ray REST import layout
"""
import json
from typing import Optional, Sequence

from .options import ExportOptions
from ..config import settings
from ..models import TestCaseRecord
from ..utils.helpers import timestamp_now


def export_json(
    test_cases: Sequence[TestCaseRecord],
    options: Optional[ExportOptions] = None,
    project: Optional[str] = None
) -> str:
    options = options or ExportOptions()
    document = {
        "project": project or settings.PROJECT_NAME,
        "generatedAt": timestamp_now(),
        "totalTestCases": len(test_cases),
        "testCases": [options.filter_record(tc.to_export_dict()) for tc in test_cases],
    }
    return json.dumps(document, indent=2, ensure_ascii=False)
