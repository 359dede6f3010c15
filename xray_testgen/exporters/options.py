"""
Export options shared by every format
"""
from typing import Any, Dict

from pydantic import BaseModel


# Record key (camelCase) controlled by each flag
OPTIONAL_FIELDS = {
    "include_steps": "steps",
    "include_expected_results": "expectedResults",
    "include_test_data": "testData",
    "include_preconditions": "preconditions",
}


class ExportOptions(BaseModel):
    """Which optional sections go into an export."""

    include_steps: bool = True
    include_expected_results: bool = True
    include_test_data: bool = True
    include_preconditions: bool = True

    def filter_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Drop the sections switched off from an exported record."""
        filtered = dict(record)
        for flag, key in OPTIONAL_FIELDS.items():
            if not getattr(self, flag):
                filtered.pop(key, None)
        return filtered
