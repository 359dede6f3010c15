"""
Utility helper functions
"""
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ..models import TestCaseRecord


TEST_CASE_ID_PREFIX = "TC_"


def format_test_case_id(number: int) -> str:
    """
    Format a sequence number as a test case id.

    Ids are padded to at least 3 digits; TC_1000 and later simply widen.
    """
    return f"{TEST_CASE_ID_PREFIX}{number:03d}"


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add when truncated

    Returns:
        Truncated text
    """
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def timestamp_now() -> str:
    """Get current timestamp as ISO format string."""
    return datetime.now().isoformat()


def filter_test_cases(
    test_cases: Iterable[TestCaseRecord],
    search: str = "",
    priority: Optional[str] = None
) -> List[TestCaseRecord]:
    """Case-insensitive search over summary/description plus an optional priority filter."""
    term = (search or "").lower()
    matches = []
    for test_case in test_cases:
        if term and term not in test_case.summary.lower() and term not in test_case.description.lower():
            continue
        if priority and priority != "all" and test_case.priority.value != priority:
            continue
        matches.append(test_case)
    return matches


def priority_stats(test_cases: Iterable[TestCaseRecord]) -> Dict[str, int]:
    stats = {"high": 0, "medium": 0, "low": 0}
    for test_case in test_cases:
        stats[test_case.priority.value.lower()] += 1
    return stats
