"""Utilities package"""
from .helpers import (
    filter_test_cases,
    format_test_case_id,
    priority_stats,
    timestamp_now,
    truncate_text,
)

__all__ = [
    "filter_test_cases",
    "format_test_case_id",
    "priority_stats",
    "timestamp_now",
    "truncate_text",
]
