"""Models package"""
from .analysis import AnalysisResult, ComponentDescriptor, Priority, UserType
from .test_case import TestCaseRecord, TestType
from .generation import AnalysisSummary, GenerationResult

__all__ = [
    "AnalysisResult",
    "ComponentDescriptor",
    "Priority",
    "UserType",
    "TestCaseRecord",
    "TestType",
    "AnalysisSummary",
    "GenerationResult",
]
