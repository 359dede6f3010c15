"""
Generation Result Data Models
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .test_case import TestCaseRecord


class AnalysisSummary(BaseModel):
    """Display-only summary of what was detected on the screen."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    detected_components: List[str] = Field(default_factory=list)
    page_type: Optional[str] = None
    user_interactions: List[str] = Field(default_factory=list)
    data_fields: List[str] = Field(default_factory=list)
    validation_points: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    complexity: Optional[str] = None
    estimated_test_count: Optional[Union[int, str]] = None


class GenerationResult(BaseModel):
    """Output of one generation run, local or remote."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    test_cases: List[TestCaseRecord] = Field(default_factory=list)
    analysis: AnalysisSummary = Field(default_factory=AnalysisSummary)
    ai_generated: bool = False
    fallback_reason: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
