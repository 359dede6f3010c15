"""
Description Analyzer Agent - Infers components and test types from free text
"""
from typing import Any, Dict, Iterable, Optional, Tuple

from .base_agent import BaseAgent
from ..knowledge import catalogue
from ..models import AnalysisResult, Priority, UserType


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def classify_page_type(file_name: Optional[str]) -> Optional[str]:
    """
    Classify an uploaded file name into a coarse page type.

    Rules are tried in order and the first substring match wins.
    """
    if not file_name:
        return None
    lowered = file_name.lower()
    for substring, page_type in catalogue.PAGE_TYPE_RULES:
        if substring in lowered:
            return page_type
    return None


class DescriptionAnalyzerAgent(BaseAgent):
    """
    Scans a description for catalogue keywords.

    Matching is plain case-insensitive substring search, so a keyword inside
    an unrelated word still counts as a match.
    """

    def __init__(self):
        super().__init__(
            name="DescriptionAnalyzer",
            description="Infers UI components, test types, priority and role from text"
        )

    async def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Execute description analysis."""
        analysis = self.analyze(
            context.get("description", ""),
            file_name=context.get("file_name"),
            user_type=context.get("user_type"),
        )
        return {"analysis": analysis}

    def analyze(
        self,
        description: str,
        file_name: Optional[str] = None,
        user_type: Optional[str] = None
    ) -> AnalysisResult:
        """
        Build an AnalysisResult for a description.

        Args:
            description: Free text written by the tester (may be empty)
            file_name: Name of the uploaded screenshot, used for page typing
            user_type: Explicit role hint ("user" or "admin"), wins over text

        Returns:
            AnalysisResult, defaults filled in where nothing matched
        """
        text = (description or "").lower()

        components = self._match_components(text)
        test_types = self._match_test_types(text) or catalogue.DEFAULT_TEST_TYPES
        page_type = classify_page_type(file_name)

        if page_type:
            detected = catalogue.PAGE_TYPE_COMPONENTS[page_type]
        else:
            detected = components

        analysis = AnalysisResult(
            components=components,
            test_types=test_types,
            priority=self._detect_priority(text),
            user_type=self._detect_user_type(text, user_type),
            page_type=page_type,
            detected_components=detected,
        )
        self.log_debug(
            f"components={list(components)} test_types={list(test_types)} "
            f"page_type={page_type} priority={analysis.priority.value}"
        )
        return analysis

    def _match_components(self, text: str) -> Tuple[str, ...]:
        return tuple(
            category
            for category, entry in catalogue.CATEGORIES.items()
            if _contains_any(text, entry.keywords)
        )

    def _match_test_types(self, text: str) -> Tuple[str, ...]:
        return tuple(
            test_type
            for test_type, keywords in catalogue.TEST_TYPE_KEYWORDS.items()
            if _contains_any(text, keywords)
        )

    def _detect_priority(self, text: str) -> Priority:
        if _contains_any(text, catalogue.HIGH_PRIORITY_KEYWORDS):
            return Priority.HIGH
        if _contains_any(text, catalogue.LOW_PRIORITY_KEYWORDS):
            return Priority.LOW
        return Priority.MEDIUM

    def _detect_user_type(self, text: str, hint: Optional[str]) -> UserType:
        if hint and hint.lower() in (UserType.USER.value, UserType.ADMIN.value):
            return UserType(hint.lower())
        if _contains_any(text, catalogue.ADMIN_KEYWORDS):
            return UserType.ADMIN
        return UserType.USER
