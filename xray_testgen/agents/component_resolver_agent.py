"""
Component Resolver Agent - Expands analyzed categories into catalogue components
"""
from typing import Any, Dict, List, Optional

from .base_agent import BaseAgent
from ..knowledge import catalogue
from ..models import AnalysisResult, ComponentDescriptor


class ComponentResolverAgent(BaseAgent):
    """
    Decides which components get test cases.

    A classified page type replaces the analyzed components entirely. With
    neither, the button/form pair is used.
    """

    def __init__(self):
        super().__init__(
            name="ComponentResolver",
            description="Maps categories to component descriptors"
        )

    async def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Execute component resolution."""
        components = self.resolve(context["analysis"], page_type=context.get("page_type"))
        return {"components": components}

    def resolve(
        self,
        analysis: AnalysisResult,
        page_type: Optional[str] = None
    ) -> List[ComponentDescriptor]:
        """
        Resolve the ordered component list for an analysis.

        Args:
            analysis: Output of the description analyzer
            page_type: Explicit page type, takes precedence over the analysis

        Returns:
            Component descriptors in generation order
        """
        page_type = page_type or analysis.page_type

        if page_type and page_type in catalogue.PAGE_TYPE_COMPONENTS:
            categories = catalogue.PAGE_TYPE_COMPONENTS[page_type]
            self.log_info(f"Page type '{page_type}' overrides description components")
        elif analysis.components:
            categories = analysis.components
        else:
            categories = catalogue.DEFAULT_COMPONENTS
            self.log_info("No components detected, using defaults")

        return [self.describe(category) for category in categories]

    @staticmethod
    def describe(category: str) -> ComponentDescriptor:
        """Build the descriptor for one category; unknown ones get a generic scenario."""
        return ComponentDescriptor(
            category=category,
            display_name=catalogue.display_name(category),
            scenarios=catalogue.scenarios_for(category),
        )
