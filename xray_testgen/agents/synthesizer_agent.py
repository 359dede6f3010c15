"""
Test Case Synthesizer Agent - Expands components into test case records
"""
from typing import Any, Dict, List, Sequence

from .base_agent import BaseAgent
from ..knowledge import catalogue, templates
from ..models import (
    AnalysisResult,
    ComponentDescriptor,
    Priority,
    TestCaseRecord,
    TestType,
    UserType,
)
from ..utils.helpers import format_test_case_id


BASE_MINUTES = 3
MINUTES_PER_STEP = 1

BASE_PRECONDITIONS = (
    "Test ortamında uygulama erişilebilir",
    "Geçerli kullanıcı hesabı mevcut",
)
ADMIN_PRECONDITION = "Admin yetkilerine sahip kullanıcı"


def determine_priority(scenario: str, test_type: str) -> Priority:
    if test_type == "functional" or catalogue.PRIMARY_SCENARIO_MARKER in scenario:
        return Priority.HIGH
    if test_type in ("validation", "ui"):
        return Priority.MEDIUM
    return Priority.LOW


# Checked in order against the scenario title, case-sensitively
LABEL_MARKERS = (
    ("Keyboard", "accessibility"),
    ("Validation", "validation"),
    ("Error", "negative"),
)


def derive_label(scenario: str) -> str:
    for marker, label in LABEL_MARKERS:
        if marker in scenario:
            return label
    return "functional"


def estimate_time(step_count: int) -> str:
    return f"{BASE_MINUTES + step_count * MINUTES_PER_STEP} dakika"


class TestCaseSynthesizerAgent(BaseAgent):
    """
    Generates one test case per (component, scenario, test type) triple
    and closes the run with the fixed page-load and cross-browser cases.
    """

    __test__ = False

    def __init__(self):
        super().__init__(
            name="TestCaseSynthesizer",
            description="Builds test case records from catalogue templates"
        )

    async def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Execute test case synthesis."""
        test_cases = self.synthesize(context["components"], context["analysis"])
        return {"test_cases": test_cases}

    def synthesize(
        self,
        components: Sequence[ComponentDescriptor],
        analysis: AnalysisResult
    ) -> List[TestCaseRecord]:
        """
        Expand components into the ordered list of test cases.

        Args:
            components: Resolver output, iterated in order
            analysis: Supplies test types and user type

        Returns:
            Records with ids TC_001 onwards; the last two are edge cases
        """
        test_cases: List[TestCaseRecord] = []
        counter = 1

        for component in components:
            for scenario in component.scenarios:
                for test_type in analysis.test_types:
                    test_cases.append(
                        self._create_test_case(counter, component, scenario, test_type, analysis)
                    )
                    counter += 1

        for template in templates.EDGE_CASES:
            test_cases.append(self._create_edge_case(counter, template))
            counter += 1

        self.log_info(
            f"Synthesized {len(test_cases)} test cases for {len(components)} components"
        )
        return test_cases

    def _create_test_case(
        self,
        number: int,
        component: ComponentDescriptor,
        scenario: str,
        test_type: str,
        analysis: AnalysisResult
    ) -> TestCaseRecord:
        name = component.display_name
        steps = templates.render_steps(component.category, name)

        labels: List[str] = []
        for label in (test_type, component.category, derive_label(scenario)):
            if label not in labels:
                labels.append(label)

        return TestCaseRecord(
            id=format_test_case_id(number),
            summary=f"{name} - {scenario}",
            description=f"{name} bileşenindeki {scenario.lower()} işlevselliğinin {test_type} testi",
            test_type=TestType.MANUAL,
            priority=determine_priority(scenario, test_type),
            component=name,
            labels=labels,
            preconditions=self._preconditions(analysis),
            steps=steps,
            expected_results=templates.render_expected_results(component.category, name),
            test_data=templates.render_test_data(component.category),
            estimated_time=estimate_time(len(steps)),
        )

    def _create_edge_case(self, number: int, template) -> TestCaseRecord:
        fields = templates.render_edge_case(template)
        return TestCaseRecord(id=format_test_case_id(number), test_type=TestType.MANUAL, **fields)

    @staticmethod
    def _preconditions(analysis: AnalysisResult) -> List[str]:
        preconditions = list(BASE_PRECONDITIONS)
        if analysis.user_type == UserType.ADMIN:
            preconditions.append(ADMIN_PRECONDITION)
        return preconditions
