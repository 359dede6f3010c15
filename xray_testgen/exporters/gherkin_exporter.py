"""
Gherkin exporter - Cucumber/SpecFlow feature file
"""
from typing import List, Sequence

from ..models import TestCaseRecord


FEATURE_HEADER = """Feature: Generated Test Scenarios
  Test case'ler otomatik olarak oluşturulmuştur

  Background:
    Given Uygulama test ortamında çalışır durumda
    And Geçerli kullanıcı ile giriş yapılmış
"""


def export_gherkin(test_cases: Sequence[TestCaseRecord]) -> str:
    numbered = len(test_cases) > 1
    blocks: List[str] = [FEATURE_HEADER]

    for index, tc in enumerate(test_cases, start=1):
        title = f"Scenario {index}" if numbered else "Scenario"
        lines = [
            "",
            "  " + " ".join(f"@{label}" for label in tc.labels),
            f"  {title}: {tc.summary}",
        ]
        lines.extend(f"    When {step}" for step in tc.steps)
        lines.extend(f"    Then {result}" for result in tc.expected_results)
        blocks.append("\n".join(lines) + "\n")

    return "".join(blocks)
