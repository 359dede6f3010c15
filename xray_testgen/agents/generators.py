"""
Generators - the two interchangeable ways to produce a test case set.

LocalRuleBasedGenerator runs the keyword pipeline. RemoteModelBackedGenerator
asks the model first and silently falls back to the local pipeline. Both
expose the same ``generate`` coroutine; ``select_generator`` picks one.
"""
import logging
from typing import Optional, Union

from .component_resolver_agent import ComponentResolverAgent
from .description_analyzer_agent import DescriptionAnalyzerAgent
from .remote_generation_agent import RemoteGenerationAgent, RemoteGenerationError
from .synthesizer_agent import TestCaseSynthesizerAgent
from ..config import settings
from ..models import AnalysisSummary, GenerationResult

logger = logging.getLogger("agent.Generator")


class LocalRuleBasedGenerator:
    """Description -> analysis -> components -> test cases, no network."""

    kind = "local"

    def __init__(
        self,
        analyzer: Optional[DescriptionAnalyzerAgent] = None,
        resolver: Optional[ComponentResolverAgent] = None,
        synthesizer: Optional[TestCaseSynthesizerAgent] = None
    ):
        self.analyzer = analyzer or DescriptionAnalyzerAgent()
        self.resolver = resolver or ComponentResolverAgent()
        self.synthesizer = synthesizer or TestCaseSynthesizerAgent()

    async def generate(
        self,
        description: str,
        file_name: Optional[str] = None,
        image: Optional[bytes] = None,
        user_type: Optional[str] = None
    ) -> GenerationResult:
        return self.generate_sync(description, file_name=file_name, user_type=user_type)

    def generate_sync(
        self,
        description: str,
        file_name: Optional[str] = None,
        user_type: Optional[str] = None
    ) -> GenerationResult:
        analysis = self.analyzer.analyze(description, file_name=file_name, user_type=user_type)
        components = self.resolver.resolve(analysis)
        test_cases = self.synthesizer.synthesize(components, analysis)

        summary = AnalysisSummary(
            detected_components=[component.category for component in components],
            page_type=analysis.page_type or "unknown",
            suggestions=[],
            estimated_test_count=len(test_cases),
        )
        return GenerationResult(test_cases=test_cases, analysis=summary, ai_generated=False)


class RemoteModelBackedGenerator:
    """Model-backed generation that never fails: errors become the local result."""

    kind = "remote"

    def __init__(
        self,
        adapter: Optional[RemoteGenerationAgent] = None,
        fallback: Optional[LocalRuleBasedGenerator] = None
    ):
        self.adapter = adapter or RemoteGenerationAgent()
        self.fallback = fallback or LocalRuleBasedGenerator()

    async def generate(
        self,
        description: str,
        file_name: Optional[str] = None,
        image: Optional[bytes] = None,
        user_type: Optional[str] = None
    ) -> GenerationResult:
        try:
            return await self.adapter.generate(image, description)
        except RemoteGenerationError as e:
            reason = f"{type(e).__name__}: {e}"
            logger.warning(f"Remote generation failed, using rule-based fallback ({reason})")
            result = self.fallback.generate_sync(description, file_name=file_name, user_type=user_type)
            return result.model_copy(update={"fallback_reason": reason})


Generator = Union[LocalRuleBasedGenerator, RemoteModelBackedGenerator]


def select_generator(
    use_ai: Optional[bool] = None,
    adapter: Optional[RemoteGenerationAgent] = None
) -> Generator:
    """
    Pick the generation strategy.

    The remote strategy needs both the flag and a credential that passes
    the availability check.
    """
    if use_ai is None:
        use_ai = settings.USE_AI
    adapter = adapter or RemoteGenerationAgent()
    if use_ai and adapter.is_available():
        return RemoteModelBackedGenerator(adapter=adapter)
    return LocalRuleBasedGenerator()
