"""Agents package"""
from .base_agent import BaseAgent
from .description_analyzer_agent import DescriptionAnalyzerAgent, classify_page_type
from .component_resolver_agent import ComponentResolverAgent
from .synthesizer_agent import TestCaseSynthesizerAgent
from .remote_generation_agent import (
    RemoteGenerationAgent,
    RemoteGenerationError,
    InvalidCredentialError,
    MissingImageError,
    RemoteCallError,
    ResponseParseError,
)
from .generators import LocalRuleBasedGenerator, RemoteModelBackedGenerator, select_generator

__all__ = [
    "BaseAgent",
    "DescriptionAnalyzerAgent",
    "classify_page_type",
    "ComponentResolverAgent",
    "TestCaseSynthesizerAgent",
    "RemoteGenerationAgent",
    "RemoteGenerationError",
    "InvalidCredentialError",
    "MissingImageError",
    "RemoteCallError",
    "ResponseParseError",
    "LocalRuleBasedGenerator",
    "RemoteModelBackedGenerator",
    "select_generator",
]
