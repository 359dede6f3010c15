"""Shared fixtures for the generator tests."""

import pytest
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from xray_testgen import models
from xray_testgen.agents import (
    ComponentResolverAgent,
    DescriptionAnalyzerAgent,
    LocalRuleBasedGenerator,
    TestCaseSynthesizerAgent,
)
from xray_testgen.config import settings


DROPDOWN_DESCRIPTION = "Bu ekranda bir dropdown menü var, tüm seçenekleri test etmek istiyorum"


def scripted_model(responses):
    """
    Chat model stand-in that replays canned replies.

    Returns the runnable and the list of prompts it received; a call past
    the last reply raises.
    """
    prompts = []
    replies = list(responses)

    def respond(prompt_value):
        prompts.append(prompt_value)
        return AIMessage(content=replies.pop(0))

    return RunnableLambda(respond), prompts


@pytest.fixture
def analyzer():
    return DescriptionAnalyzerAgent()


@pytest.fixture
def resolver():
    return ComponentResolverAgent()


@pytest.fixture
def synthesizer():
    return TestCaseSynthesizerAgent()


@pytest.fixture
def local_generator():
    return LocalRuleBasedGenerator()


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")


@pytest.fixture
def sample_record():
    return models.TestCaseRecord(
        id="TC_001",
        summary="Form - Submit işlemi",
        description="Form bileşenindeki submit işlemi işlevselliğinin functional testi",
        priority="High",
        component="Form",
        labels=["functional", "form"],
        preconditions=["Test ortamında uygulama erişilebilir"],
        steps=["Uygulamaya giriş yap", "Submit butonuna tıkla"],
        expected_results=["Form başarıyla submit edilir"],
        test_data={"note": 'say "hi"'},
        estimated_time="5 dakika",
    )
