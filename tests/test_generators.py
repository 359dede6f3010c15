"""Tests for generator selection and the remote-to-local fallback."""

import json

from xray_testgen.agents import (
    LocalRuleBasedGenerator,
    RemoteGenerationAgent,
    RemoteModelBackedGenerator,
    remote_generation_agent,
    select_generator,
)
from xray_testgen.config import API_KEY_PLACEHOLDER, settings

from .conftest import DROPDOWN_DESCRIPTION, scripted_model


REMOTE_REPLY = json.dumps({
    "testCases": [{
        "id": "TC_001",
        "summary": "Dropdown - seçenekler",
        "labels": ["functional"],
        "steps": ["Dropdown menüsünü aç"],
        "expectedResults": ["Seçenekler listelenir"],
    }],
    "analysis": {"detectedComponents": ["Dropdown"]},
})


def _adapter(responses, api_key="sk-test-123"):
    llm, prompts = scripted_model(responses)
    return RemoteGenerationAgent(llm=llm, api_key=api_key), prompts


async def test_local_generation(local_generator):
    result = await local_generator.generate(DROPDOWN_DESCRIPTION)

    assert result.ai_generated is False
    assert result.fallback_reason is None
    assert result.analysis.estimated_test_count == len(result.test_cases)
    assert result.analysis.detected_components[0] == "dropdown"
    assert result.analysis.page_type == "unknown"


async def test_local_generation_uses_page_type(local_generator):
    result = await local_generator.generate("", file_name="Havuz_Ekrani.PNG", user_type="admin")

    assert result.analysis.page_type == "gsm_pool"
    assert "gsm_dropdown" in result.analysis.detected_components
    assert all("Admin yetkilerine sahip kullanıcı" in tc.preconditions for tc in result.test_cases[:-2])


async def test_remote_generation_success():
    adapter, prompts = _adapter([REMOTE_REPLY])
    generator = RemoteModelBackedGenerator(adapter=adapter)

    result = await generator.generate("Dropdown", image=b"image")

    assert result.ai_generated is True
    assert [tc.summary for tc in result.test_cases] == ["Dropdown - seçenekler"]
    assert len(prompts) == 1


async def test_remote_falls_back_on_parse_failure(caplog):
    adapter, _ = _adapter(["bu bir JSON değil"])
    generator = RemoteModelBackedGenerator(adapter=adapter)

    result = await generator.generate(DROPDOWN_DESCRIPTION, image=b"image")

    assert result.ai_generated is False
    assert result.fallback_reason.startswith("ResponseParseError")
    assert result.test_cases[0].summary.startswith("Dropdown Menü - ")
    assert "rule-based fallback" in caplog.text


async def test_remote_falls_back_without_image():
    adapter, prompts = _adapter([REMOTE_REPLY])
    generator = RemoteModelBackedGenerator(adapter=adapter)

    result = await generator.generate("", file_name="login.png")

    assert result.fallback_reason.startswith("MissingImageError")
    assert result.analysis.page_type == "login_page"
    assert prompts == []


async def test_placeholder_key_falls_back_without_calling_model(monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", API_KEY_PLACEHOLDER)
    llm, prompts = scripted_model([REMOTE_REPLY])
    generator = RemoteModelBackedGenerator(adapter=RemoteGenerationAgent(llm=llm))

    result = await generator.generate(DROPDOWN_DESCRIPTION, image=b"image")

    assert prompts == []
    assert result.ai_generated is False
    assert result.fallback_reason.startswith("InvalidCredentialError")


async def test_client_construction_failure_falls_back(monkeypatch):
    def broken_client(**kwargs):
        raise ValueError("unsupported base_url")

    monkeypatch.setattr(remote_generation_agent, "ChatOpenAI", broken_client)
    generator = RemoteModelBackedGenerator(adapter=RemoteGenerationAgent(api_key="sk-test-123"))

    result = await generator.generate(DROPDOWN_DESCRIPTION, image=b"image")

    assert result.ai_generated is False
    assert result.fallback_reason == "RemoteCallError: unsupported base_url"


async def test_fallback_matches_local_output():
    adapter, prompts = _adapter([REMOTE_REPLY], api_key="")
    remote = RemoteModelBackedGenerator(adapter=adapter)
    local = LocalRuleBasedGenerator()

    fallback = await remote.generate(DROPDOWN_DESCRIPTION)
    direct = await local.generate(DROPDOWN_DESCRIPTION)

    volatile = {"correlation_id", "created_at"}
    assert [tc.model_dump(exclude=volatile) for tc in fallback.test_cases] == [
        tc.model_dump(exclude=volatile) for tc in direct.test_cases
    ]
    assert fallback.fallback_reason.startswith("InvalidCredentialError")
    assert prompts == []


def test_select_generator_remote_with_valid_key():
    adapter, _ = _adapter([])

    assert isinstance(select_generator(True, adapter=adapter), RemoteModelBackedGenerator)


def test_select_generator_local_when_disabled():
    adapter, _ = _adapter([])

    assert isinstance(select_generator(False, adapter=adapter), LocalRuleBasedGenerator)


def test_select_generator_local_without_key():
    adapter, _ = _adapter([], api_key="")

    assert isinstance(select_generator(True, adapter=adapter), LocalRuleBasedGenerator)


def test_select_generator_defaults_to_settings(monkeypatch, no_api_key):
    monkeypatch.setattr(settings, "USE_AI", True)

    assert select_generator().kind == "local"
