"""Tests for test case synthesis."""

import logging
import re

import pytest

from xray_testgen.agents.synthesizer_agent import derive_label, determine_priority, estimate_time
from xray_testgen.models import AnalysisResult, Priority, UserType
from xray_testgen.utils import format_test_case_id

from .conftest import DROPDOWN_DESCRIPTION


def _run(analyzer, resolver, synthesizer, description, file_name=None):
    analysis = analyzer.analyze(description, file_name=file_name)
    return synthesizer.synthesize(resolver.resolve(analysis), analysis)


def test_empty_description_generates_button_and_form_cases(analyzer, resolver, synthesizer):
    test_cases = _run(analyzer, resolver, synthesizer, "")

    # (4 button + 5 form scenarios) x (functional, ui) + 2 edge cases
    assert len(test_cases) == 20
    assert {tc.component for tc in test_cases[:-2]} == {"Buton", "Form"}
    assert test_cases[-2].summary == "Performans Testi - Sayfa Yükleme"
    assert test_cases[-1].summary == "Cross-Browser Compatibility"


def test_ids_are_sequential_and_padded(analyzer, resolver, synthesizer):
    test_cases = _run(analyzer, resolver, synthesizer, DROPDOWN_DESCRIPTION)

    assert [tc.id for tc in test_cases] == [f"TC_{n:03d}" for n in range(1, len(test_cases) + 1)]
    assert all(re.fullmatch(r"TC_\d{3}", tc.id) for tc in test_cases)
    assert len({tc.correlation_id for tc in test_cases}) == len(test_cases)


def test_edge_cases_take_last_two_ids(analyzer, resolver, synthesizer):
    test_cases = _run(analyzer, resolver, synthesizer, "tablo")

    assert [tc.component for tc in test_cases[-2:]] == ["Page", "Application"]
    assert test_cases[-1].id == format_test_case_id(len(test_cases))


def test_records_have_required_sequences(analyzer, resolver, synthesizer):
    test_cases = _run(analyzer, resolver, synthesizer, "form, tablo ve modal", file_name="havuz.png")

    for tc in test_cases:
        assert tc.labels
        assert tc.steps
        assert tc.expected_results


def test_dropdown_summary_prefix(analyzer, resolver, synthesizer):
    test_cases = _run(analyzer, resolver, synthesizer, DROPDOWN_DESCRIPTION)

    assert any(tc.summary.startswith("Dropdown Menü - ") for tc in test_cases)


def test_havuz_file_overrides_description(analyzer, resolver, synthesizer):
    test_cases = _run(analyzer, resolver, synthesizer, DROPDOWN_DESCRIPTION, file_name="havuz_ekrani.png")

    components = {tc.component for tc in test_cases[:-2]}
    assert components == {
        "GSM Dropdown",
        "GSM Numara Alanı",
        "Excel Yükleme",
        "IMEI Alanı",
        "Satır Ekle Butonu",
        "Navigasyon Butonları",
    }


def test_expansion_order_is_component_scenario_test_type(resolver, synthesizer):
    analysis = AnalysisResult(components=("button",), test_types=("functional", "ui"))

    test_cases = synthesizer.synthesize(resolver.resolve(analysis), analysis)

    assert [tc.summary for tc in test_cases[:4]] == [
        "Buton - Buton tıklama işlevi",
        "Buton - Buton tıklama işlevi",
        "Buton - Hover state kontrolü",
        "Buton - Hover state kontrolü",
    ]
    assert test_cases[0].labels == ["functional", "button"]
    assert test_cases[0].description == "Buton bileşenindeki buton tıklama işlevi işlevselliğinin functional testi"


def test_button_record_content(resolver, synthesizer):
    analysis = AnalysisResult(components=("button",), test_types=("ui",))

    record = synthesizer.synthesize(resolver.resolve(analysis), analysis)[0]

    assert record.steps == [
        "Uygulamaya giriş yap",
        "Buton bileşenine git",
        "Butonun görünür olduğunu kontrol et",
        "Butona tıkla",
        "Beklenen aksiyonun gerçekleştiğini doğrula",
    ]
    assert record.estimated_time == "8 dakika"
    assert record.priority == Priority.MEDIUM
    assert record.labels == ["ui", "button", "functional"]
    assert record.test_data == {"validUser": "test_user@example.com", "environment": "Test Environment"}
    assert record.test_type.value == "Manual"


def test_unknown_category_uses_generic_template(resolver, synthesizer):
    analysis = AnalysisResult(components=("carousel",), test_types=("functional",))

    record = synthesizer.synthesize(resolver.resolve(analysis), analysis)[0]

    assert record.summary == "carousel - Temel işlevsellik kontrolü"
    assert record.steps == [
        "Uygulamaya giriş yap",
        "carousel bileşenine git",
        "carousel ile etkileşim kur",
        "Beklenen davranışı kontrol et",
    ]
    assert record.estimated_time == "7 dakika"


def test_labels_are_deduplicated(resolver, synthesizer):
    analysis = AnalysisResult(components=("form",), test_types=("validation",))

    test_cases = synthesizer.synthesize(resolver.resolve(analysis), analysis)
    by_summary = {tc.summary: tc for tc in test_cases}

    assert by_summary["Form - Validation kuralları"].labels == ["validation", "form"]
    assert by_summary["Form - Error handling"].labels == ["validation", "form", "negative"]


def test_form_test_data(resolver, synthesizer):
    analysis = AnalysisResult(components=("form",), test_types=("functional",))

    record = synthesizer.synthesize(resolver.resolve(analysis), analysis)[0]

    assert record.test_data["invalidInputs"] == {"email": "invalid-email", "phone": "123"}


def test_admin_precondition(resolver, synthesizer):
    admin = AnalysisResult(user_type=UserType.ADMIN)
    user = AnalysisResult()

    admin_case = synthesizer.synthesize(resolver.resolve(admin), admin)[0]
    user_case = synthesizer.synthesize(resolver.resolve(user), user)[0]

    assert "Admin yetkilerine sahip kullanıcı" in admin_case.preconditions
    assert len(user_case.preconditions) == 2


@pytest.mark.parametrize("scenario, test_type, expected", [
    ("Submit işlemi", "functional", Priority.HIGH),
    ("Ana sayfaya dönüş", "performance", Priority.HIGH),
    ("Submit işlemi", "validation", Priority.MEDIUM),
    ("Submit işlemi", "ui", Priority.MEDIUM),
    ("Submit işlemi", "accessibility", Priority.LOW),
])
def test_determine_priority(scenario, test_type, expected):
    assert determine_priority(scenario, test_type) == expected


@pytest.mark.parametrize("scenario, expected", [
    ("Keyboard navigation", "accessibility"),
    ("Boş seçim validation", "functional"),
    ("Validation kuralları", "validation"),
    ("Hatalı numara error mesajı", "functional"),
    ("Error handling", "negative"),
    ("Submit işlemi", "functional"),
])
def test_derive_label(scenario, expected):
    assert derive_label(scenario) == expected


def test_estimate_time():
    assert estimate_time(4) == "7 dakika"


def test_ids_widen_past_999():
    assert format_test_case_id(7) == "TC_007"
    assert format_test_case_id(1000) == "TC_1000"


def test_generation_is_deterministic(analyzer, resolver, synthesizer):
    first = _run(analyzer, resolver, synthesizer, DROPDOWN_DESCRIPTION, file_name="login.png")
    second = _run(analyzer, resolver, synthesizer, DROPDOWN_DESCRIPTION, file_name="login.png")

    volatile = {"correlation_id", "created_at"}
    assert [tc.model_dump(exclude=volatile) for tc in first] == [
        tc.model_dump(exclude=volatile) for tc in second
    ]


async def test_agents_chain_through_execute(analyzer, resolver, synthesizer):
    context = {"description": "Arama kutusu", "file_name": None, "user_type": None}
    context.update(await analyzer.execute(context))
    context.update(await resolver.execute(context))
    context.update(await synthesizer.execute(context))

    assert context["test_cases"][0].summary == "Arama - Arama işlevi"
    assert repr(synthesizer) == "<TestCaseSynthesizerAgent(name='TestCaseSynthesizer')>"


def test_lowercase_scenario_words_do_not_change_label(resolver, synthesizer):
    analysis = AnalysisResult(components=("dropdown",), test_types=("functional",))

    test_cases = synthesizer.synthesize(resolver.resolve(analysis), analysis)
    by_summary = {tc.summary: tc for tc in test_cases}

    assert by_summary["Dropdown Menü - Boş seçim validation"].labels == ["functional", "dropdown"]
    assert by_summary["Dropdown Menü - Keyboard navigation"].labels == [
        "functional", "dropdown", "accessibility"
    ]


def test_edge_case_times_are_fixed(resolver, synthesizer):
    analysis = AnalysisResult(components=("button",))

    test_cases = synthesizer.synthesize(resolver.resolve(analysis), analysis)

    assert [tc.estimated_time for tc in test_cases[-2:]] == ["5 minutes", "15 minutes"]


def test_agent_logs_carry_agent_name(caplog, synthesizer):
    with caplog.at_level(logging.INFO, logger="agent.TestCaseSynthesizer"):
        synthesizer.synthesize([], AnalysisResult())
        synthesizer.log_warning("template missing")

    assert "[TestCaseSynthesizer] Synthesized 2 test cases for 0 components" in caplog.text
    assert any(
        r.levelno == logging.WARNING and r.getMessage() == "[TestCaseSynthesizer] template missing"
        for r in caplog.records
    )
