"""
Remote Generation Agent - Multimodal model-backed test case generation
"""
import base64
import json
import re
import uuid
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from .base_agent import BaseAgent
from ..config import API_KEY_PLACEHOLDER, API_KEY_PREFIX, settings
from ..models import AnalysisSummary, GenerationResult, TestCaseRecord
from ..utils.helpers import format_test_case_id, truncate_text


class RemoteGenerationError(Exception):
    """Base class for every failure of the remote generation path."""


class InvalidCredentialError(RemoteGenerationError):
    """API key is missing, the placeholder, or has the wrong prefix."""


class MissingImageError(RemoteGenerationError):
    """No screenshot bytes were supplied."""


class RemoteCallError(RemoteGenerationError):
    """Transport failure or non-success status from the model endpoint."""


class ResponseParseError(RemoteGenerationError):
    """Response body held no usable JSON object."""


JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")

FEATURES = ["image-analysis", "test-case-generation", "smart-suggestions"]

TEST_CASE_PROMPT = """Aşağıdaki ekran görüntüsünü detaylı analiz et ve kapsamlı test case'leri oluştur:

Açıklama: {description}

GÖRSEL ANALİZ TALİMATLARI:
1. Ekrandaki tüm UI elementlerini tespit et (butonlar, formlar, dropdown'lar, tablolar, linkler, ikonlar)
2. Sayfa tipini belirle (login, dashboard, form, liste, detay sayfası, vb.)
3. Kullanıcı etkileşim noktalarını belirle
4. Veri giriş alanlarını tespit et
5. Navigasyon elementlerini bul
6. Validation mesajları için alanları belirle
7. Responsive tasarım elementlerini tespit et

TEST CASE ÜRETİM KURALLARI:
- Her UI elementi için ayrı test case'ler oluştur
- Positive ve negative test senaryoları dahil et
- Edge case'leri unutma (boş alanlar, maksimum karakter, özel karakterler)
- Accessibility testleri ekle (keyboard navigation, screen reader)
- Cross-browser compatibility testleri dahil et
- Performance testleri ekle (yükleme süreleri, büyük veri setleri)
- Security testleri ekle (XSS, SQL injection, input validation)
- Mobile responsive testleri dahil et

Lütfen aşağıdaki formatta JSON response döndür:

{{
  "testCases": [
    {{
      "id": "TC_001",
      "summary": "Detaylı test case başlığı",
      "description": "Kapsamlı açıklama",
      "testType": "Manual|Automated",
      "priority": "High|Medium|Low",
      "component": "Spesifik bileşen adı",
      "labels": ["functional", "ui", "validation", "accessibility", "security", "performance"],
      "preconditions": ["Detaylı ön koşullar"],
      "steps": ["Adım adım test adımları"],
      "expectedResults": ["Beklenen sonuçlar"],
      "testData": {{
        "validInputs": {{"alan": "geçerli değer"}},
        "invalidInputs": {{"alan": "geçersiz değer"}},
        "edgeCases": ["sınır değerler"],
        "specialCharacters": ["özel karakterler"]
      }},
      "estimatedTime": "Tahmini süre",
      "automationPotential": "Yüksek|Orta|Düşük"
    }}
  ],
  "analysis": {{
    "detectedComponents": ["Tespit edilen tüm bileşenler"],
    "pageType": "Sayfa tipi",
    "userInteractions": ["Kullanıcı etkileşimleri"],
    "dataFields": ["Veri giriş alanları"],
    "validationPoints": ["Validation noktaları"],
    "suggestions": ["Test stratejisi önerileri", "Otomasyon fırsatları", "Risk analizi"],
    "complexity": "Düşük|Orta|Yüksek",
    "estimatedTestCount": "Tahmini test sayısı"
  }}
}}

ÖNEMLİ: Görsel analizi çok detaylı yap ve her UI elementi için test case üret."""

SUGGESTIONS_PROMPT = """Aşağıdaki test senaryosu için akıllı öneriler ver:

{description}

Lütfen şu kategorilerde öneriler ver:
1. Test Stratejisi
2. Risk Analizi
3. Otomasyon Fırsatları
4. Test Verisi Önerileri
5. Edge Case'ler

JSON formatında döndür:
{{
  "suggestions": {{
    "strategy": ["Öneri 1", "Öneri 2"],
    "risks": ["Risk 1", "Risk 2"],
    "automation": ["Otomasyon 1", "Otomasyon 2"],
    "testData": ["Veri 1", "Veri 2"],
    "edgeCases": ["Edge case 1", "Edge case 2"]
  }}
}}"""

EVALUATION_PROMPT = """Aşağıdaki test case'lerin kalitesini değerlendir:

{test_cases}

Lütfen şu kriterlere göre değerlendir:
1. Kapsamlılık (Completeness)
2. Doğruluk (Accuracy)
3. Uygulanabilirlik (Executability)
4. Bakım Kolaylığı (Maintainability)

JSON formatında döndür:
{{
  "evaluation": {{
    "overallScore": 85,
    "completeness": 90,
    "accuracy": 85,
    "executability": 80,
    "maintainability": 85,
    "improvements": ["İyileştirme 1", "İyileştirme 2"],
    "missingTests": ["Eksik test 1", "Eksik test 2"]
  }}
}}"""

GENERATION_TEMPLATE = ChatPromptTemplate.from_messages([
    ("human", [
        {"type": "text", "text": TEST_CASE_PROMPT},
        {"type": "image_url", "image_url": {"url": "data:image/jpeg;base64,{image_data}"}},
    ])
])
SUGGESTIONS_TEMPLATE = ChatPromptTemplate.from_messages([("human", SUGGESTIONS_PROMPT)])
EVALUATION_TEMPLATE = ChatPromptTemplate.from_messages([("human", EVALUATION_PROMPT)])

DEFAULT_SUGGESTIONS = {
    "strategy": ["Temel fonksiyonel testler yapın"],
    "risks": ["Kullanıcı deneyimi riskleri"],
    "automation": ["UI elementlerini otomatikleştirin"],
    "testData": ["Geçerli ve geçersiz veriler test edin"],
    "edgeCases": ["Sınır değerleri kontrol edin"],
}

DEFAULT_EVALUATION = {
    "overallScore": 75,
    "completeness": 80,
    "accuracy": 75,
    "executability": 70,
    "maintainability": 75,
    "improvements": ["Daha detaylı adımlar ekleyin"],
    "missingTests": ["Negative test case'ler ekleyin"],
}


def is_valid_api_key(api_key: Optional[str]) -> bool:
    return bool(api_key) and api_key != API_KEY_PLACEHOLDER and api_key.startswith(API_KEY_PREFIX)


def extract_json_object(content: str) -> Dict[str, Any]:
    """Parse the first-to-last brace block of a model reply."""
    match = JSON_OBJECT_PATTERN.search(content or "")
    if not match:
        raise ResponseParseError("No JSON object found in model response")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Model response is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise ResponseParseError("Model response JSON is not an object")
    return parsed


def parse_generation_response(content: str) -> GenerationResult:
    """
    Turn a model reply into a GenerationResult.

    Args:
        content: Raw message content returned by the model

    Returns:
        GenerationResult flagged as AI generated

    Raises:
        ResponseParseError: when the reply lacks a valid testCases payload
    """
    parsed = extract_json_object(content)
    raw_cases = parsed.get("testCases")
    if not isinstance(raw_cases, list):
        raise ResponseParseError("Model response has no testCases list")

    test_cases = []
    try:
        for index, raw in enumerate(raw_cases, start=1):
            data = dict(raw)
            data.pop("uuid", None)
            data["id"] = data.get("id") or format_test_case_id(index)
            data["correlationId"] = str(uuid.uuid4())
            data["createdAt"] = datetime.now()
            for key in ("priority", "testType"):
                if isinstance(data.get(key), str):
                    data[key] = data[key].strip().capitalize()
            test_cases.append(TestCaseRecord.model_validate(data))
        analysis = AnalysisSummary.model_validate(parsed.get("analysis") or {})
    except (TypeError, ValueError, ValidationError) as e:
        raise ResponseParseError(f"Model test cases do not match the record shape: {e}") from e

    return GenerationResult(test_cases=test_cases, analysis=analysis, ai_generated=True)


class RemoteGenerationAgent(BaseAgent):
    """
    Sends the screenshot and description to an OpenAI-compatible chat
    completion endpoint and parses the structured reply.

    Every failure is raised as a RemoteGenerationError; callers decide how
    to fall back.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None, api_key: Optional[str] = None):
        super().__init__(
            name="RemoteGeneration",
            description="Generates test cases with a multimodal language model"
        )
        self.api_key = settings.OPENAI_API_KEY if api_key is None else api_key
        self.model_name = settings.OPENAI_MODEL
        self.llm = llm

    async def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Execute remote generation."""
        result = await self.generate(context.get("image"), context.get("description", ""))
        return {"result": result}

    def is_available(self) -> bool:
        return is_valid_api_key(self.api_key)

    def check_availability(self) -> Dict[str, Any]:
        """Describe whether the remote path can be used, without calling it."""
        available = self.is_available()
        return {
            "available": available,
            "model": self.model_name,
            "features": list(FEATURES),
            "keyStatus": "valid" if available else "invalid_or_missing",
        }

    async def generate(self, image: Optional[bytes], description: str) -> GenerationResult:
        """
        Generate test cases from a screenshot and description.

        Args:
            image: Raw screenshot bytes
            description: Tester's description of what to cover

        Returns:
            GenerationResult with ai_generated set

        Raises:
            RemoteGenerationError: on any credential, transport or parse failure
        """
        self._require_credential()
        if not image:
            raise MissingImageError("A screenshot is required for remote generation")

        self.log_info(f"Requesting test cases from {self.model_name} ({len(image)} image bytes)")
        content = await self._invoke(GENERATION_TEMPLATE, {
            "description": description or "",
            "image_data": base64.b64encode(image).decode(),
        })
        result = parse_generation_response(content)
        self.log_info(f"Model returned {len(result.test_cases)} test cases")
        return result

    async def get_smart_suggestions(self, description: str) -> Dict[str, Any]:
        """Ask the model for strategy, risk, automation and data suggestions."""
        try:
            self._require_credential()
            content = await self._invoke(SUGGESTIONS_TEMPLATE, {"description": description or ""})
            suggestions = extract_json_object(content).get("suggestions")
            if not isinstance(suggestions, dict):
                raise ResponseParseError("Model response has no suggestions object")
            return {"suggestions": suggestions, "aiGenerated": True}
        except RemoteGenerationError as e:
            self.log_warning(f"Smart suggestions unavailable, using defaults: {e}")
            return {"suggestions": dict(DEFAULT_SUGGESTIONS), "aiGenerated": False}

    async def evaluate_test_quality(self, test_cases: Sequence[TestCaseRecord]) -> Dict[str, Any]:
        """Ask the model to score a set of test cases."""
        try:
            self._require_credential()
            payload = json.dumps(
                [tc.to_export_dict() for tc in test_cases], ensure_ascii=False, indent=2
            )
            content = await self._invoke(EVALUATION_TEMPLATE, {"test_cases": payload})
            evaluation = extract_json_object(content).get("evaluation")
            if not isinstance(evaluation, dict):
                raise ResponseParseError("Model response has no evaluation object")
            return {"evaluation": evaluation, "aiGenerated": True}
        except RemoteGenerationError as e:
            self.log_warning(f"Quality evaluation unavailable, using defaults: {e}")
            return {"evaluation": dict(DEFAULT_EVALUATION), "aiGenerated": False}

    def _require_credential(self):
        if not self.is_available():
            raise InvalidCredentialError("No valid OpenAI API key configured")

    def _get_llm(self) -> BaseChatModel:
        if self.llm is None:
            self.llm = ChatOpenAI(
                model=self.model_name,
                api_key=self.api_key,
                base_url=settings.OPENAI_BASE_URL,
                max_tokens=settings.OPENAI_MAX_TOKENS,
                temperature=settings.OPENAI_TEMPERATURE,
                timeout=settings.OPENAI_TIMEOUT,
                max_retries=settings.OPENAI_MAX_RETRIES,
            )
        return self.llm

    async def _invoke(self, template: ChatPromptTemplate, variables: Dict[str, Any]) -> str:
        try:
            chain = template | self._get_llm()
            response = await chain.ainvoke(variables)
        except Exception as e:
            self.log_error(f"Model call failed: {e}")
            raise RemoteCallError(str(e)) from e

        content = response.content
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part) for part in content
            )
        self.log_debug(f"Model response: {truncate_text(content, 200)}")
        return content
