"""
Step, expected-result and test-data templates per category.

Templates use ``{name}`` for the component display name.
"""
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


BASE_STEPS: Tuple[str, ...] = (
    "Uygulamaya giriş yap",
    "{name} bileşenine git",
)

GENERIC_STEPS: Tuple[str, ...] = (
    "{name} ile etkileşim kur",
    "Beklenen davranışı kontrol et",
)

CATEGORY_STEPS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "dropdown": (
        "Dropdown menüsüne tıkla",
        "Tüm seçeneklerin görüntülendiğini kontrol et",
        "Bir seçenek seç",
        "Seçimin yapıldığını doğrula",
    ),
    "form": (
        "Form alanlarını doldur",
        "Gerekli alanları kontrol et",
        "Submit butonuna tıkla",
        "İşlem sonucunu kontrol et",
    ),
    "button": (
        "Butonun görünür olduğunu kontrol et",
        "Butona tıkla",
        "Beklenen aksiyonun gerçekleştiğini doğrula",
    ),
    "gsm_dropdown": (
        "GSM dropdown menüsüne tıkla",
        "Havuzdaki GSM numaralarının listelendiğini kontrol et",
        "Bir GSM numarası seç",
        "Seçilen numaranın alana yansıdığını doğrula",
    ),
    "gsm_input": (
        "GSM numara alanına tıkla",
        "Test verisindeki GSM numarasını gir",
        "Alanın formatı kabul ettiğini kontrol et",
    ),
    "excel_upload": (
        "Excel yükleme butonuna tıkla",
        "Test verisindeki Excel dosyasını seç",
        "Yükleme sonucunu kontrol et",
    ),
    "imei_field": (
        "IMEI alanına tıkla",
        "Test verisindeki IMEI değerini gir",
        "Alan doğrulamasının sonucunu kontrol et",
    ),
    "add_row_button": (
        "Satır Ekle butonuna tıkla",
        "Yeni satırın tabloya eklendiğini kontrol et",
        "Yeni satırdaki alanları doldur",
    ),
    "navigation_buttons": (
        "İleri butonuna tıkla",
        "Sonraki adımın açıldığını kontrol et",
        "Geri butonuna tıkla",
        "Önceki adıma dönüldüğünü doğrula",
    ),
})

BASE_EXPECTED_RESULTS: Tuple[str, ...] = (
    "Başarıyla giriş yapılır",
    "{name} bileşeni erişilebilir durumda",
)

GENERIC_EXPECTED_RESULTS: Tuple[str, ...] = (
    "Bileşen beklenen şekilde çalışır",
    "İşlem başarıyla tamamlanır",
)

CATEGORY_EXPECTED_RESULTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "dropdown": (
        "Dropdown menü açılır",
        "Tüm seçenekler listelenir",
        "Seçim işlemi başarıyla tamamlanır",
    ),
    "form": (
        "Form alanları doldurulur",
        "Validation kuralları uygulanır",
        "Form başarıyla submit edilir",
    ),
    "gsm_dropdown": (
        "GSM numaraları eksiksiz listelenir",
        "Seçilen GSM numarası alana yansır",
    ),
    "gsm_input": (
        "Geçerli GSM numarası kabul edilir",
        "Geçersiz numarada uyarı mesajı görüntülenir",
    ),
    "excel_upload": (
        "Excel dosyası başarıyla yüklenir",
        "Hatalı satırlar raporlanır",
    ),
    "imei_field": (
        "15 haneli geçerli IMEI kabul edilir",
        "Geçersiz IMEI için hata mesajı görüntülenir",
    ),
    "add_row_button": (
        "Tabloya yeni satır eklenir",
        "Eklenen satır düzenlenebilir durumda",
    ),
    "navigation_buttons": (
        "Adımlar arasında veri kaybı olmadan geçiş yapılır",
        "Geri dönüldüğünde girilen veriler korunur",
    ),
})

BASE_TEST_DATA: Mapping[str, Any] = MappingProxyType({
    "validUser": "test_user@example.com",
    "environment": "Test Environment",
})

CATEGORY_TEST_DATA: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    "dropdown": MappingProxyType({
        "options": ("Seçenek 1", "Seçenek 2", "Seçenek 3"),
    }),
    "form": MappingProxyType({
        "validInputs": MappingProxyType({"name": "Test User", "email": "test@example.com", "phone": "5551234567"}),
        "invalidInputs": MappingProxyType({"email": "invalid-email", "phone": "123"}),
    }),
    "gsm_dropdown": MappingProxyType({
        "options": ("5321234567", "5331234567", "5341234567"),
    }),
    "gsm_input": MappingProxyType({
        "validInputs": MappingProxyType({"gsm": "5321234567"}),
        "invalidInputs": MappingProxyType({"gsm": "12345", "gsmWithLetters": "53212ab567"}),
    }),
    "excel_upload": MappingProxyType({
        "validFile": "gsm_havuz_sablon.xlsx",
        "invalidFiles": ("gsm_havuz.csv", "bos_dosya.xlsx"),
    }),
    "imei_field": MappingProxyType({
        "validInputs": MappingProxyType({"imei": "490154203237518"}),
        "invalidInputs": MappingProxyType({"imei": "49015420323751", "imeiBadCheckDigit": "490154203237519"}),
    }),
    "add_row_button": MappingProxyType({
        "maxRows": 100,
    }),
})


def _thaw(value: Any) -> Any:
    """Copy read-only template data into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def render_steps(category: str, name: str) -> List[str]:
    specific = CATEGORY_STEPS.get(category, GENERIC_STEPS)
    return [step.format(name=name) for step in BASE_STEPS + specific]


def render_expected_results(category: str, name: str) -> List[str]:
    specific = CATEGORY_EXPECTED_RESULTS.get(category, GENERIC_EXPECTED_RESULTS)
    return [result.format(name=name) for result in BASE_EXPECTED_RESULTS + specific]


def render_test_data(category: str) -> Dict[str, Any]:
    data = _thaw(BASE_TEST_DATA)
    data.update(_thaw(CATEGORY_TEST_DATA.get(category, {})))
    return data


# Fixed records appended after every local generation run
EDGE_CASES: Tuple[Mapping[str, Any], ...] = (
    MappingProxyType({
        "summary": "Performans Testi - Sayfa Yükleme",
        "description": "Sayfanın makul sürede yüklendiğinin kontrolü",
        "priority": "Low",
        "component": "Page",
        "labels": ("performance", "loading"),
        "preconditions": ("Browser açık", "Internet bağlantısı mevcut"),
        "steps": (
            "Sayfayı yenile",
            "Yükleme süresini ölç",
            "Tüm elementlerin yüklendiğini kontrol et",
        ),
        "expected_results": (
            "Sayfa 3 saniye içinde yüklenir",
            "Tüm elementler görünür durumda",
        ),
        "test_data": MappingProxyType({"maxLoadTime": "3 seconds"}),
        "estimated_time": "5 minutes",
    }),
    MappingProxyType({
        "summary": "Cross-Browser Compatibility",
        "description": "Farklı tarayıcılarda uyumluluğun kontrolü",
        "priority": "Medium",
        "component": "Application",
        "labels": ("compatibility", "browser"),
        "preconditions": ("Farklı tarayıcılar yüklü",),
        "steps": (
            "Chrome'da uygulamayı aç",
            "Firefox'ta uygulamayı aç",
            "Safari'de uygulamayı aç (Mac)",
            "Her tarayıcıda işlevselliği test et",
        ),
        "expected_results": (
            "Tüm tarayıcılarda aynı görünüm",
            "İşlevsellik farklılığı yok",
        ),
        "test_data": MappingProxyType({"browsers": ("Chrome", "Firefox", "Safari", "Edge")}),
        "estimated_time": "15 minutes",
    }),
)


def render_edge_case(template: Mapping[str, Any]) -> Dict[str, Any]:
    return _thaw(template)
