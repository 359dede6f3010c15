"""
Keyword Catalogue - static lookup tables behind rule-based generation.

Every table is built once at import and exposed read-only. Category order is
significant: the analyzer reports matched categories in catalogue order.
"""
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class CategoryEntry(NamedTuple):
    keywords: Tuple[str, ...]
    display_name: str
    scenarios: Tuple[str, ...]


GENERIC_SCENARIO = "Temel işlevsellik kontrolü"

# Substring marking a scenario as a primary flow (always High priority)
PRIMARY_SCENARIO_MARKER = "Ana"

DEFAULT_COMPONENTS: Tuple[str, ...] = ("button", "form")
DEFAULT_TEST_TYPES: Tuple[str, ...] = ("functional", "ui")

CATEGORIES: Mapping[str, CategoryEntry] = MappingProxyType({
    "dropdown": CategoryEntry(
        keywords=("dropdown", "açılır", "seçim", "liste", "menü"),
        display_name="Dropdown Menü",
        scenarios=(
            "Tüm seçeneklerin görüntülenmesi",
            "Seçim yapma işlemi",
            "Keyboard navigation",
            "Varsayılan değer kontrolü",
            "Boş seçim validation",
        ),
    ),
    "button": CategoryEntry(
        keywords=("buton", "button", "tıkla", "bas"),
        display_name="Buton",
        scenarios=(
            "Buton tıklama işlevi",
            "Hover state kontrolü",
            "Disabled state kontrolü",
            "Loading state kontrolü",
        ),
    ),
    "form": CategoryEntry(
        keywords=("form", "giriş", "kayıt", "doldur"),
        display_name="Form",
        scenarios=(
            "Form doldurma işlemi",
            "Validation kuralları",
            "Submit işlemi",
            "Reset işlemi",
            "Error handling",
        ),
    ),
    "input": CategoryEntry(
        keywords=("input", "alan", "field", "giriş"),
        display_name="Giriş Alanı",
        scenarios=(
            "Veri girişi",
            "Validation kontrolleri",
            "Placeholder text",
            "Character limit",
            "Format kontrolü",
        ),
    ),
    "navigation": CategoryEntry(
        keywords=("menü", "nav", "navigasyon", "yönlendirme"),
        display_name="Navigasyon",
        scenarios=(
            "Menü öğelerine tıklama",
            "Sayfa yönlendirmeleri",
            "Breadcrumb kontrolü",
            "Mobile responsive",
        ),
    ),
    "table": CategoryEntry(
        keywords=("tablo", "table", "liste", "satır"),
        display_name="Tablo",
        scenarios=(
            "Veri görüntüleme",
            "Sıralama işlemleri",
            "Filtreleme",
            "Pagination",
            "Row selection",
        ),
    ),
    "modal": CategoryEntry(
        keywords=("modal", "popup", "pencere"),
        display_name="Modal Pencere",
        scenarios=(
            "Modal açılması",
            "Modal kapanması",
            "Overlay tıklama",
            "ESC tuşu ile kapanma",
        ),
    ),
    "search": CategoryEntry(
        keywords=("arama", "search", "filtre"),
        display_name="Arama",
        scenarios=(
            "Arama işlevi",
            "Sonuç görüntüleme",
            "Boş arama",
            "Filtre uygulama",
        ),
    ),
    "upload": CategoryEntry(
        keywords=("yükle", "upload", "dosya"),
        display_name="Dosya Yükleme",
        scenarios=(
            "Dosya seçimi",
            "Drag & drop",
            "Dosya validation",
            "Upload progress",
        ),
    ),
    "login": CategoryEntry(
        keywords=("giriş", "login", "oturum"),
        display_name="Giriş Sistemi",
        scenarios=(
            "Başarılı giriş",
            "Hatalı giriş",
            "Şifre unuttum",
            "Session yönetimi",
        ),
    ),
    # GSM number pool ("havuz") screen, reached only through the file name
    "gsm_dropdown": CategoryEntry(
        keywords=(),
        display_name="GSM Dropdown",
        scenarios=(
            "GSM numara listesinin görüntülenmesi",
            "GSM numarası seçimi",
            "Keyboard navigation",
            "Boş seçim validation",
        ),
    ),
    "gsm_input": CategoryEntry(
        keywords=(),
        display_name="GSM Numara Alanı",
        scenarios=(
            "Geçerli GSM numarası girişi",
            "GSM format validation",
            "Karakter limiti kontrolü",
            "Hatalı numara error mesajı",
        ),
    ),
    "excel_upload": CategoryEntry(
        keywords=(),
        display_name="Excel Yükleme",
        scenarios=(
            "Excel dosyası seçimi",
            "Dosya format validation",
            "Hatalı satır error raporu",
            "Şablon dosyası indirme",
        ),
    ),
    "imei_field": CategoryEntry(
        keywords=(),
        display_name="IMEI Alanı",
        scenarios=(
            "Geçerli IMEI girişi",
            "IMEI format validation",
            "15 hane kontrolü",
            "Kontrol hanesi (Luhn) doğrulaması",
        ),
    ),
    "add_row_button": CategoryEntry(
        keywords=(),
        display_name="Satır Ekle Butonu",
        scenarios=(
            "Yeni satır ekleme",
            "Çoklu satır ekleme",
            "Satır silme",
            "Maksimum satır limiti",
        ),
    ),
    "navigation_buttons": CategoryEntry(
        keywords=(),
        display_name="Navigasyon Butonları",
        scenarios=(
            "İleri butonu ile geçiş",
            "Geri butonu ile dönüş",
            "Ana sayfaya dönüş",
            "Keyboard navigation",
        ),
    ),
})

TEST_TYPE_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "functional": ("işlevsel", "functional", "çalış"),
    "ui": ("görünüm", "ui", "arayüz", "görsel"),
    "validation": ("doğrula", "validation", "kontrol", "geçerli"),
    "accessibility": ("erişilebilir", "accessibility", "keyboard"),
    "performance": ("performans", "hız", "yavaş"),
    "negative": ("negative", "hatalı", "yanlış", "geçersiz"),
})

HIGH_PRIORITY_KEYWORDS: Tuple[str, ...] = ("kritik", "önemli", "critical", "important", "high")
LOW_PRIORITY_KEYWORDS: Tuple[str, ...] = ("düşük", "low")
ADMIN_KEYWORDS: Tuple[str, ...] = ("admin", "yönetici", "manager")

# Ordered (substring, page type) rules applied to the upload's file name
PAGE_TYPE_RULES: Tuple[Tuple[str, str], ...] = (
    ("havuz", "gsm_pool"),
    ("pool", "gsm_pool"),
    ("login", "login_page"),
    ("giris", "login_page"),
    ("arama", "search_page"),
    ("search", "search_page"),
)

PAGE_TYPE_COMPONENTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "gsm_pool": (
        "gsm_dropdown",
        "gsm_input",
        "excel_upload",
        "imei_field",
        "add_row_button",
        "navigation_buttons",
    ),
    "login_page": ("login", "input", "button"),
    "search_page": ("search", "table"),
})


def display_name(category: str) -> str:
    entry = CATEGORIES.get(category)
    return entry.display_name if entry else category


def scenarios_for(category: str) -> Tuple[str, ...]:
    entry = CATEGORIES.get(category)
    return entry.scenarios if entry else (GENERIC_SCENARIO,)
