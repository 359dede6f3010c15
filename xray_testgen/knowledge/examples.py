"""
Example descriptions and quick additions offered to testers.
"""
from typing import Dict, List


EXAMPLE_PROMPTS: List[Dict[str, str]] = [
    {
        "title": "Dropdown Test",
        "description": "Bu ekranda bir dropdown menü var. Tüm seçeneklerin doğru görüntülendiğini ve seçim işlemlerinin çalıştığını test etmek istiyorum.",
    },
    {
        "title": "Form Validation",
        "description": "Login formundaki validation kurallarını test etmek istiyorum. Boş field'lar, geçersiz email format ve şifre kriterleri kontrol edilmeli.",
    },
    {
        "title": "Navigation Test",
        "description": "Ana menü navigasyonunu test etmek istiyorum. Tüm menü öğelerinin doğru sayfalara yönlendirdiğini kontrol edilmeli.",
    },
    {
        "title": "Button Actions",
        "description": "Sayfadaki tüm butonların işlevselliğini test etmek istiyorum. Kaydet, iptal, düzenle gibi aksiyonlar kontrol edilmeli.",
    },
]

QUICK_ADDITIONS: List[str] = [
    "Functional testing gerekli",
    "UI validation kontrolü",
    "Negative test case'ler dahil",
    "Accessibility testleri",
    "Performance testleri",
    "Cross-browser compatibility",
]
