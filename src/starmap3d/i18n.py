"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "3D 별지도",
        "en": "Star Map 3D",
    },
    "label_star": {
        "ko": "별",
        "en": "Star",
    },
    "label_distance": {
        "ko": "거리",
        "en": "Distance",
    },
    "unit_light_years": {
        "ko": "광년",
        "en": "light years",
    },
    "not_applicable": {
        "ko": "해당 없음",
        "en": "N/A",
    },
    "label_catalog": {
        "ko": "카탈로그 경로 또는 URL",
        "en": "Catalog path or URL",
    },
    "label_upload": {
        "ko": "카탈로그 JSON 업로드",
        "en": "Upload catalog JSON",
    },
    "label_select": {
        "ko": "별 선택",
        "en": "Select a star",
    },
    "btn_load": {
        "ko": "✦ 불러오기",
        "en": "✦ Load",
    },
    "loading_catalog": {
        "ko": "✦ 별 목록을 불러오는 중",
        "en": "✦ Loading the catalog",
    },
    "placeholder": {
        "ko": "카탈로그를 불러오면 별지도가 나타납니다",
        "en": "Load a catalog to see the star map",
    },
    "error_catalog": {
        "ko": "카탈로그를 불러올 수 없어요. ({error})",
        "en": "Could not load the catalog. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
