"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "컬러 글로브",
        "en": "ColorGlobe",
    },
    "tab_picker": {
        "ko": "색상 선택",
        "en": "Color Picker",
    },
    "tab_globe": {
        "ko": "회전하는 지구본",
        "en": "Rotating Globe",
    },
    "tab_defaults": {
        "ko": "LAF 기본 색상",
        "en": "LAF Defaults",
    },
    "picker_title": {
        "ko": "단색",
        "en": "Solid",
    },
    "label_hue": {
        "ko": "색상",
        "en": "Hue",
    },
    "label_saturation": {
        "ko": "채도",
        "en": "Saturation",
    },
    "label_brightness": {
        "ko": "명도",
        "en": "Brightness",
    },
    "label_opacity": {
        "ko": "불투명도 %",
        "en": "A%",
    },
    "label_hex": {
        "ko": "16진수",
        "en": "Hex",
    },
    "btn_toggle_mode": {
        "ko": "RGB/HSV 전환",
        "en": "Toggle RGB/HSV",
    },
    "btn_apply": {
        "ko": "적용",
        "en": "Apply",
    },
    "error_hex": {
        "ko": "16진수 색상이 아니에요. ({error})",
        "en": "Not a hex color. ({error})",
    },
    "label_dot_color": {
        "ko": "점 색상",
        "en": "Dot color",
    },
    "label_total_dots": {
        "ko": "점 개수",
        "en": "Dots",
    },
    "label_filter": {
        "ko": "키 검색",
        "en": "Filter keys",
    },
    "chk_group_by_color": {
        "ko": "색상별 묶기",
        "en": "Group by color",
    },
    "chk_only_alpha": {
        "ko": "투명색만",
        "en": "Only alpha",
    },
    "empty_results": {
        "ko": "색상을 찾을 수 없어요.",
        "en": "No colors found.",
    },
    "btn_edit_color": {
        "ko": "색상 수정",
        "en": "Edit color",
    },
    "svg_btn_save": {
        "ko": "↓ 저장",
        "en": "↓ Save",
    },
    "svg_filename": {
        "ko": "지구본.png",
        "en": "globe.png",
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
