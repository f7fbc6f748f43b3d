from colorglobe.i18n import t


def test_known_key_in_each_language():
    assert t("tab_globe", "en") == "Rotating Globe"
    assert t("tab_globe", "ko") == "회전하는 지구본"


def test_unknown_language_falls_back_to_english():
    assert t("btn_apply", "fr") == "Apply"


def test_unknown_key_returns_key():
    assert t("no_such_key", "en") == "no_such_key"
