from pathlib import Path

import pytest

from colorglobe.config import ConfigError, Settings, load_settings
from colorglobe.palette import DEFAULTS_DIR


def test_defaults_when_unset():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.total_dots == 1000
    assert settings.seed is None
    assert settings.defaults_path == DEFAULTS_DIR / "darcula.json"


def test_reads_environment():
    settings = load_settings(
        {
            "GLOBE_TOTAL_DOTS": "325",
            "GLOBE_SEED": "7",
            "GLOBE_FRAMES": "24",
            "COLOR_DEFAULTS_PATH": "/tmp/light.json",
            "APP_LANG": "KO",
            "LOG_LEVEL": "debug",
        }
    )
    assert settings.total_dots == 325
    assert settings.seed == 7
    assert settings.frames == 24
    assert settings.defaults_path == Path("/tmp/light.json")
    assert settings.lang == "ko"
    assert settings.log_level == "DEBUG"


def test_empty_values_fall_back_to_defaults():
    settings = load_settings({"GLOBE_TOTAL_DOTS": "", "GLOBE_SEED": ""})
    assert settings.total_dots == 1000
    assert settings.seed is None


@pytest.mark.parametrize(
    "env",
    [
        {"GLOBE_TOTAL_DOTS": "many"},
        {"GLOBE_TOTAL_DOTS": "-1"},
        {"GLOBE_FRAMES": "0"},
        {"GLOBE_SEED": "x"},
        {"LOG_LEVEL": "chatty"},
        {"APP_LANG": "fr"},
    ],
)
def test_malformed_values_raise(env):
    with pytest.raises(ConfigError):
        load_settings(env)
