"""Тесты для загрузки ``clock.yaml`` и переменных окружения."""

import pytest
import yaml

import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TIMEWORDS_LANG", raising=False)
    monkeypatch.delenv("TIMEWORDS_DRIVER", raising=False)


def test_missing_file_uses_defaults(tmp_path):
    cfg = config.load_clock(tmp_path / "clock.yaml")
    assert cfg == config.ClockConfig()
    assert cfg.language == "es"
    assert cfg.driver == "console"


def test_partial_file(tmp_path):
    path = tmp_path / "clock.yaml"
    path.write_text("language: ja\nhighlight: UPPER\n", encoding="utf-8")
    cfg = config.load_clock(path)
    assert cfg.language == "ja"
    assert cfg.highlight == "upper"
    assert cfg.refresh_interval_sec == 60


def test_full_file(tmp_path):
    data = {
        "language": "ca",
        "driver": "console",
        "highlight": "bold",
        "refresh_interval_sec": 30,
        "timeline_minutes": 15,
    }
    path = tmp_path / "clock.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    cfg = config.load_clock(path)
    assert (cfg.language, cfg.refresh_interval_sec, cfg.timeline_minutes) == ("ca", 30, 15)


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "clock.yaml"
    path.write_text("language: ca\n", encoding="utf-8")
    monkeypatch.setenv("TIMEWORDS_LANG", "en")
    monkeypatch.setenv("TIMEWORDS_DRIVER", "other")
    cfg = config.load_clock(path)
    assert cfg.language == "en"
    assert cfg.driver == "other"


def test_broken_yaml_falls_back(tmp_path):
    path = tmp_path / "clock.yaml"
    path.write_text("language: [unclosed\n", encoding="utf-8")
    assert config.load_clock(path) == config.ClockConfig()


def test_non_mapping_yaml_falls_back(tmp_path):
    path = tmp_path / "clock.yaml"
    path.write_text("- es\n- en\n", encoding="utf-8")
    assert config.load_clock(path) == config.ClockConfig()


@pytest.mark.parametrize(
    "text",
    ["refresh_interval_sec: 0\n", "timeline_minutes: -1\n", "highlight: blink\n", "refresh_interval_sec: soon\n"],
)
def test_bad_values_raise(tmp_path, text):
    path = tmp_path / "clock.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(config.ConfigError):
        config.load_clock(path)


def test_shipped_config_is_valid():
    cfg = config.load_clock()
    assert cfg.driver == "console"
