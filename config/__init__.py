"""Загрузка YAML-конфигурации часов.

Настройки лежат в ``config/clock.yaml``. Отсутствующий файл или ключ —
не ошибка: подставляется значение по умолчанию. Язык и драйвер дисплея
можно переопределить переменными окружения ``TIMEWORDS_LANG`` и
``TIMEWORDS_DRIVER`` (в том числе из файла ``.env``). Источник каждого
значения пишется в лог.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore
from dotenv import load_dotenv

from core.logging_json import configure_logging

# Папка, где лежат YAML-конфигурации
CONFIG_DIR = Path(__file__).resolve().parent

load_dotenv()

log = configure_logging("config")

HIGHLIGHT_STYLES = ("bold", "upper")


class ConfigError(Exception):
    """Значение в конфигурации нельзя использовать."""


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Прочитать YAML-файл и вернуть словарь параметров.

    При отсутствии файла или ошибке парсинга возвращается пустой словарь.
    """
    if not path.exists():
        log.info("конфигурация %s отсутствует — используем значения по умолчанию", path.name)
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        log.warning("не удалось прочитать %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("%s: ожидался словарь, получено %s", path.name, type(data).__name__)
        return {}
    log.debug("файл %s успешно загружен: %s", path.name, data)
    return data


def _env_or_cfg(data: Dict[str, Any], key: str, env_name: str, default: str) -> str:
    """Значение из окружения, затем из файла, затем по умолчанию."""
    value = os.getenv(env_name)
    if value:
        log.info("%s=%s (env)", env_name, value)
        return value
    if data.get(key) not in (None, ""):
        log.info("%s=%s (cfg)", key, data[key])
        return str(data[key])
    log.info("%s=%s (default)", key, default)
    return default


@dataclass
class ClockConfig:
    """Настройки отображения часов."""

    language: str = "es"              # код языка: es/en/ca/ja
    driver: str = "console"           # имя драйвера из пакета ``display.drivers``
    highlight: str = "bold"           # выделение строки в консоли: bold/upper
    refresh_interval_sec: int = 60    # период обновления дисплея
    timeline_minutes: int = 60        # длина поминутной ленты


def load_clock(path: Path | None = None) -> ClockConfig:
    """Загрузить настройки часов из ``clock.yaml``."""

    path = path or CONFIG_DIR / "clock.yaml"
    data = _read_yaml(path)
    defaults = ClockConfig()

    highlight = str(data.get("highlight", defaults.highlight)).lower()
    if highlight not in HIGHLIGHT_STYLES:
        raise ConfigError(f"highlight must be one of {HIGHLIGHT_STYLES}, got {highlight!r}")

    try:
        interval = int(data.get("refresh_interval_sec", defaults.refresh_interval_sec))
        timeline = int(data.get("timeline_minutes", defaults.timeline_minutes))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{path.name}: {exc}") from exc
    if interval <= 0:
        raise ConfigError("refresh_interval_sec must be positive")
    if timeline < 0:
        raise ConfigError("timeline_minutes must not be negative")

    return ClockConfig(
        language=_env_or_cfg(data, "language", "TIMEWORDS_LANG", defaults.language),
        driver=_env_or_cfg(data, "driver", "TIMEWORDS_DRIVER", defaults.driver),
        highlight=highlight,
        refresh_interval_sec=interval,
        timeline_minutes=timeline,
    )


__all__ = ["CONFIG_DIR", "ClockConfig", "ConfigError", "load_clock"]
