"""
Модуль дисплея с поддержкой динамической загрузки драйверов.
Структура:

 display/           # пакет дисплея
 ├── __init__.py    # загрузчик драйверов и базовый класс
 └── drivers/       # папка с драйверами
     └── console.py # драйвер вывода фразы в консоль
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import importlib
from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

from core.logging_json import configure_logging
from timewords import PhraseResult

log = configure_logging("display")


@dataclass
class DisplayItem:
    kind:    Literal["phrase", "text"]
    payload: Optional[Union[PhraseResult, str]]  # None → удалить элемент из кеша


class DisplayDriver(ABC):
    """Абстрактный базовый класс для драйверов дисплея."""

    @abstractmethod
    def draw(self, item: DisplayItem) -> None:
        """Получает DisplayItem — что именно нарисовать."""
        ...

    @abstractmethod
    def process_events(self) -> None:
        """Вызывается в цикле обновления для обработки событий драйвера."""
        ...

    def forget(self, kind: str) -> None:
        """Удалить закэшированный элемент указанного вида.

        Драйверы, не поддерживающие кэш, могут не переопределять метод.
        """
        return


# Внутренний экземпляр текущего драйвера
_driver: DisplayDriver | None = None


def init_driver(
    name: str = "console", driver: DisplayDriver | None = None, **options: Any
) -> DisplayDriver:
    """
    Инициализировать драйвер дисплея:
      - name: имя модуля внутри ``display.drivers`` (без ``.py``)
      - driver: объект драйвера (приоритет выше ``name``)
      - options: аргументы конструктора драйвера

    Пример: ``init_driver("console", highlight="upper")``
    """
    global _driver
    if _driver is not None:
        return _driver
    if driver is not None:
        _driver = driver
        return _driver

    # динамический импорт по имени
    module_path = f"display.drivers.{name}"
    log.info("display module %s", module_path)
    module = importlib.import_module(module_path)
    # ожидаем, что класс называется <Name>DisplayDriver
    class_name = name.capitalize() + "DisplayDriver"
    driver_cls = getattr(module, class_name)
    _driver = driver_cls(**options)
    return _driver


def get_driver() -> DisplayDriver:
    """Получить текущий драйвер, инициализировать по умолчанию, если не задан."""
    if _driver is None:
        return init_driver()
    return _driver


def reset_driver() -> None:
    """Забыть текущий драйвер (нужно при смене конфигурации и в тестах)."""
    global _driver
    _driver = None
