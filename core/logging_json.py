"""Настройка структурированного JSON‑логирования."""

from __future__ import annotations

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone


TRACE_ID: ContextVar[str] = ContextVar("trace_id", default="")


class ContextFilter(logging.Filter):
    """Добавляет ``trace_id`` из контекста в запись лога."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.trace_id = TRACE_ID.get()
        return True


class JsonFormatter(logging.Formatter):
    """Форматирует записи логов в компактный JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Преобразует запись ``record`` в строку JSON."""

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_entry = {
            # Метка времени события в формате ISO 8601
            "ts": ts.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            # Уровень логирования (INFO, ERROR и т.д.)
            "level": record.levelname,
            # Имя компонента, либо logger.name, если не передано через extra
            "component": getattr(record, "component", record.name),
            # Название события, произвольная строка
            "event": getattr(record, "event", ""),
            # Идентификатор трассировки для связывания логов
            "trace_id": getattr(record, "trace_id", ""),
            # Дополнительные атрибуты события
            "attrs": getattr(record, "attrs", {}),
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exc"] = self.formatException(record.exc_info)
        # ensure_ascii=False — чтобы кандзи и «d’» выводились как есть
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def configure_logging(component: str = "", level: int = logging.INFO) -> logging.Logger:
    """Настраивает логгер *component* на вывод JSON и возвращает его.

    Повторный вызов для того же компонента не добавляет второй обработчик.
    """

    logger = logging.getLogger(component or __name__)
    logger.setLevel(level)
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        handler.addFilter(ContextFilter())
        logger.addHandler(handler)
    logger.propagate = False  # не передавать записи в родительские логгеры
    return logger


def new_trace_id() -> str:
    """Создать короткий идентификатор трассировки."""

    return uuid.uuid4().hex[:8]


__all__ = ["configure_logging", "TRACE_ID", "new_trace_id", "JsonFormatter", "ContextFilter"]
