"""Фоновое обновление дисплея часов.

Цикл выравнивается по границе минуты, чтобы фраза менялась вместе
с часами, и на каждом шаге рисует свежую фразу на дисплее.
"""

from __future__ import annotations

import asyncio
import datetime as dt
from typing import Callable

from app.clock import next_language, seconds_until_next_minute
from core.logging_json import TRACE_ID, configure_logging, new_trace_id
from display import DisplayDriver, DisplayItem
from timewords import render_clock_phrase

# Отдельный логгер для задач планировщика
log = configure_logging("scheduler")


def refresh(driver: DisplayDriver, language: str, now: dt.datetime) -> None:
    """Нарисовать фразу для *now* на *driver*."""
    phrase = render_clock_phrase(now, language)
    driver.draw(DisplayItem(kind="phrase", payload=phrase))
    # подпись с кодом языка, заметна при переключении --cycle
    driver.draw(DisplayItem(kind="text", payload=phrase.locale.value))
    log.debug(
        "phrase drawn",
        extra={"event": "clock.refresh", "attrs": {"lang": language, "text": phrase.full_text}},
    )


async def run_clock(
    driver: DisplayDriver,
    language: str,
    interval: int = 60,
    *,
    cycle: bool = False,
    max_ticks: int | None = None,
    clock: Callable[[], dt.datetime] = dt.datetime.now,
) -> str:
    """Обновлять дисплей каждые *interval* секунд.

    При ``interval == 60`` сон выравнивается по началу следующей минуты.
    ``cycle`` переключает язык на каждом шаге. Возвращает язык последнего
    шага, что удобно в тестах.
    """
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        token = TRACE_ID.set(new_trace_id())
        try:
            refresh(driver, language, clock())
            driver.process_events()
        except Exception:
            log.exception("display refresh failed")
        finally:
            TRACE_ID.reset(token)
        ticks += 1
        if max_ticks is not None and ticks >= max_ticks:
            break
        if cycle:
            language = next_language(language)
        if interval == 60:
            sleep_for = seconds_until_next_minute(clock())
        else:
            sleep_for = float(interval)
        await asyncio.sleep(sleep_for)
    return language


__all__ = ["refresh", "run_clock"]
