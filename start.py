from __future__ import annotations

"""Точка входа: текущее время словами в консоли.

Режимы:

* по умолчанию — одна фраза для текущего времени (или ``--time``);
* ``--all`` — та же фраза на всех языках;
* ``--timeline [N]`` — поминутная лента на N минут вперёд (по умолчанию из конфига);
* ``--watch`` — постоянное обновление на драйвере дисплея.
"""

import argparse
import asyncio
import datetime as dt
import json
import sys
from pathlib import Path
from typing import Optional

from app.clock import LANGUAGES, build_timeline, parse_hhmm
from config import ClockConfig, ConfigError, load_clock
from core.logging_json import configure_logging
from display import DisplayDriver, init_driver
from timewords import PhraseResult, render_clock_phrase

log = configure_logging("app")

# --timeline без числа: длина берётся из clock.yaml
TIMELINE_FROM_CONFIG = object()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="timewords",
        description="Show the current time as a short phrase (es/en/ca/ja).",
    )
    p.add_argument("--lang", help="language code: es, en, ca, ja (default from config)")
    p.add_argument("--time", help="wall-clock time in HH:MM instead of now")
    p.add_argument("--config", type=Path, help="path to clock.yaml")

    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--all", action="store_true", help="render in every language")
    mode.add_argument(
        "--timeline",
        type=int,
        nargs="?",
        const=TIMELINE_FROM_CONFIG,
        metavar="N",
        help="print N minutes ahead (default from config)",
    )
    mode.add_argument("--watch", action="store_true", help="keep the display updated")

    p.add_argument("--cycle", action="store_true", help="(watch) switch language every tick")
    p.add_argument("--json", action="store_true", help="print JSON instead of text")
    return p


def init_display_from_config(cfg: ClockConfig) -> DisplayDriver:
    """Создать драйвер дисплея по настройкам."""
    options = {"highlight": cfg.highlight} if cfg.driver == "console" else {}
    return init_driver(cfg.driver, **options)


def format_phrase(phrase: PhraseResult) -> str:
    """Три строки, выделенная помечена ``>``, затем полный текст."""
    line1, line2, line3, full_text, highlight = phrase.as_tuple()
    out = []
    for idx, line in enumerate((line1, line2, line3), start=1):
        mark = ">" if idx == highlight else " "
        out.append(f"{mark} {line}".rstrip())
    out.append(f"  ({full_text})")
    return "\n".join(out) + "\n"


def _now(args: argparse.Namespace) -> dt.datetime:
    now = dt.datetime.now()
    if args.time:
        reading = parse_hhmm(args.time)
        now = now.replace(hour=reading.hour24, minute=reading.minute, second=0, microsecond=0)
    return now


def _write(text: str) -> None:
    # кандзи и «d’» без UnicodeEncodeError на узких консолях
    sys.stdout.buffer.write(text.encode("utf-8", errors="replace"))
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_clock(args.config)
    except ConfigError as exc:
        parser.error(str(exc))
    language = args.lang or cfg.language

    try:
        now = _now(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.watch:
        driver = init_display_from_config(cfg)
        log.info("watch mode", extra={"attrs": {"lang": language, "driver": cfg.driver}})
        try:
            asyncio.run(
                _watch(driver, language, cfg.refresh_interval_sec, args.cycle)
            )
        except KeyboardInterrupt:
            log.info("stopped")
        return 0

    if args.timeline is not None:
        minutes = cfg.timeline_minutes if args.timeline is TIMELINE_FROM_CONFIG else args.timeline
        if minutes < 0:
            parser.error("--timeline must not be negative")
        entries = build_timeline(now, language, minutes)
        if args.json:
            data = [{"at": e.at.isoformat(), **e.phrase.to_dict()} for e in entries]
            _write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")
        else:
            _write("".join(f"{e.at:%H:%M}  {e.phrase.full_text}\n" for e in entries))
        return 0

    languages = LANGUAGES if args.all else (language,)
    phrases = [render_clock_phrase(now, code) for code in languages]
    if args.json:
        data = [p.to_dict() for p in phrases]
        _write(json.dumps(data if args.all else data[0], ensure_ascii=False, indent=2) + "\n")
    else:
        _write("\n".join(format_phrase(p) for p in phrases))
    return 0


async def _watch(driver: DisplayDriver, language: str, interval: int, cycle: bool) -> None:
    from app.scheduler import run_clock

    await run_clock(driver, language, interval, cycle=cycle)


if __name__ == "__main__":
    raise SystemExit(main())
