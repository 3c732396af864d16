"""Разбиение испанской фразы на три строки примерно равной длины.

Перебираются все пары разрезов ``1 <= i < j < n``. Длина сегмента —
число букв (пробелы и апострофы не считаются). Сначала ищется самое
ровное разбиение, в котором сегмент с часом самый короткий; если такого
нет, берётся самое ровное разбиение без ограничений.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .numerals import ES_HOUR_WORDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalancedLines:
    line1: str
    line2: str
    line3: str
    hour_line: int


def _letters(token: str) -> int:
    return sum(1 for ch in token if ch.isalpha())


def _segment_of(idx: int, i: int, j: int) -> int:
    if idx < i:
        return 1
    if idx < j:
        return 2
    return 3


def _find_hour_index(tokens: Sequence[str], hour_words: Iterable[str]) -> int:
    words = {w.lower() for w in hour_words}
    for idx, token in enumerate(tokens):
        if token.lower() in words:
            return idx
    return 0


def _best_cut(
    lengths: Sequence[int],
    hour_idx: int,
    require_hour_shortest: bool,
    default: tuple[int, int] | None = None,
) -> tuple[int, int] | None:
    n = len(lengths)
    total = sum(lengths)
    best = default
    best_score: int | None = None
    for i in range(1, n - 1):
        for j in range(i + 1, n):
            sum1 = sum(lengths[:i])
            sum2 = sum(lengths[i:j])
            sum3 = total - sum1 - sum2
            sums = (sum1, sum2, sum3)
            if require_hour_shortest:
                seg = _segment_of(hour_idx, i, j)
                if sums[seg - 1] != min(sums):
                    continue
            score = max(sums) - min(sums)
            # строгое «<»: при равенстве остаётся первый найденный вариант
            if best_score is None or score < best_score:
                best, best_score = (i, j), score
    return best


def balance_lines(
    phrase: str, hour_words: Iterable[str] = ES_HOUR_WORDS
) -> BalancedLines:
    """Разрезать *phrase* на три строки и вернуть номер строки с часом.

    Меньше трёх слов — вся фраза в первой строке, остальные пустые.
    """
    tokens = phrase.split()
    n = len(tokens)
    if n < 3:
        return BalancedLines(phrase, "", "", 1)

    hour_idx = _find_hour_index(tokens, hour_words)
    lengths = [_letters(t) for t in tokens]

    cut = _best_cut(lengths, hour_idx, require_hour_shortest=True)
    if cut is None:
        logger.debug("no split keeps the hour shortest: %r", phrase)
        # первый разрез (1, 2) существует всегда при n >= 3
        cut = _best_cut(lengths, hour_idx, require_hour_shortest=False, default=(1, 2))
    i, j = cut

    return BalancedLines(
        line1=" ".join(tokens[:i]),
        line2=" ".join(tokens[i:j]),
        line3=" ".join(tokens[j:]),
        hour_line=_segment_of(hour_idx, i, j),
    )


__all__ = ["BalancedLines", "balance_lines"]
