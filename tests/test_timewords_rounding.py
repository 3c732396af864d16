"""Тесты округления к пятиминутным отметкам."""

import pytest

from timewords.rounding import reference_hour, round_reading, to_hour12


@pytest.mark.parametrize("minute", range(60))
def test_unit_and_direction(minute):
    res = round_reading(10, minute)
    assert res.unit == minute % 5
    if res.unit in (0, 1, 2):
        assert res.rounded_minute == minute - res.unit
        assert res.display_hour24 == 10
    elif minute + 5 - res.unit < 60:
        assert res.rounded_minute == minute + 5 - res.unit
        assert res.display_hour24 == 10
    else:
        assert res.rounded_minute == 0
        assert res.display_hour24 == 11
    assert res.rounded_minute % 5 == 0


@pytest.mark.parametrize("minute", range(0, 60, 5))
def test_exact_tick_is_unchanged(minute):
    res = round_reading(7, minute)
    assert (res.unit, res.rounded_minute, res.display_hour24) == (0, minute, 7)


def test_hour_rollover_at_midnight():
    res = round_reading(23, 58)
    assert res.display_hour24 == 0
    assert res.rounded_minute == 0
    assert res.unit == 3


def test_just_past_rounds_down():
    res = round_reading(4, 12)
    assert (res.unit, res.rounded_minute, res.display_hour24) == (2, 10, 4)


def test_nearly_rounds_up():
    res = round_reading(4, 13)
    assert (res.unit, res.rounded_minute, res.display_hour24) == (3, 15, 4)


def test_reference_hour_after_half():
    assert reference_hour(round_reading(16, 45)) == 17
    assert reference_hour(round_reading(16, 30)) == 16
    assert reference_hour(round_reading(23, 40)) == 0


@pytest.mark.parametrize("h24,h12", [(0, 12), (1, 1), (11, 11), (12, 12), (13, 1), (23, 11)])
def test_to_hour12(h24, h12):
    assert to_hour12(h24) == h12
