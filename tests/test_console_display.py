"""Консольный драйвер рисует фразу с выделенной строкой."""

import io

import pytest

import display
from display import DisplayItem
from display.drivers.console import BOLD, RESET, ConsoleDisplayDriver
from timewords import ClockReading, render_clock_phrase


@pytest.fixture(autouse=True)
def _reset_driver():
    display.reset_driver()
    yield
    display.reset_driver()


def _phrase():
    return render_clock_phrase(ClockReading(16, 10), "en")


def test_bold_highlight():
    out = io.StringIO()
    driver = ConsoleDisplayDriver(stream=out)
    driver.draw(DisplayItem(kind="phrase", payload=_phrase()))
    panel = out.getvalue().splitlines()
    assert len(panel) == 6
    assert BOLD in panel[3] and RESET in panel[3]
    assert "four" in panel[3]
    assert BOLD not in panel[1]


def test_upper_highlight():
    out = io.StringIO()
    driver = ConsoleDisplayDriver(highlight="upper", stream=out)
    driver.draw(DisplayItem(kind="phrase", payload=_phrase()))
    assert "FOUR" in out.getvalue()
    assert "ten past" in out.getvalue()


def test_text_item_and_removal():
    out = io.StringIO()
    driver = ConsoleDisplayDriver(stream=out)
    driver.draw(DisplayItem(kind="text", payload="hello"))
    assert "hello" in out.getvalue()
    out.truncate(0)
    out.seek(0)
    driver.draw(DisplayItem(kind="text", payload=None))
    assert "hello" not in out.getvalue()


def test_empty_line_keeps_height():
    out = io.StringIO()
    driver = ConsoleDisplayDriver(stream=out)
    driver.draw(DisplayItem(kind="phrase", payload=render_clock_phrase(ClockReading(15, 0), "ca")))
    assert len(out.getvalue().splitlines()) == 6


def test_init_driver_by_name():
    driver = display.init_driver("console", highlight="upper")
    assert isinstance(driver, ConsoleDisplayDriver)
    assert display.get_driver() is driver


def test_init_driver_prefers_instance():
    own = ConsoleDisplayDriver(stream=io.StringIO())
    assert display.init_driver("missing", driver=own) is own


def test_text_footer_under_phrase():
    out = io.StringIO()
    driver = ConsoleDisplayDriver(stream=out)
    driver.draw(DisplayItem(kind="phrase", payload=_phrase()))
    driver.draw(DisplayItem(kind="text", payload="en"))
    panel = out.getvalue().splitlines()[-6:]
    assert panel[4].strip("│ ") == "en"
