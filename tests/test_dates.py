import pendulum
import pytest

from puppetdashboard_health import dates
from puppetdashboard_health.exceptions import DateParseError

from conftest import EPOCH_2024


def test_parse_utc():
    ts = dates.parse("2024-01-01T00:00:00Z")
    assert ts == pendulum.datetime(2024, 1, 1)
    assert dates.to_epoch_seconds(ts) == EPOCH_2024


def test_parse_without_offset_is_utc():
    assert dates.to_epoch_seconds(dates.parse("2024-01-01T00:00:00")) == EPOCH_2024


def test_parse_embedded_offset():
    ts = dates.parse("2024-01-01T02:00:00+02:00")
    assert dates.to_epoch_seconds(ts) == EPOCH_2024


def test_to_epoch_seconds_truncates():
    ts = dates.parse("2024-01-01T00:00:00.999Z")
    assert dates.to_epoch_seconds(ts) == EPOCH_2024


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        None,
        1704067200,
        "not a date",
        "yesterday",
        # would be completed from the clock
        "now",
        "10:30",
        # dates without a time
        "2024",
        "2024-01-01",
        # a duration
        "P1D",
    ],
)
def test_parse_rejects(raw):
    with pytest.raises(DateParseError):
        dates.parse(raw)


def test_now_is_utc():
    assert dates.now().timezone_name == "UTC"


def test_format():
    assert dates.format(pendulum.datetime(2024, 1, 1)) == "2024-01-01T00:00:00Z"
