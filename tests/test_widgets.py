import random

import pytest

from weatherstation.exceptions import EmptyHistory, InvalidConfiguration
from weatherstation.models import Measurement, WeatherRecord
from weatherstation.widgets.current import CurrentReadingView
from weatherstation.widgets.statistics import StatisticsView, summarize


def record(temperature, humidity=50, pressure=750):
    return WeatherRecord(temperature=temperature, humidity=humidity, pressure=pressure)


# Current reading -----------------------------------------------------------
def test_current_view_starts_with_zero_record():
    view = CurrentReadingView("C")
    assert view.current == WeatherRecord()
    assert view.listener_id == "C"


def test_current_view_stores_and_prints_latest(capsys):
    view = CurrentReadingView("C")

    view.on_update(record(21, 60, 710))

    assert view.current == record(21, 60, 710)
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "C"
    assert "Temperature\t: 21" in out
    assert "Humidity\t: 60" in out
    assert "Pressure\t: 710" in out


# Statistics ----------------------------------------------------------------
def test_summarize_single_linear_scan():
    stat = summarize([4, 1, 9, 1, 9])
    assert (stat.minimum, stat.maximum, stat.total, stat.count) == (1, 9, 24, 5)
    assert stat.average == pytest.approx(4.8)


def test_summarize_empty_raises():
    with pytest.raises(EmptyHistory):
        summarize([])


@pytest.mark.parametrize("history_length", [0, -3, 2.5])
def test_history_length_must_be_positive(history_length):
    with pytest.raises(InvalidConfiguration):
        StatisticsView("S", history_length=history_length)


def test_display_before_update_raises_empty_history():
    view = StatisticsView("S")
    with pytest.raises(EmptyHistory):
        view.display()
    with pytest.raises(EmptyHistory):
        view.statistics()


@pytest.mark.parametrize("capacity,updates", [(1, 5), (3, 2), (3, 3), (3, 7), (10, 25)])
def test_history_keeps_most_recent_values(capacity, updates, capsys):
    view = StatisticsView("S", history_length=capacity)
    temperatures = list(range(100, 100 + updates))

    for value in temperatures:
        view.on_update(record(value, humidity=value + 1, pressure=value + 2))

    kept = min(updates, capacity)
    expected = temperatures[-kept:]
    assert view.history(Measurement.TEMPERATURE) == expected
    assert view.history(Measurement.HUMIDITY) == [v + 1 for v in expected]
    assert view.history("pressure") == [v + 2 for v in expected]


def test_statistics_bound_every_retained_value(capsys):
    rng = random.Random(99)
    view = StatisticsView("S", history_length=7)

    for _ in range(40):
        view.on_update(record(rng.randrange(-20, 40), rng.randrange(0, 100), rng.randrange(900, 1100)))
        for measurement, stat in view.statistics().items():
            values = view.history(measurement)
            assert all(stat.minimum <= v <= stat.maximum for v in values)
            assert stat.total == sum(values)
            assert stat.count == len(values)
            assert stat.average == pytest.approx(sum(values) / len(values))


def test_pressure_average_uses_its_own_window(capsys):
    view = StatisticsView("S", history_length=4)
    view.on_update(record(1, 1, 100))
    # Simulate a pressure history that drifted out of step with humidity.
    view._histories[Measurement.PRESSURE].append(300)

    stat = view.statistics()[Measurement.PRESSURE]

    assert stat.average == pytest.approx(200.0)


def test_statistics_view_prints_min_max_avg(capsys):
    view = StatisticsView("S", history_length=2)
    view.on_update(record(10, 40, 700))
    view.on_update(record(15, 50, 720))

    out = capsys.readouterr().out.split("S\n")[-1]
    assert "Temperature (min/max/avg)\t: 10 / 15 / 12.50" in out
    assert "Humidity (min/max/avg)\t: 40 / 50 / 45.00" in out
    assert "Pressure (min/max/avg)\t: 700 / 720 / 710.00" in out
