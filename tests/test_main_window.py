import math

import pytest

from config import Settings
from telemetry.model import Record
from telemetry.series import build
from ui.canvases import MultiLineCanvas
from ui.main_window import MainWindow
from ui.styles import css_to_rgba


@pytest.fixture
def window(qapp):
    w = MainWindow(settings=Settings())
    yield w
    w.close()


def test_initial_state(window):
    assert window.windowTitle() == "HWiNFO Graph"
    assert window.granularity_slider.minimum() == 0
    assert window.granularity_slider.maximum() == 60
    assert window.granularity_label.text() == "Data Granularity: 0 seconds"
    assert window.status_label.text() == "No file loaded"


def test_open_csv_draws_four_lines(window, hwinfo_csv):
    assert window.open_csv(str(hwinfo_csv(rows=25)))

    assert len(window.chart_canvas.lines) == 4
    assert "25 rows loaded, 25 points shown" in window.status_label.text()


def test_slider_resamples(window, hwinfo_csv):
    window.open_csv(str(hwinfo_csv(rows=25)))

    window.set_granularity(10)

    assert window.controller.granularity == 10
    assert window.granularity_label.text() == "Data Granularity: 10 seconds"
    assert len(window.controller.collection) == 3
    assert "3 points shown" in window.status_label.text()


def test_slider_snaps_to_step(window):
    window.granularity_slider.setValue(37)

    assert window.granularity_slider.value() == 40
    assert window.controller.granularity == 40


def test_missing_file_reports_status(window, tmp_path):
    missing = tmp_path / "missing.csv"

    assert window.open_csv(str(missing)) is False
    assert window.status_label.text() == f"Could not open {missing}"
    assert window.controller.records == []


def test_canvas_handles_gaps_and_empty(qapp):
    canvas = MultiLineCanvas("test")
    records = [Record(time="0s", cpu_usage=1.0), Record(time=None), Record(time="2s", cpu_usage=3.0)]

    canvas.update_collection(build(records, 0))
    y = canvas.lines[0].get_ydata()
    assert y[0] == 1.0 and math.isnan(y[1]) and y[2] == 3.0

    canvas.update_collection(build([], 0))
    assert canvas.lines == []


def test_css_to_rgba():
    assert css_to_rgba("rgb(255, 0, 0)") == (1.0, 0.0, 0.0, 1.0)
    assert css_to_rgba("rgba(0, 0, 255, 0.5)") == (0.0, 0.0, 1.0, 0.5)
    assert css_to_rgba("#6FA8FF") == "#6FA8FF"


def test_unknown_encoding_still_opens(qapp, hwinfo_csv):
    w = MainWindow(settings=Settings(encoding="no-such-codec"))

    assert w.open_csv(str(hwinfo_csv(rows=3)))
    assert "3 rows loaded" in w.status_label.text()
    w.close()
