import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from telemetry.model import Record


@pytest.fixture(scope="session")
def qapp():
    from PyQt5 import QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def make_records():
    """Records with Time "0s".."Ns" and CPU usage 0..N-1."""
    def _make(count):
        return [
            Record(
                time=f"{i}s",
                cpu_usage=float(i),
                cpu_temp=40.0 + i,
                gpu_load=float(i * 2),
                gpu_temp=50.0 + i,
            )
            for i in range(count)
        ]
    return _make


HWINFO_HEADER = '"Date","Time","Total CPU Usage [%]","CPU Package [°C]","GPU Core Load [%]","GPU Temperature [°C]",'


@pytest.fixture
def hwinfo_csv(tmp_path):
    """Write a HWiNFO-style log with ``rows`` samples; returns its path."""
    def _write(rows=5, encoding="utf-8"):
        lines = [HWINFO_HEADER]
        for i in range(rows):
            lines.append(f'19.10.2026,12:00:{i:02d}.000,{i}.5,{60 + i},{i * 3},{55 + i},')
        path = tmp_path / "log.csv"
        path.write_bytes(("\n".join(lines) + "\n").encode(encoding))
        return path
    return _write
