# telemetry/model.py
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Record:
    time: Optional[str] = None         # "Time" column, kept as text
    cpu_usage: Optional[float] = None  # Total CPU Usage [%]
    cpu_temp: Optional[float] = None   # CPU Package [°C]
    gpu_load: Optional[float] = None   # GPU Core Load [%]
    gpu_temp: Optional[float] = None   # GPU Temperature [°C]


# Record attributes holding telemetry values, in chart order
TELEMETRY_FIELDS = ("cpu_usage", "cpu_temp", "gpu_load", "gpu_temp")
