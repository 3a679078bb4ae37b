"""
Runtime settings for the HWiNFO graph viewer.

Values come from the process environment. ``main.py`` loads a ``.env`` file
first, so any of these can be set there as well.
"""
import codecs
import logging
import os
from dataclasses import dataclass, field
from typing import Dict

DEFAULT_ENCODING = "utf-8-sig"
FALLBACK_ENCODING = "cp1252"

MAX_GRANULARITY = 60
GRANULARITY_STEP = 10

DEFAULT_COLUMNS = {
    "time": "Time",
    "cpu_usage": "Total CPU Usage [%]",
    "cpu_temp": "CPU Package [°C]",
    "gpu_load": "GPU Core Load [%]",
    "gpu_temp": "GPU Temperature [°C]",
}

# Record field -> environment variable overriding its CSV column name
logger = logging.getLogger(__name__)

COLUMN_ENV_VARS = {
    "time": "HWINFO_TIME_COLUMN",
    "cpu_usage": "HWINFO_CPU_USAGE_COLUMN",
    "cpu_temp": "HWINFO_CPU_TEMP_COLUMN",
    "gpu_load": "HWINFO_GPU_LOAD_COLUMN",
    "gpu_temp": "HWINFO_GPU_TEMP_COLUMN",
}


@dataclass(frozen=True)
class Settings:
    """
    Ingestion and logging settings.

    Attributes:
        encoding: First encoding tried when reading a CSV file
        columns: Record field name -> CSV column name
        log_level: Name of the root logging level
    """
    encoding: str = DEFAULT_ENCODING
    columns: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLUMNS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ

        columns = dict(DEFAULT_COLUMNS)
        for name, var in COLUMN_ENV_VARS.items():
            value = env.get(var, "").strip()
            if value:
                columns[name] = value

        encoding = env.get("HWINFO_CSV_ENCODING", "").strip() or DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError:
            logger.warning(f"Unknown HWINFO_CSV_ENCODING '{encoding}', using {DEFAULT_ENCODING}")
            encoding = DEFAULT_ENCODING

        return cls(
            encoding=encoding,
            columns=columns,
            log_level=env.get("HWINFO_LOG_LEVEL", "").strip().upper() or "INFO",
        )
