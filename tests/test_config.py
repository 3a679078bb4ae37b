from config import DEFAULT_COLUMNS, DEFAULT_ENCODING, Settings


def test_defaults_without_environment():
    settings = Settings.from_env({})

    assert settings.encoding == DEFAULT_ENCODING
    assert settings.columns == DEFAULT_COLUMNS
    assert settings.log_level == "INFO"


def test_environment_overrides():
    settings = Settings.from_env({
        "HWINFO_CSV_ENCODING": "latin-1",
        "HWINFO_CPU_TEMP_COLUMN": "CPU (Tctl/Tdie) [°C]",
        "HWINFO_GPU_TEMP_COLUMN": "  ",
        "HWINFO_LOG_LEVEL": "debug",
    })

    assert settings.encoding == "latin-1"
    assert settings.columns["cpu_temp"] == "CPU (Tctl/Tdie) [°C]"
    assert settings.columns["gpu_temp"] == DEFAULT_COLUMNS["gpu_temp"]
    assert settings.log_level == "DEBUG"


def test_unknown_encoding_uses_default():
    settings = Settings.from_env({"HWINFO_CSV_ENCODING": "klingon-8"})

    assert settings.encoding == DEFAULT_ENCODING
