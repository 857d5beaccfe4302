"""Configuration schema and loader."""

from .loader import config_to_yaml, load_config, validate_config
from .schema import (
    DigestConfig,
    IOConfig,
    LabelsConfig,
    LoggingConfig,
    ProcStatusConfig,
    ReporterConfig,
)

__all__ = [
    "ProcStatusConfig",
    "LabelsConfig",
    "ReporterConfig",
    "DigestConfig",
    "IOConfig",
    "LoggingConfig",
    "load_config",
    "validate_config",
    "config_to_yaml",
]
