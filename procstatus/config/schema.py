"""Structured configuration definitions for OmegaConf."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LabelsConfig:
    process: Optional[str] = "Hashing"
    update: Optional[str] = "hashed"
    summary: Optional[str] = "Hashed"


@dataclass
class ReporterConfig:
    style: str = "text"
    quiet: bool = False


@dataclass
class DigestConfig:
    algorithm: str = "md5"
    backend: str = "hashlib"


@dataclass
class IOConfig:
    chunk_size: int = 32 * 1024


@dataclass
class LoggingConfig:
    level: str = "info"
    format: str = "human"
    file: Optional[str] = None


@dataclass
class ProcStatusConfig:
    labels: LabelsConfig = field(default_factory=LabelsConfig)
    reporter: ReporterConfig = field(default_factory=ReporterConfig)
    digest: DigestConfig = field(default_factory=DigestConfig)
    io: IOConfig = field(default_factory=IOConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


__all__ = [
    "LabelsConfig",
    "ReporterConfig",
    "DigestConfig",
    "IOConfig",
    "LoggingConfig",
    "ProcStatusConfig",
]
