"""Load procstatus configuration from YAML files and dotted overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from procstatus.digest import DigestType, list_digest_backends
from procstatus.exceptions import ConfigurationError
from procstatus.status import REPORTER_STYLES
from procstatus.utils.logging_utils import LOG_FORMATS

from . import schema


def load_config(
    path: str | Path | None = None,
    *,
    overrides: Iterable[str] = (),
    defaults: Iterable[str] = (),
) -> schema.ProcStatusConfig:
    """Load a configuration, layering file values and overrides on defaults.

    Layers, lowest precedence first: schema defaults, ``defaults``, the file,
    ``overrides``.

    Args:
        path: Optional YAML file with any subset of the schema
        overrides: Dotted ``key=value`` assignments, e.g. ``io.chunk_size=65536``
        defaults: Dotted ``key=value`` assignments a command uses in place of
            the schema defaults

    Raises:
        ConfigurationError: If the file is missing, a key is unknown, or a
            value fails validation.
    """
    base = OmegaConf.structured(schema.ProcStatusConfig)
    layers = [base]

    default_list = _check_dotlist(defaults)
    if default_list:
        layers.append(OmegaConf.from_dotlist(default_list))

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        try:
            layers.append(OmegaConf.load(config_path))
        except (OmegaConfBaseException, yaml.YAMLError, OSError, ValueError) as exc:
            raise ConfigurationError(f"Unable to read {config_path}: {exc}") from exc

    override_list = _check_dotlist(overrides)
    if override_list:
        layers.append(OmegaConf.from_dotlist(override_list))

    try:
        merged = OmegaConf.merge(*layers)
        config = OmegaConf.to_object(merged)
    except OmegaConfBaseException as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    validate_config(config)
    return config


def _check_dotlist(items: Iterable[str]) -> list[str]:
    item_list = list(items)
    for item in item_list:
        if "=" not in item:
            raise ConfigurationError(f"Invalid override '{item}': expected key=value")
    return item_list


def validate_config(config: schema.ProcStatusConfig) -> None:
    if config.io.chunk_size <= 0:
        raise ConfigurationError("io.chunk_size must be a positive integer")
    if config.reporter.style not in REPORTER_STYLES:
        raise ConfigurationError(
            f"reporter.style must be one of: {', '.join(REPORTER_STYLES)}"
        )
    if config.logging.format not in LOG_FORMATS:
        raise ConfigurationError(
            f"logging.format must be one of: {', '.join(LOG_FORMATS)}"
        )
    if config.digest.algorithm.lower() not in {t.value for t in DigestType}:
        raise ConfigurationError(
            f"digest.algorithm must be one of: "
            f"{', '.join(t.value for t in DigestType)}"
        )
    if config.digest.backend.lower() not in list_digest_backends():
        raise ConfigurationError(
            f"digest.backend must be one of: {', '.join(list_digest_backends())}"
        )


def config_to_yaml(config: schema.ProcStatusConfig) -> str:
    return OmegaConf.to_yaml(OmegaConf.structured(config))


__all__ = ["load_config", "validate_config", "config_to_yaml"]
