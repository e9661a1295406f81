"""
Configuration loading.

A config file is optional YAML holding any CompilerConfig fields, e.g.:

    namespace: ::mytheme
    output_format: python
    color_files:
      - color-palette.json
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from spectrum_tokens.errors import ConfigError
from spectrum_tokens.models.config import CompilerConfig

logger = logging.getLogger(__name__)


def load_config(path: Path | str | None = None, **overrides: Any) -> CompilerConfig:
    """
    Build the run configuration.

    Args:
        path: Optional YAML config file
        **overrides: Field values that win over the file (None is ignored)

    Returns:
        Validated CompilerConfig

    Raises:
        ConfigError: If the file cannot be read or does not validate
    """
    data: dict[str, Any] = {}

    if path is not None:
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        data.update(loaded)
        logger.debug(f"Loaded config from {path}")

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return CompilerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
