"""Configuration loader — shortpath.yml parsing, defaults and CLI overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

import yaml
from pydantic import ValidationError

from shortpath.logger import logger
from shortpath.model import InputConfig, ShortPathConfig

# Characters that can appear inside a numeric field cannot split one.
_NUMERIC_CHARS = frozenset("0123456789+-")


def load_config(path: Path | None = None, *, strict: bool | None = None) -> ShortPathConfig:
    """Load config from YAML, falling back to defaults on any problem.

    *strict*, when given, overrides ``input.strict`` from the file (the
    ``--lenient`` flag passes ``False``).
    """
    raw = _read_mapping(path)
    try:
        cfg = ShortPathConfig.model_validate(raw)
    except ValidationError as e:
        logger.warning("Invalid config in %s: %s, using defaults", path, e)
        cfg = ShortPathConfig()

    cfg.input = _checked_input(cfg.input, path)
    if strict is not None and strict != cfg.input.strict:
        logger.debug("Parsing mode overridden on the command line: strict=%s", strict)
        cfg.input = cfg.input.model_copy(update={"strict": strict})
    return cfg


def _read_mapping(path: Path | None) -> dict[str, Any]:
    if path is None:
        logger.debug("No config file provided, using defaults")
        return {}

    from pathlib import Path as _Path

    try:
        text = _Path(str(path)).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", path)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read config file %s: %s, using defaults", path, e)
        return {}

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("Malformed YAML in %s: %s, using defaults", path, e)
        return {}

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Config file %s is not a YAML mapping, using defaults", path)
        return {}
    return raw


def _checked_input(cfg: InputConfig, path: Path | None) -> InputConfig:
    delimiter = cfg.delimiter
    if _NUMERIC_CHARS.intersection(delimiter) or "\n" in delimiter or "\r" in delimiter:
        logger.warning(
            "Delimiter %r in %s would split numeric fields, using ','", delimiter, path
        )
        return cfg.model_copy(update={"delimiter": ","})
    return cfg
