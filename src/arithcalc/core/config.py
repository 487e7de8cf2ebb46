"""
Configuration for arithcalc.

Settings live in the ``[arithcalc]`` table of a TOML file that is only read
when passed explicitly on the command line:

    [arithcalc]
    max_depth = 50
    graph_name = "expr"
    precision = 6
"""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from arithcalc.core.errors import ConfigError
from arithcalc.core.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

# Parsing recurses a few frames per nesting level
MAX_DEPTH_LIMIT = 150


@dataclass(frozen=True)
class CalcConfig:
    """Runtime settings for parsing, evaluation output and graph rendering."""

    max_depth: int = DEFAULT_MAX_DEPTH
    graph_name: str | None = None
    precision: int | None = None  # significant digits; None = shortest repr


def load_config(path: Path) -> CalcConfig:
    """
    Load settings from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        CalcConfig with file values over the defaults

    Raises:
        ConfigError: If the file is missing, malformed or has invalid values
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("arithcalc", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [arithcalc] must be a table")

    known = {f.name for f in fields(CalcConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown setting(s): {', '.join(unknown)}")

    max_depth = section.get("max_depth", DEFAULT_MAX_DEPTH)
    if not _is_int(max_depth) or not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ConfigError(f"{path}: max_depth must be an integer from 1 to {MAX_DEPTH_LIMIT}")

    graph_name = section.get("graph_name")
    if graph_name is not None and not isinstance(graph_name, str):
        raise ConfigError(f"{path}: graph_name must be a string")

    precision = section.get("precision")
    if precision is not None and (not _is_int(precision) or precision < 1):
        raise ConfigError(f"{path}: precision must be a positive integer")

    config = CalcConfig(max_depth=max_depth, graph_name=graph_name, precision=precision)
    logger.debug(f"Loaded config from {path}: {config}")
    return config


def _is_int(value: object) -> bool:
    # TOML booleans are ints in Python
    return isinstance(value, int) and not isinstance(value, bool)
