# topmark:header:start
#
#   project      : Saw
#   file         : io.py
#   file_relpath : src/saw/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Loading
errors are logged and yield an empty table, so a broken config file never
prevents Saw from running with its defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from saw.config.keys import Toml
from saw.config.logging import get_logger
from saw.constants import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS

if TYPE_CHECKING:
    from pathlib import Path

    from saw.config.logging import SawLogger

TomlTable: TypeAlias = "dict[str, Any]"

logger: SawLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Saw's runtime defaults as a TOML-table-compatible dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_INPUT: {
            Toml.KEY_ENCODING: DEFAULT_ENCODING,
            Toml.KEY_ENCODING_ERRORS: DEFAULT_ENCODING_ERRORS,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``saw.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: The sub-table, or an empty dict when missing or not a table.
    """
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for [%s], got %r; ignoring it", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring it", key, value)
    return None
