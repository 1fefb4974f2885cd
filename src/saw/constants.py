# topmark:header:start
#
#   project      : Saw
#   file         : constants.py
#   file_relpath : src/saw/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Saw Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SAW_VERSION: str = get_version("saw")

# Project-local configuration file names, in merge order (later overrides earlier):
PYPROJECT_TOML_NAME: str = "pyproject.toml"
SAW_TOML_NAME: str = "saw.toml"

# Table holding Saw settings inside pyproject.toml:
PYPROJECT_TOOL_SECTION: str = "saw"

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_ENCODING_ERRORS: str = "strict"
