# topmark:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Saw configuration: logging setup and the layered TOML configuration model."""

from __future__ import annotations
