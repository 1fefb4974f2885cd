# topmark:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Saw package.

Saw is a line-oriented text transformation tool. A short program made of
keyword-prefixed commands (``filter``, ``match``, ``sub``, ``fields``, ...) is
compiled once into a pipeline of stateful units and then applied to every line
of the input, producing at most one output line per input line.
"""

from __future__ import annotations
