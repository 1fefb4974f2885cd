# topmark:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/grammar/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Saw command grammar: keywords, argument parsers and the program compiler."""

from __future__ import annotations

from saw.grammar.compiler import COMMAND_SPECS, COMMANDS, CommandSpec, compile_program
from saw.grammar.errors import NoMatch, ParseError, error_chain, format_error_chain

__all__ = [
    "COMMANDS",
    "COMMAND_SPECS",
    "CommandSpec",
    "NoMatch",
    "ParseError",
    "compile_program",
    "error_chain",
    "format_error_chain",
]
