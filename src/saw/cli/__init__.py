# topmark:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Saw command-line interface (Click)."""
