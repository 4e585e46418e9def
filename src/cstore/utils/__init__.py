# topmark:header:start
#
#   project      : CStore
#   file         : __init__.py
#   file_relpath : src/cstore/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem helpers for CStore."""
