# topmark:header:start
#
#   project      : CStore
#   file         : __main__.py
#   file_relpath : src/cstore/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CStore via ``python -m cstore``.

It delegates directly to :func:`cstore.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how CStore is launched.
"""

from __future__ import annotations

from cstore.cli.main import cli

if __name__ == "__main__":
    cli()
