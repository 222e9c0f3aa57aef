"""Allow ``python -m record_parse`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m record_parse`` behaves identically to the ``record-parse``
console script.
"""

from __future__ import annotations

from record_parse.cli.app import cli

if __name__ == "__main__":
    cli()
