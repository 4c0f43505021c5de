"""Shared fixtures for integration tests."""

import io
from contextlib import redirect_stderr, redirect_stdout


def run_cli(args: list[str]) -> tuple[int, str, str]:
    """Execute CLI command and capture stdout/stderr."""
    from mdlc.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        try:
            rc = main(args)
        except SystemExit as exc:  # commands exit through sys.exit
            rc = exc.code if isinstance(exc.code, int) else 0
    return rc, out_buf.getvalue(), err_buf.getvalue()
