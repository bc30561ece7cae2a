"""Terminal messages. Results go to stdout, warnings and errors to stderr."""

import os
import sys

_COLORS = {"warn": "33", "error": "31", "ok": "32"}


def _mark(label: str, kind: str, stream) -> str:
    if os.environ.get("NO_COLOR") or not getattr(stream, "isatty", lambda: False)():
        return label
    return f"\033[{_COLORS[kind]}m{label}\033[0m"


def info(msg: str):
    print(msg)


def ok(msg: str):
    print(f"{_mark('OK:', 'ok', sys.stdout)} {msg}")


def warn(msg: str):
    print(f"{_mark('Warning:', 'warn', sys.stderr)} {msg}", file=sys.stderr)


def error(msg: str):
    print(f"{_mark('Error:', 'error', sys.stderr)} {msg}", file=sys.stderr)
