"""External tools: the PDF viewer and the LaTeX typesetter.

Both are reached through small capability objects so the core never shells
out directly and tests can pass in fakes.
"""

import pathlib
import shlex
import subprocess
from typing import Protocol

from pdfsr.errors import BuildError

AUX_SUFFIXES = (".aux", ".log", ".out", ".toc", ".nav", ".snm")


class Viewer(Protocol):
    def show(self, path: pathlib.Path) -> None: ...


class DocumentBuilder(Protocol):
    def build(self, source: pathlib.Path) -> pathlib.Path: ...


class CommandViewer:
    """Opens a file with an external command and returns immediately."""

    def __init__(self, command: str = "xdg-open"):
        self.command = command

    def show(self, path: pathlib.Path) -> None:
        cmd = shlex.split(self.command) + [str(path)]
        subprocess.Popen(cmd, start_new_session=True,
                         stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


class LatexBuilder:
    """Typesets a .tex file next to itself and removes the by-products."""

    def __init__(self, command: str = "pdflatex -interaction=nonstopmode"):
        self.command = command

    def build(self, source: pathlib.Path) -> pathlib.Path:
        source = pathlib.Path(source).resolve()
        if not source.is_file():
            raise BuildError(f"No such file: {source}")
        cmd = shlex.split(self.command) + [source.name]
        try:
            proc = subprocess.run(cmd, cwd=source.parent,
                                  stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        except OSError as e:
            raise BuildError(f"Cannot run {cmd[0]}: {e}") from e
        finally:
            self._clean(source)
        output = source.with_suffix(".pdf")
        if proc.returncode != 0:
            raise BuildError(f"{cmd[0]} exited with status {proc.returncode} on {source.name}")
        if not output.is_file():
            raise BuildError(f"{cmd[0]} produced no {output.name}")
        return output

    def _clean(self, source: pathlib.Path):
        for suffix in AUX_SUFFIXES:
            source.with_suffix(suffix).unlink(missing_ok=True)
