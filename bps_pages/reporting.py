"""Console progress reporting for site builds."""

from __future__ import annotations

import dataclasses as dc
import sys
import typing as typ
from pathlib import Path


def format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@dc.dataclass(slots=True)
class ConsoleReporter:
    """Print progress lines to stdout and warnings to stderr.

    Streams default to the interpreter's current ``sys.stdout`` and
    ``sys.stderr`` at call time, so pytest's ``capsys`` sees the output.
    """

    stdout: typ.TextIO | None = None
    stderr: typ.TextIO | None = None
    warnings: list[str] = dc.field(default_factory=list)

    def info(self, message: str) -> None:
        """Report a progress line."""
        print(message, file=self.stdout or sys.stdout)

    def warn(self, message: str) -> None:
        """Report a non-fatal problem and remember it."""
        self.warnings.append(message)
        print(message, file=self.stderr or sys.stderr)

    def error(self, message: str) -> None:
        """Report a fatal problem."""
        print(message, file=self.stderr or sys.stderr)


__all__ = ["ConsoleReporter", "format_path"]
