"""Loggers, including one that drops messages above a verbosity level."""

from __future__ import annotations

import abc
import argparse
import sys
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, TextIO


class Logger(abc.ABC):
    """Something that records messages at a verbosity level."""

    @abc.abstractmethod
    def log(self, verbosity: int, message: Any) -> None:
        """Log ``message`` at the given verbosity level."""


class StderrLogger(Logger):
    """Writes every message to standard error, or to a given stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def log(self, verbosity: int, message: Any) -> None:
        print(f"verbosity={verbosity}: {message}", file=self._stream or sys.stderr)


@dataclass
class VerbosityFilter(Logger):
    """Passes on only messages up to ``max_verbosity`` to ``inner``."""

    max_verbosity: int
    inner: Logger = field(default_factory=StderrLogger)

    def log(self, verbosity: int, message: Any) -> None:
        if verbosity <= self.max_verbosity:
            self.inner.log(verbosity, message)


def do_things(logger: Logger) -> None:
    """Log a couple of messages at different levels."""
    logger.log(5, "FYI")
    logger.log(2, "Uhoh")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Log through a filter that keeps messages up to verbosity 3."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    do_things(VerbosityFilter(3, StderrLogger()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())