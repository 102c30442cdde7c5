"""Listing the entries of a directory, including ``.`` and ``..``."""

from __future__ import annotations

import argparse
import os
import sys
from itertools import chain
from pprint import pformat
from typing import AnyStr, Generic, Iterator, Optional, Sequence, Union


class DirectoryError(OSError):
    """Raised when a directory cannot be opened."""


class DirectoryIterator(Generic[AnyStr]):
    """Iterates over the names of the entries in a directory.

    The names ``.`` and ``..`` come first; names have the type of the path.
    """

    def __init__(self, path: Union[AnyStr, "os.PathLike[AnyStr]"]) -> None:
        self.path = os.fspath(path)
        null = b"\0" if isinstance(self.path, bytes) else "\0"
        if null in self.path:
            raise DirectoryError("Invalid path: path contains a nul byte")
        try:
            self._scandir = os.scandir(self.path)
        except OSError as err:
            raise DirectoryError(f"Could not open {self.path!r}") from err
        dots = (b".", b"..") if isinstance(self.path, bytes) else (".", "..")
        self._entries: Iterator[AnyStr] = chain(
            dots, (entry.name for entry in self._scandir)
        )

    def __iter__(self) -> "DirectoryIterator[AnyStr]":
        return self

    def __next__(self) -> AnyStr:
        return next(self._entries)

    def close(self) -> None:
        """Release the directory handle; iteration then ends."""
        self._scandir.close()
        self._entries = iter(())

    def __enter__(self) -> "DirectoryIterator[AnyStr]":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the entries of a directory."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("path", nargs="?", default=".")
    args = parser.parse_args(argv)
    try:
        with DirectoryIterator(args.path) as entries:
            names = list(entries)
    except DirectoryError as err:
        print(err, file=sys.stderr)
        return 1
    print(f"files: {pformat(names)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())