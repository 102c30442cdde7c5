"""Rotation ciphers over ASCII letters, applied to byte streams."""

from __future__ import annotations

import argparse
import io
import string
from functools import lru_cache
from typing import BinaryIO, Optional, Sequence


@lru_cache(maxsize=None)
def _table(rot: int) -> bytes:
    shift = rot % 26
    lower = string.ascii_lowercase
    upper = string.ascii_uppercase
    source = (lower + upper).encode("ascii")
    target = (lower[shift:] + lower[:shift] + upper[shift:] + upper[:shift]).encode(
        "ascii"
    )
    return bytes.maketrans(source, target)


def rotate(data: bytes, rot: int) -> bytes:
    """Rotate each ASCII letter in ``data`` by ``rot`` places; keep other bytes."""
    return bytes(data).translate(_table(rot))


class RotDecoder(io.RawIOBase):
    """A readable stream that rotates the letters read from another stream."""

    def __init__(self, stream: BinaryIO, rot: int) -> None:
        super().__init__()
        self._stream = stream
        self._rot = rot

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> Optional[int]:
        view = memoryview(buffer).cast("B")
        data = self._stream.read(len(view))
        if data is None:
            return None
        size = len(data)
        view[:size] = rotate(data, self._rot)
        return size


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Decode a ROT13 joke and print it."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    decoder = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    print(decoder.read().decode("ascii"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())