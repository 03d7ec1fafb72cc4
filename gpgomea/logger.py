"""Append-only logging of text lines to files."""

from __future__ import annotations

import functools
import os
from typing import TextIO


class Logger:
    """Writes messages as lines at the end of a file.

    One file is kept open at a time; logging to another file closes the
    current one and opens the new one in append mode.
    """

    def __init__(self) -> None:
        self._path: str = ""
        self._stream: TextIO | None = None

    def log(self, message: str, file: str | os.PathLike[str]) -> None:
        """Append ``message`` and a newline to ``file``."""
        path = os.fspath(file)
        if path != self._path or self._stream is None:
            self.close()
            self._path = path
            self._stream = open(path, "a", encoding="utf-8")
        self._stream.write(f"{message}\n")
        self._stream.flush()

    def close(self) -> None:
        """Close the open file, if any."""
        if self._stream is not None:
            self._stream.close()
        self._stream = None
        self._path = ""

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@functools.lru_cache(maxsize=None)
def get_logger() -> Logger:
    """Return the logger shared by the whole program."""
    return Logger()