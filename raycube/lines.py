"""Reading text one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, List, Optional, TextIO, Union


class LineReader:
    """Hand out the lines of a text stream one by one.

    Each line keeps its terminating newline; the last line may lack one.
    NUL characters are dropped from the text.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def next_line(self) -> Optional[str]:
        """Return the next line, or None once the stream is exhausted."""
        raw = self._stream.readline()
        if not raw:
            return None
        return raw.replace("\0", "")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(path: Union[str, "os.PathLike[str]"]) -> List[str]:
    """Return every line of the file at ``path``, newlines kept as they are."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
        return list(LineReader(handle))