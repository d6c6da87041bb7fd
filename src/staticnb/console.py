from __future__ import annotations

import io
from typing import List


class Console(io.TextIOBase):
    """Append-only text stream backing a notebook console.

    Usable anywhere a writable text file is expected (``print(file=...)``,
    ``redirect_stdout``). Text can only be appended; it is never rewound or
    truncated, and ``close()`` keeps the buffer so it can still be rendered.
    """

    def __init__(self) -> None:
        super().__init__()
        self._parts: List[str] = []

    def writable(self) -> bool:
        return True

    def readable(self) -> bool:
        return False

    def seekable(self) -> bool:
        return False

    def write(self, s: str) -> int:
        if not isinstance(s, str):
            raise TypeError(f"write() argument must be str, not {type(s).__name__}")
        if s:
            self._parts.append(s)
        return len(s)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def close(self) -> None:
        # stays open: the buffer outlives the file written from it
        return None

    @property
    def closed(self) -> bool:
        return False
