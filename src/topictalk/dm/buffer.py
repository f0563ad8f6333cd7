"""Say-buffer with a read cursor that is reset whenever the buffer is replaced."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class PaginatedBuffer:
    """Immutable sequence of lines and the index of the next line to serve.

    Build instances with :meth:`of` or :meth:`empty`; a fresh buffer always
    starts at cursor 0.
    """

    lines: tuple[str, ...] = ()
    cursor: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.cursor <= len(self.lines):
            raise ValueError(f"Cursor {self.cursor} outside buffer of length {len(self.lines)}")

    @classmethod
    def of(cls, lines: Iterable[str]) -> "PaginatedBuffer":
        return cls(lines=tuple(lines), cursor=0)

    @classmethod
    def empty(cls) -> "PaginatedBuffer":
        return cls()

    @property
    def remaining(self) -> int:
        return len(self.lines) - self.cursor

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.lines)

    def advance(self) -> tuple[str | None, "PaginatedBuffer"]:
        """Return the line under the cursor and the buffer moved past it.

        An exhausted buffer returns ``(None, self)``.
        """
        if self.exhausted:
            return None, self
        return self.lines[self.cursor], PaginatedBuffer(self.lines, self.cursor + 1)

    def __len__(self) -> int:
        return len(self.lines)
