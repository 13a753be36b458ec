"""A small mutable view over text with chopping and trimming helpers."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["StringView"]

# The characters the C locale treats as white space.
_WHITESPACE = " \t\n\v\f\r"


@dataclass
class StringView:
    """Text that can be consumed from the left piece by piece."""

    data: str = ""

    def __str__(self) -> str:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def chop_by_delim(self, delim: str) -> StringView:
        """Remove and return the text up to ``delim``; the delimiter is dropped.

        When ``delim`` does not occur, the whole view is returned and this
        view becomes empty.
        """
        if len(delim) != 1:
            raise ValueError("delimiter must be a single character")
        head, found, tail = self.data.partition(delim)
        self.data = tail if found else ""
        return StringView(head)

    def chop_left(self, n: int) -> StringView:
        """Remove and return at most ``n`` characters from the left."""
        if n < 0:
            raise ValueError("cannot chop a negative number of characters")
        head, self.data = self.data[:n], self.data[n:]
        return StringView(head)

    def trim_left(self) -> StringView:
        """Return a view without leading white space."""
        return StringView(self.data.lstrip(_WHITESPACE))

    def trim_right(self) -> StringView:
        """Return a view without trailing white space."""
        return StringView(self.data.rstrip(_WHITESPACE))

    def trim(self) -> StringView:
        """Return a view without white space on either side."""
        return self.trim_left().trim_right()

    def starts_with(self, prefix: str | StringView) -> bool:
        """Tell whether the view begins with ``prefix``."""
        return self.data.startswith(str(prefix))

    def ends_with(self, suffix: str | StringView) -> bool:
        """Tell whether the view ends with ``suffix``."""
        return self.data.endswith(str(suffix))