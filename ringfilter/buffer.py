"""Fixed-size circular buffer of single-precision floats."""

from __future__ import annotations

from array import array

_ITEM_TYPE = "f"
_FORMAT_ROWS = 16
_RULE = "=================="


class CircularBuffer:
    """A ring of float32 slots with independent head (write) and tail (read) positions.

    The size must be a positive power of two.  Pushing writes at the head and
    advances it; popping reads at the tail and advances it.  No fill level is
    tracked: the head simply overwrites the oldest slot once it wraps around.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("buffer size must be greater than zero")
        if size & (size - 1):
            raise ValueError("buffer size must be a power of 2")
        self.size = size
        self.head = 0
        self.tail = 0
        self._data = array(_ITEM_TYPE, bytes(size * array(_ITEM_TYPE).itemsize))

    def __len__(self) -> int:
        return self.size

    def __iter__(self):
        return iter(self._data)

    def __repr__(self) -> str:
        return f"CircularBuffer(size={self.size}, head={self.head}, tail={self.tail})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range for buffer of size {self.size}")

    def get(self, index: int) -> float:
        """Return the value stored in slot ``index``."""
        self._check_index(index)
        return self._data[index]

    def set(self, index: int, value: float) -> None:
        """Store ``value`` (rounded to float32) in slot ``index``."""
        self._check_index(index)
        self._data[index] = value

    @property
    def byte_size(self) -> int:
        """Size of the raw storage in bytes."""
        return self.size * self._data.itemsize

    def get_byte(self, index: int) -> int:
        """Return the byte at ``index`` of the raw storage."""
        if not 0 <= index < self.byte_size:
            raise IndexError(f"byte index {index} out of range")
        with memoryview(self._data) as view, view.cast("B") as raw:
            return raw[index]

    def set_byte(self, index: int, value: int) -> None:
        """Overwrite the byte at ``index`` of the raw storage."""
        if not 0 <= index < self.byte_size:
            raise IndexError(f"byte index {index} out of range")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value {value} out of range")
        with memoryview(self._data) as view, view.cast("B") as raw:
            raw[index] = value

    def push(self, value: float) -> None:
        """Write ``value`` at the head and advance the head."""
        self.set(self.head, value)
        self.head = self.next_index(self.head)

    def pop(self) -> float:
        """Read the value at the tail and advance the tail."""
        value = self.get(self.tail)
        self.tail = self.next_index(self.tail)
        return value

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < self.size:
            raise IndexError(f"offset {offset} out of range for buffer of size {self.size}")

    def get_oldest(self, offset: int) -> float:
        """Return the value ``offset`` slots after the head."""
        self._check_offset(offset)
        return self._data[(self.head + offset) % self.size]

    def get_newest(self, offset: int) -> float:
        """Return the value ``offset`` slots before the head."""
        self._check_offset(offset)
        return self._data[(self.head - offset + self.size) % self.size]

    def next_index(self, index: int) -> int:
        """Return the slot after ``index``, wrapping to zero."""
        return index + 1 if index < self.size - 1 else 0

    def prev_index(self, index: int) -> int:
        """Return the slot before ``index``, wrapping to the last slot."""
        return index - 1 if index > 0 else self.size - 1

    def format(self) -> str:
        """Render the first 16 slots with head and tail markers."""
        lines = [_RULE]
        for i in range(_FORMAT_ROWS):
            value = self._data[i] if i < self.size else 0.0
            prefix = "H>" if i == self.head else "  "
            suffix = "    <T" if i == self.tail else ""
            lines.append(f"{prefix}{value:10.2f}{suffix}")
        lines.append(_RULE)
        return "".join(line + "\r\n" for line in lines)

    __str__ = format