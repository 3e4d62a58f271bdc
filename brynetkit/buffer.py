"""Fixed-capacity byte buffer with separate read and write positions."""

from __future__ import annotations


class Buffer:
    """A byte buffer of fixed capacity.

    Bytes are appended at the write position and consumed from the read
    position. When there is not enough room at the tail, a write moves the
    unread bytes to the head before giving up.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("buffer size must not be negative")
        self._data = bytearray(size)
        self._read_pos = 0
        self._write_pos = 0

    def __len__(self) -> int:
        """Total capacity of the buffer."""
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"Buffer(size={len(self._data)}, read_pos={self._read_pos}, "
            f"write_pos={self._write_pos})"
        )

    def clear(self) -> None:
        """Discard all content by resetting both positions."""
        self._read_pos = 0
        self._write_pos = 0

    def readable_count(self) -> int:
        """Number of bytes written but not yet consumed."""
        return self._write_pos - self._read_pos

    def writable_count(self) -> int:
        """Number of bytes that fit after the write position."""
        return len(self._data) - self._write_pos

    def readable(self) -> bytes:
        """The unread bytes."""
        return bytes(self._data[self._read_pos:self._write_pos])

    def adjust_to_head(self) -> None:
        """Move the unread bytes to the start of the buffer."""
        if self._read_pos == 0:
            return
        length = self.readable_count()
        if length > 0:
            self._data[0:length] = self._data[self._read_pos:self._write_pos]
        self._read_pos = 0
        self._write_pos = length

    def add_write_pos(self, value: int) -> None:
        """Advance the write position; raise ValueError past the capacity."""
        target = self._write_pos + value
        if target > len(self._data):
            raise ValueError("write position beyond buffer capacity")
        self._write_pos = target

    def add_read_pos(self, value: int) -> None:
        """Advance the read position; raise ValueError past the capacity."""
        target = self._read_pos + value
        if target > len(self._data):
            raise ValueError("read position beyond buffer capacity")
        self._read_pos = target

    def write(self, data: bytes) -> None:
        """Append data, compacting first if needed.

        Raises BufferError when the data cannot fit even after compaction.
        """
        length = len(data)
        if self.writable_count() >= length:
            self._data[self._write_pos:self._write_pos + length] = data
            self._write_pos += length
            return
        if len(self._data) - self.readable_count() >= length:
            self.adjust_to_head()
            self.write(data)
            return
        raise BufferError(
            f"cannot write {length} bytes: only "
            f"{len(self._data) - self.readable_count()} free"
        )