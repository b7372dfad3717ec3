"""Read newline-terminated records of any length from a binary stream."""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional

INITIAL_BUFFER_SIZE = 8
ENCODING = "utf-8"


def read_line(stream: BinaryIO, initial_size: int = INITIAL_BUFFER_SIZE) -> Optional[str]:
    """Read one line from ``stream`` without its trailing newline.

    The buffer starts at ``initial_size`` bytes and doubles until the whole line
    fits. A final line without a newline is returned as-is. Returns ``None``
    when nothing could be read. A MemoryError while growing the buffer is not
    caught.
    """
    buffer = bytearray()
    size = max(1, initial_size)
    while True:
        chunk = stream.readline(size - len(buffer))
        if not chunk:
            if not buffer:
                return None
            break  # EOF without a newline
        buffer += chunk
        if buffer.endswith(b"\n"):
            del buffer[-1]
            break
        if len(buffer) >= size:
            size *= 2
    return buffer.decode(ENCODING, errors="replace")


def iter_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield every line of ``stream`` until end-of-stream."""
    while True:
        line = read_line(stream)
        if line is None:
            return
        yield line


__all__ = ["INITIAL_BUFFER_SIZE", "read_line", "iter_lines"]
