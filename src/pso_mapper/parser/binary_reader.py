"""Bounded little-endian reader used for map entries and battle params."""

import struct


class BinaryReader:
    """Wraps a bytes buffer with typed reads and a moving cursor.

    slice(size) returns a new BinaryReader bounded to the next `size` bytes,
    so a fixed-size entry parser can never run into the following entry.
    """

    __slots__ = ("_data", "_pos", "_end")

    def __init__(self, data: bytes, offset: int = 0, end: int | None = None) -> None:
        self._data = data
        self._pos = offset
        self._end = end if end is not None else len(data)

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    def _take(self, size: int) -> int:
        if self._pos + size > self._end:
            raise ValueError(
                f"Read of {size} bytes at offset {self._pos} "
                f"would exceed boundary at {self._end}"
            )
        start = self._pos
        self._pos += size
        return start

    def uint16(self) -> int:
        return struct.unpack_from("<H", self._data, self._take(2))[0]

    def uint32(self) -> int:
        return struct.unpack_from("<I", self._data, self._take(4))[0]

    def float32(self) -> float:
        return struct.unpack_from("<f", self._data, self._take(4))[0]

    def uint32_array(self, count: int) -> tuple[int, ...]:
        return struct.unpack_from(f"<{count}I", self._data, self._take(4 * count))

    def bytes(self, size: int) -> bytes:
        start = self._take(size)
        return bytes(self._data[start : start + size])

    def slice(self, size: int) -> "BinaryReader":
        """Return a new BinaryReader bounded to the next `size` bytes.

        Advances this reader's cursor past the sliced region.
        """
        start = self._take(size)
        return BinaryReader(self._data, start, start + size)
