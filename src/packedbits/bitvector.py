from __future__ import annotations

from typing_extensions import override

from packedbits.exc import InvalidSizeError, OutOfRangeError
from packedbits.utils import LoggerWithTrace

#: The number of logical bits packed into each storage byte.
BITS_PER_BYTE = 8

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)


def byte_index(position: int) -> int:
    """
    Returns the index of the storage byte that holds ``position``.
    """

    return position // BITS_PER_BYTE


def bit_mask(position: int) -> int:
    """
    Returns the single-bit mask for ``position`` within its byte.

    Bit 0 of a byte is its least significant bit, so position 0 maps to ``0b00000001`` and
    position 7 maps to ``0b10000000``.
    """

    return 1 << (position % BITS_PER_BYTE)


def _check_int(name: str, value: object) -> None:
    # bools are ints, but never meaningful as a size or a position
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")


class PackedBitVector:
    """
    A fixed-capacity array of booleans packed eight to a byte.

    The capacity is decided once at construction time and never changes. Every access is bounds
    checked against it and fails with :class:`.OutOfRangeError` without touching the storage.
    """

    __slots__ = ("_capacity_bits", "_storage")

    def __init__(self, size: int) -> None:
        """
        :param size: The number of addressable bits. Must be a non-negative integer.
        """

        _check_int("size", size)

        if size < 0:
            raise InvalidSizeError(size)

        self._capacity_bits = size
        # always one byte of headroom, even on exact multiples of 8
        self._storage = bytearray(size // BITS_PER_BYTE + 1)

        logger.debug("Allocated %d byte(s) for %d bit(s)", len(self._storage), size)

    @property
    def capacity_bits(self) -> int:
        """
        Returns the number of addressable bits.
        """

        return self._capacity_bits

    @property
    def storage(self) -> memoryview:
        """
        Returns a read-only view over the packed backing bytes.
        """

        return memoryview(self._storage).toreadonly()

    def _check_position(self, position: int) -> None:
        _check_int("position", position)

        if position < 0 or position >= self._capacity_bits:
            logger.trace(
                "Rejecting access at position=%d for %d bit(s)", position, self._capacity_bits
            )
            raise OutOfRangeError(self._capacity_bits, position)

    def set(self, position: int, value: bool) -> None:
        """
        Sets the bit at ``position`` to ``value``.

        :param position: The zero-based bit position.
        :param value: The new value of the bit.
        :raises OutOfRangeError: If ``position`` is outside of ``[0, capacity_bits)``.
        """

        self._check_position(position)

        index = byte_index(position)
        mask = bit_mask(position)
        if value:
            self._storage[index] |= mask
        else:
            self._storage[index] &= ~mask & 0xFF

    def get(self, position: int) -> bool:
        """
        Gets the value of the bit at ``position``.

        :param position: The zero-based bit position.
        :raises OutOfRangeError: If ``position`` is outside of ``[0, capacity_bits)``.
        """

        self._check_position(position)

        mask = bit_mask(position)
        return (self._storage[byte_index(position)] & mask) == mask

    def __len__(self) -> int:
        return self._capacity_bits

    def __getitem__(self, item: int) -> bool:
        if isinstance(item, slice):
            raise TypeError("PackedBitVector does not support slicing")

        return self.get(item)

    def __setitem__(self, key: int, value: bool) -> None:
        if isinstance(key, slice):
            raise TypeError("PackedBitVector does not support slicing")

        self.set(key, value)

    @override
    def __repr__(self) -> str:
        return (
            f"<PackedBitVector capacity_bits={self._capacity_bits} bytes={len(self._storage)}>"
        )
