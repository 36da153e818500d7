from __future__ import annotations

from collections.abc import Callable
from typing import Self

from typing_extensions import override

__all__ = (
    "BitVectorError",
    "OutOfRangeError",
    "InvalidSizeError",
)


class BitVectorError(Exception):
    """
    Base class exception for all bit vector related exceptions.
    """

    __slots__ = ()


class OutOfRangeError(BitVectorError, IndexError):
    """
    Thrown when a bit position outside of ``[0, capacity_bits)`` is read or written.

    Reads and writes share this one error shape.
    """

    __slots__ = ("requested_size", "requested_position")

    def __init__(self, requested_size: int, requested_position: int):
        #: The capacity of the vector at the time of the failed access.
        self.requested_size: int = requested_size
        #: The offending bit position.
        self.requested_position: int = requested_position

        super().__init__(requested_size, requested_position)

    @override
    def __str__(self) -> str:
        return (
            f"Given position: {self.requested_position} "
            f"is out of the bitarray size {self.requested_size}."
        )

    @override
    def __repr__(self) -> str:
        return (
            f"OutOfRangeError(requested_size={self.requested_size!r}, "
            f"requested_position={self.requested_position!r})"
        )


class InvalidSizeError(BitVectorError, ValueError):
    """
    Thrown when a vector is constructed with a negative size.
    """

    __slots__ = ("requested_size",)

    def __init__(self, requested_size: int):
        #: The rejected size.
        self.requested_size: int = requested_size

        super().__init__(requested_size)

    @override
    def __str__(self) -> str:
        return f"Bitarray size must be non-negative, got {self.requested_size}."

    __repr__: Callable[[Self], str] = __str__
