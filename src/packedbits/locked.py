from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import attr
from anyio import Lock

from packedbits.bitvector import PackedBitVector
from packedbits.utils import LoggerWithTrace

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)


@attr.s(slots=True, frozen=True)
class LockedBitVector:
    """
    A :class:`.PackedBitVector` guarded by a single exclusive lock, for sharing one vector between
    multiple tasks.

    The underlying vector does no locking of its own. This wrapper is only safe if every access to
    the vector goes through it, so the caller must not keep using a wrapped vector directly.
    """

    _vector: PackedBitVector = attr.ib()
    _lock: Lock = attr.ib(factory=Lock, init=False)

    def __attrs_post_init__(self) -> None:
        logger.debug("Guarding %r with an exclusive lock", self._vector)

    @classmethod
    def of_size(cls, size: int) -> LockedBitVector:
        """
        Creates a new, all-false vector of ``size`` bits and wraps it.
        """

        return cls(PackedBitVector(size))

    @property
    def capacity_bits(self) -> int:
        """
        Returns the number of addressable bits. The capacity never changes, so this doesn't lock.
        """

        return self._vector.capacity_bits

    @asynccontextmanager
    async def hold(self) -> AsyncGenerator[PackedBitVector, None]:
        """
        Acquires the lock and yields the raw vector for the duration of the block.
        """

        async with self._lock:
            yield self._vector

    async def set(self, position: int, value: bool) -> None:
        """
        Sets the bit at ``position`` to ``value`` while holding the lock.
        """

        async with self._lock:
            self._vector.set(position, value)

    async def get(self, position: int) -> bool:
        """
        Gets the bit at ``position`` while holding the lock.
        """

        async with self._lock:
            return self._vector.get(position)
