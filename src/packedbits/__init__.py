import logging

# our public exports, relatively minimal
from packedbits.bitvector import (
    BITS_PER_BYTE as BITS_PER_BYTE,
    PackedBitVector as PackedBitVector,
    bit_mask as bit_mask,
    byte_index as byte_index,
)
from packedbits.exc import (
    BitVectorError as BitVectorError,
    InvalidSizeError as InvalidSizeError,
    OutOfRangeError as OutOfRangeError,
)
from packedbits.locked import LockedBitVector as LockedBitVector
from packedbits.utils import TRACE

logging.addLevelName(TRACE, "TRACE")
