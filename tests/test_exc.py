import pickle

import pytest

from packedbits.exc import BitVectorError, InvalidSizeError, OutOfRangeError


def test_out_of_range_message():
    """
    Tests the exact rendering of an out-of-range error.
    """

    err = OutOfRangeError(10, 10)
    assert str(err) == "Given position: 10 is out of the bitarray size 10."
    assert repr(err) == "OutOfRangeError(requested_size=10, requested_position=10)"


def test_field_order():
    """
    Tests that the position comes before the size in the message.
    """

    assert str(OutOfRangeError(3, 42)) == "Given position: 42 is out of the bitarray size 3."


def test_hierarchy():
    """
    Tests that package errors are catchable by both their base class and the builtin kind.
    """

    assert isinstance(OutOfRangeError(1, 1), BitVectorError)
    assert isinstance(OutOfRangeError(1, 1), IndexError)
    assert isinstance(InvalidSizeError(-1), BitVectorError)
    assert isinstance(InvalidSizeError(-1), ValueError)

    with pytest.raises(IndexError):
        raise OutOfRangeError(8, 9)


def test_pickle():
    """
    Tests that errors survive a pickle round trip with their fields intact.
    """

    err = pickle.loads(pickle.dumps(OutOfRangeError(10, 11)))
    assert err.requested_size == 10
    assert err.requested_position == 11

    size_err = pickle.loads(pickle.dumps(InvalidSizeError(-4)))
    assert size_err.requested_size == -4
