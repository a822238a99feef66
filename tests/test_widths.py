import pytest
import torch

from based.errors import RangeError
from based.widths import (
    I8,
    I64,
    I128,
    ISIZE,
    POINTER_BITS,
    U8,
    U128,
    USIZE,
    from_dtype,
    int_type,
)


def test_bounds():
    assert (U8.min_value, U8.max_value) == (0, 255)
    assert (I8.min_value, I8.max_value) == (-128, 127)
    assert U128.max_value == 2**128 - 1
    assert I128.min_value == -(2**127)


def test_pointer_sized():
    assert USIZE.bits == ISIZE.bits == POINTER_BITS
    assert ISIZE.unsigned == USIZE


def test_unsigned_peer():
    assert I8.unsigned == U8
    assert U8.unsigned is U8


def test_twos_complement():
    assert I8.to_unsigned(-1) == 255
    assert I8.to_unsigned(-128) == 128
    assert I8.from_unsigned(255) == -1
    assert I8.from_unsigned(127) == 127
    assert U8.from_unsigned(255) == 255


def test_check():
    assert U8.check(255) == 255
    with pytest.raises(RangeError):
        U8.check(256)
    with pytest.raises(RangeError):
        I8.from_unsigned(256)


def test_lookup_by_name():
    assert int_type("i128") is I128
    with pytest.raises(ValueError):
        int_type("u7")


def test_lookup_by_dtype():
    assert from_dtype(torch.int64) is I64
    assert from_dtype(torch.uint8) is U8
    with pytest.raises(TypeError):
        from_dtype(torch.float32)
