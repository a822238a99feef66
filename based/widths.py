import struct
from dataclasses import dataclass

import torch

from based.errors import RangeError

POINTER_BITS = struct.calcsize("P") * 8


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type, described by its bit width and signedness."""

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def unsigned(self) -> "IntType":
        if not self.signed:
            return self
        return int_type("u" + self.name[1:])

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def check(self, value: int) -> int:
        if not self.contains(value):
            raise RangeError(value, self)
        return value

    def to_unsigned(self, value: int) -> int:
        # two's complement bit pattern
        return self.check(value) & self.unsigned.max_value

    def from_unsigned(self, value: int) -> int:
        value = self.unsigned.check(value)
        if self.signed and value > self.max_value:
            return value - (1 << self.bits)
        return value


U8 = IntType("u8", 8, False)
U16 = IntType("u16", 16, False)
U32 = IntType("u32", 32, False)
U64 = IntType("u64", 64, False)
U128 = IntType("u128", 128, False)
USIZE = IntType("usize", POINTER_BITS, False)

I8 = IntType("i8", 8, True)
I16 = IntType("i16", 16, True)
I32 = IntType("i32", 32, True)
I64 = IntType("i64", 64, True)
I128 = IntType("i128", 128, True)
ISIZE = IntType("isize", POINTER_BITS, True)

INT_TYPES = {
    t.name: t for t in (U8, U16, U32, U64, U128, USIZE, I8, I16, I32, I64, I128, ISIZE)
}

# dtypes that torch can build from python ints and turn back with tolist()
TORCH_DTYPES = {
    torch.uint8: U8,
    torch.int8: I8,
    torch.int16: I16,
    torch.int32: I32,
    torch.int64: I64,
}


def int_type(name: str) -> IntType:
    try:
        return INT_TYPES[name]
    except KeyError:
        raise ValueError(
            f"unknown integer type {name!r}, expected one of {sorted(INT_TYPES)}"
        ) from None


def from_dtype(dtype: torch.dtype) -> IntType:
    try:
        return TORCH_DTYPES[dtype]
    except KeyError:
        raise TypeError(f"unsupported tensor dtype {dtype}") from None
