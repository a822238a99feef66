"""Custom numeral systems with single-character digits."""

from based.alphabet import Alphabet
from based.batch import decode_to_tensor, encode_tensor
from based.codec import decode, encode
from based.config import CodecConfig
from based.errors import (
    BasedError,
    DuplicateCharacterError,
    EmptyInputError,
    RadixError,
    RangeError,
    UnknownCharacterError,
)
from based.widths import (
    I8,
    I16,
    I32,
    I64,
    I128,
    INT_TYPES,
    ISIZE,
    POINTER_BITS,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    IntType,
    from_dtype,
    int_type,
)

BASE57 = "23456789abcdefghijkmnpqrstuvwxyzABCDEFGHIJKLMNPQRSTUVWXYZ"
BASE62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
