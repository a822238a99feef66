"""Conversion between integers and their representation in an `Alphabet`.

A single implementation serves every `IntType`. Decoding accumulates digits
most-significant first in an unbounded python int, then narrows the result to
the requested type with a checked conversion. Encoding reinterprets signed
values as their unsigned bit pattern and repeatedly divides by the radix.

When the value's width fits in the working type (`CodecConfig.working_bits`,
pointer sized by default) the loop runs on the working type directly; wider
values (e.g. 128 bit) are divided in their own width and only each digit is
converted to the working type to index the digit table.
"""

import logging
import operator
from typing import Optional

from based.config import CodecConfig
from based.errors import EmptyInputError, RangeError, UnknownCharacterError
from based.widths import USIZE, IntType

logger = logging.getLogger(__name__)


def decode(
    alphabet, rep: str, int_type: IntType = USIZE, config: Optional[CodecConfig] = None
) -> int:
    config = config or CodecConfig()
    if not isinstance(rep, str):
        raise TypeError(f"can only decode str, got {type(rep).__name__}")
    if not rep and not config.allow_empty:
        raise EmptyInputError()

    val = 0
    radix = alphabet.radix
    limit = int_type.unsigned.max_value
    exceeded = False
    for c in rep:
        digit = alphabet.index_of.get(c)
        if digit is None:
            raise UnknownCharacterError(c)
        if exceeded:
            # keep scanning for unknown characters, the exact value is lost
            val = None
            continue
        val *= radix
        val += digit
        exceeded = val > limit

    if exceeded:
        raise RangeError(val, int_type)
    if int_type.signed and config.signed_mode == "bits":
        return int_type.from_unsigned(val)
    return int_type.check(val)


def encode(
    alphabet, value: int, int_type: IntType = USIZE, config: Optional[CodecConfig] = None
) -> str:
    config = config or CodecConfig()
    if isinstance(value, bool):
        raise TypeError("cannot encode a bool")
    val = int_type.to_unsigned(operator.index(value))
    working = config.working_type

    if int_type.bits <= working.bits:
        indices = _digits(working.check(val), working.check(alphabet.radix))
    else:
        logger.debug("Encoding %s value on the wide path", int_type.name)
        wide = int_type.unsigned
        indices = [
            working.check(rem) for rem in _digits(val, wide.check(alphabet.radix))
        ]

    table = alphabet.digits
    return "".join(table[i] for i in reversed(indices))


def _digits(val, radix):
    # least significant first, at least one digit
    stack = [val % radix]
    div = val // radix
    while div > 0:
        stack.append(div % radix)
        div = div // radix
    return stack
