import logging
from types import MappingProxyType
from typing import Iterable, Optional

from based import codec
from based.config import CodecConfig
from based.errors import DuplicateCharacterError, RadixError
from based.widths import USIZE, IntType

logger = logging.getLogger(__name__)


class Alphabet:
    """An ordered set of single-character digits.

    The value of each character is its index, e.g. the first character has
    value 0, the second value 1, etc. An alphabet is immutable once built and
    can be shared freely between conversions.
    """

    __slots__ = ("digits", "index_of", "radix")

    def __init__(self, chars: Iterable[str]):
        digits = []
        index_of = {}
        for i, c in enumerate(chars):
            if not isinstance(c, str) or len(c) != 1:
                raise TypeError(f"digits must be single characters, got {c!r}")
            if c in index_of:
                raise DuplicateCharacterError(c, index_of[c], i)
            index_of[c] = i
            digits.append(c)

        if len(digits) < 2:
            raise RadixError(len(digits))

        object.__setattr__(self, "digits", tuple(digits))
        object.__setattr__(self, "index_of", MappingProxyType(index_of))
        object.__setattr__(self, "radix", len(digits))
        logger.debug("Built base-%d alphabet %r", self.radix, str(self))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return "".join(self.digits)

    def __repr__(self) -> str:
        return f"Alphabet({str(self)!r})"

    def __len__(self) -> int:
        return self.radix

    def __contains__(self, c) -> bool:
        return c in self.index_of

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.digits == other.digits

    def __hash__(self) -> int:
        return hash(self.digits)

    def display(self) -> str:
        return str(self)

    def decode(
        self, rep: str, int_type: IntType = USIZE, config: Optional[CodecConfig] = None
    ) -> int:
        return codec.decode(self, rep, int_type, config)

    def encode(
        self, value: int, int_type: IntType = USIZE, config: Optional[CodecConfig] = None
    ) -> str:
        return codec.encode(self, value, int_type, config)
