from typing import Optional


class BasedError(Exception):
    """Base class for every error raised by this package."""


class DuplicateCharacterError(BasedError, ValueError):
    def __init__(self, char: str, first_position: int, second_position: int):
        super().__init__(
            f"Character {char!r} appears at positions {first_position} and "
            f"{second_position}"
        )
        self.char = char
        self.first_position = first_position
        self.second_position = second_position


class RadixError(BasedError, ValueError):
    def __init__(self, radix: int):
        super().__init__(f"An alphabet needs at least 2 characters, got {radix}")
        self.radix = radix


class UnknownCharacterError(BasedError, ValueError):
    def __init__(self, char: str):
        super().__init__(f"Encountered char {char!r} not in base")
        self.char = char


class EmptyInputError(BasedError, ValueError):
    def __init__(self):
        super().__init__("Cannot decode an empty string")


class RangeError(BasedError, OverflowError):
    def __init__(self, value: Optional[int], int_type):
        # value is None when decoding stopped accumulating past the type's range
        if value is None:
            shown = "decoded value"
        elif value.bit_length() > 2 * int_type.bits:
            shown = f"{value.bit_length()}-bit value"
        else:
            shown = str(value)
        super().__init__(
            f"{shown} does not fit in {int_type.name} "
            f"[{int_type.min_value}, {int_type.max_value}]"
        )
        self.value = value
        self.int_type = int_type
