"""
Drug and reaction items with a signed integer encoding.

Drugs are encoded as positive codes, adverse reactions as negative codes.
The absolute value of a code is the item identifier.
"""
import numbers
from dataclasses import dataclass

from maras.core.exceptions import DecodeError

MAX_ITEM_ID = 2 ** 31 - 1


def _check_code(code) -> int:
    if isinstance(code, bool) or not isinstance(code, numbers.Integral):
        raise DecodeError(code, "item codes must be integers")
    code = int(code)
    if code == 0:
        raise DecodeError(code, "0 is neither a drug nor a reaction code")
    if abs(code) > MAX_ITEM_ID:
        raise DecodeError(code, f"identifier exceeds {MAX_ITEM_ID}")
    return code


def _check_identifier(identifier) -> int:
    if isinstance(identifier, bool) or not isinstance(identifier, numbers.Integral):
        raise DecodeError(identifier, "identifiers must be integers")
    if identifier < 1:
        raise DecodeError(identifier, "identifiers must be positive")
    return int(identifier)


@dataclass(frozen=True)
class Item:
    """
    Immutable drug or reaction, compared and hashed by its code.

    Attributes:
        code: Signed item code (> 0 for drugs, < 0 for reactions)
    """
    code: int

    def __post_init__(self):
        object.__setattr__(self, 'code', _check_code(self.code))

    @property
    def is_drug(self) -> bool:
        return self.code > 0

    @property
    def identifier(self) -> int:
        return abs(self.code)

    def to_int(self) -> int:
        return self.code

    @classmethod
    def from_int(cls, code) -> "Item":
        """
        Decode an item code produced by the mining algorithm.

        Raises:
            DecodeError: If the code is not an integer in the item domain
        """
        return cls(code)

    @classmethod
    def drug(cls, identifier: int) -> "Item":
        return cls(_check_identifier(identifier))

    @classmethod
    def reaction(cls, identifier: int) -> "Item":
        return cls(-_check_identifier(identifier))

    def __str__(self) -> str:
        prefix = "D" if self.is_drug else "R"
        return f"{prefix}{self.identifier}"
