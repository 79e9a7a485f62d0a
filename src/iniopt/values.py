"""
Value Cells for iniopt

Every value stored in an option lives in a value cell. A cell holds exactly
one concrete value of exactly one of the five supported kinds.

The cells form a closed tagged variant:
    BooleanValue | SignedValue | UnsignedValue | FloatValue | StringValue

Kind identity is carried by the cell class itself, so recovering a value
under the wrong kind is a plain tag comparison, never a cast.

ARCHITECTURAL RULE:
    The set of kinds is closed. There is no extension point here.
    Adding a kind means touching OptionType, the cell classes,
    conform() and the parsing grammar together.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Type

from .errors import BadCast


class OptionType(Enum):
    """
    The five primitive kinds an option can hold.

    Enum values double as the names used in text and serialized forms.
    """

    BOOLEAN = "boolean"
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    STRING = "string"

    def coerce(self, text: str) -> Any:
        """Parse text into a value of this kind."""
        from .parsing import parse_value
        return parse_value(text, self)


# Integers are stored as 64-bit values.
SIGNED_MIN = -2 ** 63
SIGNED_MAX = 2 ** 63 - 1
UNSIGNED_MAX = 2 ** 64 - 1


def conform(value: Any, kind: OptionType) -> Any:
    """
    Check that a Python value belongs to a kind and return it normalized.

    Rules:
        BOOLEAN:  bool
        SIGNED:   int (bool excluded), within int64
        UNSIGNED: int (bool excluded), within uint64
        FLOAT:    float; a non-bool int is widened to float
        STRING:   str

    Raises:
        BadCast: If the value does not belong to the kind
    """
    if kind is OptionType.BOOLEAN:
        if isinstance(value, bool):
            return value
    elif kind is OptionType.SIGNED:
        if isinstance(value, int) and not isinstance(value, bool):
            if not SIGNED_MIN <= value <= SIGNED_MAX:
                raise BadCast(f"Value {value} is out of range for signed")
            return value
    elif kind is OptionType.UNSIGNED:
        if isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise BadCast(f"Negative value {value} cannot be stored as unsigned")
            if value > UNSIGNED_MAX:
                raise BadCast(f"Value {value} is out of range for unsigned")
            return value
    elif kind is OptionType.FLOAT:
        if isinstance(value, float):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return float(value)
    elif kind is OptionType.STRING:
        if isinstance(value, str):
            return value
    else:
        raise BadCast(f"Unsupported option type: {kind!r}")
    raise BadCast(f"Value {value!r} of type {type(value).__name__} is not {kind.value}")


def infer_kind(value: Any) -> OptionType:
    """
    Infer the kind of a Python value.

    bool must be tested before int since bool is a subclass of int.
    Unsigned is never inferred; it has to be requested explicitly.
    """
    if isinstance(value, bool):
        return OptionType.BOOLEAN
    if isinstance(value, int):
        return OptionType.SIGNED
    if isinstance(value, float):
        return OptionType.FLOAT
    if isinstance(value, str):
        return OptionType.STRING
    raise BadCast(f"Unsupported value type: {type(value).__name__}")


class ValueCell(ABC):
    """
    Base class for all value cells.

    This class is structure only. It carries no kind tag of its own;
    each concrete subclass fixes one.
    """

    kind: ClassVar[OptionType]
    value: Any

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = conform(value, self.kind)


@dataclass
class BooleanValue(ValueCell):
    kind: ClassVar[OptionType] = OptionType.BOOLEAN
    value: bool


@dataclass
class SignedValue(ValueCell):
    kind: ClassVar[OptionType] = OptionType.SIGNED
    value: int


@dataclass
class UnsignedValue(ValueCell):
    kind: ClassVar[OptionType] = OptionType.UNSIGNED
    value: int


@dataclass
class FloatValue(ValueCell):
    kind: ClassVar[OptionType] = OptionType.FLOAT
    value: float


@dataclass
class StringValue(ValueCell):
    kind: ClassVar[OptionType] = OptionType.STRING
    value: str


_CELL_CLASSES: Dict[OptionType, Type[ValueCell]] = {
    OptionType.BOOLEAN: BooleanValue,
    OptionType.SIGNED: SignedValue,
    OptionType.UNSIGNED: UnsignedValue,
    OptionType.FLOAT: FloatValue,
    OptionType.STRING: StringValue,
}


def make_cell(value: Any, kind: OptionType) -> ValueCell:
    """
    Build a cell of the given kind.

    Raises:
        BadCast: If the value does not belong to the kind
    """
    try:
        cell_class = _CELL_CLASSES[kind]
    except KeyError:
        raise BadCast(f"Unsupported option type: {kind!r}")
    return cell_class(conform(value, kind))


def duplicate(cell: ValueCell) -> ValueCell:
    """Return a fresh cell of the same kind holding the same value."""
    return _CELL_CLASSES[cell.kind](cell.value)


__all__ = [
    "OptionType",
    "ValueCell",
    "BooleanValue",
    "SignedValue",
    "UnsignedValue",
    "FloatValue",
    "StringValue",
    "conform",
    "infer_kind",
    "make_cell",
    "duplicate",
]
