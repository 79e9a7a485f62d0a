"""
Core Option Object

Defines the configuration option container of iniopt.

An option is a named record holding either one value or an ordered list
of values, all of one fixed primitive kind (see OptionType).

ARCHITECTURAL RULE:
    Option:
        - Knows nothing about INI files, sections or I/O
        - Enforces its type tag against every value cell it touches
        - Never shares value cells with another option
        - Reads from its schema binding, never owns or mutates it
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional

from .errors import BadCast, NotFound
from .parsing import format_list, parse_value
from .schema import SchemaLookup, SchemaMode
from .values import (
    OptionType,
    ValueCell,
    conform,
    duplicate,
    infer_kind,
    make_cell,
)


logger = logging.getLogger(__name__)


def _require_type(kind: Any) -> OptionType:
    if not isinstance(kind, OptionType):
        raise BadCast(f"Unsupported option type: {kind!r}")
    return kind


class Option:
    """
    Represents a single ini configuration option.

    Properties:
        name:
            Non-empty identifier, fixed at construction

        type:
            OptionType shared by every stored value.
            Fixed at construction; only set_list() may retag it.

        schema_binding:
            Optional OptionSchema entry this option was created from or
            bound to. Shared with the schema registry, never copied.

    Construction:
        Option("port", 8080)                          -> signed, 1 value
        Option("port", "8080", OptionType.UNSIGNED)   -> text is parsed
        Option("hosts", ["a", "b"])                   -> string list
        Option("ratios", [], OptionType.FLOAT)        -> empty float list

    INVARIANTS:
        - Every value cell's kind equals type
        - Copies never share value cells with their source
    """

    __hash__ = None

    def __init__(self, name: str, value: Any = "", type: Optional[OptionType] = None,
                 schema=None):
        if not isinstance(name, str) or not name:
            raise ValueError("Option name must be a non-empty string")

        items = list(value) if isinstance(value, (list, tuple)) else [value]
        if type is None:
            kind = infer_kind(items[0]) if items else OptionType.STRING
        else:
            kind = _require_type(type)

        self._name = name
        self._type = kind
        self._values: List[ValueCell] = [self._initial_cell(item, kind) for item in items]
        self._schema = schema

    @staticmethod
    def _initial_cell(item: Any, kind: OptionType) -> ValueCell:
        # Text handed in by a parser is read with the value grammar.
        if isinstance(item, str) and kind is not OptionType.STRING:
            item = parse_value(item, kind)
        return make_cell(item, kind)

    @classmethod
    def _from_cells(cls, name: str, kind: OptionType, cells: List[ValueCell],
                    schema) -> "Option":
        option = cls.__new__(cls)
        option._name = name
        option._type = kind
        option._values = cells
        option._schema = schema
        return option

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> OptionType:
        return self._type

    @property
    def schema_binding(self):
        return self._schema

    @property
    def is_list(self) -> bool:
        """True if the option holds more than one value."""
        return len(self._values) > 1

    def bind_schema(self, entry) -> None:
        """Associate this option with a schema entry (or None to unbind)."""
        self._schema = entry

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return (cell.get() for cell in self._values)

    def _expect(self, kind: Optional[OptionType]) -> OptionType:
        """Return the kind a mutation must use, failing if the caller disagrees."""
        if kind is None:
            return self._type
        kind = _require_type(kind)
        if kind is not self._type:
            raise BadCast(
                f"Option '{self._name}' holds {self._type.value} values, not {kind.value}"
            )
        return kind

    # =========================================================================
    # Single value access
    # =========================================================================

    def set(self, value: Any, kind: Optional[OptionType] = None) -> None:
        """
        Replace the first value.

        Args:
            value: New value; must belong to the option's type
            kind: Kind asserted by the caller (defaults to the option's type)

        Raises:
            BadCast: If kind or value disagree with the option's type
            NotFound: If the option holds no values
        """
        expected = self._expect(kind)
        value = conform(value, expected)
        if not self._values:
            raise NotFound(0)
        self._values[0].set(value)

    def get(self, kind: OptionType) -> Any:
        """
        Return the first value as the requested kind.

        Raises:
            NotFound: If the option holds no values
            BadCast: If the stored kind is not the requested kind
        """
        kind = _require_type(kind)
        if not self._values:
            raise NotFound(0)
        cell = self._values[0]
        if cell.kind is not kind:
            raise BadCast(f"Cannot cast {cell.kind.value} to {kind.value}")
        return cell.get()

    # =========================================================================
    # List access
    # =========================================================================

    def set_list(self, values: Iterable[Any], kind: OptionType) -> None:
        """
        Replace all values and retag the option to kind.

        The replacement is built before anything is changed, so a value
        that does not belong to kind leaves the option untouched.

        Raises:
            BadCast: If values is a single string, or any value does not
                belong to kind
        """
        kind = _require_type(kind)
        if isinstance(values, (str, bytes)):
            raise BadCast("set_list expects a sequence of values, not a single string")
        cells = [make_cell(value, kind) for value in values]
        if kind is not self._type:
            logger.debug("Option '%s' retagged from %s to %s",
                         self._name, self._type.value, kind.value)
        self._type = kind
        self._values = cells

    def get_list(self, kind: OptionType) -> List[Any]:
        """
        Return a new list of every value as the requested kind, in order.

        Raises:
            NotFound: If the option holds no values
            BadCast: If any stored value is not of the requested kind
        """
        kind = _require_type(kind)
        if not self._values:
            raise NotFound(0)
        results = []
        for cell in self._values:
            if cell.kind is not kind:
                raise BadCast(f"Cannot cast {cell.kind.value} to {kind.value}")
            results.append(cell.get())
        return results

    def add_to_list(self, value: Any, position: Optional[int] = None,
                    kind: Optional[OptionType] = None) -> None:
        """
        Add a value at the end of the list, or at position.

        position == len(option) is a valid append.

        Raises:
            BadCast: If kind or value disagree with the option's type
            NotFound: If position is negative or past the end
        """
        cell = make_cell(value, self._expect(kind))
        if position is None:
            self._values.append(cell)
            return
        if position < 0 or position > len(self._values):
            raise NotFound(position)
        self._values.insert(position, cell)

    def remove_from_list(self, value: Any, kind: Optional[OptionType] = None) -> bool:
        """
        Remove the first value equal to the given one.

        Returns:
            True if a value was removed, False if none matched

        Raises:
            BadCast: If kind or value disagree with the option's type
        """
        target = conform(value, self._expect(kind))
        for index, cell in enumerate(self._values):
            if cell.get() == target:
                del self._values[index]
                return True
        return False

    def remove_from_list_pos(self, position: int) -> None:
        """
        Remove the value at position.

        Raises:
            NotFound: If position is negative or not below len(option)
        """
        if position < 0 or position >= len(self._values):
            raise NotFound(position)
        del self._values[position]

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, schema=None, mode: SchemaMode = SchemaMode.RELAXED) -> bool:
        """
        Check this option against a schema.

        Args:
            schema:
                Anything with lookup(name) -> SchemaLookup, typically a
                Schema registry or a single OptionSchema entry.
                Defaults to the bound schema entry.
            mode:
                STRICT rejects options the schema does not know,
                RELAXED accepts them

        Returns:
            True if the option is acceptable, False otherwise.
            Neither the option nor the schema is modified.
        """
        source = schema if schema is not None else self._schema
        if source is None:
            result = SchemaLookup(found=False)
        else:
            result = source.lookup(self._name)

        if not result.found:
            verdict = mode is not SchemaMode.STRICT
            logger.debug("Option '%s' unknown to schema (%s mode): %s",
                         self._name, mode.value, "accepted" if verdict else "rejected")
            return verdict

        if result.expected_type is not self._type:
            logger.debug("Option '%s' rejected: expected %s, holds %s",
                         self._name, result.expected_type.value, self._type.value)
            return False

        if not result.allows_list and len(self._values) != 1:
            logger.debug("Option '%s' rejected: single value expected, holds %d",
                         self._name, len(self._values))
            return False

        return True

    # =========================================================================
    # Copy / move
    # =========================================================================

    def copy(self) -> "Option":
        """Return a deep duplicate; the schema binding is shared."""
        cells = [duplicate(cell) for cell in self._values]
        return self._from_cells(self._name, self._type, cells, self._schema)

    def __copy__(self) -> "Option":
        return self.copy()

    def __deepcopy__(self, memo) -> "Option":
        return self.copy()

    def copy_from(self, other: "Option") -> None:
        """Replace type, values and binding with a deep duplicate of other's."""
        cells = [duplicate(cell) for cell in other._values]
        self._type = other._type
        self._values = cells
        self._schema = other._schema

    def move(self) -> "Option":
        """
        Return a new option owning this option's values.

        This option keeps its name and type and is left with no values.
        """
        moved = self._from_cells(self._name, self._type, self._values, self._schema)
        self._values = []
        return moved

    def move_from(self, other: "Option") -> None:
        """Take over other's type, values and binding, leaving other empty."""
        if other is self:
            return
        self._type = other._type
        self._values = other._values
        self._schema = other._schema
        other._values = []

    # =========================================================================
    # Comparison / formatting
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return (
            self._name == other._name
            and self._type is other._type
            and self._values == other._values
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def render(self, delimiter: str = ",") -> str:
        """Render as `name = value` or `name = v1, v2, ...`."""
        rendered = format_list(list(self), self._type, delimiter)
        return f"{self._name} = {rendered}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Option(name={self._name!r}, type={self._type}, "
            f"values={list(self)!r})"
        )


__all__ = ["Option"]
