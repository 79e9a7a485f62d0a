"""
Schema Registry — which options are permitted and in what shape.

This module provides:
    - OptionSchema entries (expected type, cardinality, default)
    - Schema, a name-keyed registry of entries
    - validate_options(), a read-only report over a set of options

IMPORTANT: Validation never modifies options or the schema.
It only produces verdicts and reports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional

from .values import OptionType

if TYPE_CHECKING:
    from .option import Option


logger = logging.getLogger(__name__)


class SchemaMode(Enum):
    """
    Strictness of schema validation.

    STRICT:  every option must be declared in the schema
    RELAXED: only declared options are checked
    """
    STRICT = "strict"
    RELAXED = "relaxed"


@dataclass(frozen=True)
class SchemaLookup:
    """
    Answer of a schema to "what do you know about this option name?".

    Properties:
        found: Whether the name is declared
        expected_type: Declared OptionType (None when not found)
        allows_list: Whether more than one value is permitted
    """

    found: bool
    expected_type: Optional[OptionType] = None
    allows_list: bool = False


_NOT_FOUND = SchemaLookup(found=False)


@dataclass
class OptionSchema:
    """
    Declares one permitted option.

    Properties:
        name: Option name this entry describes
        type: Expected OptionType
        is_list: Whether list values are permitted
        default: Default value (typed value, list, or raw text)
        description: Human-readable description (optional)
        mandatory: Whether the option must be present
    """

    name: str
    type: OptionType
    is_list: bool = False
    default: Any = None
    description: Optional[str] = None
    mandatory: bool = False

    def lookup(self, name: str) -> SchemaLookup:
        if name != self.name:
            return _NOT_FOUND
        return SchemaLookup(found=True, expected_type=self.type, allows_list=self.is_list)

    def default_option(self) -> "Option":
        """
        Build an option holding this entry's default, bound to this entry.

        A text default for a list entry is split with the list grammar.
        """
        from .option import Option
        from .parsing import parse_list

        default = self.default
        if default is None:
            default = []
        elif self.is_list and isinstance(default, str):
            default = parse_list(default, self.type)
        return Option(self.name, default, self.type, schema=self)


class Schema:
    """
    Name-keyed registry of OptionSchema entries.

    Entries are kept in insertion order. Options look entries up by name
    at validation time, so the registry stays the sole owner.
    """

    def __init__(self, entries: Iterable[OptionSchema] = ()):
        self._entries: Dict[str, OptionSchema] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: OptionSchema) -> None:
        """
        Register an entry.

        Raises:
            ValueError: If an entry with the same name exists
        """
        if entry.name in self._entries:
            raise ValueError(f"Duplicate schema entry: {entry.name}")
        self._entries[entry.name] = entry

    def get(self, name: str) -> Optional[OptionSchema]:
        return self._entries.get(name)

    def lookup(self, name: str) -> SchemaLookup:
        entry = self._entries.get(name)
        if entry is None:
            return _NOT_FOUND
        return entry.lookup(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OptionSchema]:
        return iter(self._entries.values())


@dataclass
class ValidationReport:
    """Outcome of validating a set of options against a schema."""

    mode: SchemaMode
    valid: bool = True
    invalid_options: List[str] = field(default_factory=list)
    unknown_options: List[str] = field(default_factory=list)
    missing_mandatory: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def validate_options(options: Iterable["Option"], schema: Schema,
                     mode: SchemaMode = SchemaMode.RELAXED) -> ValidationReport:
    """
    Validate every option against a schema and collect the verdicts.

    Checks for:
    - Options the schema does not declare (fatal only in STRICT mode)
    - Options whose type or cardinality disagree with their entry
    - Mandatory entries with no option present

    Returns a ValidationReport with verdicts and warnings.
    """
    report = ValidationReport(mode=mode)
    seen = set()

    for option in options:
        seen.add(option.name)
        if option.name not in schema:
            report.unknown_options.append(option.name)
            if mode is SchemaMode.STRICT:
                report.valid = False
            report.add_warning(f"Unknown option: {option.name}")
            continue
        if not option.validate(schema, mode):
            report.valid = False
            report.invalid_options.append(option.name)
            entry = schema.get(option.name)
            shape = "list of " if entry.is_list else ""
            report.add_warning(
                f"Option '{option.name}' does not match schema: expected {shape}{entry.type.value}"
            )

    for entry in schema:
        if entry.mandatory and entry.name not in seen:
            report.valid = False
            report.missing_mandatory.append(entry.name)
            report.add_warning(f"Missing mandatory option: {entry.name}")

    for msg in report.warnings:
        logger.warning(msg)

    return report


__all__ = [
    "SchemaMode",
    "SchemaLookup",
    "OptionSchema",
    "Schema",
    "ValidationReport",
    "validate_options",
]
