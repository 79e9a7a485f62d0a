"""
Serialization helpers for iniopt objects (Option, Schema).

Provides JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from iniopt.option import Option
from iniopt.schema import OptionSchema, Schema
from iniopt.values import OptionType


def option_to_dict(o: Option) -> Dict[str, Any]:
    return {
        "name": o.name,
        "type": o.type.value,
        "values": list(o),
        "list": o.is_list,
    }


def option_from_dict(d: Dict[str, Any]) -> Option:
    kind = OptionType(d["type"])
    values = d.get("values", [])
    if not isinstance(values, list):
        values = [values]
    return Option(d["name"], values, kind)


def options_to_json(options: List[Option]) -> str:
    return json.dumps([option_to_dict(o) for o in options], sort_keys=True)


def options_from_json(s: str) -> List[Option]:
    return [option_from_dict(d) for d in json.loads(s)]


def options_to_yaml(options: List[Option]) -> str:
    return yaml.safe_dump([option_to_dict(o) for o in options])


def options_from_yaml(s: str) -> List[Option]:
    return [option_from_dict(d) for d in (yaml.safe_load(s) or [])]


def option_schema_to_dict(e: OptionSchema) -> Dict[str, Any]:
    return {
        "name": e.name,
        "type": e.type.value,
        "is_list": e.is_list,
        "default": e.default,
        "description": e.description,
        "mandatory": e.mandatory,
    }


def option_schema_from_dict(d: Dict[str, Any]) -> OptionSchema:
    return OptionSchema(
        name=d["name"],
        type=OptionType(d["type"]),
        is_list=d.get("is_list", False),
        default=d.get("default"),
        description=d.get("description"),
        mandatory=d.get("mandatory", False),
    )


def schema_to_dict(s: Schema) -> Dict[str, Any]:
    return {"options": [option_schema_to_dict(e) for e in s]}


def schema_from_dict(d: Dict[str, Any]) -> Schema:
    return Schema(option_schema_from_dict(e) for e in d.get("options", []))


def schema_to_yaml(s: Schema) -> str:
    return yaml.safe_dump(schema_to_dict(s))


def schema_from_yaml(s: str) -> Schema:
    return schema_from_dict(yaml.safe_load(s) or {})
