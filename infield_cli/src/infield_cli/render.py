"""Render discovered input fields as YAML or as a JSON-schema object.

    print(to_fields_yaml(fields))
    print(json.dumps(to_json_schema("Order", fields), indent=2))
"""

from __future__ import annotations

from typing import Any, Iterable

import yaml
from loguru import logger
from pydantic import TypeAdapter
from pydantic.errors import PydanticInvalidForJsonSchema, PydanticSchemaGenerationError

from infield_lib.types import InputField


# =============================================================================
# Custom YAML Dumper
# =============================================================================

class _FieldDumper(yaml.SafeDumper):
    """YAML dumper for field listings.

    - Strings with newlines use literal block scalar (|)
    - None renders as an empty value instead of 'null'
    """
    pass


def _str_representer(dumper: _FieldDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


def _none_representer(dumper: _FieldDumper, _data: None) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:null", "")


_FieldDumper.add_representer(str, _str_representer)
_FieldDumper.add_representer(type(None), _none_representer)


# =============================================================================
# Public API
# =============================================================================

def type_label(tp: Any) -> str:
    """Readable name for a declared type: ``int``, ``list[str]``, ``typing.Any``."""
    if isinstance(tp, type) and not getattr(tp, "__args__", None):
        return tp.__qualname__ if tp.__module__ == "builtins" else f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


_PLAIN = TypeAdapter(Any)


def plain_default(value: Any) -> Any:
    """JSON-compatible form of a materialized default (enum members become their values)."""
    return _PLAIN.dump_python(value, mode="json")


def fields_to_dicts(fields: Iterable[InputField], *, strip_nulls: bool = False) -> list[dict]:
    """Plain dicts for each field, sorted by name."""
    rows = []
    for f in sorted(fields, key=lambda f: f.name):
        row = {
            "name": f.name,
            "description": f.description,
            "type": type_label(f.declared_type),
            "default_value": plain_default(f.default_value),
            "source": str(f.source_member) if f.source_member is not None else None,
        }
        if strip_nulls:
            row = {k: v for k, v in row.items() if v is not None}
        rows.append(row)
    return rows


def to_fields_yaml(fields: Iterable[InputField], *, title: str | None = None, strip_nulls: bool = False) -> str:
    """YAML listing of fields, optionally under a ``title`` key."""
    data: Any = fields_to_dicts(fields, strip_nulls=strip_nulls)
    if title is not None:
        data = {title: data}
    result = yaml.dump(
        data,
        Dumper=_FieldDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=120,
    )
    return result.rstrip("\n")


def property_schema(field: InputField) -> dict:
    """JSON schema for one field: pydantic's schema for its type plus description/default."""
    try:
        schema = TypeAdapter(field.declared_type).json_schema()
    except (PydanticSchemaGenerationError, PydanticInvalidForJsonSchema):
        logger.warning(f"No JSON schema for type {type_label(field.declared_type)} of field '{field.name}'")
        schema = {}
    if field.description is not None:
        schema["description"] = field.description
    if field.default_value is not None:
        schema["default"] = plain_default(field.default_value)
    return schema


def to_json_schema(title: str, fields: Iterable[InputField]) -> dict:
    """Object schema with one property per input field."""
    return {
        "title": title,
        "type": "object",
        "properties": {f.name: property_schema(f) for f in sorted(fields, key=lambda f: f.name)},
    }
