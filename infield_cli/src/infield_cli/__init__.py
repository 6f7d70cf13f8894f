"""infield_cli - command line front end: config loading, target resolution, rendering."""

from .config import InfieldConfig
from .render import fields_to_dicts, to_fields_yaml, to_json_schema

__all__ = [
    "InfieldConfig",
    "fields_to_dicts",
    "to_fields_yaml",
    "to_json_schema",
]
