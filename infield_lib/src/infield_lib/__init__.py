"""
infield_lib - input-field discovery for generated input schemas.

Structure:
├── types.py            - Core types (CandidateMember, PropertyGroup, InputField)
├── annotations.py      - Markers (Input, Query, Ignore) and decorators
├── errors.py           - Exception hierarchy
├── strategies.py       - Inclusion policies and type transformers
├── discovery/          - Grouping, exclusion veto, precedence, synthesis, agreement
└── backends/           - Member scanners (InspectScanner, NamespaceScanner)

Lazy imports:
- Lightweight modules (types, annotations, errors) are always loaded
- Discovery and backends (pull in pydantic) load on first access
"""

import importlib
from typing import TYPE_CHECKING

from .annotations import Ignore, Input, Query, creator, ignore, input_field, query
from .errors import (
    AmbiguousPropertyError,
    BackendDisagreementError,
    DefaultValueError,
    DuplicateInputFieldError,
    InputFieldDiscoveryError,
)
from .types import CandidateMember, InputField, MemberKind, PropertyGroup

if TYPE_CHECKING:
    from .backends import InspectScanner, MemberScanner, NamespaceScanner, get_scanner
    from .discovery import (
        InputFieldDiscovery,
        NameCollisionPolicy,
        check_backend_agreement,
        discover_input_fields,
    )
    from .strategies import DefaultInclusionPolicy, DefaultTypeTransformer


# Lazy import mapping: attribute name -> (module, attribute)
_LAZY_IMPORTS = {
    "discover_input_fields": (".discovery", "discover_input_fields"),
    "InputFieldDiscovery": (".discovery", "InputFieldDiscovery"),
    "NameCollisionPolicy": (".discovery", "NameCollisionPolicy"),
    "check_backend_agreement": (".discovery", "check_backend_agreement"),
    "MemberScanner": (".backends", "MemberScanner"),
    "InspectScanner": (".backends", "InspectScanner"),
    "NamespaceScanner": (".backends", "NamespaceScanner"),
    "get_scanner": (".backends", "get_scanner"),
    "DefaultInclusionPolicy": (".strategies", "DefaultInclusionPolicy"),
    "DefaultTypeTransformer": (".strategies", "DefaultTypeTransformer"),
}


def __getattr__(name: str):
    """Lazy import handler for top-level attributes."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path, package="infield_lib")
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'infield_lib' has no attribute {name!r}")


__all__ = [
    # Markers
    "Input",
    "Query",
    "Ignore",
    "input_field",
    "query",
    "ignore",
    "creator",
    # Types
    "CandidateMember",
    "InputField",
    "MemberKind",
    "PropertyGroup",
    # Errors
    "InputFieldDiscoveryError",
    "AmbiguousPropertyError",
    "DuplicateInputFieldError",
    "DefaultValueError",
    "BackendDisagreementError",
    # Discovery
    "discover_input_fields",
    "InputFieldDiscovery",
    "NameCollisionPolicy",
    "check_backend_agreement",
    # Backends
    "MemberScanner",
    "InspectScanner",
    "NamespaceScanner",
    "get_scanner",
    # Strategies
    "DefaultInclusionPolicy",
    "DefaultTypeTransformer",
]
