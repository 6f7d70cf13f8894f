"""Discovery pipeline: grouping, exclusion veto, precedence and field synthesis."""

from .agreement import check_backend_agreement, field_set_differences
from .engine import InputFieldDiscovery, NameCollisionPolicy, discover_input_fields
from .exclusion import is_excluded, vetoing_member
from .grouping import group_members
from .precedence import authoritative_member, resolve_metadata
from .synthesis import declared_type_of, synthesize_field

__all__ = [
    "discover_input_fields",
    "InputFieldDiscovery",
    "NameCollisionPolicy",
    "check_backend_agreement",
    "field_set_differences",
    "group_members",
    "is_excluded",
    "vetoing_member",
    "resolve_metadata",
    "authoritative_member",
    "synthesize_field",
    "declared_type_of",
]
