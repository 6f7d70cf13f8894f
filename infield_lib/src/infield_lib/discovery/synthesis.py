"""Build the InputField record for a resolved property group."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..strategies import TypeTransformer
from ..types import InputField, MemberKind, PropertyGroup, ResolvedMetadata
from .precedence import authoritative_member

if TYPE_CHECKING:
    from ..backends.base import MemberScanner

# Field type first, then accessor parameter/return type
TYPE_SOURCE_ORDER = (
    MemberKind.FIELD,
    MemberKind.SETTER,
    MemberKind.GETTER,
    MemberKind.CONSTRUCTOR_PARAMETER,
)


def declared_type_of(group: PropertyGroup) -> Any:
    for kind in TYPE_SOURCE_ORDER:
        member = group.get(kind)
        if member is not None and member.declared_type is not None:
            return member.declared_type
    return Any


def synthesize_field(
    group: PropertyGroup,
    resolved: ResolvedMetadata,
    type_transformer: TypeTransformer,
    scanner: MemberScanner,
) -> InputField:
    declared_type = type_transformer.transform(declared_type_of(group))

    default_value = None
    if resolved.default_value is not None:
        default_value = scanner.materialize_default(resolved.default_value, declared_type)

    source = authoritative_member(group) or group.by_priority()[0]
    return InputField(
        name=resolved.name,
        description=resolved.description,
        declared_type=declared_type,
        source_member=source,
        default_value=default_value,
    )
