"""Pick the authoritative metadata for a property group.

Only members with relevant (``Input``) metadata take part; ``Query`` and other
competing markers are never consulted. Among those, the member of highest
kind priority wins outright:

    SETTER > GETTER > FIELD > CONSTRUCTOR_PARAMETER

The winner's metadata is taken as a whole. Components it leaves unset fall
back to the property name / no description / no default, never to a
lower-priority member, so a bare ``Input`` on the setter hides a fully
populated ``Input`` on the field.
"""

from __future__ import annotations

from loguru import logger

from ..types import CandidateMember, PropertyGroup, ResolvedMetadata


def authoritative_member(group: PropertyGroup) -> CandidateMember | None:
    """Highest-priority member carrying relevant metadata, or None."""
    for member in group.by_priority():
        if member.explicit_metadata is not None:
            return member
    return None


def resolve_metadata(group: PropertyGroup) -> ResolvedMetadata:
    member = authoritative_member(group)
    if member is None:
        return ResolvedMetadata(name=group.property_name)

    meta = member.explicit_metadata
    if meta.is_bare:
        logger.debug(f"Property '{group.property_name}': bare Input on {member}, using defaults")
    else:
        logger.debug(f"Property '{group.property_name}': metadata from {member}")
    return ResolvedMetadata(
        name=meta.name or group.property_name,
        description=meta.description,
        default_value=meta.default_value,
    )
