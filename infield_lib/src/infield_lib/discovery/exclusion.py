"""Exclusion veto for property groups.

Any single member can veto its whole group, whatever its kind: an ``Ignore``
on the setter removes the property even when the getter or backing field
carries valid ``Input`` metadata. Failing the inclusion policy counts the
same as an ``Ignore`` marker.
"""

from __future__ import annotations

from loguru import logger

from ..strategies import InclusionPolicy
from ..types import CandidateMember, PropertyGroup


def vetoing_member(group: PropertyGroup, inclusion_policy: InclusionPolicy) -> CandidateMember | None:
    """Return the first member that excludes the group, or None."""
    for member in group.by_priority():
        if member.excluded or not inclusion_policy.include_input_member(member):
            return member
    return None


def is_excluded(group: PropertyGroup, inclusion_policy: InclusionPolicy) -> bool:
    member = vetoing_member(group, inclusion_policy)
    if member is None:
        return False
    reason = "Ignore marker" if member.excluded else "inclusion policy"
    logger.debug(f"Property '{group.property_name}' excluded by {member} ({reason})")
    return True
