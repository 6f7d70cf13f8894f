"""Cluster candidate members into property groups."""

from __future__ import annotations

from typing import Iterable

from ..errors import AmbiguousPropertyError
from ..types import CandidateMember, PropertyGroup


def group_members(members: Iterable[CandidateMember]) -> dict[str, PropertyGroup]:
    """Group members by inferred property name.

    Raises:
        AmbiguousPropertyError: Two members of the same kind share a property name
            (e.g. ``field1`` and ``_field1``, or ``get_field1`` and ``getField1``).
    """
    groups: dict[str, PropertyGroup] = {}
    for member in members:
        group = groups.get(member.property_name)
        if group is None:
            group = groups[member.property_name] = PropertyGroup(member.property_name)
        existing = group.get(member.kind)
        if existing is not None:
            raise AmbiguousPropertyError(member.property_name, existing, member)
        group.members[member.kind] = member
    return groups
