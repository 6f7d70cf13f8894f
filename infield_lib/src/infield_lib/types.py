"""Core types for infield_lib."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator


class MemberKind(Enum):
    """Structural surface a candidate member was found on."""

    FIELD = "field"
    GETTER = "getter"
    SETTER = "setter"
    CONSTRUCTOR_PARAMETER = "constructor_parameter"

    @property
    def priority(self) -> int:
        """Higher wins when several members carry relevant metadata."""
        return _KIND_PRIORITY[self]


_KIND_PRIORITY = {
    MemberKind.SETTER: 3,
    MemberKind.GETTER: 2,
    MemberKind.FIELD: 1,
    MemberKind.CONSTRUCTOR_PARAMETER: 0,
}


@dataclass(frozen=True)
class RelevantMetadata:
    """Input-field metadata taken from an ``Input`` marker. Any part may be unset."""

    name: str | None = None
    description: str | None = None
    default_value: str | None = None

    def __post_init__(self):
        # Empty name/description mean "not given"
        if self.name == "":
            object.__setattr__(self, "name", None)
        if self.description == "":
            object.__setattr__(self, "description", None)

    @property
    def is_bare(self) -> bool:
        return self.name is None and self.description is None and self.default_value is None


@dataclass(frozen=True)
class CompetingMetadata:
    """Metadata from a marker of another category (e.g. ``Query``). Never merged."""

    category: str
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class CandidateMember:
    """One structural surface of a logical property."""

    property_name: str
    kind: MemberKind
    declared_name: str
    declaring_class: type
    declared_type: Any = None
    explicit_metadata: RelevantMetadata | None = None
    excluded: bool = False
    competing_metadata: CompetingMetadata | None = None

    def __str__(self) -> str:
        return f"{self.kind.value} {self.declaring_class.__qualname__}.{self.declared_name}"


@dataclass
class PropertyGroup:
    """All candidate members of one type sharing a property name."""

    property_name: str
    members: dict[MemberKind, CandidateMember] = field(default_factory=dict)

    def __iter__(self) -> Iterator[CandidateMember]:
        return iter(self.members.values())

    def __len__(self) -> int:
        return len(self.members)

    def get(self, kind: MemberKind) -> CandidateMember | None:
        return self.members.get(kind)

    def by_priority(self) -> list[CandidateMember]:
        """Members ordered from highest to lowest kind priority."""
        return sorted(self.members.values(), key=lambda m: m.kind.priority, reverse=True)


@dataclass(frozen=True)
class ResolvedMetadata:
    """Authoritative (name, description, default) triple for one property group."""

    name: str
    description: str | None = None
    default_value: str | None = None


@dataclass(frozen=True, eq=False)
class InputField:
    """Canonical input field produced by discovery.

    Equality covers name, description, declared type and default value.
    ``source_member`` is provenance only. Hashing uses the name so records
    with unhashable defaults (lists, dicts) can still be collected in a set.
    """

    name: str
    description: str | None
    declared_type: Any
    source_member: CandidateMember | None = None
    default_value: Any = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputField):
            return NotImplemented
        return (
            self.name == other.name
            and self.description == other.description
            and self.declared_type == other.declared_type
            and self.default_value == other.default_value
        )

    def __hash__(self) -> int:
        return hash(self.name)
