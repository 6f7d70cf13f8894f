"""Pluggable inclusion and type-transformation strategies.

    policy = DefaultInclusionPolicy("myapp.models")   # only members declared under myapp.models
    transformer = DefaultTypeTransformer(unwrap_optional=True)
"""

from __future__ import annotations

import types
from typing import TYPE_CHECKING, Annotated, Any, Protocol, Union, get_args, get_origin

if TYPE_CHECKING:
    from .types import CandidateMember


class InclusionPolicy(Protocol):
    """Decides whether a member is visible for schema purposes at all."""

    def include_input_member(self, member: CandidateMember) -> bool: ...


class TypeTransformer(Protocol):
    """Maps a raw declared type to the type recorded on the input field."""

    def transform(self, declared_type: Any) -> Any: ...


class DefaultInclusionPolicy:
    """Admit members whose declaring class lives under one of ``base_modules``.

    With no modules given every member is admitted.
    """

    def __init__(self, *base_modules: str):
        self.base_modules = tuple(m.rstrip(".") for m in base_modules if m)

    def include_input_member(self, member: CandidateMember) -> bool:
        if not self.base_modules:
            return True
        module = getattr(member.declaring_class, "__module__", "") or ""
        return any(module == base or module.startswith(base + ".") for base in self.base_modules)

    def __repr__(self) -> str:
        return f"DefaultInclusionPolicy{self.base_modules!r}"


class DefaultTypeTransformer:
    """Strip Annotated and NewType wrappers, map ``object`` to ``Any``.

    Args:
        unwrap_optional: Turn ``X | None`` into ``X``.
        object_as_any: Record ``object`` as ``typing.Any``.
    """

    def __init__(self, unwrap_optional: bool = False, object_as_any: bool = True):
        self.unwrap_optional = unwrap_optional
        self.object_as_any = object_as_any

    def transform(self, declared_type: Any) -> Any:
        tp = declared_type
        while True:
            if get_origin(tp) is Annotated:
                tp = get_args(tp)[0]
            elif hasattr(tp, "__supertype__"):
                tp = tp.__supertype__
            else:
                break

        if self.unwrap_optional and get_origin(tp) in (Union, types.UnionType):
            args = tuple(a for a in get_args(tp) if a is not type(None))
            if len(args) == 1:
                tp = self.transform(args[0])

        if self.object_as_any and tp is object:
            return Any
        return tp

    def __repr__(self) -> str:
        return (
            f"DefaultTypeTransformer(unwrap_optional={self.unwrap_optional}, "
            f"object_as_any={self.object_as_any})"
        )
