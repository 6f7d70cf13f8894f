"""MemberScanner — shared discovery rules for scanning backends.

Concrete backends only decide how class members are enumerated. Everything
else lives here, default materialization included:

- A generic alias (``Box[int]``) is split into ``Box`` and ``{T: int}``,
  and every declared type is substituted accordingly.
- Creator mode: if the class itself declares one ``@creator`` callable, its
  parameters are the only candidates.
- Otherwise annotations become FIELD members, public properties and
  ``get_x``/``set_x`` (or ``getX``/``setX``) methods become GETTER/SETTER
  members. A private field ``_x`` is reported only when something else
  exposes ``x`` or it carries an ``Input`` marker.
"""

from __future__ import annotations

import inspect
import types
from abc import ABC, abstractmethod
from typing import Annotated, Any, ClassVar, Iterable, NamedTuple, TypeVar, Union, get_args, get_origin

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from ..annotations import Ignore, Input, Query, is_creator, is_marker, markers_of
from ..errors import DefaultValueError, InputFieldDiscoveryError
from ..types import CandidateMember, CompetingMetadata, MemberKind, RelevantMetadata


class Param(NamedTuple):
    """One callable parameter as reported by a backend."""
    name: str
    annotation: Any          # None when unannotated
    positional: bool
    variadic: bool
    has_default: bool


# =============================================================================
# Naming
# =============================================================================

def decapitalize(name: str) -> str:
    """``Field1`` -> ``field1``; ``URL`` stays ``URL``."""
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[:1].lower() + name[1:]


def field_property_name(name: str, declaring_class: type) -> str | None:
    """Property name for an annotated attribute, or None if it is not a field."""
    if name.startswith("__") or name.startswith(f"_{declaring_class.__name__.lstrip('_')}__"):
        return None
    prop = name[1:] if name.startswith("_") else name
    if not prop or prop.startswith("_"):
        return None
    return prop


def accessor_property_name(name: str) -> tuple[str, str] | None:
    """Split ``get_x``/``getX``/``set_x``/``setX`` into (prefix, property name)."""
    for prefix in ("get", "set"):
        if not name.startswith(prefix):
            continue
        rest = name[len(prefix):]
        if rest.startswith("_"):
            rest = rest[1:]
            if rest and not rest.startswith("_"):
                return prefix, rest
        elif rest and rest[0].isupper():
            return prefix, decapitalize(rest)
    return None


# =============================================================================
# Types
# =============================================================================

def split_annotated(annotation: Any) -> tuple[Any, tuple]:
    """Separate ``Annotated[T, *markers]`` into (T, markers)."""
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[0], tuple(annotation.__metadata__)
    return annotation, ()


def split_generic(type_: Any) -> tuple[Any, dict]:
    """``Box[int]`` -> (Box, {T: int}); a plain class maps to itself."""
    origin = get_origin(type_)
    if origin is None or not isinstance(origin, type):
        return type_, {}
    params = getattr(origin, "__parameters__", ())
    return origin, dict(zip(params, get_args(type_)))


def substitute_typevars(tp: Any, typevars: dict) -> Any:
    if not typevars or tp is None:
        return tp
    if isinstance(tp, TypeVar):
        return typevars.get(tp, tp)
    if get_origin(tp) is None:
        return tp
    params = getattr(tp, "__parameters__", ())
    if params:
        return tp[tuple(typevars.get(p, p) for p in params)]
    return tp


def _is_invalid_json(error: ValidationError) -> bool:
    return any(e["type"] == "json_invalid" for e in error.errors())


def is_text_type(tp: Any) -> bool:
    """``str`` or an optional ``str``: defaults are taken verbatim."""
    if tp is str:
        return True
    if get_origin(tp) in (Union, types.UnionType):
        args = set(get_args(tp))
        return str in args and args <= {str, type(None)}
    return False


# =============================================================================
# Markers
# =============================================================================

def metadata_from_markers(markers: Iterable, where: str) -> tuple[RelevantMetadata | None, bool, CompetingMetadata | None]:
    """Turn a member's markers into (relevant metadata, excluded, competing metadata)."""
    relevant = None
    competing = None
    excluded = False
    for marker in markers:
        if is_marker(marker, Input):
            if relevant is not None:
                raise InputFieldDiscoveryError(f"{where} carries more than one Input marker")
            if marker is Input:
                relevant = RelevantMetadata()
            else:
                relevant = RelevantMetadata(marker.name, marker.description, marker.default_value)
        elif is_marker(marker, Query):
            if competing is None:
                competing = (CompetingMetadata("query") if marker is Query
                             else CompetingMetadata("query", marker.name, marker.description))
        elif is_marker(marker, Ignore):
            excluded = True
    return relevant, excluded, competing


# =============================================================================
# Scanner
# =============================================================================

class MemberScanner(ABC):
    """Enumerates candidate members of a type and materializes raw defaults."""

    name: str = "base"

    # ---- enumeration hooks -------------------------------------------------

    @abstractmethod
    def _iter_field_annotations(self, owner: type) -> Iterable[tuple[str, Any, type]]:
        """Yield (attribute name, annotation with extras, declaring class)."""

    @abstractmethod
    def _iter_attributes(self, owner: type) -> Iterable[tuple[str, Any, type]]:
        """Yield (attribute name, raw class attribute, declaring class)."""

    @abstractmethod
    def _signature(self, func) -> tuple[list[Param], Any]:
        """Return (parameters, return annotation) of a plain function."""

    # ---- public API --------------------------------------------------------

    def scan_members(self, type_: Any) -> list[CandidateMember]:
        owner, typevars = split_generic(type_)
        if not isinstance(owner, type):
            raise TypeError(f"Cannot scan {type_!r}: not a class")

        creator_func = self._find_creator(owner)
        if creator_func is not None:
            return self._creator_members(owner, creator_func, typevars)
        return self._structural_members(owner, typevars)

    def materialize_default(self, raw: str, declared_type: Any) -> Any:
        """Turn a raw default string into a value of ``declared_type``.

        Text types keep the raw string. Otherwise the raw string is read as
        JSON; when it is not JSON text the string itself is validated, so
        ``"AAAA"`` stays a string for ``Any`` and ``"red"`` selects an enum member.
        """
        if is_text_type(declared_type):
            return raw
        value_type = Any if declared_type is object else declared_type
        adapter = self._type_adapter(raw, value_type)
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            if not _is_invalid_json(e):
                raise DefaultValueError(raw, value_type, str(e)) from e
        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            raise DefaultValueError(raw, value_type, str(e)) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # ---- helpers -----------------------------------------------------------

    @staticmethod
    def _type_adapter(raw: str, value_type: Any) -> TypeAdapter:
        try:
            return TypeAdapter(value_type)
        except PydanticSchemaGenerationError as e:
            raise DefaultValueError(raw, value_type, "type has no value schema") from e

    def _member(self, prop, kind, declared_name, declaring, annotation, extra_markers, typevars) -> CandidateMember:
        tp, markers = split_annotated(annotation)
        where = f"{kind.value} {declaring.__qualname__}.{declared_name}"
        relevant, excluded, competing = metadata_from_markers(tuple(extra_markers) + markers, where)
        return CandidateMember(
            property_name=prop,
            kind=kind,
            declared_name=declared_name,
            declaring_class=declaring,
            declared_type=substitute_typevars(tp, typevars),
            explicit_metadata=relevant,
            excluded=excluded,
            competing_metadata=competing,
        )

    def _find_creator(self, owner: type):
        creators = []
        for name, attr, declaring in self._iter_attributes(owner):
            if declaring is not owner:
                continue
            if isinstance(attr, staticmethod) and is_creator(attr.__func__):
                raise InputFieldDiscoveryError(
                    f"{owner.__qualname__}.{name}: @creator must be __init__ or a classmethod, not a staticmethod"
                )
            func = attr.__func__ if isinstance(attr, classmethod) else attr
            if inspect.isfunction(func) and is_creator(func):
                creators.append(func)
        if len(creators) > 1:
            names = ", ".join(sorted(f.__name__ for f in creators))
            raise InputFieldDiscoveryError(f"{owner.__qualname__} declares more than one creator: {names}")
        return creators[0] if creators else None

    def _creator_members(self, owner: type, func, typevars: dict) -> list[CandidateMember]:
        params, _ = self._signature(func)
        members = []
        # First parameter is self/cls
        for param in params[1:]:
            if param.variadic:
                continue
            members.append(self._member(
                param.name, MemberKind.CONSTRUCTOR_PARAMETER, f"{func.__name__}({param.name})",
                owner, param.annotation, (), typevars,
            ))
        return members

    def _structural_members(self, owner: type, typevars: dict) -> list[CandidateMember]:
        found: list[tuple[CandidateMember, bool]] = []

        for name, annotation, declaring in self._iter_field_annotations(owner):
            prop = field_property_name(name, declaring)
            if prop is None or get_origin(split_annotated(annotation)[0]) is ClassVar:
                continue
            member = self._member(prop, MemberKind.FIELD, name, declaring, annotation, (), typevars)
            found.append((member, name.startswith("_")))

        for name, attr, declaring in self._iter_attributes(owner):
            if name.startswith("_"):
                continue
            for member in self._accessor_members(name, attr, declaring, typevars):
                found.append((member, False))

        exposed = {m.property_name for m, private in found if not private}
        return [
            m for m, private in found
            if not private or m.property_name in exposed or m.explicit_metadata is not None
        ]

    def _accessor_members(self, name: str, attr, declaring: type, typevars: dict) -> list[CandidateMember]:
        members = []
        if isinstance(attr, property):
            if attr.fget is not None:
                _params, returns = self._signature(attr.fget)
                members.append(self._member(name, MemberKind.GETTER, name, declaring,
                                            returns, markers_of(attr.fget), typevars))
            if attr.fset is not None:
                params, _ = self._signature(attr.fset)
                value = params[1].annotation if len(params) > 1 else None
                members.append(self._member(name, MemberKind.SETTER, name, declaring,
                                            value, markers_of(attr.fset), typevars))
            return members

        if not inspect.isfunction(attr):
            return members
        accessor = accessor_property_name(name)
        if accessor is None:
            return members

        prefix, prop = accessor
        params, returns = self._signature(attr)
        positional = [p for p in params if p.positional and not p.variadic]
        required_rest = [p for p in params if not p.positional and not p.variadic and not p.has_default]
        if required_rest:
            return members
        if prefix == "get" and len(positional) == 1:
            members.append(self._member(prop, MemberKind.GETTER, name, declaring,
                                        returns, markers_of(attr), typevars))
        elif prefix == "set" and len(positional) == 2:
            members.append(self._member(prop, MemberKind.SETTER, name, declaring,
                                        positional[1].annotation, markers_of(attr), typevars))
        return members
