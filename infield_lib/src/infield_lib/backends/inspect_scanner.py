"""InspectScanner — enumerates members through the ``inspect`` and ``typing`` APIs.

Field types come from ``typing.get_type_hints`` over the whole class,
attributes from ``inspect.getmembers_static`` and callables from
``inspect.signature`` (which follows ``__wrapped__``).
"""

from __future__ import annotations

import inspect
import typing
from typing import Any, Iterable

from .base import MemberScanner, Param

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class InspectScanner(MemberScanner):
    name = "inspect"

    def _iter_field_annotations(self, owner: type) -> Iterable[tuple[str, Any, type]]:
        hints = typing.get_type_hints(owner, include_extras=True)
        for name, annotation in hints.items():
            declaring = _declaring_class(owner, name, annotations=True)
            if declaring is not None:
                yield name, annotation, declaring

    def _iter_attributes(self, owner: type) -> Iterable[tuple[str, Any, type]]:
        for name, value in inspect.getmembers_static(owner):
            declaring = _declaring_class(owner, name)
            if declaring is not None:
                yield name, value, declaring

    def _signature(self, func) -> tuple[list[Param], Any]:
        sig = inspect.signature(func, eval_str=True)
        params = [
            Param(
                name=p.name,
                annotation=None if p.annotation is p.empty else p.annotation,
                positional=p.kind in _POSITIONAL,
                variadic=p.kind in _VARIADIC,
                has_default=p.default is not p.empty,
            )
            for p in sig.parameters.values()
        ]
        returns = None if sig.return_annotation is sig.empty else sig.return_annotation
        return params, returns


def _declaring_class(owner: type, name: str, annotations: bool = False) -> type | None:
    """Most derived class in the MRO (other than object) that defines ``name``."""
    for klass in owner.__mro__:
        if klass is object:
            continue
        namespace = inspect.get_annotations(klass) if annotations else vars(klass)
        if name in namespace:
            return klass
    return None
