"""NamespaceScanner — walks class namespaces base-first.

Each class in ``reversed(__mro__)`` contributes its own annotations and
attributes, later (more derived) classes overriding earlier ones. Callable
parameters are read from the code objects of the unwrapped functions.
"""

from __future__ import annotations

import inspect
import typing
from typing import Any, Iterable

from .base import MemberScanner, Param


class NamespaceScanner(MemberScanner):
    name = "namespace"

    @staticmethod
    def _namespaces(owner: type) -> list[type]:
        return [klass for klass in reversed(owner.__mro__) if klass is not object]

    def _iter_field_annotations(self, owner: type) -> Iterable[tuple[str, Any, type]]:
        merged: dict[str, tuple[Any, type]] = {}
        for klass in self._namespaces(owner):
            for name, annotation in inspect.get_annotations(klass, eval_str=True).items():
                merged[name] = (annotation, klass)
        for name, (annotation, klass) in merged.items():
            yield name, annotation, klass

    def _iter_attributes(self, owner: type) -> Iterable[tuple[str, Any, type]]:
        merged: dict[str, tuple[Any, type]] = {}
        for klass in self._namespaces(owner):
            for name, value in vars(klass).items():
                merged[name] = (value, klass)
        for name, (value, klass) in merged.items():
            yield name, value, klass

    def _signature(self, func) -> tuple[list[Param], Any]:
        func = inspect.unwrap(func)
        code = func.__code__
        hints = typing.get_type_hints(func, include_extras=True)
        n_positional = code.co_argcount
        n_kwonly = code.co_kwonlyargcount
        n_defaults = len(func.__defaults__ or ())
        kwdefaults = func.__kwdefaults__ or {}
        names = code.co_varnames

        params = []
        for i in range(n_positional):
            params.append(Param(names[i], hints.get(names[i]), True, False, i >= n_positional - n_defaults))

        index = n_positional + n_kwonly
        if code.co_flags & inspect.CO_VARARGS:
            params.append(Param(names[index], hints.get(names[index]), True, True, False))
            index += 1

        for name in names[n_positional:n_positional + n_kwonly]:
            params.append(Param(name, hints.get(name), False, False, name in kwdefaults))

        if code.co_flags & inspect.CO_VARKEYWORDS:
            params.append(Param(names[index], hints.get(names[index]), False, True, False))

        return params, hints.get("return")
