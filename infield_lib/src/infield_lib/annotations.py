"""Markers that attach input-field metadata to class members.

Use with Annotated for fields and constructor parameters, and as decorators
for getters, setters and creator constructors:

    class Order:
        _quantity: Annotated[int, Input(name="qty", default_value="1")]
        note: Annotated[str, Query(name="remark")]       # other category, ignored
        secret: Annotated[str, Ignore]                   # never an input field

        @creator
        def __init__(self, quantity: int): ...

        @property
        @input_field(description="Unit price")
        def price(self) -> float: ...

        @price.setter
        @ignore
        def price(self, value: float) -> None: ...

Decorators go beneath @property / @x.setter / @classmethod and return the
function unchanged. A bare class works wherever an instance does:
``Annotated[str, Input]`` is the same as ``Annotated[str, Input()]``.
"""

from dataclasses import dataclass

MARKERS_ATTR = "__infield_markers__"
CREATOR_ATTR = "__infield_creator__"


@dataclass(frozen=True)
class Input:
    """Marker: explicit input-field name, description and raw default value."""

    name: str | None = None
    description: str | None = None
    default_value: str | None = None


@dataclass(frozen=True)
class Query:
    """Marker: output (query) field metadata. Not consulted for input fields."""

    name: str | None = None
    description: str | None = None


class Ignore:
    """Marker: exclude the whole property from input fields."""


def is_marker(obj, marker: type) -> bool:
    return obj is marker or isinstance(obj, marker)


def _attach(func, marker):
    if isinstance(func, property):
        raise TypeError("Markers must be applied beneath @property, not on top of it")
    if isinstance(func, (classmethod, staticmethod)):
        raise TypeError("Markers must be applied beneath @classmethod/@staticmethod")
    markers = list(getattr(func, MARKERS_ATTR, ()))
    markers.append(marker)
    setattr(func, MARKERS_ATTR, tuple(markers))
    return func


def input_field(func=None, *, name: str | None = None, description: str | None = None,
                default_value: str | None = None):
    """Attach an ``Input`` marker to a getter or setter. Usable bare or with arguments."""
    marker = Input(name=name, description=description, default_value=default_value)
    if func is not None:
        return _attach(func, marker)
    return lambda f: _attach(f, marker)


def query(func=None, *, name: str | None = None, description: str | None = None):
    """Attach a ``Query`` marker to a getter or setter."""
    marker = Query(name=name, description=description)
    if func is not None:
        return _attach(func, marker)
    return lambda f: _attach(f, marker)


def ignore(func):
    """Attach an ``Ignore`` marker to a getter or setter."""
    return _attach(func, Ignore)


def creator(func):
    """Designate ``__init__`` or a classmethod factory as the creator constructor."""
    if isinstance(func, (property, classmethod, staticmethod)):
        raise TypeError("@creator must be applied to the plain function, beneath @classmethod")
    setattr(func, CREATOR_ATTR, True)
    return func


def markers_of(func) -> tuple:
    """Markers recorded on a function by the decorators above."""
    return tuple(getattr(func, MARKERS_ATTR, ()))


def is_creator(func) -> bool:
    return bool(getattr(func, CREATOR_ATTR, False))
