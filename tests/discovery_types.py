"""Types scanned by the discovery tests, one per behavioural scenario."""

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, ClassVar, Generic, TypeVar

from infield_lib.annotations import Ignore, Input, Query, creator, ignore, input_field, query

T = TypeVar("T")

AAA = Input(name="aaa", description="AAA", default_value="AAAA")
BBB = Input(name="bbb", description="BBB", default_value="2222")
CCC = Input(name="ccc", description="CCC", default_value="3333")


def passthrough(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)
    return wrapper


# =============================================================================
# Single surface, no markers
# =============================================================================

class FieldsOnly:
    field1: str
    field2: int
    field3: object


class GettersOnly:
    _field1: str
    _field2: int
    _field3: object

    def get_field1(self) -> str:
        return self._field1

    def get_field2(self) -> int:
        return self._field2

    def get_field3(self) -> object:
        return self._field3


class SettersOnly:
    _field1: str
    _field2: int
    _field3: object

    def setField1(self, field1: str) -> None:
        self._field1 = field1

    def setField2(self, field2: int) -> None:
        self._field2 = field2

    def setField3(self, field3: object) -> None:
        self._field3 = field3


# =============================================================================
# Explicit Input markers on one surface
# =============================================================================

class ExplicitFields:
    field1: Annotated[str, AAA]
    field2: Annotated[int, BBB]
    field3: Annotated[object, CCC]


class ExplicitGetters:
    _field1: str
    _field2: int
    _field3: object

    @property
    @input_field(name="aaa", description="AAA", default_value="AAAA")
    def field1(self) -> str:
        return self._field1

    @property
    @input_field(name="bbb", description="BBB", default_value="2222")
    def field2(self) -> int:
        return self._field2

    @property
    @input_field(name="ccc", description="CCC", default_value="3333")
    def field3(self) -> object:
        return self._field3


class ExplicitSetters:
    _field1: str
    _field2: int
    _field3: object

    @input_field(name="aaa", description="AAA", default_value="AAAA")
    def set_field1(self, field1: str) -> None:
        self._field1 = field1

    @input_field(name="bbb", description="BBB", default_value="2222")
    def set_field2(self, field2: int) -> None:
        self._field2 = field2

    @input_field(name="ccc", description="CCC", default_value="3333")
    def set_field3(self, field3: object) -> None:
        self._field3 = field3


# =============================================================================
# Competing (Query) markers only
# =============================================================================

class QueryFields:
    field1: Annotated[str, Query(name="aaa")]
    field2: Annotated[int, Query(name="bbb")]
    field3: Annotated[object, Query(name="ccc")]


class QueryGetters:
    _field1: str
    _field2: int
    _field3: object

    @query(name="aaa")
    def get_field1(self) -> str:
        return self._field1

    @query(name="bbb")
    def get_field2(self) -> int:
        return self._field2

    @query(name="ccc")
    def get_field3(self) -> object:
        return self._field3


class QuerySetters:
    _field1: str
    _field2: int
    _field3: object

    @property
    def field1(self) -> str:
        return self._field1

    @field1.setter
    @query(name="aaa")
    def field1(self, value: str) -> None:
        self._field1 = value

    @property
    def field2(self) -> int:
        return self._field2

    @field2.setter
    @query(name="bbb")
    def field2(self, value: int) -> None:
        self._field2 = value

    @property
    def field3(self) -> object:
        return self._field3

    @field3.setter
    @query(name="ccc")
    def field3(self, value: object) -> None:
        self._field3 = value


# =============================================================================
# Input on one surface, Query on another
# =============================================================================

class MixedFieldsWin:
    _field1: Annotated[str, AAA]
    _field2: Annotated[int, BBB]
    _field3: Annotated[object, CCC]

    @query(name="xxx")
    def get_field1(self) -> str:
        return self._field1

    @query(name="yyy")
    def get_field2(self) -> int:
        return self._field2

    @query(name="zzz")
    def get_field3(self) -> object:
        return self._field3


class MixedGettersWin:
    _field1: Annotated[str, Query(name="xxx")]
    _field2: Annotated[int, Query(name="yyy")]
    _field3: Annotated[object, Query(name="zzz")]

    @input_field(name="aaa", description="AAA", default_value="AAAA")
    def get_field1(self) -> str:
        return self._field1

    @input_field(name="bbb", description="BBB", default_value="2222")
    def get_field2(self) -> int:
        return self._field2

    @input_field(name="ccc", description="CCC", default_value="3333")
    def get_field3(self) -> object:
        return self._field3


class MixedSettersWin:
    _field1: Annotated[str, Query(name="xxx")]
    _field2: Annotated[int, Query(name="yyy")]
    _field3: Annotated[object, Query(name="zzz")]

    @input_field(name="aaa", description="AAA", default_value="AAAA")
    def set_field1(self, field1: str) -> None:
        self._field1 = field1

    @input_field(name="bbb", description="BBB", default_value="2222")
    def set_field2(self, field2: int) -> None:
        self._field2 = field2

    @input_field(name="ccc", description="CCC", default_value="3333")
    def set_field3(self, field3: object) -> None:
        self._field3 = field3


# =============================================================================
# Input on several surfaces
# =============================================================================

class ConflictingGettersWin:
    _field1: Annotated[str, Input(name="xxx", description="XXX", default_value="XXXX")]
    _field2: Annotated[int, Input(name="yyy", description="YYY", default_value="-1")]
    _field3: Annotated[object, Input(name="zzz", description="ZZZ", default_value="-1")]

    @input_field(name="aaa", description="AAA", default_value="AAAA")
    def getField1(self) -> str:
        return self._field1

    @input_field(name="bbb", description="BBB", default_value="2222")
    def getField2(self) -> int:
        return self._field2

    @input_field(name="ccc", description="CCC", default_value="3333")
    def getField3(self) -> object:
        return self._field3


class ConflictingSettersWin:
    _field1: Annotated[str, Input(name="xxx", description="XXX", default_value="XXXX")]
    _field2: Annotated[int, Input(name="yyy", description="YYY", default_value="-1")]
    _field3: Annotated[object, Input(name="zzz", description="ZZZ", default_value="-1")]

    @input_field(name="aaa", description="AAA", default_value="AAAA")
    def set_field1(self, field1: str) -> None:
        self._field1 = field1

    @input_field(name="bbb", description="BBB", default_value="2222")
    def set_field2(self, field2: int) -> None:
        self._field2 = field2

    @input_field(name="ccc", description="CCC", default_value="3333")
    def set_field3(self, field3: object) -> None:
        self._field3 = field3


class AllConflictingSettersWin:
    _field1: Annotated[str, Input(name="xxx", description="XXX", default_value="XXXX")]
    _field2: Annotated[int, Input(name="yyy", description="YYY", default_value="-1")]
    _field3: Annotated[object, Input(name="zzz", description="ZZZ", default_value="-1")]

    @property
    @input_field(name="111", description="1111", default_value="XXXX")
    def field1(self) -> str:
        return self._field1

    @field1.setter
    @input_field(name="aaa", description="AAA", default_value="AAAA")
    def field1(self, value: str) -> None:
        self._field1 = value

    @property
    @input_field(name="222", description="2222", default_value="-1")
    def field2(self) -> int:
        return self._field2

    @field2.setter
    @input_field(name="bbb", description="BBB", default_value="2222")
    def field2(self, value: int) -> None:
        self._field2 = value

    @property
    @input_field(name="333", description="3333", default_value="-1")
    def field3(self) -> object:
        return self._field3

    @field3.setter
    @input_field(name="ccc", description="CCC", default_value="3333")
    def field3(self, value: object) -> None:
        self._field3 = value


class SurfaceNamesDiffer:
    """Field, getter and setter of field1 each name it differently."""

    _field1: Annotated[str, Input(name="from_field")]

    @input_field(name="from_getter")
    def get_field1(self) -> str:
        return self._field1

    @input_field(name="from_setter")
    def set_field1(self, value: str) -> None:
        self._field1 = value


# =============================================================================
# Exclusion
# =============================================================================

class HiddenSetters:
    _field1: str
    _field2: int
    _field3: object

    @property
    def field1(self) -> str:
        return self._field1

    @field1.setter
    def field1(self, value: str) -> None:
        self._field1 = value

    @property
    @query(name="ignored")
    @input_field(name="ignored")
    def field2(self) -> int:
        return self._field2

    @field2.setter
    @ignore
    @input_field(name="ignored")
    def field2(self, value: int) -> None:
        self._field2 = value

    @property
    def field3(self) -> object:
        return self._field3

    @field3.setter
    @input_field
    def field3(self, value: object) -> None:
        self._field3 = value


class HiddenCtorParams:
    _field1: str
    _field2: int
    _field3: object

    @creator
    def __init__(self, field1: str, field2: Annotated[int, Ignore], field3: object):
        self._field1 = field1
        self._field2 = field2
        self._field3 = field3


class HiddenField:
    field1: str
    field2: Annotated[int, Ignore, Input(name="still_hidden")]
    field3: object

    @input_field(name="also_ignored", description="never used")
    def set_field2(self, value: int) -> None:
        self.field2 = value


# =============================================================================
# Precedence corner cases
# =============================================================================

class BareSetterWins:
    _field1: Annotated[str, Input(name="named", description="Described", default_value="dflt")]

    @input_field
    def set_field1(self, value: str) -> None:
        self._field1 = value


class QueryOnHighestMember:
    _field1: Annotated[str, AAA]

    @query(name="zzz", description="ZZZ")
    def set_field1(self, value: str) -> None:
        self._field1 = value


# =============================================================================
# Structure
# =============================================================================

class Empty:
    pass


class Box(Generic[T]):
    item: T
    items: list[T]
    label: Annotated[str, Input(default_value="box")]


class Entity:
    id: Annotated[int, Input(description="Identifier")]
    registry: ClassVar[dict] = {}


class Customer(Entity):
    name: str
    _secret: str

    def get_display(self) -> str:
        return self.name

    def get_with_key(self, key):
        return key

    def set_pair(self, left, right):
        return left, right


class Untyped:
    def get_thing(self):
        return 1


@dataclass
class Point:
    x: int
    y: int = 0


class FromFactory:
    _a: int

    def __init__(self, a: int, b: str):
        self._a = a

    @classmethod
    @creator
    def create(cls, a: int, b: Annotated[str, Input(name="bee")], *rest, **extra) -> "FromFactory":
        return cls(a, b)


class TwoCreators:
    @creator
    def __init__(self, a: int):
        self.a = a

    @classmethod
    @creator
    def build(cls, b: int) -> "TwoCreators":
        return cls(b)


class ForeignBase:
    shared: str


ForeignBase.__module__ = "thirdparty.models"


class LocalChild(ForeignBase):
    own: int


# =============================================================================
# Decorated callables
# =============================================================================

class WrappedAccessors:
    _field1: str
    _field2: int

    @passthrough
    def get_field1(self) -> str:
        return self._field1

    @input_field(name="bbb", description="BBB", default_value="2222")
    @passthrough
    def set_field2(self, value: int) -> None:
        self._field2 = value


class WrappedCreator:
    @creator
    @passthrough
    def __init__(self, field1: str, field2: int, field3: Annotated[object, Ignore]):
        self.field1 = field1
        self.field2 = field2


# =============================================================================
# Defaults that are not JSON text
# =============================================================================

class Color(Enum):
    RED = "red"
    BLUE = "blue"


class LooseDefaults:
    field3: Annotated[object, Input(name="ccc", default_value="AAAA")]
    answer: Annotated[object, Input(default_value="yes")]
    flag: Annotated[bool, Input(default_value="true")]
    count: Annotated[int, Input(default_value="16")]
    color: Annotated[Color, Input(default_value="red")]
    mapping: Annotated[object, Input(default_value='{"a": 1}')]


# =============================================================================
# Misconfigured types
# =============================================================================

class AmbiguousFields:
    field1: str
    _field1: str


class AmbiguousGetters:
    def get_field1(self) -> str:
        return ""

    def getField1(self) -> str:
        return ""


class DuplicateNames:
    field1: Annotated[str, Input(name="same")]
    field2: Annotated[int, Input(name="same")]


class DoubleInput:
    field1: Annotated[str, Input(name="a"), Input(name="b")]


class TypedDefaults:
    ratio: Annotated[float, Input(default_value="0.5")]
    tags: Annotated[list[str], Input(default_value='["a", "b"]')]
    flag: Annotated[bool, Input(default_value="true")]
    note: Annotated[str | None, Input(default_value="n/a")]
    anything: Annotated[object, Input(default_value="[1, 2]")]


class BadDefault:
    count: Annotated[int, Input(default_value="many")]


class HexDefault:
    count: Annotated[int, Input(default_value="0x10")]


class StaticCreator:
    @staticmethod
    @creator
    def build(a: int) -> "StaticCreator":
        return StaticCreator()
