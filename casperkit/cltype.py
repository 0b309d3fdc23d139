"""CL type descriptors and their JSON representation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Union


class CLTypeEnum(IntEnum):
    """Tags of the CL type system; member names are the wire names."""

    Bool = 0
    I32 = 1
    I64 = 2
    U8 = 3
    U32 = 4
    U64 = 5
    U128 = 6
    U256 = 7
    U512 = 8
    Unit = 9
    String = 10
    Key = 11
    URef = 12
    Option = 13
    List = 14
    ByteArray = 15
    Result = 16
    Map = 17
    Tuple1 = 18
    Tuple2 = 19
    Tuple3 = 20
    Any = 21
    PublicKey = 22


_PRIMITIVES = frozenset(
    {
        CLTypeEnum.Bool,
        CLTypeEnum.I32,
        CLTypeEnum.I64,
        CLTypeEnum.U8,
        CLTypeEnum.U32,
        CLTypeEnum.U64,
        CLTypeEnum.U128,
        CLTypeEnum.U256,
        CLTypeEnum.U512,
        CLTypeEnum.Unit,
        CLTypeEnum.String,
        CLTypeEnum.Key,
        CLTypeEnum.URef,
        CLTypeEnum.Any,
        CLTypeEnum.PublicKey,
    }
)

_TUPLE_TAGS = {1: CLTypeEnum.Tuple1, 2: CLTypeEnum.Tuple2, 3: CLTypeEnum.Tuple3}

_ARITY = {
    CLTypeEnum.Option: 1,
    CLTypeEnum.List: 1,
    CLTypeEnum.Result: 2,
    CLTypeEnum.Map: 2,
    CLTypeEnum.Tuple1: 1,
    CLTypeEnum.Tuple2: 2,
    CLTypeEnum.Tuple3: 3,
    CLTypeEnum.ByteArray: 0,
}

_INT32_MAX = 2**31 - 1

TypeLike = Union["CLType", CLTypeEnum, int]


@dataclass(frozen=True, order=True)
class CLType:
    """An immutable, possibly nested CL type."""

    tag: CLTypeEnum = CLTypeEnum.Any
    inner: tuple[CLType, ...] = ()
    size: int = 0

    def __post_init__(self) -> None:
        try:
            tag = CLTypeEnum(self.tag)
        except ValueError:
            raise ValueError(f"Invalid CLType tag: {self.tag!r}") from None
        object.__setattr__(self, "tag", tag)
        expected = 0 if tag in _PRIMITIVES else _ARITY[tag]
        if len(self.inner) != expected:
            raise ValueError(f"{tag.name} takes {expected} inner type(s), got {len(self.inner)}")
        if tag is CLTypeEnum.ByteArray:
            if not 0 <= self.size <= _INT32_MAX:
                raise ValueError(f"Invalid ByteArray size: {self.size}")
        elif self.size:
            raise ValueError(f"{tag.name} does not carry a size")

    @classmethod
    def primitive(cls, tag: CLTypeEnum | int) -> CLType:
        """A type without inner types, such as Bool or String."""
        try:
            tag = CLTypeEnum(tag)
        except ValueError:
            raise ValueError(f"Invalid CLType tag: {tag!r}") from None
        if tag not in _PRIMITIVES:
            raise ValueError(f"{tag.name} is not a primitive CLType")
        return cls(tag)

    @classmethod
    def option(cls, inner: TypeLike) -> CLType:
        return cls(CLTypeEnum.Option, (_coerce(inner),))

    @classmethod
    def list_of(cls, inner: TypeLike) -> CLType:
        return cls(CLTypeEnum.List, (_coerce(inner),))

    @classmethod
    def byte_array(cls, size: int) -> CLType:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("ByteArray size must be an int")
        return cls(CLTypeEnum.ByteArray, (), size)

    @classmethod
    def result(cls, ok: TypeLike, err: TypeLike) -> CLType:
        return cls(CLTypeEnum.Result, (_coerce(ok), _coerce(err)))

    @classmethod
    def map(cls, key: TypeLike, value: TypeLike) -> CLType:
        return cls(CLTypeEnum.Map, (_coerce(key), _coerce(value)))

    @classmethod
    def tuple(cls, *args: TypeLike) -> CLType:
        """A Tuple1, Tuple2 or Tuple3 of the given element types."""
        tag = _TUPLE_TAGS.get(len(args))
        if tag is None:
            raise ValueError(f"Tuples take 1 to 3 elements, got {len(args)}")
        return cls(tag, tuple(_coerce(arg) for arg in args))

    def to_json(self) -> Any:
        tag = self.tag
        if tag in _PRIMITIVES:
            return tag.name
        if tag is CLTypeEnum.ByteArray:
            return {"ByteArray": self.size}
        if tag in (CLTypeEnum.Option, CLTypeEnum.List):
            return {tag.name: self.inner[0].to_json()}
        if tag is CLTypeEnum.Map:
            key, value = self.inner
            return {"Map": {"key": key.to_json(), "value": value.to_json()}}
        if tag is CLTypeEnum.Result:
            ok, err = self.inner
            return {"Result": {"Ok": ok.to_json(), "Err": err.to_json()}}
        return {tag.name: [item.to_json() for item in self.inner]}

    @classmethod
    def from_json(cls, data: Any) -> CLType:
        if isinstance(data, str):
            tag = CLTypeEnum.__members__.get(data)
            if tag is None or tag not in _PRIMITIVES:
                raise ValueError(f"Invalid CLType: {data!r}")
            return cls(tag)
        if not isinstance(data, dict) or not data:
            raise ValueError(f"Invalid CLType: {data!r}")

        name = next(iter(data))
        body = data[name]
        if name in ("Option", "List"):
            return cls(CLTypeEnum[name], (cls.from_json(body),))
        if name == "ByteArray":
            if isinstance(body, bool) or not isinstance(body, int):
                raise ValueError(f"Invalid ByteArray size: {body!r}")
            return cls.byte_array(body)
        if name == "Result":
            return cls.result(
                cls.from_json(_member(body, "Ok", name)),
                cls.from_json(_member(body, "Err", name)),
            )
        if name == "Map":
            return cls.map(
                cls.from_json(_member(body, "key", name)),
                cls.from_json(_member(body, "value", name)),
            )
        if name in ("Tuple1", "Tuple2", "Tuple3"):
            count = _ARITY[CLTypeEnum[name]]
            if not isinstance(body, list) or len(body) < count:
                raise ValueError(f"{name} needs {count} element types")
            return cls.tuple(*(cls.from_json(item) for item in body[:count]))
        raise ValueError(f"Invalid CLType: {name!r}")


def _coerce(value: TypeLike) -> CLType:
    if isinstance(value, CLType):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return CLType.primitive(value)
    raise TypeError(f"Expected a CLType or CLTypeEnum, got {type(value).__name__}")


def _member(body: Any, name: str, kind: str) -> Any:
    if not isinstance(body, dict) or name not in body:
        raise ValueError(f"{kind} CLType is missing {name!r}")
    return body[name]