"""Executable deploy items that call stored contracts."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

_U32_LIMIT = 1 << 32


def _text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def _args(value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise TypeError("args must be a list")
    return copy.deepcopy(value)


def _version(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("version must be an integer")
    if not 0 <= value < _U32_LIMIT:
        raise ValueError(f"version {value} does not fit in u32")
    return value


@dataclass
class StoredContractByName:
    """A contract named in the signer's account, its entry point and runtime arguments.

    Arguments are kept in their JSON form.
    """

    name: str = ""
    entry_point: str = ""
    args: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        _text(self.name, "name")
        _text(self.entry_point, "entry_point")
        self.args = _args(self.args)

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "entry_point": self.entry_point,
            "args": copy.deepcopy(self.args),
        }

    @classmethod
    def from_json(cls, data: dict) -> StoredContractByName:
        return cls(name=data["name"], entry_point=data["entry_point"], args=data["args"])


@dataclass
class StoredVersionedContractByHash:
    """A contract package hash, an optional version, entry point and runtime arguments.

    Without a version the highest enabled version is called.
    """

    hash: str = ""
    entry_point: str = ""
    args: list[Any] = field(default_factory=list)
    version: Optional[int] = None

    def __post_init__(self) -> None:
        _text(self.hash, "hash")
        _text(self.entry_point, "entry_point")
        self.args = _args(self.args)
        if self.version is not None:
            _version(self.version)

    def to_json(self) -> dict:
        result: dict = {
            "hash": self.hash,
            "entry_point": self.entry_point,
            "args": copy.deepcopy(self.args),
        }
        if self.version is not None:
            result["version"] = self.version
        return result

    @classmethod
    def from_json(cls, data: dict) -> StoredVersionedContractByHash:
        version = _version(data["version"]) if "version" in data else None
        return cls(
            hash=data["hash"],
            entry_point=data["entry_point"],
            args=data["args"],
            version=version,
        )