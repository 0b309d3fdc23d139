"""Global state keys: parsing, byte serialization and JSON form."""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import Any, ClassVar, Union

from casperkit.codec import hex_decode, hex_encode

_HASH_LENGTH = 32
_MAX_ACCESS_RIGHTS = 0o7


class KeyIdentifier(IntEnum):
    """Tag byte that leads the serialized form of a global state key."""

    Account = 0x00
    Hash = 0x01
    URef = 0x02
    Transfer = 0x03
    DeployInfo = 0x04
    EraInfo = 0x05
    Balance = 0x06
    Bid = 0x07
    Withdraw = 0x08
    Dictionary = 0x09


KeySource = Union[str, bytes, bytearray]


@total_ordering
class GlobalStateKey:
    """A key in global state, such as ``hash-<64 hex digits>``.

    Concrete kinds are the subclasses; use :meth:`from_string` or
    :meth:`from_bytes` to get the right one from a string or bytes.
    """

    prefix: ClassVar[str] = ""
    identifier: ClassVar[KeyIdentifier]

    def __init__(self, key: KeySource) -> None:
        if not self.prefix:
            raise TypeError("GlobalStateKey is abstract; use from_string or from_bytes")
        if isinstance(key, (bytes, bytearray)):
            key = self._key_from_raw(bytes(key))
        if not isinstance(key, str):
            raise TypeError(f"Expected a key string or bytes, got {type(key).__name__}")
        if not key.startswith(self.prefix):
            raise ValueError(f"Key {key!r} does not start with {self.prefix!r}")
        self._raw = self._raw_from_key(key)
        self._key = key

    @property
    def key(self) -> str:
        """The key as a prefixed string."""
        return self._key

    @property
    def key_identifier(self) -> KeyIdentifier:
        return self.identifier

    @property
    def raw_bytes(self) -> bytes:
        """The key's payload, without the identifier byte."""
        return self._raw

    def _raw_from_key(self, key: str) -> bytes:
        body = key[len(self.prefix):]
        data = hex_decode(body)
        if len(data) != _HASH_LENGTH:
            raise ValueError(f"{type(self).__name__} needs {_HASH_LENGTH} bytes, got {len(data)}")
        return data

    @classmethod
    def _key_from_raw(cls, raw: bytes) -> str:
        if len(raw) != _HASH_LENGTH:
            raise ValueError(f"{cls.__name__} needs {_HASH_LENGTH} bytes, got {len(raw)}")
        return cls.prefix + hex_encode(raw)

    @classmethod
    def from_string(cls, value: str) -> GlobalStateKey:
        """The key of the kind named by the prefix of ``value``."""
        if not isinstance(value, str):
            raise TypeError(f"Expected a key string, got {type(value).__name__}")
        for kind in _KINDS_BY_PREFIX:
            if value.startswith(kind.prefix):
                return cls._checked(kind)(value)
        raise ValueError(f"Unknown global state key format: {value!r}")

    @classmethod
    def from_bytes(cls, data: bytes) -> GlobalStateKey:
        """The key whose identifier byte leads ``data``."""
        data = bytes(data)
        if not data:
            raise ValueError("Empty global state key bytes")
        try:
            identifier = KeyIdentifier(data[0])
        except ValueError:
            raise ValueError(f"Unknown key identifier: {data[0]}") from None
        return cls._checked(_KINDS_BY_ID[identifier])(data[1:])

    @classmethod
    def _checked(cls, kind: type[GlobalStateKey]) -> type[GlobalStateKey]:
        if not issubclass(kind, cls):
            raise ValueError(f"Expected a {cls.__name__}, found a {kind.__name__}")
        return kind

    def to_bytes(self) -> bytes:
        """Identifier byte followed by the raw payload."""
        return bytes([self.identifier]) + self._raw

    def to_hex_string(self) -> str:
        """Lower-case hex of the raw payload."""
        return hex_encode(self._raw)

    def to_json(self) -> str:
        return self._key

    @classmethod
    def from_json(cls, data: Any) -> GlobalStateKey:
        """Key from a JSON string or an object holding it under ``"key"``."""
        if isinstance(data, dict):
            if "key" not in data:
                raise ValueError("Global state key object has no 'key' member")
            data = data["key"]
        if not isinstance(data, str):
            raise ValueError(f"Invalid global state key JSON: {data!r}")
        return cls.from_string(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlobalStateKey):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GlobalStateKey):
            return NotImplemented
        return self.to_bytes() < other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r})"


class AccountHashKey(GlobalStateKey):
    """An account in global state: ``account-hash-`` and 32 bytes."""

    prefix = "account-hash-"
    identifier = KeyIdentifier.Account


class HashKey(GlobalStateKey):
    """An immutably stored contract: ``hash-`` and 32 bytes."""

    prefix = "hash-"
    identifier = KeyIdentifier.Hash


class TransferKey(GlobalStateKey):
    """A transfer: ``transfer-`` and 32 bytes."""

    prefix = "transfer-"
    identifier = KeyIdentifier.Transfer


class DeployInfoKey(GlobalStateKey):
    """Information about a deploy: ``deploy-`` and 32 bytes."""

    prefix = "deploy-"
    identifier = KeyIdentifier.DeployInfo


class EraInfoKey(GlobalStateKey):
    """Auction metadata of an era: ``era-`` and a u64, e.g. ``era-3407``."""

    prefix = "era-"
    identifier = KeyIdentifier.EraInfo

    def _raw_from_key(self, key: str) -> bytes:
        body = key[len(self.prefix):]
        if not body.isdigit() or not body.isascii():
            raise ValueError(f"Invalid era number in {key!r}")
        era = int(body)
        if era > 0xFFFFFFFFFFFFFFFF:
            raise ValueError(f"Era number {era} does not fit in u64")
        return era.to_bytes(8, "little")

    @classmethod
    def _key_from_raw(cls, raw: bytes) -> str:
        if len(raw) != 8:
            raise ValueError(f"EraInfoKey needs 8 bytes, got {len(raw)}")
        return f"{cls.prefix}{int.from_bytes(raw, 'little')}"

    @property
    def era_id(self) -> int:
        return int.from_bytes(self._raw, "little")


class BalanceKey(GlobalStateKey):
    """The balance of a purse: ``balance-`` and 32 bytes."""

    prefix = "balance-"
    identifier = KeyIdentifier.Balance


class BidKey(GlobalStateKey):
    """An auction bid: ``bid-`` and 32 bytes."""

    prefix = "bid-"
    identifier = KeyIdentifier.Bid


class WithdrawKey(GlobalStateKey):
    """An auction withdrawal: ``withdraw-`` and 32 bytes."""

    prefix = "withdraw-"
    identifier = KeyIdentifier.Withdraw


class DictionaryKey(GlobalStateKey):
    """A dictionary item: ``dictionary-`` and 32 bytes."""

    prefix = "dictionary-"
    identifier = KeyIdentifier.Dictionary


class _URefKey(GlobalStateKey):
    """An unforgeable reference: ``uref-<32 bytes hex>-<access rights, 3 octal digits>``."""

    prefix = "uref-"
    identifier = KeyIdentifier.URef

    def _raw_from_key(self, key: str) -> bytes:
        body = key[len(self.prefix):]
        address, sep, rights = body.rpartition("-")
        if not sep or len(rights) != 3 or any(ch not in "01234567" for ch in rights):
            raise ValueError(f"Invalid URef access rights in {key!r}")
        access = int(rights, 8)
        if access > _MAX_ACCESS_RIGHTS:
            raise ValueError(f"Invalid URef access rights in {key!r}")
        data = hex_decode(address)
        if len(data) != _HASH_LENGTH:
            raise ValueError(f"URef needs {_HASH_LENGTH} address bytes, got {len(data)}")
        return data + bytes([access])

    @classmethod
    def _key_from_raw(cls, raw: bytes) -> str:
        if len(raw) != _HASH_LENGTH + 1:
            raise ValueError(f"URef needs {_HASH_LENGTH + 1} bytes, got {len(raw)}")
        access = raw[-1]
        if access > _MAX_ACCESS_RIGHTS:
            raise ValueError(f"Invalid URef access rights: {access}")
        return f"{cls.prefix}{hex_encode(raw[:-1])}-{access:03o}"


_KINDS_BY_PREFIX: tuple[type[GlobalStateKey], ...] = (
    AccountHashKey,
    HashKey,
    _URefKey,
    TransferKey,
    DeployInfoKey,
    EraInfoKey,
    BalanceKey,
    BidKey,
    WithdrawKey,
    DictionaryKey,
)

_KINDS_BY_ID = {kind.identifier: kind for kind in _KINDS_BY_PREFIX}