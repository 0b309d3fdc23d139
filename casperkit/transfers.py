"""Transfers, transforms, unbonding purses, validator changes and deploy approvals."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union

from casperkit.keys import AccountHashKey

IDENTITY = "Identity"


def _uint(value: Any, bits: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} {value} does not fit in u{bits}")
    return value


def _u512(value: Any, name: str) -> int:
    """A U512 amount, given as an int or as a decimal string."""
    if isinstance(value, str):
        try:
            value = int(value, 10)
        except ValueError:
            raise ValueError(f"{name} is not a decimal number: {value!r}") from None
    return _uint(value, 512, name)


def _text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def _account(value: Union[AccountHashKey, str], name: str) -> AccountHashKey:
    if isinstance(value, AccountHashKey):
        return value
    if isinstance(value, str):
        return AccountHashKey(value)
    raise TypeError(f"{name} must be an account hash key")


def _present(data: dict, name: str) -> bool:
    return name in data and data[name] is not None


@dataclass
class Transfer:
    """A transfer of funds from one purse to another.

    Purses are URef strings; amount and gas are U512 values.
    """

    deploy_hash: str
    from_: AccountHashKey
    source: str = ""
    target: str = ""
    amount: int = 0
    gas: int = 0
    to: Optional[AccountHashKey] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        _text(self.deploy_hash, "deploy_hash")
        self.from_ = _account(self.from_, "from")
        if self.to is not None:
            self.to = _account(self.to, "to")
        _text(self.source, "source")
        _text(self.target, "target")
        self.amount = _u512(self.amount, "amount")
        self.gas = _u512(self.gas, "gas")
        if self.id is not None:
            _uint(self.id, 64, "id")

    def to_json(self) -> dict:
        result: dict = {
            "deploy_hash": self.deploy_hash,
            "from": self.from_.to_json(),
            "source": self.source,
            "target": self.target,
            "amount": str(self.amount),
            "gas": str(self.gas),
        }
        if self.id is not None:
            result["id"] = self.id
        if self.to is not None:
            result["to"] = self.to.to_json()
        return result

    @classmethod
    def from_json(cls, data: dict) -> Transfer:
        to = None
        if _present(data, "to"):
            to = AccountHashKey(_text(data["to"], "to"))
        return cls(
            deploy_hash=_text(data["deploy_hash"], "deploy_hash"),
            from_=AccountHashKey.from_json(data["from"]),
            source=_text(data["source"], "source"),
            target=_text(data["target"], "target"),
            amount=data["amount"],
            gas=data["gas"],
            to=to,
            id=data["id"] if _present(data, "id") else None,
        )


@dataclass
class TransformEntry:
    """A global state key and the transform applied to it.

    The transform is kept in its JSON form; ``"Identity"`` is the identity transform.
    """

    key: str = ""
    transform: Any = IDENTITY

    def __post_init__(self) -> None:
        _text(self.key, "key")

    @property
    def is_identity(self) -> bool:
        return self.transform == IDENTITY

    def to_json(self) -> dict:
        return {"key": self.key, "transform": copy.deepcopy(self.transform)}

    @classmethod
    def from_json(cls, data: dict) -> TransformEntry:
        transform = data["transform"]
        if isinstance(transform, str) and transform == IDENTITY:
            return cls(key=_text(data["key"], "key"), transform=IDENTITY)
        return cls(key=_text(data["key"], "key"), transform=copy.deepcopy(transform))


@dataclass
class UnbondingPurse:
    """An unbonding or delegation withdrawal."""

    bonding_purse: str = ""
    validator_public_key: str = ""
    unbonder_public_key: str = ""
    era_of_creation: int = 0
    amount: int = 0

    def __post_init__(self) -> None:
        _text(self.bonding_purse, "bonding_purse")
        _text(self.validator_public_key, "validator_public_key")
        _text(self.unbonder_public_key, "unbonder_public_key")
        _uint(self.era_of_creation, 64, "era_of_creation")
        self.amount = _u512(self.amount, "amount")

    def to_json(self) -> dict:
        return {
            "bonding_purse": self.bonding_purse,
            "validator_public_key": self.validator_public_key,
            "unbonder_public_key": self.unbonder_public_key,
            "era_of_creation": self.era_of_creation,
            "amount": str(self.amount),
        }

    @classmethod
    def from_json(cls, data: dict) -> UnbondingPurse:
        return cls(
            bonding_purse=data["bonding_purse"],
            validator_public_key=data["validator_public_key"],
            unbonder_public_key=data["unbonder_public_key"],
            era_of_creation=data["era_of_creation"],
            amount=data["amount"],
        )


class ValidatorChange(IntEnum):
    """A change to a validator's status between two eras."""

    Added = 0
    Removed = 1
    Banned = 2
    CannotPropose = 3
    SeenAsFaulty = 4


@dataclass
class ValidatorStatusChange:
    """One change to a validator's status in a given era."""

    era_id: int
    validator_change: ValidatorChange

    def __post_init__(self) -> None:
        _uint(self.era_id, 64, "era_id")
        self.validator_change = ValidatorChange(self.validator_change)


@dataclass
class ValidatorChanges:
    """The status changes of one validator."""

    public_key: str
    status_changes: list[ValidatorStatusChange] = field(default_factory=list)

    def __post_init__(self) -> None:
        _text(self.public_key, "public_key")


@dataclass
class ExecutionEffect:
    """Operations and the journal of transforms from a single deploy.

    Operations are kept in their JSON form.
    """

    operations: list[Any] = field(default_factory=list)
    transforms: list[TransformEntry] = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "operations": copy.deepcopy(self.operations),
            "transforms": [entry.to_json() for entry in self.transforms],
        }

    @classmethod
    def from_json(cls, data: dict) -> ExecutionEffect:
        operations = data["operations"]
        transforms = data["transforms"]
        if not isinstance(operations, list):
            raise TypeError("operations must be a list")
        if not isinstance(transforms, list):
            raise TypeError("transforms must be a list")
        return cls(
            operations=copy.deepcopy(operations),
            transforms=[TransformEntry.from_json(item) for item in transforms],
        )


@dataclass
class DeployApproval:
    """A signer's public key and the signature it made over a deploy, both as hex."""

    signer: str = ""
    signature: str = ""

    def __post_init__(self) -> None:
        _text(self.signer, "signer")
        _text(self.signature, "signature")

    def to_json(self) -> dict:
        return {"signer": self.signer, "signature": self.signature}

    @classmethod
    def from_json(cls, data: dict) -> DeployApproval:
        return cls(signer=data["signer"], signature=data["signature"])