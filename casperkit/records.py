"""Account, era, peer and reward records with their JSON forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

_U512_LIMIT = 1 << 512


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


def _texts(value: Any, name: str) -> list[str]:
    if not isinstance(value, list):
        raise TypeError(f"{name} must be a list")
    return [_text(item, name) for item in value]


def _objects(value: Any, name: str) -> list[dict]:
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise TypeError(f"{name} must be a list of objects")
    return [dict(item) for item in value]


@dataclass
class ActionThresholds:
    """Weights that must be met for deployment and key management actions."""

    deployment: int = 0
    key_management: int = 0

    def __post_init__(self) -> None:
        _uint(self.deployment, 8, "deployment")
        _uint(self.key_management, 8, "key_management")

    def to_json(self) -> dict:
        return {"deployment": self.deployment, "key_management": self.key_management}

    @classmethod
    def from_json(cls, data: dict) -> ActionThresholds:
        return cls(deployment=data["deployment"], key_management=data["key_management"])


@dataclass
class AssociatedKey:
    """A key allowed to sign deploys for an account, with its weight."""

    account_hash: str = ""
    weight: int = 0

    def __post_init__(self) -> None:
        _text(self.account_hash, "account_hash")
        _uint(self.weight, 8, "weight")

    def to_json(self) -> dict:
        return {"account_hash": self.account_hash, "weight": self.weight}

    @classmethod
    def from_json(cls, data: dict) -> AssociatedKey:
        return cls(account_hash=data["account_hash"], weight=data["weight"])


@dataclass
class Account:
    """A user's account as stored in global state.

    Named keys are kept as their JSON objects; the main purse is a URef string.
    """

    account_hash: str = ""
    named_keys: list[dict] = field(default_factory=list)
    main_purse: str = ""
    associated_keys: list[AssociatedKey] = field(default_factory=list)
    action_thresholds: ActionThresholds = field(default_factory=ActionThresholds)

    def to_json(self) -> dict:
        return {
            "account_hash": self.account_hash,
            "named_keys": [dict(item) for item in self.named_keys],
            "main_purse": self.main_purse,
            "associated_keys": [key.to_json() for key in self.associated_keys],
            "action_thresholds": self.action_thresholds.to_json(),
        }

    @classmethod
    def from_json(cls, data: dict) -> Account:
        return cls(
            account_hash=_text(data["account_hash"], "account_hash"),
            named_keys=_objects(data["named_keys"], "named_keys"),
            main_purse=_text(data["main_purse"], "main_purse"),
            associated_keys=[AssociatedKey.from_json(item) for item in data["associated_keys"]],
            action_thresholds=ActionThresholds.from_json(data["action_thresholds"]),
        )


@dataclass
class DeployInfo:
    """Information relating to a deploy."""

    deploy_hash: str = ""
    transfers: list[str] = field(default_factory=list)
    from_: str = ""
    source: str = ""
    gas: int = 0

    def __post_init__(self) -> None:
        self.gas = _u512(self.gas, "gas")

    def to_json(self) -> dict:
        return {
            "deploy_hash": self.deploy_hash,
            "transfers": list(self.transfers),
            "from": self.from_,
            "source": self.source,
            "gas": str(self.gas),
        }

    @classmethod
    def from_json(cls, data: dict) -> DeployInfo:
        return cls(
            deploy_hash=_text(data["deploy_hash"], "deploy_hash"),
            transfers=_texts(data["transfers"], "transfers"),
            from_=_text(data["from"], "from"),
            source=_text(data["source"], "source"),
            gas=data["gas"],
        )


@dataclass
class Reward:
    """A validator reward."""

    amount: int = 0
    validator: str = ""

    def __post_init__(self) -> None:
        _uint(self.amount, 64, "amount")

    def to_json(self) -> dict:
        return {"amount": self.amount, "validator": self.validator}

    @classmethod
    def from_json(cls, data: dict) -> Reward:
        return cls(amount=data["amount"], validator=_text(data["validator"], "validator"))


@dataclass
class EraReport:
    """Equivocators, inactive validators and rewards of an era."""

    equivocators: list[str] = field(default_factory=list)
    inactive_validators: list[str] = field(default_factory=list)
    rewards: list[Reward] = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "equivocators": list(self.equivocators),
            "inactive_validators": list(self.inactive_validators),
            "rewards": [reward.to_json() for reward in self.rewards],
        }

    @classmethod
    def from_json(cls, data: dict) -> EraReport:
        return cls(
            equivocators=_texts(data["equivocators"], "equivocators"),
            inactive_validators=_texts(data["inactive_validators"], "inactive_validators"),
            rewards=[Reward.from_json(item) for item in data["rewards"]],
        )


@dataclass
class EraEnd:
    """Era report and validator weights for the next era."""

    era_report: EraReport = field(default_factory=EraReport)
    next_era_validator_weights: list[dict] = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "era_report": self.era_report.to_json(),
            "next_era_validator_weights": [dict(item) for item in self.next_era_validator_weights],
        }

    @classmethod
    def from_json(cls, data: dict) -> EraEnd:
        return cls(
            era_report=EraReport.from_json(data["era_report"]),
            next_era_validator_weights=_objects(
                data["next_era_validator_weights"], "next_era_validator_weights"
            ),
        )


@dataclass
class EraValidators:
    """Validators and their weights in an era."""

    era_id: int = 0
    validator_weights: list[dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        _uint(self.era_id, 64, "era_id")

    def to_json(self) -> dict:
        return {
            "era_id": self.era_id,
            "validator_weights": [dict(item) for item in self.validator_weights],
        }

    @classmethod
    def from_json(cls, data: dict) -> EraValidators:
        return cls(
            era_id=data["era_id"],
            validator_weights=_objects(data["validator_weights"], "validator_weights"),
        )


@dataclass
class Peer:
    """A node in the network."""

    node_id: str = ""
    address: str = ""

    def to_json(self) -> dict:
        return {"node_id": self.node_id, "address": self.address}

    @classmethod
    def from_json(cls, data: dict) -> Peer:
        return cls(
            node_id=_text(data["node_id"], "node_id"),
            address=_text(data["address"], "address"),
        )


@dataclass
class SeigniorageAllocation:
    """A reward allocated to a validator or to a delegator."""

    is_delegator: bool = False
    validator_public_key: str = ""
    amount: int = 0
    delegator_public_key: Optional[str] = None

    def __post_init__(self) -> None:
        self.amount = _u512(self.amount, "amount")
        if self.is_delegator and self.delegator_public_key is None:
            raise ValueError("delegator_public_key not found")

    def to_json(self) -> dict:
        if self.is_delegator:
            return {
                "delegator_public_key": self.delegator_public_key,
                "validator_public_key": self.validator_public_key,
                "amount": str(self.amount),
            }
        return {"validator_public_key": self.validator_public_key, "amount": str(self.amount)}

    @classmethod
    def from_json(cls, data: dict) -> SeigniorageAllocation:
        """Allocation from ``{"Delegator": {...}}`` or ``{"Validator": {...}}``."""
        delegator: Optional[str] = None
        if "Delegator" in data:
            is_delegator = True
            body = data["Delegator"]
            if "delegator_public_key" not in body:
                raise ValueError("delegator_public_key not found")
            delegator = _text(body["delegator_public_key"], "delegator_public_key")
        elif "Validator" in data:
            is_delegator = False
            body = data["Validator"]
        else:
            raise ValueError("Seigniorage allocation is neither Delegator nor Validator")

        if "validator_public_key" not in body:
            raise ValueError("validator_public_key not found")
        if "amount" not in body:
            raise ValueError("amount not found")
        return cls(
            is_delegator=is_delegator,
            validator_public_key=_text(body["validator_public_key"], "validator_public_key"),
            amount=body["amount"],
            delegator_public_key=delegator,
        )