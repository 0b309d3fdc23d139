"""Typed results of the node's JSON-RPC calls, with their JSON forms.

Block, block header, auction state and stored value bodies are kept in their
JSON form.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from casperkit.records import Peer
from casperkit.transfers import Transfer


def _u512(value: Any, name: str) -> int:
    """A U512 value, given as an int or as a decimal string."""
    if isinstance(value, str):
        try:
            value = int(value, 10)
        except ValueError:
            raise ValueError(f"{name} is not a decimal number: {value!r}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value < (1 << 512):
        raise ValueError(f"{name} {value} does not fit in u512")
    return value


def _text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def _object(value: Any, name: str) -> dict:
    if not isinstance(value, dict):
        raise TypeError(f"{name} must be an object")
    return copy.deepcopy(value)


def _list(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise TypeError(f"{name} must be a list")
    return value


def _present(data: dict, name: str) -> bool:
    return name in data and data[name] is not None


@dataclass
class GetAuctionInfoResult:
    """Result of ``state_get_auction_info``."""

    auction_state: dict = field(default_factory=dict)

    def to_json(self) -> dict:
        return {"auction_state": copy.deepcopy(self.auction_state)}

    @classmethod
    def from_json(cls, data: dict) -> GetAuctionInfoResult:
        return cls(auction_state=_object(data["auction_state"], "auction_state"))


@dataclass
class GetBalanceResult:
    """Result of ``state_get_balance``."""

    balance_value: int = 0
    merkle_proof: str = ""

    def __post_init__(self) -> None:
        self.balance_value = _u512(self.balance_value, "balance_value")
        _text(self.merkle_proof, "merkle_proof")

    def to_json(self) -> dict:
        return {"balance_value": str(self.balance_value), "merkle_proof": self.merkle_proof}

    @classmethod
    def from_json(cls, data: dict) -> GetBalanceResult:
        return cls(balance_value=data["balance_value"], merkle_proof=data["merkle_proof"])


@dataclass
class GetBlockResult:
    """Result of ``chain_get_block``; the block is absent when not found."""

    block: Optional[dict] = None

    def to_json(self) -> dict:
        result: dict = {}
        if self.block is not None:
            result["block"] = copy.deepcopy(self.block)
        return result

    @classmethod
    def from_json(cls, data: dict) -> GetBlockResult:
        block = _object(data["block"], "block") if _present(data, "block") else None
        return cls(block=block)


@dataclass
class GetBlockTransfersResult:
    """Result of ``chain_get_block_transfers``."""

    block_hash: Optional[str] = None
    transfers: Optional[list[Transfer]] = None

    def to_json(self) -> dict:
        result: dict = {}
        if self.block_hash is not None:
            result["block_hash"] = self.block_hash
        if self.transfers is not None:
            result["transfers"] = [transfer.to_json() for transfer in self.transfers]
        return result

    @classmethod
    def from_json(cls, data: dict) -> GetBlockTransfersResult:
        block_hash = _text(data["block_hash"], "block_hash") if _present(data, "block_hash") else None
        transfers = None
        if _present(data, "transfers"):
            transfers = [Transfer.from_json(item) for item in _list(data["transfers"], "transfers")]
        return cls(block_hash=block_hash, transfers=transfers)


@dataclass
class GetDictionaryItemResult:
    """Result of ``state_get_dictionary_item``."""

    dictionary_key: str = ""
    stored_value: Any = None
    merkle_proof: str = ""

    def to_json(self) -> dict:
        return {
            "dictionary_key": self.dictionary_key,
            "stored_value": copy.deepcopy(self.stored_value),
            "merkle_proof": self.merkle_proof,
        }

    @classmethod
    def from_json(cls, data: dict) -> GetDictionaryItemResult:
        return cls(
            dictionary_key=_text(data["dictionary_key"], "dictionary_key"),
            stored_value=copy.deepcopy(data["stored_value"]),
            merkle_proof=_text(data["merkle_proof"], "merkle_proof"),
        )


@dataclass
class GetItemResult:
    """Result of ``state_get_item``."""

    stored_value: Any = None
    merkle_proof: str = ""

    def to_json(self) -> dict:
        return {
            "stored_value": copy.deepcopy(self.stored_value),
            "merkle_proof": self.merkle_proof,
        }

    @classmethod
    def from_json(cls, data: dict) -> GetItemResult:
        return cls(
            stored_value=copy.deepcopy(data["stored_value"]),
            merkle_proof=_text(data["merkle_proof"], "merkle_proof"),
        )


@dataclass
class InfoGetPeersResult:
    """Result of ``info_get_peers``: the connected peers."""

    peers: list[Peer] = field(default_factory=list)

    def to_json(self) -> dict:
        return {"peers": [peer.to_json() for peer in self.peers]}

    @classmethod
    def from_json(cls, data: dict) -> InfoGetPeersResult:
        return cls(peers=[Peer.from_json(item) for item in _list(data["peers"], "peers")])


@dataclass
class QueryGlobalStateResult:
    """Result of ``query_global_state``; the block header is given for block-hash queries."""

    stored_value: Any = None
    merkle_proof: str = ""
    block_header: Optional[dict] = None

    def to_json(self) -> dict:
        result: dict = {}
        if self.block_header is not None:
            result["block_header"] = copy.deepcopy(self.block_header)
        result["stored_value"] = copy.deepcopy(self.stored_value)
        result["merkle_proof"] = self.merkle_proof
        return result

    @classmethod
    def from_json(cls, data: dict) -> QueryGlobalStateResult:
        header = None
        if _present(data, "block_header"):
            header = _object(data["block_header"], "block_header")
        return cls(
            stored_value=copy.deepcopy(data["stored_value"]),
            merkle_proof=_text(data["merkle_proof"], "merkle_proof"),
            block_header=header,
        )