"""High-level client for a node's JSON-RPC interface."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from casperkit.connector import Connector, HttpConnector, JsonRpcClient
from casperkit.keys import GlobalStateKey
from casperkit.results import (
    GetAuctionInfoResult,
    GetBalanceResult,
    GetBlockResult,
    GetBlockTransfersResult,
    GetDictionaryItemResult,
    GetItemResult,
    InfoGetPeersResult,
    QueryGlobalStateResult,
)

BlockId = Union[str, int]
KeyLike = Union[str, GlobalStateKey]

_U64_LIMIT = 1 << 64


def split_path(path: str) -> list[str]:
    """Split a ``/``-separated path into its parts.

    An empty path gives no parts and a single trailing separator adds no
    empty part; empty parts between separators are kept.
    """
    parts = path.split("/")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _block_identifier(block: BlockId) -> dict:
    """``{"block_identifier": ...}`` for a block hash (str) or height (int)."""
    if isinstance(block, str):
        return {"block_identifier": {"Hash": block}}
    if isinstance(block, bool) or not isinstance(block, int):
        raise TypeError("block must be a block hash string or a block height int")
    if not 0 <= block < _U64_LIMIT:
        raise ValueError(f"Block height {block} does not fit in u64")
    return {"block_identifier": {"Height": block}}


def _key_text(key: KeyLike) -> str:
    if isinstance(key, GlobalStateKey):
        return key.to_json()
    if isinstance(key, str):
        return key
    raise TypeError("key must be a string or a GlobalStateKey")


class Client:
    """Calls the node's RPC methods and returns typed results where they exist.

    Results without a typed counterpart are returned as their JSON objects.
    """

    def __init__(self, address: str, connector: Optional[Connector] = None) -> None:
        self.address = address
        self._rpc = JsonRpcClient(connector if connector is not None else HttpConnector(address))

    def _call(self, method: str, params: Union[dict, list]) -> Any:
        return self._rpc.call(method, params)

    def get_node_peers(self) -> InfoGetPeersResult:
        """The node IDs and addresses of the node's peers."""
        return InfoGetPeersResult.from_json(self._call("info_get_peers", []))

    def get_state_root_hash(self, block: BlockId) -> dict:
        """The state root hash at a block given by hash or height."""
        return self._call("chain_get_state_root_hash", _block_identifier(block))

    def get_deploy_info(self, deploy_hash: str) -> dict:
        """The deploy with the given hash and its execution results."""
        return self._call("info_get_deploy", {"deploy_hash": deploy_hash})

    def get_status_info(self) -> dict:
        """The node's status."""
        return self._call("info_get_status", {})

    def get_block_transfers(self, block: BlockId) -> GetBlockTransfersResult:
        """The transfers of a block given by hash or height."""
        return GetBlockTransfersResult.from_json(
            self._call("chain_get_block_transfers", _block_identifier(block))
        )

    def get_block(self, block: BlockId) -> GetBlockResult:
        """A block given by hash or height."""
        return GetBlockResult.from_json(self._call("chain_get_block", _block_identifier(block)))

    def get_era_info_by_switch_block(self, block: BlockId) -> dict:
        """Era information at a switch block given by hash or height."""
        return self._call("chain_get_era_info_by_switch_block", _block_identifier(block))

    def get_item(self, state_root_hash: str, key: KeyLike, path: Sequence[str] = ()) -> GetItemResult:
        """The stored value under ``key`` and ``path`` at the given state root hash."""
        params = {"state_root_hash": state_root_hash, "key": _key_text(key), "path": list(path)}
        return GetItemResult.from_json(self._call("state_get_item", params))

    def get_dictionary_item(self, state_root_hash: str, dictionary_item: str) -> Any:
        """A dictionary item by its dictionary key, as returned by the node."""
        params = {
            "state_root_hash": state_root_hash,
            "dictionary_identifier": {"Dictionary": dictionary_item},
        }
        return self._call("state_get_dictionary_item", params)

    def get_dictionary_item_by_account(
        self, state_root_hash: str, account_key: str, dictionary_name: str, dictionary_item_key: str
    ) -> GetDictionaryItemResult:
        """A dictionary item named under an account."""
        identifier = {
            "AccountNamedKey": {
                "key": account_key,
                "dictionary_name": dictionary_name,
                "dictionary_item_key": dictionary_item_key,
            }
        }
        return self._dictionary_item(state_root_hash, identifier)

    def get_dictionary_item_by_contract(
        self, state_root_hash: str, contract_key: str, dictionary_name: str, dictionary_item_key: str
    ) -> GetDictionaryItemResult:
        """A dictionary item named under a contract."""
        identifier = {
            "ContractNamedKey": {
                "key": contract_key,
                "dictionary_name": dictionary_name,
                "dictionary_item_key": dictionary_item_key,
            }
        }
        return self._dictionary_item(state_root_hash, identifier)

    def get_dictionary_item_by_uref(
        self, state_root_hash: str, seed_uref: str, dictionary_item_key: str
    ) -> GetDictionaryItemResult:
        """A dictionary item under a seed URef."""
        identifier = {"URef": {"seed_uref": seed_uref, "dictionary_item_key": dictionary_item_key}}
        return self._dictionary_item(state_root_hash, identifier)

    def _dictionary_item(self, state_root_hash: str, identifier: dict) -> GetDictionaryItemResult:
        params = {"state_root_hash": state_root_hash, "dictionary_identifier": identifier}
        return GetDictionaryItemResult.from_json(self._call("state_get_dictionary_item", params))

    def get_account_balance(self, purse_uref: str, state_root_hash: str) -> GetBalanceResult:
        """The balance of a purse at the given state root hash."""
        params = {"state_root_hash": state_root_hash, "purse_uref": purse_uref}
        return GetBalanceResult.from_json(self._call("state_get_balance", params))

    def get_auction_info(self, block: BlockId) -> GetAuctionInfoResult:
        """The auction state at a block given by hash or height."""
        return GetAuctionInfoResult.from_json(
            self._call("state_get_auction_info", _block_identifier(block))
        )

    def put_deploy(self, deploy: Any) -> dict:
        """Send a deploy, given as its JSON object or as an object with ``to_json``."""
        deploy_json = deploy.to_json() if hasattr(deploy, "to_json") else deploy
        if not isinstance(deploy_json, dict):
            raise TypeError("deploy must be a JSON object or provide to_json()")
        return self._call("account_put_deploy", {"deploy": deploy_json})

    def query_global_state(
        self, key: KeyLike, state_root_hash: str, path: str = ""
    ) -> QueryGlobalStateResult:
        """Query global state under ``key`` and a ``/``-separated ``path`` at a state root hash."""
        return self._query({"StateRootHash": state_root_hash}, key, path)

    def query_global_state_with_block_hash(
        self, key: KeyLike, block_hash: str, path: str = ""
    ) -> QueryGlobalStateResult:
        """Query global state under ``key`` and a ``/``-separated ``path`` at a block hash."""
        return self._query({"BlockHash": block_hash}, key, path)

    def _query(self, state_identifier: dict, key: KeyLike, path: str) -> QueryGlobalStateResult:
        params = {
            "state_identifier": state_identifier,
            "key": _key_text(key),
            "path": split_path(path),
        }
        return QueryGlobalStateResult.from_json(self._call("query_global_state", params))