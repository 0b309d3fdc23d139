# casperkit

A pure-Python library for working with Casper network nodes over JSON-RPC.
It has no dependencies outside the standard library.

## What is in it

- `casperkit.cltype` – `CLTypeEnum` and the immutable `CLType`, which
  describes primitive and nested types (`Option`, `List`, `ByteArray`,
  `Result`, `Map`, `Tuple1`–`Tuple3`). Build them with `CLType.primitive`,
  `CLType.option`, `CLType.list_of`, `CLType.byte_array`, `CLType.result`,
  `CLType.map` and `CLType.tuple`, and convert with `to_json()` /
  `CLType.from_json()`. Invalid types raise `ValueError`.
- `casperkit.codec` – `hex_encode` / `hex_decode`; little-endian hex
  encoders and decoders for `bool`, `i32`, `i64`, `u8`, `u32`, `u64` and
  length-prefixed UTF-8 strings (`bool_encode`, `u64_decode`,
  `string_encode`, …); `str_to_timestamp` (RFC 3339 text to milliseconds
  since the epoch) and `time_to_rfc3339` (seconds to RFC 3339 UTC text);
  small text helpers (`to_lower`, `starts_with`, `split_string`,
  `string_to_hex`, `hex_to_string`, `hex_str_to_uint32`); `file_exists`;
  and `ByteWriter`, which accumulates serialized values
  (`write_int`, `write_uint`, `write_ulong`, `write_byte`, `write_bytes`,
  `write_string`, `getvalue`).
- `casperkit.keys` – `KeyIdentifier` and `GlobalStateKey` with its kinds
  `AccountHashKey`, `HashKey`, `TransferKey`, `DeployInfoKey`,
  `EraInfoKey`, `BalanceKey`, `BidKey`, `WithdrawKey` and `DictionaryKey`.
  `GlobalStateKey.from_string` picks the kind from the prefix (including
  `uref-<hex>-<access rights>` keys), `GlobalStateKey.from_bytes` from the
  leading identifier byte; `to_bytes()` gives the identifier byte followed
  by the payload.
- `casperkit.records` – `ActionThresholds`, `AssociatedKey`, `Account`,
  `DeployInfo`, `Reward`, `EraReport`, `EraEnd`, `EraValidators`, `Peer`
  and `SeigniorageAllocation`.
- `casperkit.transfers` – `Transfer`, `TransformEntry`, `UnbondingPurse`,
  `ValidatorChange`, `ValidatorStatusChange`, `ValidatorChanges`,
  `ExecutionEffect` and `DeployApproval`.
- `casperkit.contracts` – `StoredContractByName` and
  `StoredVersionedContractByHash`.
- `casperkit.results` – typed results: `GetAuctionInfoResult`,
  `GetBalanceResult`, `GetBlockResult`, `GetBlockTransfersResult`,
  `GetDictionaryItemResult`, `GetItemResult`, `InfoGetPeersResult`,
  `QueryGlobalStateResult`.
- `casperkit.connector` – `HttpConnector`, which POSTs requests to
  `<host>/rpc`, `JsonRpcClient`, which builds JSON-RPC 2.0 requests and
  unpacks responses, and `JsonRpcError`, raised for transport failures,
  non-200 responses, malformed responses and errors returned by the server.
- `casperkit.client` – `Client`, a high-level wrapper over the node's RPC
  methods, and `split_path`.

Record, result and contract classes are dataclasses with `to_json()` and
`from_json()`. U512 amounts are Python ints and are written to JSON as
decimal strings. Two record fields named `from` in JSON are called `from_`
in Python (`DeployInfo.from_`, `Transfer.from_`).

## Usage

```python
from casperkit.cltype import CLType, CLTypeEnum
from casperkit.codec import u64_encode
from casperkit.keys import GlobalStateKey
from casperkit.client import Client

map_type = CLType.map(
    CLType.primitive(CLTypeEnum.String),
    CLType.list_of(CLType.primitive(CLTypeEnum.PublicKey)),
)
print(map_type.to_json())
# {'Map': {'key': 'String', 'value': {'List': 'PublicKey'}}}
assert CLType.from_json(map_type.to_json()) == map_type

print(u64_encode(2685))  # '7d0a000000000000'

key = GlobalStateKey.from_string(
    "hash-96053169b397360449b4de964200be449594ca93f252153f0a679b804e214a54"
)
print(key.to_bytes().hex())
# '0196053169b397360449b4de964200be449594ca93f252153f0a679b804e214a54'

client = Client("http://localhost:7777")
peers = client.get_node_peers()          # InfoGetPeersResult
root = client.get_state_root_hash(12345) # dict
block = client.get_block("<block hash>") # GetBlockResult
```

Block arguments to `Client` methods are either a block hash (`str`) or a
block height (`int`). Keys may be given as strings or as `GlobalStateKey`
objects. `query_global_state` and `query_global_state_with_block_hash` take
a `/`-separated path. A `Client` can be given any object with a
`send(request: str) -> str` method as its connector instead of the default
`HttpConnector`.

## What it does not do

- It does not build or sign deploys and does not load or use key pairs;
  `Client.put_deploy` sends a deploy that is already a JSON object (or has a
  `to_json()` method).
- It does not serialize CL values to bytes beyond the primitive encoders in
  `casperkit.codec`.
- Blocks, block headers, auction state, stored values, named keys, validator
  weights, transforms, operations and runtime arguments are kept as their
  JSON objects rather than typed classes.
- `Client.get_state_root_hash`, `get_deploy_info`, `get_status_info`,
  `get_era_info_by_switch_block`, `get_dictionary_item` and `put_deploy`
  return the node's result as plain JSON.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```