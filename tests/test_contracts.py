import pytest

from casperkit.contracts import StoredContractByName, StoredVersionedContractByHash

HASH = "96053169b397360449b4de964200be449594ca93f252153f0a679b804e214a54"
ARGS = [["amount", {"bytes": "06da6662305f01", "parsed": "1508345276122", "cl_type": "U512"}]]


def test_by_name_round_trip():
    data = {"name": "counter", "entry_point": "counter_inc", "args": ARGS}
    contract = StoredContractByName.from_json(data)
    assert contract.name == "counter"
    assert contract.to_json() == data


def test_by_name_key_order_and_default_args():
    contract = StoredContractByName("counter", "counter_inc")
    out = contract.to_json()
    assert list(out) == ["name", "entry_point", "args"]
    assert out["args"] == []


def test_by_name_missing_args():
    with pytest.raises(KeyError):
        StoredContractByName.from_json({"name": "counter", "entry_point": "counter_inc"})


def test_by_name_rejects_non_list_args():
    with pytest.raises(TypeError):
        StoredContractByName("counter", "counter_inc", args="amount")


def test_by_name_args_are_copied():
    args = [["amount", {"cl_type": "U8"}]]
    contract = StoredContractByName("counter", "counter_inc", args)
    args[0][0] = "other"
    assert contract.to_json()["args"][0][0] == "amount"


def test_versioned_without_version_omits_it():
    data = {"hash": HASH, "entry_point": "counter_inc", "args": ARGS}
    contract = StoredVersionedContractByHash.from_json(data)
    assert contract.version is None
    out = contract.to_json()
    assert "version" not in out
    assert out == data


def test_versioned_with_version_round_trip():
    data = {"hash": HASH, "entry_point": "counter_inc", "args": [], "version": 2}
    contract = StoredVersionedContractByHash.from_json(data)
    assert contract.version == 2
    assert contract.to_json() == data


def test_versioned_rejects_version_beyond_u32():
    with pytest.raises(ValueError):
        StoredVersionedContractByHash(HASH, "counter_inc", version=1 << 32)


def test_versioned_rejects_null_version():
    with pytest.raises(TypeError):
        StoredVersionedContractByHash.from_json(
            {"hash": HASH, "entry_point": "counter_inc", "args": [], "version": None}
        )


def test_versioned_missing_hash():
    with pytest.raises(KeyError):
        StoredVersionedContractByHash.from_json({"entry_point": "counter_inc", "args": []})