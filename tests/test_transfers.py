import pytest

from casperkit.keys import AccountHashKey
from casperkit.transfers import (
    DeployApproval,
    ExecutionEffect,
    Transfer,
    TransformEntry,
    UnbondingPurse,
    ValidatorChange,
    ValidatorChanges,
    ValidatorStatusChange,
)

ACCOUNT = "account-hash-1b2d1d9069d21f916ab58be305c816b8f5258177d9cf29eee33728c4e934f094"
UREF = "uref-e48935c79e96c490c01e1e8800de5ec5f4a857a57db0dcffed1e1e2b5d29b5e4-007"
DEPLOY_HASH = "96053169b397360449b4de964200be449594ca93f252153f0a679b804e214a54"
PUBLIC_KEY = "01cd807fb41345d8dd5a61da7991e1468173acbee53920e4dfe0d28cb8825ac664"


def _transfer_json(**extra):
    data = {
        "deploy_hash": DEPLOY_HASH,
        "from": ACCOUNT,
        "source": UREF,
        "target": UREF,
        "amount": "1508345276122",
        "gas": "0",
    }
    data.update(extra)
    return data


def test_transfer_round_trip_with_optionals():
    data = _transfer_json(id=7, to=ACCOUNT)
    transfer = Transfer.from_json(data)
    assert transfer.to_json() == data
    assert transfer.from_ == AccountHashKey(ACCOUNT)
    assert transfer.to == AccountHashKey(ACCOUNT)
    assert transfer.amount == 1508345276122


def test_transfer_omits_missing_optionals():
    transfer = Transfer.from_json(_transfer_json())
    out = transfer.to_json()
    assert "id" not in out
    assert "to" not in out
    assert list(out) == ["deploy_hash", "from", "source", "target", "amount", "gas"]


def test_transfer_null_optionals_become_none():
    transfer = Transfer.from_json(_transfer_json(id=None, to=None))
    assert transfer.id is None
    assert transfer.to is None


def test_transfer_accepts_key_string_in_constructor():
    transfer = Transfer(deploy_hash=DEPLOY_HASH, from_=ACCOUNT, amount="5")
    assert transfer.from_ == AccountHashKey(ACCOUNT)
    assert transfer.amount == 5


def test_transfer_rejects_wrong_key_kind():
    with pytest.raises(ValueError):
        Transfer.from_json(_transfer_json(**{"from": "hash-" + DEPLOY_HASH}))


def test_transfer_rejects_negative_amount():
    with pytest.raises(ValueError):
        Transfer(deploy_hash=DEPLOY_HASH, from_=ACCOUNT, amount=-1)


def test_transfer_rejects_id_beyond_u64():
    with pytest.raises(ValueError):
        Transfer(deploy_hash=DEPLOY_HASH, from_=ACCOUNT, id=1 << 64)


def test_transfer_missing_field_raises():
    data = _transfer_json()
    del data["gas"]
    with pytest.raises(KeyError):
        Transfer.from_json(data)


def test_transform_entry_identity():
    entry = TransformEntry.from_json({"key": ACCOUNT, "transform": "Identity"})
    assert entry.is_identity
    assert entry.to_json() == {"key": ACCOUNT, "transform": "Identity"}


def test_transform_entry_object_round_trip():
    data = {"key": ACCOUNT, "transform": {"WriteCLValue": {"cl_type": "U512", "bytes": "00", "parsed": "0"}}}
    entry = TransformEntry.from_json(data)
    assert not entry.is_identity
    assert entry.to_json() == data


def test_transform_entry_copies_transform():
    data = {"key": ACCOUNT, "transform": {"AddUInt512": "5"}}
    entry = TransformEntry.from_json(data)
    data["transform"]["AddUInt512"] = "9"
    assert entry.to_json()["transform"] == {"AddUInt512": "5"}


def test_unbonding_purse_round_trip():
    data = {
        "bonding_purse": UREF,
        "validator_public_key": PUBLIC_KEY,
        "unbonder_public_key": PUBLIC_KEY,
        "era_of_creation": 2685,
        "amount": "1508345276122",
    }
    purse = UnbondingPurse.from_json(data)
    assert purse.to_json() == data
    assert purse.amount == 1508345276122


def test_unbonding_purse_rejects_negative_era():
    with pytest.raises(ValueError):
        UnbondingPurse(era_of_creation=-1)


def test_validator_change_names_in_order():
    names = [
        ValidatorStatusChange(era_id=0, validator_change=code).validator_change.name
        for code in range(5)
    ]
    assert names == [
        "Added",
        "Removed",
        "Banned",
        "CannotPropose",
        "SeenAsFaulty",
    ]
    assert ValidatorChange(0) is ValidatorChange.Added


def test_validator_status_change_coerces_enum():
    change = ValidatorStatusChange(era_id=3, validator_change=2)
    assert change.validator_change is ValidatorChange.Banned


def test_validator_status_change_rejects_bad_values():
    with pytest.raises(ValueError):
        ValidatorStatusChange(era_id=-1, validator_change=ValidatorChange.Added)
    with pytest.raises(ValueError):
        ValidatorStatusChange(era_id=1, validator_change=99)


def test_validator_changes_holds_status_changes():
    changes = ValidatorChanges(
        public_key=PUBLIC_KEY,
        status_changes=[ValidatorStatusChange(1, ValidatorChange.Removed)],
    )
    assert changes.status_changes[0].validator_change is ValidatorChange.Removed
    assert changes.public_key == PUBLIC_KEY


def test_execution_effect_round_trip():
    data = {
        "operations": [{"key": ACCOUNT, "kind": "Write"}],
        "transforms": [
            {"key": ACCOUNT, "transform": "Identity"},
            {"key": UREF, "transform": {"AddUInt512": "100"}},
        ],
    }
    effect = ExecutionEffect.from_json(data)
    assert effect.transforms[0].is_identity
    assert effect.to_json() == data


def test_execution_effect_missing_transforms():
    with pytest.raises(KeyError):
        ExecutionEffect.from_json({"operations": []})


def test_deploy_approval_round_trip():
    data = {"signer": PUBLIC_KEY, "signature": "01" + DEPLOY_HASH + DEPLOY_HASH}
    approval = DeployApproval.from_json(data)
    assert approval.signer == PUBLIC_KEY
    assert approval.to_json() == data


def test_deploy_approval_missing_signature():
    with pytest.raises(KeyError):
        DeployApproval.from_json({"signer": PUBLIC_KEY})