import pytest

from casperkit.records import (
    Account,
    ActionThresholds,
    AssociatedKey,
    DeployInfo,
    EraEnd,
    EraReport,
    EraValidators,
    Peer,
    Reward,
    SeigniorageAllocation,
)

PUBLIC_KEY = "01cd807fb41345d8dd5a61da7991e1468173acbee53920e4dfe0d28cb8825ac664"
ACCOUNT_HASH = "account-hash-998c5fd4e7b568bedd78e05555c83c61893dc5d8546ce0bec8b30e1c570f21aa"
UREF = "uref-e48935c79e96c490c01e1e8800de5ec5f4a857a57db0dcffed1e1e2b5d29b5e4-007"
DEPLOY_HASH = "96053169b397360449b4de964200be449594ca93f252153f0a679b804e214a54"


def account_json():
    return {
        "account_hash": ACCOUNT_HASH,
        "named_keys": [{"name": "counter", "key": "hash-" + DEPLOY_HASH}],
        "main_purse": UREF,
        "associated_keys": [{"account_hash": ACCOUNT_HASH, "weight": 1}],
        "action_thresholds": {"deployment": 1, "key_management": 2},
    }


def test_action_thresholds_round_trip():
    data = {"deployment": 3, "key_management": 255}
    parsed = ActionThresholds.from_json(data)
    assert parsed.deployment == 3
    assert parsed.key_management == 255
    assert parsed.to_json() == data


def test_action_thresholds_reject_out_of_range():
    with pytest.raises(ValueError):
        ActionThresholds(deployment=256)


def test_associated_key_round_trip():
    data = {"account_hash": ACCOUNT_HASH, "weight": 7}
    assert AssociatedKey.from_json(data).to_json() == data


def test_account_round_trip():
    data = account_json()
    account = Account.from_json(data)
    assert account.main_purse == UREF
    assert account.associated_keys[0] == AssociatedKey(ACCOUNT_HASH, 1)
    assert account.action_thresholds == ActionThresholds(1, 2)
    assert account.to_json() == data


def test_account_missing_field():
    data = account_json()
    del data["main_purse"]
    with pytest.raises(KeyError):
        Account.from_json(data)


def test_deploy_info_round_trip_with_string_gas():
    data = {
        "deploy_hash": DEPLOY_HASH,
        "transfers": ["transfer-" + DEPLOY_HASH],
        "from": ACCOUNT_HASH,
        "source": UREF,
        "gas": "1508345276122",
    }
    info = DeployInfo.from_json(data)
    assert info.gas == 1508345276122
    assert info.from_ == ACCOUNT_HASH
    assert info.to_json() == data


def test_deploy_info_rejects_bad_gas():
    with pytest.raises(ValueError):
        DeployInfo(gas="not a number")
    with pytest.raises(ValueError):
        DeployInfo(gas=-1)


def test_reward_round_trip():
    data = {"amount": 1000, "validator": PUBLIC_KEY}
    assert Reward.from_json(data).to_json() == data


def test_reward_amount_must_fit_u64():
    with pytest.raises(ValueError):
        Reward(amount=1 << 64)


def test_era_end_round_trip():
    data = {
        "era_report": {
            "equivocators": [PUBLIC_KEY],
            "inactive_validators": [],
            "rewards": [{"amount": 5, "validator": PUBLIC_KEY}],
        },
        "next_era_validator_weights": [{"validator": PUBLIC_KEY, "weight": "100"}],
    }
    era_end = EraEnd.from_json(data)
    assert era_end.era_report.rewards == [Reward(5, PUBLIC_KEY)]
    assert era_end.era_report == EraReport.from_json(data["era_report"])
    assert era_end.to_json() == data


def test_era_validators_round_trip():
    data = {"era_id": 2685, "validator_weights": [{"validator": PUBLIC_KEY, "weight": "7"}]}
    validators = EraValidators.from_json(data)
    assert validators.era_id == 2685
    assert validators.to_json() == data


def test_peer_round_trip():
    data = {"node_id": "tls:0123abcd", "address": "127.0.0.1:35000"}
    peer = Peer.from_json(data)
    assert peer == Peer("tls:0123abcd", "127.0.0.1:35000")
    assert peer.to_json() == data


def test_seigniorage_delegator_parsed():
    data = {
        "Delegator": {
            "delegator_public_key": PUBLIC_KEY,
            "validator_public_key": PUBLIC_KEY,
            "amount": "250",
        }
    }
    allocation = SeigniorageAllocation.from_json(data)
    assert allocation.is_delegator is True
    assert allocation.amount == 250
    assert allocation.to_json() == data["Delegator"]


def test_seigniorage_validator_parsed():
    data = {"Validator": {"validator_public_key": PUBLIC_KEY, "amount": "42"}}
    allocation = SeigniorageAllocation.from_json(data)
    assert allocation.is_delegator is False
    assert allocation.delegator_public_key is None
    assert allocation.to_json() == data["Validator"]


@pytest.mark.parametrize(
    "data",
    [
        {"Delegator": {"validator_public_key": PUBLIC_KEY, "amount": "1"}},
        {"Validator": {"amount": "1"}},
        {"Validator": {"validator_public_key": PUBLIC_KEY}},
        {"Other": {}},
    ],
)
def test_seigniorage_missing_members(data):
    with pytest.raises(ValueError):
        SeigniorageAllocation.from_json(data)