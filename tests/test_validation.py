import pytest

from chainsigner.utils import validation as v

ALICE_ACCOUNT = bytes.fromhex("d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d")
ALICE = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"
ALICE_POLKADOT = "15oF4uVJwmo4TdGW7VfQxNLavjCXviqxT9S1MgbjMNHr6Sp5"


def test_address_validation():
    assert v.is_valid_address(ALICE)
    assert v.is_valid_address(ALICE, 42)
    assert not v.is_valid_address(ALICE, 0)
    assert v.is_valid_address(ALICE_POLKADOT, 0)
    assert v.validate_address(ALICE) == ALICE
    for bad in ["invalid", "", None, "0x" + ALICE_ACCOUNT.hex(), ALICE[:-1] + "Z"]:
        with pytest.raises(v.ValidationError):
            v.validate_address(bad)


def test_decode_account_id_formats():
    assert v.decode_account_id(ALICE) == ALICE_ACCOUNT
    assert v.decode_account_id(ALICE_POLKADOT) == ALICE_ACCOUNT
    assert v.decode_account_id("0x" + ALICE_ACCOUNT.hex()) == ALICE_ACCOUNT
    assert v.decode_account_id(ALICE_ACCOUNT) == ALICE_ACCOUNT
    for bad in ["0x1234", 42, "", "not an address"]:
        with pytest.raises(v.ValidationError):
            v.decode_account_id(bad)


def test_addresses_equal_across_encodings():
    assert ALICE != ALICE_POLKADOT
    assert v.addresses_equal(ALICE_POLKADOT, ALICE)
    assert v.addresses_equal(ALICE, "0x" + ALICE_ACCOUNT.hex())
    assert not v.addresses_equal(ALICE, "0x" + "00" * 32)
    assert not v.addresses_equal(ALICE, "garbage")


def test_public_key_validation():
    assert v.is_valid_public_key(ALICE_ACCOUNT)
    assert v.validate_public_key("0x" + ALICE_ACCOUNT.hex()) == ALICE_ACCOUNT
    assert not v.is_valid_public_key(ALICE_ACCOUNT[:-1])
    assert not v.is_valid_public_key("zz" * 32)
    with pytest.raises(v.ValidationError):
        v.validate_public_key(42)
