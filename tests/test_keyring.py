import pytest
from substrateinterface import Keypair
from substrateinterface.utils.ss58 import ss58_encode

from chainsigner.exceptions import AddressNotFoundError, DuplicateAddressError
from chainsigner.keyring import KeyPair, Keyring, derive_pair


def test_add_and_get_pairs_in_order():
    keyring = Keyring()
    alice = keyring.add_pair(derive_pair("//Alice"))
    bob = keyring.add_pair(derive_pair("//Bob"))
    assert [p.address for p in keyring.get_pairs()] == [alice.address, bob.address]
    assert keyring.addresses() == [alice.address, bob.address]
    assert len(keyring) == 2
    assert list(keyring) == [alice, bob]


def test_get_pairs_is_snapshot():
    keyring = Keyring()
    keyring.add_pair(derive_pair("//Alice"))
    snapshot = keyring.get_pairs()
    keyring.add_pair(derive_pair("//Bob"))
    assert len(snapshot) == 1


def test_find_by_address_uses_account_id():
    keyring = Keyring()
    alice = keyring.add_pair(derive_pair("//Alice"))
    polkadot_address = ss58_encode(alice.account_id, 0)
    assert keyring.find_by_address(alice.address) is alice
    assert keyring.find_by_address(polkadot_address) is alice
    assert keyring.find_by_address("0x" + alice.account_id.hex()) is alice
    assert keyring.get_pair(alice.address) is alice
    assert polkadot_address in keyring


def test_find_by_address_not_found():
    keyring = Keyring()
    keyring.add_pair(derive_pair("//Alice"))
    bob = derive_pair("//Bob")
    with pytest.raises(AddressNotFoundError) as exc:
        keyring.find_by_address(bob.address)
    assert exc.value.address == bob.address
    with pytest.raises(AddressNotFoundError):
        keyring.find_by_address("not an address")
    assert bob.address not in keyring


def test_same_pair_replaces_in_place():
    keyring = Keyring()
    first = keyring.add_pair(derive_pair("//Alice"))
    keyring.add_pair(derive_pair("//Bob"))
    again = keyring.add_pair(derive_pair("//Alice", meta={"name": "alice"}))
    assert len(keyring) == 2
    assert keyring.get_pairs()[0] is again
    assert again.address == first.address


def test_different_secret_at_same_address_is_rejected():
    keyring = Keyring()
    alice = keyring.add_pair(derive_pair("//Alice"))
    impostor = KeyPair(Keypair(
        public_key=alice.public_key,
        private_key=derive_pair("//Bob").secret_key,
        ss58_format=42,
    ))
    with pytest.raises(DuplicateAddressError):
        keyring.add_pair(impostor)
    assert len(keyring) == 1


def test_add_from_uri_and_remove():
    keyring = Keyring(ss58_format=0)
    pair = keyring.add_from_uri("//Charlie", {"name": "charlie"})
    assert pair.address.startswith("1")
    assert pair.meta["name"] == "charlie"
    assert keyring.remove_pair(pair.address) is pair
    assert len(keyring) == 0
    with pytest.raises(AddressNotFoundError):
        keyring.remove_pair(pair.address)


def test_custom_address_equality():
    keyring = Keyring(address_equals=lambda a, b: a == b)
    alice = keyring.add_pair(derive_pair("//Alice"))
    with pytest.raises(AddressNotFoundError):
        keyring.find_by_address(ss58_encode(alice.account_id, 0))
