import asyncio

import pytest
from substrateinterface.utils.ss58 import ss58_encode

from chainsigner import DefaultRegistry, SignerPayloadJSON, derive_pair
from chainsigner.exceptions import RegistryError, ValidationError
from chainsigner.utils.encoding import blake2_256


def payload(**fields):
    data = {
        "address": derive_pair("//Alice").address,
        "version": 4,
        "method": "0x0500",
        "era": "0x00",
        "nonce": 1,
        "tip": 0,
        "specVersion": 1,
        "transactionVersion": 1,
        "genesisHash": "0x" + "11" * 32,
        "blockHash": "0x" + "22" * 32,
    }
    data.update(fields)
    return SignerPayloadJSON.from_dict(data)


def test_encode_v4_layout():
    encoded = asyncio.run(DefaultRegistry().encode_payload(payload(nonce="0x40", tip=1), 4))
    assert encoded == bytes.fromhex(
        "0500" "00" "0101" "04" "01000000" "01000000" + "11" * 32 + "22" * 32
    )


def test_short_payload_is_signed_as_is():
    registry = DefaultRegistry()
    p = payload()
    assert asyncio.run(registry.signing_payload(p, 4)) == asyncio.run(registry.encode_payload(p, 4))


def test_long_payload_is_hashed():
    registry = DefaultRegistry()
    p = payload(method="0x" + "ab" * 300)
    encoded = asyncio.run(registry.encode_payload(p, 4))
    assert len(encoded) > 256
    assert asyncio.run(registry.signing_payload(p, 4)) == blake2_256(encoded)


def test_encode_errors():
    registry = DefaultRegistry()
    with pytest.raises(RegistryError):
        asyncio.run(registry.encode_payload(payload(), 5))
    for bad in [
        {"blockHash": "0x22"},
        {"method": "zz"},
        {"nonce": "abc"},
        {"specVersion": 2 ** 32},
        {"tip": True},
    ]:
        with pytest.raises(RegistryError):
            asyncio.run(registry.encode_payload(payload(**bad), 4))


def test_account_ids():
    registry = DefaultRegistry()
    alice = derive_pair("//Alice")
    assert registry.create_account_id(alice.address) == alice.account_id
    assert registry.account_id_equals(alice.address, ss58_encode(alice.account_id, 0))
    assert not registry.account_id_equals(alice.address, derive_pair("//Bob").address)
    assert not registry.account_id_equals(alice.address, "garbage")
    with pytest.raises(ValidationError):
        registry.create_account_id("garbage")


def test_signed_payload_structure():
    registry = DefaultRegistry(ss58_format=0)
    assert registry.signed_payload(payload(), b"\x02\x01") == {"signature": "0x0201"}
    assert repr(registry) == "DefaultRegistry(ss58_format=0)"
