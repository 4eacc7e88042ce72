import asyncio

import pytest
from substrateinterface.utils.ss58 import ss58_encode

import chainsigner
from chainsigner import DefaultRegistry, Signer, derive_pair
from chainsigner.crypto import verify_message
from chainsigner.exceptions import AddressNotFoundError, PairLockedError, RegistryError
from chainsigner.utils.encoding import hex_to_bytes

ALICE = derive_pair("//Alice")
BOB = derive_pair("//Bob")

PAYLOAD = {
    "address": ALICE.address,
    "version": 4,
    "method": "0x0500",
    "era": "0x00",
    "nonce": "0x01",
    "tip": "0x00",
    "specVersion": "0x00000001",
    "transactionVersion": "0x00000001",
    "genesisHash": "0x" + "11" * 32,
    "blockHash": "0x" + "22" * 32,
    "blockNumber": "0x00",
    "signedExtensions": [],
}


@pytest.fixture
def signer():
    return chainsigner.create_signer(["//Alice", "//Bob"])


def test_sign_raw(signer):
    result = asyncio.run(signer.sign_raw({"address": ALICE.address, "data": "0x1234"}))
    assert result.id == 1
    assert verify_message(ALICE.address, hex_to_bytes(result.signature), b"\x12\x34")
    assert result.signed_transaction is None


def test_sign_raw_any_prefix(signer):
    polkadot = ss58_encode(BOB.account_id, 0)
    result = asyncio.run(signer.sign_raw({"address": polkadot, "data": "hello"}))
    assert verify_message(BOB.address, hex_to_bytes(result.signature), b"hello")


def test_sign_payload(signer):
    result = asyncio.run(signer.sign_payload(PAYLOAD))
    signature = hex_to_bytes(result.signature)
    assert len(signature) == 65
    assert signature[0] == 0x01

    expected = bytes.fromhex(
        "0500" "00" "04" "00" "01000000" "01000000" + "11" * 32 + "22" * 32
    )
    assert verify_message(ALICE.address, signature, expected)


def test_request_ids_are_shared_and_increasing(signer):
    async def run():
        return [
            await signer.sign_raw({"address": ALICE.address, "data": "0x00"}),
            await signer.sign_payload(PAYLOAD),
            await signer.sign_raw({"address": BOB.address, "data": "0x01"}),
            await signer.sign_payload(dict(PAYLOAD, address=BOB.address)),
        ]

    results = asyncio.run(run())
    assert [r.id for r in results] == [1, 2, 3, 4]
    assert signer.last_request_id == 4


def test_concurrent_requests_get_distinct_ids(signer):
    async def run():
        raw = [signer.sign_raw({"address": ALICE.address, "data": f"m{i}"}) for i in range(10)]
        payloads = [signer.sign_payload(PAYLOAD) for _ in range(10)]
        return await asyncio.gather(*raw, *payloads)

    ids = sorted(r.id for r in asyncio.run(run()))
    assert ids == list(range(1, 21))


def test_unknown_address(signer):
    charlie = derive_pair("//Charlie")
    with pytest.raises(AddressNotFoundError) as exc:
        asyncio.run(signer.sign_raw({"address": charlie.address, "data": "0x00"}))
    assert str(exc.value) == f"[2] Can't find the keyring pair for {charlie.address}"
    with pytest.raises(AddressNotFoundError):
        asyncio.run(signer.sign_payload(dict(PAYLOAD, address=charlie.address)))
    assert signer.last_request_id == 0


def test_registry_errors_propagate(signer):
    with pytest.raises(RegistryError):
        asyncio.run(signer.sign_payload(dict(PAYLOAD, version=3)))
    with pytest.raises(RegistryError):
        asyncio.run(signer.sign_payload(dict(PAYLOAD, genesisHash="0x11")))
    assert signer.last_request_id == 0


def test_locked_pair_cannot_sign():
    signer = Signer(DefaultRegistry())
    pair = signer.add_pair(derive_pair("//Charlie"))
    pair.lock()
    with pytest.raises(PairLockedError):
        asyncio.run(signer.sign_raw({"address": pair.address, "data": "0x00"}))


def test_custom_registry_equality():
    class ExactRegistry(DefaultRegistry):
        def account_id_equals(self, a, b):
            return a == b

    signer = chainsigner.create_signer(["//Alice"], registry=ExactRegistry())
    with pytest.raises(AddressNotFoundError):
        signer.find_keyring_pair(ss58_encode(ALICE.account_id, 0))
    assert signer.find_keyring_pair(ALICE.address).suri == "//Alice"


def test_create_signer_with_hd_accounts():
    mnemonic = "test test test test test test test test test test test junk"
    signer = chainsigner.create_signer(
        [{"mnemonic": mnemonic, "path": "//test", "count": 3}],
        ss58_format=0,
    )
    assert len(signer.get_pairs()) == 3
    assert all(p.address.startswith("1") for p in signer.get_pairs())
    assert signer.config[0].count == 3


def test_signer_without_setup_is_empty():
    signer = Signer(config=["//Alice"])
    assert signer.get_pairs() == []
    signer.setup()
    assert len(signer.keyring) == 1
