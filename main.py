"""
chainsigner usage examples

This file demonstrates the keyring and the signer protocol.
"""

import asyncio
import logging

import chainsigner
from chainsigner import InvalidSecretError, Signer, derive_pair
from chainsigner.crypto import generate_mnemonic, verify_message
from chainsigner.utils.encoding import hex_to_bytes

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def keyring_example():
    """Example 1: Key pairs from secret URIs."""
    print("\n=== Keyring Example ===")

    alice = derive_pair("//Alice")
    print(f"Alice: {alice.address}")
    print(f"Alice (polkadot prefix): {derive_pair('//Alice', ss58_format=0).address}")

    mnemonic = generate_mnemonic(words=12)
    stash = derive_pair(mnemonic, "//stash/0")
    print(f"Stash suri re-derives: {derive_pair(stash.suri).address == stash.address}")


async def signer_example():
    """Example 2: Provision accounts and sign."""
    print("\n=== Signer Example ===")

    mnemonic = "test test test test test test test test test test test junk"
    signer = chainsigner.create_signer([
        "//Alice",
        "//Bob",
        {"mnemonic": mnemonic, "path": "//test", "initialIndex": 0, "count": 3},
    ])
    for pair in signer.get_pairs():
        print(f"  {pair.address} {pair.meta.get('name', '')}")

    alice = signer.get_pairs()[0]
    result = await signer.sign_raw({"address": alice.address, "data": "hello"})
    print(f"Raw request {result.id}: {result.signature[:18]}...")
    print(f"Verified: {verify_message(alice.address, hex_to_bytes(result.signature), 'hello')}")

    result = await signer.sign_payload({
        "address": alice.address,
        "version": 4,
        "method": "0x0500",
        "era": "0x00",
        "nonce": "0x00",
        "tip": "0x00",
        "specVersion": "0x00000001",
        "transactionVersion": "0x00000001",
        "genesisHash": "0x" + "00" * 32,
        "blockHash": "0x" + "00" * 32,
    })
    print(f"Payload request {result.id}: {result.signature[:20]}...")


def error_handling_example():
    """Example 3: Invalid account config."""
    print("\n=== Error Handling Example ===")

    signer = Signer(config=["//Alice", "not-a-valid-secret"])
    try:
        signer.setup()
    except InvalidSecretError as e:
        print(f"Provisioning failed for {e.uri!r}: {e}")
    print(f"Pairs kept: {len(signer.keyring)}")


async def main():
    """Run all examples."""
    keyring_example()
    await signer_example()
    error_handling_example()


if __name__ == "__main__":
    asyncio.run(main())
