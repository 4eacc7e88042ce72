"""Cryptographic utilities for chainsigner."""

from ..crypto.mnemonics import (
    generate_mnemonic,
    is_valid_mnemonic,
    mnemonic_to_mini_secret,
    normalize_mnemonic,
)
from ..crypto.suri import DeriveJunction, SecretUri, parse_suri, parse_derivation_path
from ..crypto.derive import derive_keypair, keypair_from_uri, mini_secret
from ..crypto.signature import (
    sign_message,
    verify_message,
    encode_multi_signature,
    decode_multi_signature,
)

__all__ = [
    # Mnemonics and secret URIs
    "generate_mnemonic",
    "is_valid_mnemonic",
    "normalize_mnemonic",
    "mnemonic_to_mini_secret",
    "DeriveJunction",
    "SecretUri",
    "parse_suri",
    "parse_derivation_path",

    # Derivation
    "mini_secret",
    "keypair_from_uri",
    "derive_keypair",

    # Signatures
    "sign_message",
    "verify_message",
    "encode_multi_signature",
    "decode_multi_signature",
]
