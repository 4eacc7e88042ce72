"""Common type definitions for chainsigner."""

from typing import NewType, Union

__all__ = [
    "HexStr",
    "Address",
    "AccountId",
    "SecretKeyBytes",
    "PublicKeyBytes",
    "ChainCode",
    "Signature",
    "BytesLike",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation, usually 0x-prefixed."""

# Identifiers
Address = NewType("Address", str)
"""SS58 encoded address string."""

AccountId = NewType("AccountId", bytes)
"""32-byte on-chain account identifier (the sr25519 public key)."""

# Crypto types
SecretKeyBytes = NewType("SecretKeyBytes", bytes)
"""64-byte sr25519 secret key (scalar and nonce)."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""32-byte sr25519 public key."""

ChainCode = NewType("ChainCode", bytes)
"""32-byte junction chain code."""

Signature = NewType("Signature", bytes)
"""64-byte sr25519 signature, optionally with a type prefix."""

# Type aliases
BytesLike = Union[bytes, bytearray, str]
"""Raw bytes, 0x-prefixed hex, or plain text."""
