"""Encoding and decoding utilities for chainsigner."""

import hashlib
from typing import Union

from ..exceptions import ValidationError
from ..types.common import BytesLike, HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "is_hex",
    "to_bytes",
    "blake2_256",
]


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except (ValueError, TypeError) as e:
        # Hex input may be a raw seed; keep it out of the message
        raise ValidationError("Invalid hex string") from e


def bytes_to_hex(data: bytes, prefix: bool = True) -> HexStr:
    """
    Convert bytes to hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Hex string
    """
    hex_str = bytes(data).hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def is_hex(value: str) -> bool:
    """Check for a 0x-prefixed, even-length hex string."""
    if not isinstance(value, str) or not value.startswith("0x"):
        return False
    body = value[2:]
    if len(body) % 2:
        return False
    try:
        bytes.fromhex(body)
    except ValueError:
        return False
    return True


def to_bytes(data: BytesLike) -> bytes:
    """
    Normalize signer input to bytes.

    0x-prefixed hex strings are decoded, other strings are UTF-8 encoded.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        if is_hex(data):
            return hex_to_bytes(data)
        return data.encode("utf-8")
    raise ValidationError(f"Cannot convert {type(data).__name__} to bytes")


def blake2_256(data: bytes) -> bytes:
    """Perform blake2b with a 32-byte digest."""
    return hashlib.blake2b(data, digest_size=32).digest()
