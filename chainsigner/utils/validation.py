"""Validation utilities for chainsigner."""

from typing import Optional, Union

from substrateinterface.utils.ss58 import ss58_decode

from ..exceptions import ValidationError
from ..types.common import AccountId, PublicKeyBytes
from ..utils.encoding import hex_to_bytes

__all__ = [
    "is_valid_address",
    "validate_address",
    "decode_account_id",
    "addresses_equal",
    "is_valid_public_key",
    "validate_public_key",
]

ACCOUNT_ID_LENGTH = 32


def decode_account_id(address: Union[str, bytes]) -> AccountId:
    """
    Decode any supported address representation to an account id.

    Accepts SS58 addresses of any network prefix, 0x-hex account ids,
    or the raw 32 bytes.

    Args:
        address: Address to decode

    Returns:
        32-byte account id

    Raises:
        ValidationError: If address cannot be decoded
    """
    if isinstance(address, (bytes, bytearray)):
        raw = bytes(address)
    elif isinstance(address, str) and address.startswith("0x"):
        raw = hex_to_bytes(address)
    elif isinstance(address, str) and address:
        try:
            raw = bytes.fromhex(ss58_decode(address))
        except (ValueError, IndexError) as e:
            raise ValidationError(f"Invalid SS58 address {address!r}: {e}") from e
    else:
        raise ValidationError(f"Unsupported address: {address!r}")

    if len(raw) != ACCOUNT_ID_LENGTH:
        raise ValidationError(f"Account id must be 32 bytes, got {len(raw)}")
    return AccountId(raw)


def addresses_equal(a: Union[str, bytes], b: Union[str, bytes]) -> bool:
    """
    Compare two addresses by account id.

    Returns False when either side cannot be decoded.
    """
    try:
        return decode_account_id(a) == decode_account_id(b)
    except ValidationError:
        return False


def is_valid_address(address: str, ss58_format: Optional[int] = None) -> bool:
    """
    Check if address format is valid.

    Args:
        address: Address to validate
        ss58_format: Optional network prefix the address must carry

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_address(address, ss58_format)
        return True
    except ValidationError:
        return False


def validate_address(address: str, ss58_format: Optional[int] = None) -> str:
    """
    Validate SS58 address.

    Args:
        address: Address to validate
        ss58_format: Optional network prefix the address must carry

    Returns:
        The address unchanged

    Raises:
        ValidationError: If address is invalid
    """
    if not address or not isinstance(address, str) or address.startswith("0x"):
        raise ValidationError("Address must be a non-empty SS58 string")

    decode_account_id(address)
    if ss58_format is not None:
        try:
            ss58_decode(address, valid_ss58_format=ss58_format)
        except ValueError as e:
            raise ValidationError(
                f"Address {address} is not an SS58 format {ss58_format} address"
            ) from e

    return address


def is_valid_public_key(key: Union[str, bytes]) -> bool:
    """Check if public key format is valid."""
    try:
        validate_public_key(key)
        return True
    except ValidationError:
        return False


def validate_public_key(key: Union[str, bytes]) -> PublicKeyBytes:
    """
    Validate an sr25519 public key and return it as bytes.

    Args:
        key: Public key as hex string or bytes

    Returns:
        32-byte public key

    Raises:
        ValidationError: If public key is invalid
    """
    if isinstance(key, str):
        key = hex_to_bytes(key)
    if not isinstance(key, (bytes, bytearray)):
        raise ValidationError(f"Unsupported public key type: {type(key).__name__}")
    if len(key) != ACCOUNT_ID_LENGTH:
        raise ValidationError(f"Public key must be 32 bytes, got {len(key)}")
    return PublicKeyBytes(bytes(key))
