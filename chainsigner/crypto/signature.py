"""Signature utilities for chainsigner."""

from typing import Union

from substrateinterface import Keypair
from substrateinterface.exceptions import ConfigurationError

from ..constants import DEFAULT_SS58_FORMAT, KEYPAIR_TYPE, SR25519_SIGNATURE_LENGTH, SR25519_SIGNATURE_TYPE
from ..exceptions import CryptoError, ValidationError
from ..types.common import BytesLike, Signature
from ..utils.encoding import to_bytes
from ..utils.validation import decode_account_id

__all__ = [
    "sign_message",
    "verify_message",
    "encode_multi_signature",
    "decode_multi_signature",
]


def sign_message(
    keypair: Keypair,
    message: BytesLike,
    with_type: bool = False
) -> Signature:
    """
    Sign a message.

    Args:
        keypair: sr25519 keypair holding a secret key
        message: Message bytes, 0x-hex or text
        with_type: Prefix the MultiSignature type byte

    Returns:
        64-byte signature, or 65 bytes when typed

    Raises:
        CryptoError: If the keypair cannot sign
    """
    try:
        signature = keypair.sign(to_bytes(message))
    except (ConfigurationError, ValueError, TypeError) as e:
        raise CryptoError(f"Signing failed: {e}") from e

    if with_type:
        return encode_multi_signature(signature)
    return Signature(bytes(signature))


def verify_message(
    address_or_keypair: Union[str, bytes, Keypair],
    signature: bytes,
    message: BytesLike
) -> bool:
    """
    Verify a signed message.

    Args:
        address_or_keypair: SS58/hex address, public key or keypair
        signature: Plain or typed signature
        message: Original message

    Returns:
        True if signature is valid
    """
    message = to_bytes(message)

    try:
        signature = decode_multi_signature(signature)
    except CryptoError:
        return False

    if isinstance(address_or_keypair, Keypair):
        keypair = address_or_keypair
    else:
        try:
            keypair = Keypair(
                public_key=decode_account_id(address_or_keypair),
                ss58_format=DEFAULT_SS58_FORMAT,
                crypto_type=KEYPAIR_TYPE,
            )
        except ValidationError:
            return False

    try:
        return bool(keypair.verify(message, signature))
    except (ValueError, TypeError):
        return False


def encode_multi_signature(signature: bytes) -> Signature:
    """Prefix a plain sr25519 signature with its MultiSignature type byte."""
    if len(signature) != SR25519_SIGNATURE_LENGTH:
        raise CryptoError(f"Sr25519 signature must be 64 bytes, got {len(signature)}")
    return Signature(bytes([SR25519_SIGNATURE_TYPE]) + bytes(signature))


def decode_multi_signature(signature: bytes) -> Signature:
    """
    Strip the type byte from a typed signature.

    Plain 64-byte signatures are returned unchanged.

    Raises:
        CryptoError: If the signature has the wrong length or type
    """
    signature = bytes(signature)
    if len(signature) == SR25519_SIGNATURE_LENGTH:
        return Signature(signature)
    if len(signature) == SR25519_SIGNATURE_LENGTH + 1:
        if signature[0] != SR25519_SIGNATURE_TYPE:
            raise CryptoError(f"Unsupported signature type: {signature[0]:#x}")
        return Signature(signature[1:])
    raise CryptoError(f"Invalid signature length: {len(signature)}")
