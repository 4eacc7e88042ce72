"""BIP39 mnemonic helpers for chainsigner."""

from bip39 import bip39_to_mini_secret
from substrateinterface import Keypair

from ..constants import MNEMONIC_LANGUAGE
from ..exceptions import CryptoError

__all__ = [
    "generate_mnemonic",
    "normalize_mnemonic",
    "is_valid_mnemonic",
    "mnemonic_to_mini_secret",
]

MNEMONIC_WORD_COUNTS = (12, 15, 18, 21, 24)


def generate_mnemonic(words: int = 12) -> str:
    """Generate BIP39 mnemonic phrase."""
    if words not in MNEMONIC_WORD_COUNTS:
        raise ValueError("Word count must be 12, 15, 18, 21, or 24")
    return Keypair.generate_mnemonic(words, MNEMONIC_LANGUAGE)


def normalize_mnemonic(mnemonic: str) -> str:
    """Collapse whitespace between words."""
    return " ".join(mnemonic.split())


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Check word list membership and checksum."""
    try:
        return bool(Keypair.validate_mnemonic(normalize_mnemonic(mnemonic), MNEMONIC_LANGUAGE))
    except ValueError:
        return False


def mnemonic_to_mini_secret(mnemonic: str, password: str = "") -> bytes:
    """
    Convert a checked mnemonic to the 32-byte Substrate mini secret.

    The password acts as the BIP39 passphrase, as in ``phrase///password``.

    Raises:
        CryptoError: If the mnemonic is invalid
    """
    mnemonic = normalize_mnemonic(mnemonic)
    if not is_valid_mnemonic(mnemonic):
        raise CryptoError("Invalid BIP39 mnemonic")
    try:
        return bytes(bytearray(bip39_to_mini_secret(mnemonic, password, MNEMONIC_LANGUAGE)))
    except ValueError as e:
        raise CryptoError(f"Mini secret derivation failed: {e}") from e
