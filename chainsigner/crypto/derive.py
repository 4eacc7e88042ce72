"""Substrate sr25519 key derivation for chainsigner."""

from typing import Iterable

import sr25519
from substrateinterface import Keypair

from ..constants import DEFAULT_SS58_FORMAT, KEYPAIR_TYPE, RAW_SEED_LENGTH
from ..crypto.mnemonics import mnemonic_to_mini_secret
from ..crypto.suri import DeriveJunction, SecretUri
from ..exceptions import CryptoError, ValidationError
from ..utils.encoding import hex_to_bytes

__all__ = ["mini_secret", "keypair_from_uri", "derive_keypair"]


def mini_secret(uri: SecretUri) -> bytes:
    """
    Seed bytes for the root of ``uri``.

    A ``0x`` phrase is the mini secret itself; anything else must be a
    BIP39 mnemonic, with the URI password as its passphrase.

    Raises:
        ValidationError: If a raw seed is malformed or combined with a password
        CryptoError: If the mnemonic is invalid
    """
    phrase = uri.effective_phrase
    if phrase.startswith("0x"):
        if uri.password is not None:
            raise ValidationError("Passwords are not supported with raw hex seeds")
        seed = hex_to_bytes(phrase)
        if len(seed) != RAW_SEED_LENGTH:
            raise ValidationError(f"Raw seed must be {RAW_SEED_LENGTH} bytes, got {len(seed)}")
        return seed
    return mnemonic_to_mini_secret(phrase, uri.password or "")


def derive_keypair(keypair: Keypair, junctions: Iterable[DeriveJunction]) -> Keypair:
    """
    Walk ``junctions`` from ``keypair``.

    Hard junctions use the secret key, soft junctions allow public
    derivation; both follow Substrate's schnorrkel HDKD.
    """
    junctions = tuple(junctions)
    if not junctions:
        return keypair

    public, secret = keypair.public_key, keypair.private_key
    for junction in junctions:
        derive = sr25519.hard_derive_keypair if junction.hard else sr25519.derive_keypair
        try:
            _, public, secret = derive((junction.chain_code, public, secret), b"")
        except ValueError as e:
            raise CryptoError(f"Derivation failed at junction {junction}: {e}") from e

    return Keypair(
        public_key=public,
        private_key=secret,
        ss58_format=keypair.ss58_format,
        crypto_type=KEYPAIR_TYPE,
    )


def keypair_from_uri(uri: SecretUri, ss58_format: int = DEFAULT_SS58_FORMAT) -> Keypair:
    """
    Build the sr25519 keypair a secret URI names.

    Raises:
        ValidationError: If the URI is malformed
        CryptoError: If the mnemonic is invalid or derivation fails
    """
    try:
        root = Keypair.create_from_seed(
            mini_secret(uri).hex(),
            ss58_format=ss58_format,
            crypto_type=KEYPAIR_TYPE,
        )
    except ValueError as e:
        raise CryptoError(f"Cannot create keypair from seed: {e}") from e
    return derive_keypair(root, uri.junctions)
