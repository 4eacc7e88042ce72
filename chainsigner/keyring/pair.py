"""Key pairs and the derivation engine that produces them."""

import logging
from typing import Any, Dict, Optional

from substrateinterface import Keypair

from ..constants import DEFAULT_SS58_FORMAT
from ..crypto.derive import derive_keypair, keypair_from_uri
from ..crypto.signature import sign_message, verify_message
from ..crypto.suri import SecretUri, parse_derivation_path, parse_suri
from ..exceptions import CryptoError, InvalidSecretError, PairLockedError, ValidationError
from ..types.common import AccountId, Address, BytesLike, PublicKeyBytes, SecretKeyBytes, Signature
from ..utils.encoding import bytes_to_hex

__all__ = ["KeyPair", "derive_pair"]

logger = logging.getLogger(__name__)


class KeyPair:
    """
    An sr25519 key pair with its SS58 address.

    Wraps a ``substrateinterface.Keypair`` and adds keyring state: the
    secret URI that reproduces it, metadata, and a lock flag. Pairs made
    by the derivation engine remember their parsed URI so children get a
    re-derivable ``suri``.
    """

    def __init__(
        self,
        keypair: Keypair,
        suri: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
        locked: bool = False,
        keep_unlocked: bool = False,
        source: Optional[SecretUri] = None,
    ) -> None:
        """
        Initialize key pair.

        Args:
            keypair: sr25519 keypair with a secret key
            suri: Secret URI the pair was derived from
            meta: Diagnostic metadata (e.g. ``name``)
            locked: Whether secret-key operations start disabled
            keep_unlocked: Make ``lock()`` a no-op
            source: Parsed form of ``suri`` used to name derived children
        """
        self._keypair = keypair
        self._source = source
        self.suri = suri
        self.meta: Dict[str, Any] = dict(meta or {})
        self.keep_unlocked = keep_unlocked
        self.locked = False if keep_unlocked else locked

    @property
    def keypair(self) -> Keypair:
        return self._keypair

    @property
    def address(self) -> Address:
        """SS58 address of this pair."""
        return Address(self._keypair.ss58_address)

    @property
    def ss58_format(self) -> int:
        return self._keypair.ss58_format

    @property
    def account_id(self) -> AccountId:
        return AccountId(self._keypair.public_key)

    @property
    def public_key(self) -> PublicKeyBytes:
        return PublicKeyBytes(self._keypair.public_key)

    @property
    def secret_key(self) -> SecretKeyBytes:
        return SecretKeyBytes(self._keypair.private_key)

    @property
    def is_locked(self) -> bool:
        return self.locked

    def lock(self) -> None:
        """Disable secret-key operations unless the pair is kept unlocked."""
        if self.keep_unlocked:
            logger.debug(f"Ignoring lock() for permanently unlocked pair {self.address}")
            return
        self.locked = True

    def unlock(self) -> None:
        """Re-enable secret-key operations."""
        self.locked = False

    def sign(self, message: BytesLike, with_type: bool = False) -> Signature:
        """
        Sign a message with this pair's secret key.

        Args:
            message: Message bytes, 0x-hex or text
            with_type: Prefix the MultiSignature type byte

        Raises:
            PairLockedError: If the pair is locked
        """
        if self.locked:
            raise PairLockedError(f"Cannot sign with locked pair {self.address}")
        return sign_message(self._keypair, message, with_type=with_type)

    def verify(self, message: BytesLike, signature: bytes) -> bool:
        """Verify a plain or typed signature against this pair's public key."""
        return verify_message(self._keypair, signature, message)

    def derive(self, path: str, meta: Optional[Dict[str, Any]] = None) -> "KeyPair":
        """
        Derive a child pair.

        Args:
            path: Derivation path such as ``//hard/soft``
            meta: Metadata for the child

        Returns:
            Child KeyPair

        Raises:
            ValidationError: If the path is malformed
            CryptoError: If derivation fails
        """
        junctions = parse_derivation_path(path)
        child_source = self._source.join(junctions) if self._source is not None else None

        return KeyPair(
            derive_keypair(self._keypair, junctions),
            suri=str(child_source) if child_source is not None else None,
            meta=meta,
            source=child_source,
        )

    def same_secret(self, other: "KeyPair") -> bool:
        """Check whether two pairs hold the same secret key."""
        return self.secret_key == other.secret_key

    def to_dict(self) -> Dict[str, Any]:
        """Public view of the pair, without secret material."""
        return {
            "address": self.address,
            "publicKey": bytes_to_hex(self.public_key),
            "meta": dict(self.meta),
            "locked": self.locked,
        }

    def __repr__(self) -> str:
        name = self.meta.get("name")
        label = f", name={name!r}" if name else ""
        return f"KeyPair({self.address}{label})"


def derive_pair(
    secret: str,
    path: Optional[str] = None,
    ss58_format: int = DEFAULT_SS58_FORMAT,
    meta: Optional[Dict[str, Any]] = None,
) -> KeyPair:
    """
    Turn a secret URI or mnemonic, plus an optional path, into a key pair.

    Deterministic: the same ``(secret, path)`` always yields the same
    keys and address, identical to Substrate's sr25519 keyring, so
    ``//Alice`` is the development account Alice.

    Args:
        secret: Secret URI or mnemonic phrase
        path: Extra derivation path appended after the secret's own path
        ss58_format: Network prefix for the address
        meta: Metadata for the pair

    Returns:
        KeyPair whose ``suri`` re-derives to the same pair

    Raises:
        InvalidSecretError: If the secret or path is malformed or derivation fails
    """
    try:
        uri = parse_suri(secret)
        if path:
            uri = uri.join(parse_derivation_path(path))
        keypair = keypair_from_uri(uri, ss58_format)
    except (ValidationError, CryptoError) as e:
        raise InvalidSecretError(secret) from e

    return KeyPair(
        keypair,
        suri=str(uri) if path else secret,
        meta=meta,
        source=uri,
    )
