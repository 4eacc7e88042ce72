"""
chainsigner

An in-process account keyring and transaction signer for Substrate-style
chains: key pairs from secret URIs and mnemonics, HD account expansion,
and the two-call wallet signer protocol.
"""

from typing import Iterable, Optional

from .constants import DEFAULT_SS58_FORMAT, DEV_PHRASE
from .exceptions import (
    ChainSignerError,
    ValidationError,
    AccountConfigError,
    CryptoError,
    InvalidSecretError,
    KeyringError,
    AddressNotFoundError,
    DuplicateAddressError,
    PairLockedError,
    RegistryError,
)
from .keyring import KeyPair, Keyring, derive_pair
from .provisioner import AccountProvisioner
from .registry import TypeRegistry, DefaultRegistry
from .signer import Signer, RequestCounter
from .types import (
    SimpleURI,
    HDSpec,
    AccountSpec,
    RawAccountSpec,
    SignerPayloadRaw,
    SignerPayloadJSON,
    SignerResult,
)

__version__ = "1.0.0"

__all__ = [
    # Signer
    "Signer",
    "RequestCounter",
    "create_signer",

    # Keyring
    "KeyPair",
    "Keyring",
    "derive_pair",
    "AccountProvisioner",

    # Registry
    "TypeRegistry",
    "DefaultRegistry",

    # Config and protocol types
    "SimpleURI",
    "HDSpec",
    "AccountSpec",
    "RawAccountSpec",
    "SignerPayloadRaw",
    "SignerPayloadJSON",
    "SignerResult",

    # Constants
    "DEFAULT_SS58_FORMAT",
    "DEV_PHRASE",

    # Exceptions
    "ChainSignerError",
    "ValidationError",
    "AccountConfigError",
    "CryptoError",
    "InvalidSecretError",
    "KeyringError",
    "AddressNotFoundError",
    "DuplicateAddressError",
    "PairLockedError",
    "RegistryError",
]


def create_signer(
    accounts: Optional[Iterable[RawAccountSpec]] = None,
    registry: Optional[TypeRegistry] = None,
    ss58_format: int = DEFAULT_SS58_FORMAT,
) -> Signer:
    """
    Create a signer and provision its accounts.

    Args:
        accounts: Secret URIs and/or HD mnemonic mappings
        registry: Type registry (default: DefaultRegistry)
        ss58_format: Network prefix for addresses

    Returns:
        Signer with a populated keyring

    Example:
        >>> signer = chainsigner.create_signer(["//Alice", "//Bob"])
        >>> signer = chainsigner.create_signer(
        ...     [{"mnemonic": phrase, "path": "//test", "count": 5}]
        ... )
    """
    signer = Signer(
        registry=registry or DefaultRegistry(ss58_format),
        config=accounts,
        ss58_format=ss58_format,
    )
    signer.setup()
    return signer
