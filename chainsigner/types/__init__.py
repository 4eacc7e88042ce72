"""Type definitions for chainsigner."""

# Common types
from ..types.common import (
    HexStr,
    Address,
    AccountId,
    SecretKeyBytes,
    PublicKeyBytes,
    ChainCode,
    Signature,
    BytesLike,
)

# Account configuration
from ..types.config import (
    SimpleURI,
    HDSpec,
    AccountSpec,
    RawAccountSpec,
    parse_account_spec,
    parse_account_specs,
)

# Signer protocol
from ..types.signer import (
    SignerPayloadRaw,
    SignerPayloadJSON,
    SignerResult,
)

__all__ = [
    # Common
    "HexStr",
    "Address",
    "AccountId",
    "SecretKeyBytes",
    "PublicKeyBytes",
    "ChainCode",
    "Signature",
    "BytesLike",

    # Config
    "SimpleURI",
    "HDSpec",
    "AccountSpec",
    "RawAccountSpec",
    "parse_account_spec",
    "parse_account_specs",

    # Signer
    "SignerPayloadRaw",
    "SignerPayloadJSON",
    "SignerResult",
]
